"""
CLI commands for inspecting a run without installing anything.

Thin wrappers over ``src.core.services.qt_install``.
"""

from __future__ import annotations

import json
import sys

import click

from src.core.models.inputs import ActionInputs


def resolve_from_context(ctx: click.Context) -> ActionInputs:
    """Resolve inputs from INPUT_* variables and the optional inputs file."""
    from src.core.config.loader import load_inputs_file, make_input_lookup
    from src.core.services.qt_install.resolver.input_resolution import resolve_inputs

    host_env = ctx.obj["host_env"]
    inputs_path = ctx.obj.get("inputs_path")
    overrides = load_inputs_file(inputs_path) if inputs_path else None
    get_input = make_input_lookup(host_env.environ, overrides)
    return resolve_inputs(get_input, host_env)


def _resolve_or_exit(ctx: click.Context) -> ActionInputs:
    from src.core.errors import QtActionError

    try:
        return resolve_from_context(ctx)
    except QtActionError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


# ── Inputs ──────────────────────────────────────────────────────


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(ctx: click.Context, as_json: bool) -> None:
    """Show the inputs after defaults and validation."""
    inputs = _resolve_or_exit(ctx)
    data = inputs.public_dict()

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    click.secho(f"📋 Qt {inputs.version} ({inputs.host}/{inputs.target})", fg="cyan", bold=True)
    for key, value in data.items():
        if isinstance(value, list):
            value = " ".join(value) or "—"
        click.echo(f"   {key:<24} {value}")


@click.command("cache-key")
@click.pass_context
def cache_key(ctx: click.Context) -> None:
    """Print the cache key this run would use."""
    from src.core.services.qt_install.domain.cache_key import build_cache_key

    inputs = _resolve_or_exit(ctx)
    click.echo(build_cache_key(inputs, ctx.obj["host_env"].os_release))


@click.command()
@click.option("--autodesktop", is_flag=True, help="Assume aqtinstall supports --autodesktop.")
@click.pass_context
def plan(ctx: click.Context, autodesktop: bool) -> None:
    """List the commands a cache miss would run, in order."""
    from src.core.services.qt_install.domain.commands import redact
    from src.core.services.qt_install.orchestration.orchestrator import (
        aqt_steps,
        bootstrap_steps,
        dependency_steps,
    )

    inputs = _resolve_or_exit(ctx)
    host_env = ctx.obj["host_env"]

    steps = [
        *dependency_steps(inputs, host_env),
        *bootstrap_steps(inputs, host_env),
        *aqt_steps(inputs, host_env, autodesktop),
    ]
    for number, step in enumerate(steps, start=1):
        click.secho(f"{number:>2}. {step.label}", bold=True)
        click.echo(f"    {' '.join(redact(step.command))}")


# ── Install tree ────────────────────────────────────────────────


@click.command()
@click.argument("directory", type=click.Path(file_okay=False))
@click.option("--host", default=None, help="aqt host the tree was installed for (default: this runner).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def locate(ctx: click.Context, directory: str, host: str | None, as_json: bool) -> None:
    """Find the Qt arch directory inside an aqt output DIRECTORY."""
    from src.core.errors import QtNotFoundError
    from src.core.models.inputs import Host
    from src.core.services.qt_install.detection.install_dir import (
        companion_host_path,
        locate_qt_arch_dir,
    )
    from src.core.services.qt_install.resolver.input_resolution import default_host

    try:
        parsed_host = Host(host) if host else default_host(ctx.obj["host_env"])
    except ValueError:
        click.secho(f"❌ Unknown host: {host}", fg="red")
        sys.exit(1)

    try:
        qt_path, parallel_desktop = locate_qt_arch_dir(directory, parsed_host)
    except QtNotFoundError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    host_path = companion_host_path(qt_path) if parallel_desktop else None

    if as_json:
        click.echo(json.dumps({
            "qt_path": str(qt_path),
            "requires_parallel_desktop": parallel_desktop,
            "host_path": str(host_path) if host_path else None,
        }, indent=2))
        return

    click.echo(str(qt_path))
    if parallel_desktop:
        click.secho("   ↳ needs a parallel desktop Qt", fg="yellow")
        if host_path:
            click.echo(f"   ↳ host Qt: {host_path}")
