"""
install-qt-action — CLI entrypoint.

Usage:
    python -m src.main --help
    python -m src.main run
    python -m src.main --inputs inputs.yml resolve --json
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from src.core.observability.logging_config import setup_logging

from src import __version__


@click.group()
@click.version_option(version=__version__, prog_name="install-qt-action")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--inputs",
    "-i",
    "inputs_path",
    type=click.Path(exists=False),
    default=None,
    help="YAML file of action inputs (overrides INPUT_* variables).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    inputs_path: str | None,
) -> None:
    """install-qt-action — install Qt with aqtinstall and expose it to later steps."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["inputs_path"] = Path(inputs_path) if inputs_path else None

    # Host facts are detected once; tests pass their own through ``obj``
    if "host_env" not in ctx.obj:
        from src.core.services.qt_install.detection.host_detect import detect_host_environment

        ctx.obj["host_env"] = detect_host_environment()

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("QIA_LOG_LEVEL", "INFO")

    setup_logging(
        level=level,
        log_file=os.environ.get("QIA_LOG_FILE"),
        log_file_level=os.environ.get("QIA_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
        annotate=os.environ.get("GITHUB_ACTIONS") == "true",
    )


@cli.command()
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for cached Qt archives (default: $QIA_CACHE_DIR or ~/.cache).",
)
@click.pass_context
def run(ctx: click.Context, cache_dir: str | None) -> None:
    """Run the action: install Qt and export its environment.

    Examples:

        INPUT_TARGET=desktop INPUT_VERSION=6.8.1 python -m src.main run

        python -m src.main --inputs qt.yml run --cache-dir /var/cache/qt
    """
    import logging

    from src.adapters.cache.directory import DirectoryCacheStore
    from src.adapters.github.workflow import GitHubWorkflow
    from src.adapters.shell.command import SubprocessCommandRunner
    from src.core.errors import QtActionError
    from src.core.services.qt_install.orchestration.orchestrator import run_action
    from src.ui.cli.qt import resolve_from_context

    logger = logging.getLogger("src.main")

    host_env = ctx.obj["host_env"]
    workflow = ctx.obj.get("workflow") or GitHubWorkflow()
    runner = ctx.obj.get("runner") or SubprocessCommandRunner()
    cache_store = ctx.obj.get("cache_store") or DirectoryCacheStore(
        Path(cache_dir) if cache_dir else None
    )

    try:
        inputs = resolve_from_context(ctx)
        result = run_action(inputs, host_env, runner, cache_store, workflow)
    except QtActionError as e:
        workflow.set_failed(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        workflow.set_failed(f"unknown error: {e}")
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        if result.qt_path is not None:
            click.secho(f"✅ Qt ready at {result.qt_path}", fg="green")
        else:
            click.secho("✅ Done", fg="green")


# ── Register sub-commands from src/ui/cli/ ──────────────────────

from src.ui.cli.qt import cache_key, locate, plan, resolve

cli.add_command(resolve)
cli.add_command(cache_key)
cli.add_command(locate)
cli.add_command(plan)


if __name__ == "__main__":
    cli()
