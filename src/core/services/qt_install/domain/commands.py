"""
L1 Domain — Command assembly (pure).

Builds the argument lists for apt-get, pip and aqt. Nothing here runs
anything: the orchestrator hands these lists to a command runner.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.core.models.inputs import ActionInputs, InstallDeps
from src.core.services.qt_install.data.constants import (
    LINUX_DEPENDENCIES,
    LINUX_DEPENDENCIES_QT_6_5,
)
from src.core.services.qt_install.domain.version_compare import compare_versions

# Arguments whose following value must never be logged.
SECRET_FLAGS = frozenset({"--pw"})


def flagged_list(flag: str, values: Sequence[str]) -> list[str]:
    """``["--modules", "a", "b"]`` for non-empty values, else ``[]``."""
    return [flag, *values] if values else []


def python_module(python: str, module: str, args: Sequence[str]) -> list[str]:
    """``python -m <module> args...``"""
    return [python, "-m", module, *args]


def redact(command: Sequence[str]) -> list[str]:
    """Copy of ``command`` with secret flag values replaced by ``***``."""
    redacted: list[str] = []
    hide_next = False
    for arg in command:
        redacted.append("***" if hide_next else arg)
        hide_next = arg in SECRET_FLAGS
    return redacted


# ── apt ─────────────────────────────────────────────────────────


def linux_dependencies(version: str) -> list[str]:
    """Native packages needed by Qt ``version`` on Ubuntu runners."""
    deps = list(LINUX_DEPENDENCIES)
    if compare_versions(version, ">=", "6.5.0"):
        deps.extend(LINUX_DEPENDENCIES_QT_6_5)
    return deps


def apt_commands(inputs: ActionInputs) -> list[list[str]]:
    """``apt-get update`` and ``apt-get install`` commands, or none."""
    if inputs.install_deps == InstallDeps.SKIP:
        return []

    prefix = ["sudo"] if inputs.install_deps == InstallDeps.SUDO else []
    return [
        [*prefix, "apt-get", "update"],
        [*prefix, "apt-get", "install", *linux_dependencies(inputs.version), "-y"],
    ]


# ── pip ─────────────────────────────────────────────────────────


def pip_prerequisites_command(inputs: ActionInputs, python: str) -> list[str]:
    return python_module(
        python, "pip", ["install", "setuptools", "wheel", f"py7zr{inputs.py7zr_version}"],
    )


def pip_aqt_command(inputs: ActionInputs, python: str) -> list[str]:
    """Install aqtinstall, or the ``aqtsource`` override when given."""
    if inputs.aqt_source:
        requirement = inputs.aqt_source
    else:
        requirement = f"aqtinstall{inputs.aqt_version}"
    return python_module(python, "pip", ["install", requirement])


def aqt_version_command(python: str) -> list[str]:
    return python_module(python, "aqt", ["version"])


# ── aqt ─────────────────────────────────────────────────────────


def install_qt_args(inputs: ActionInputs, autodesktop: bool) -> list[str]:
    """Arguments for the main Qt install (after ``python -m aqt``)."""
    arch = [inputs.arch] if inputs.arch else []

    if inputs.use_official_installer:
        return [
            "install-qt-official",
            inputs.target.value,
            *arch,
            inputs.version,
            "--outputdir", inputs.dir,
            "--email", inputs.email,
            "--pw", inputs.pw,
            *flagged_list("--modules", inputs.modules),
            *inputs.extra,
        ]

    return [
        "install-qt",
        inputs.host.value,
        inputs.target.value,
        inputs.version,
        *arch,
        *(["--autodesktop"] if autodesktop else []),
        "--outputdir", inputs.dir,
        *flagged_list("--modules", inputs.modules),
        *flagged_list("--archives", inputs.archives),
        *inputs.extra,
    ]


def install_flavor_args(
    inputs: ActionInputs,
    flavor: str,
    archives: Sequence[str],
    modules: Sequence[str],
) -> list[str]:
    """Arguments for ``install-src`` / ``install-doc`` / ``install-example``."""
    return [
        f"install-{flavor}",
        inputs.host.value,
        inputs.version,
        "--outputdir", inputs.dir,
        *flagged_list("--archives", archives),
        *flagged_list("--modules", modules),
        *inputs.extra,
    ]


def install_tool_args(inputs: ActionInputs, tool: str) -> list[str]:
    """Arguments for ``install-tool``; ``tool`` is "name [variant] [arch]"."""
    return [
        "install-tool",
        inputs.host.value,
        inputs.target.value,
        *tool.split(),
        "--outputdir", inputs.dir,
        *inputs.extra,
    ]


def flavor_requests(inputs: ActionInputs) -> list[tuple[str, tuple[str, ...], tuple[str, ...]]]:
    """Requested source/doc/example installs as ``(flavor, archives, modules)``."""
    requests = []
    if inputs.src:
        requests.append(("src", inputs.src_archives, ()))
    if inputs.doc:
        requests.append(("doc", inputs.doc_archives, inputs.doc_modules))
    if inputs.example:
        requests.append(("example", inputs.example_archives, inputs.example_modules))
    return requests
