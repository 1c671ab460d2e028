"""
L5 Orchestration — Top-level coordinator.

Ties everything together for one run, strictly in order:

    native deps → cache restore → pip + aqt installs → cache save
    → tool PATH entries → environment export → outputs

Every external command must succeed; the first failure raises
``InstallError`` and nothing after it runs.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from src.adapters.base import CacheStore, CommandRunner, WorkflowReporter
from src.core.errors import InstallError
from src.core.models.action import Receipt
from src.core.models.host import HostEnvironment
from src.core.models.inputs import ActionInputs
from src.core.services.qt_install.data.constants import (
    ENV_HOST_PATH,
    ENV_LD_LIBRARY_PATH,
    ENV_PKG_CONFIG_PATH,
    ENV_PLUGIN_PATH,
    ENV_QML_IMPORT_PATH,
    ENV_ROOT,
    ENV_TOOLS,
    OUTPUT_QT_PATH,
)
from src.core.services.qt_install.detection.aqt_version import is_autodesktop_supported
from src.core.services.qt_install.detection.install_dir import (
    companion_host_path,
    locate_qt_arch_dir,
    tools_paths,
)
from src.core.services.qt_install.domain.cache_key import build_cache_key
from src.core.services.qt_install.domain.commands import (
    apt_commands,
    aqt_version_command,
    flavor_requests,
    install_flavor_args,
    install_qt_args,
    install_tool_args,
    pip_aqt_command,
    pip_prerequisites_command,
    python_module,
)
from src.core.services.qt_install.domain.version_compare import compare_versions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallStep:
    """One external command of the install sequence."""

    label: str
    command: list[str]


@dataclass
class ActionResult:
    """What a completed run produced."""

    cache_key: str | None = None
    cache_hit: bool = False
    qt_path: Path | None = None
    requires_parallel_desktop: bool = False
    receipts: list[Receipt] = field(default_factory=list)


# ── Planning (pure) ─────────────────────────────────────────────


def dependency_steps(inputs: ActionInputs, host_env: HostEnvironment) -> list[InstallStep]:
    """apt-get steps; only Linux runners get native dependencies."""
    if not host_env.is_linux:
        return []
    labels = ("Update package lists", "Install Qt build dependencies")
    return [
        InstallStep(label, command)
        for label, command in zip(labels, apt_commands(inputs), strict=False)
    ]


def bootstrap_steps(inputs: ActionInputs, host_env: HostEnvironment) -> list[InstallStep]:
    """pip steps installing py7zr and aqtinstall."""
    return [
        InstallStep("Install pip prerequisites", pip_prerequisites_command(inputs, host_env.python)),
        # separate install lets aqtinstall override the py7zr pin if it needs to
        InstallStep("Install aqtinstall", pip_aqt_command(inputs, host_env.python)),
    ]


def aqt_steps(
    inputs: ActionInputs,
    host_env: HostEnvironment,
    autodesktop: bool = False,
) -> list[InstallStep]:
    """aqt invocations: Qt itself, then src/doc/examples, then each tool."""
    python = host_env.python
    steps: list[InstallStep] = []

    if inputs.is_install_qt_binaries:
        args = install_qt_args(inputs, autodesktop)
        steps.append(InstallStep(f"Install Qt {inputs.version}", python_module(python, "aqt", args)))

    for flavor, archives, modules in flavor_requests(inputs):
        args = install_flavor_args(inputs, flavor, archives, modules)
        steps.append(InstallStep(f"Install Qt {flavor}", python_module(python, "aqt", args)))

    for tool in inputs.tools:
        args = install_tool_args(inputs, tool)
        steps.append(InstallStep(f"Install tool {tool.split()[0]}", python_module(python, "aqt", args)))

    return steps


# ── Execution ───────────────────────────────────────────────────


def _run_step(
    runner: CommandRunner,
    step: InstallStep,
    result: ActionResult,
    *,
    capture: bool = False,
) -> Receipt:
    logger.info("▶ %s", step.label)
    receipt = runner.run(step.label, step.command, capture=capture)
    result.receipts.append(receipt)
    if receipt.failed:
        raise InstallError(
            step.label,
            receipt.error or "command failed",
            return_code=receipt.return_code,
            stderr=receipt.output,
        )
    logger.debug("%s finished in %dms", step.label, receipt.duration_ms)
    return receipt


def install_dependencies(
    inputs: ActionInputs,
    host_env: HostEnvironment,
    runner: CommandRunner,
    result: ActionResult,
) -> None:
    for step in dependency_steps(inputs, host_env):
        _run_step(runner, step, result)


def install_qt(
    inputs: ActionInputs,
    host_env: HostEnvironment,
    runner: CommandRunner,
    result: ActionResult,
) -> None:
    """Install aqtinstall, then everything requested through it."""
    for step in bootstrap_steps(inputs, host_env):
        _run_step(runner, step, result)

    # aqt decides by itself whether a parallel desktop Qt is needed
    version_step = InstallStep("Check aqtinstall version", aqt_version_command(host_env.python))
    receipt = _run_step(runner, version_step, result, capture=True)
    autodesktop = is_autodesktop_supported(receipt.output)
    logger.debug("aqtinstall --autodesktop supported: %s", autodesktop)

    for step in aqt_steps(inputs, host_env, autodesktop):
        _run_step(runner, step, result)


def export_tools(inputs: ActionInputs, workflow: WorkflowReporter) -> None:
    if not inputs.tools:
        return
    if inputs.add_tools_to_path:
        for path in tools_paths(inputs.dir):
            workflow.add_path(str(path))
    if inputs.set_env:
        workflow.export_variable(ENV_TOOLS, os.path.join(inputs.dir, "Tools"))


def export_qt(
    inputs: ActionInputs,
    host_env: HostEnvironment,
    workflow: WorkflowReporter,
    result: ActionResult,
) -> None:
    """Locate the installed Qt and expose it to later steps."""
    qt_path, parallel_desktop = locate_qt_arch_dir(inputs.dir, inputs.host)
    result.qt_path = qt_path
    result.requires_parallel_desktop = parallel_desktop
    logger.info("Qt installed at %s", qt_path)

    workflow.set_output(OUTPUT_QT_PATH, str(qt_path))

    if not inputs.set_env:
        return

    if host_env.is_linux:
        workflow.append_variable(ENV_LD_LIBRARY_PATH, str(qt_path / "lib"))
    if not host_env.is_windows:
        workflow.append_variable(ENV_PKG_CONFIG_PATH, str(qt_path / "lib" / "pkgconfig"))

    cmake_dir = str(qt_path / "lib" / "cmake")
    if compare_versions(inputs.version, "<", "6.0.0"):
        workflow.export_variable("Qt5_DIR", cmake_dir)
    else:
        workflow.export_variable("Qt6_DIR", cmake_dir)

    workflow.export_variable(ENV_ROOT, str(qt_path))
    workflow.export_variable(ENV_PLUGIN_PATH, str(qt_path / "plugins"))
    workflow.export_variable(ENV_QML_IMPORT_PATH, str(qt_path / "qml"))

    if parallel_desktop:
        host_path = companion_host_path(qt_path)
        if host_path is not None:
            workflow.export_variable(ENV_HOST_PATH, str(host_path))

    workflow.add_path(str(qt_path / "bin"))


def run_action(
    inputs: ActionInputs,
    host_env: HostEnvironment,
    runner: CommandRunner,
    cache_store: CacheStore,
    workflow: WorkflowReporter,
) -> ActionResult:
    """Run the whole action for already-validated ``inputs``.

    Raises:
        InstallError: An external command exited non-zero.
        QtNotFoundError: Binaries were requested but no qmake was found.
    """
    result = ActionResult()
    workflow.mask(inputs.pw)

    install_dependencies(inputs, host_env, runner, result)

    if inputs.cache:
        result.cache_key = build_cache_key(inputs, host_env.os_release)
        hit = cache_store.restore([inputs.dir], result.cache_key)
        if hit:
            logger.info('Automatic cache hit with key "%s"', hit)
            result.cache_hit = True
        else:
            logger.info("Automatic cache miss, will cache this run")

    if not result.cache_hit:
        install_qt(inputs, host_env, runner, result)

        if inputs.cache and result.cache_key:
            cache_id = cache_store.save([inputs.dir], result.cache_key)
            if cache_id is not None:
                logger.info("Automatic cache saved with id %s", cache_id)

    export_tools(inputs, workflow)

    if inputs.is_install_qt_binaries:
        export_qt(inputs, host_env, workflow, result)

    return result
