"""
L3 Detection — Locating what aqt installed.

Read-only filesystem checks run after the installer has populated the
output directory: the Qt arch directory, the companion host prefix for
cross-compiling installs, and tool executable directories.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from src.core.errors import QtNotFoundError
from src.core.models.inputs import Host
from src.core.services.qt_install.data.constants import (
    BINLESS_TOOL_DIRECTORIES,
    QMAKE_GLOB,
    TARGET_QT_CONF,
    TOOL_PATH_GLOBS,
)

logger = logging.getLogger(__name__)

_QT6_VERSION_DIR = re.compile(r"^6\.\d+\.\d+$")
_MOBILE_OR_WASM_ARCH = re.compile(r"^(android.*|ios|wasm.*)$")
_ARM64_ARCH = re.compile(r"^msvc.*_arm64$")
_HOST_PREFIX = re.compile(r"^HostPrefix=(.*)$", re.MULTILINE)


def find_qt_arch_dirs(install_dir: str | Path) -> list[Path]:
    """Every arch dir under ``install_dir`` holding a qmake, sorted.

    For 6.4.2/gcc_64, qmake is at ``<install_dir>/6.4.2/gcc_64/bin/qmake``.
    Sorting makes the result independent of filesystem enumeration order.
    """
    root = Path(install_dir).absolute()
    arch_dirs = {qmake.parent.parent for qmake in root.glob(QMAKE_GLOB)}
    return sorted(arch_dirs)


def requires_parallel_desktop(arch_dir: Path, host: Host | None = None) -> bool:
    """Whether a Qt6 install at ``arch_dir`` needs a desktop Qt beside it.

    Qt6 android/ios/wasm installs ship only target libraries; host tools
    come from a desktop install. The same applies to Windows-on-ARM
    builds when the runner itself is not ARM64.
    """
    if not _QT6_VERSION_DIR.match(arch_dir.parent.name):
        return False
    arch = arch_dir.name
    if _MOBILE_OR_WASM_ARCH.match(arch):
        return True
    return bool(_ARM64_ARCH.match(arch)) and not (host is not None and host.is_arm64)


def locate_qt_arch_dir(install_dir: str | Path, host: Host | None = None) -> tuple[Path, bool]:
    """Pick the Qt arch dir to expose to later steps.

    Returns:
        ``(arch_dir, needs_parallel_desktop)``. When several installs
        coexist, the first (lexically) that needs a parallel desktop
        install wins, otherwise the first overall.

    Raises:
        QtNotFoundError: If no qmake exists under ``install_dir``.
    """
    arch_dirs = find_qt_arch_dirs(install_dir)
    if not arch_dirs:
        raise QtNotFoundError(f"Failed to locate a Qt installation directory in {install_dir}")

    if len(arch_dirs) > 1:
        logger.debug("Found %d Qt installations: %s", len(arch_dirs), arch_dirs)

    for arch_dir in arch_dirs:
        if requires_parallel_desktop(arch_dir, host):
            return arch_dir, True
    return arch_dirs[0], False


def read_host_prefix(qt_path: str | Path) -> str:
    """``HostPrefix`` from ``bin/target_qt.conf``, or ``""`` when absent."""
    conf = Path(qt_path) / "bin" / TARGET_QT_CONF
    try:
        data = conf.read_text(encoding="utf-8")
    except OSError:
        return ""
    match = _HOST_PREFIX.search(data)
    return match.group(1).strip() if match else ""


def companion_host_path(qt_path: str | Path) -> Path | None:
    """Absolute path of the desktop Qt a cross install was built against."""
    host_prefix = read_host_prefix(qt_path)
    if not host_prefix:
        return None
    return (Path(qt_path) / "bin" / host_prefix).resolve()


def tools_paths(install_dir: str | Path) -> list[Path]:
    """Directories holding executables of installed tools."""
    root = Path(install_dir).absolute()
    found: list[Path] = []
    for pattern in TOOL_PATH_GLOBS:
        found.extend(sorted(p for p in root.glob(pattern) if p.is_dir()))
    found.extend(
        root / "Tools" / name
        for name in BINLESS_TOOL_DIRECTORIES
        if (root / "Tools" / name).is_dir()
    )
    # a dir can match more than one pattern
    return list(dict.fromkeys(p.resolve() for p in found))
