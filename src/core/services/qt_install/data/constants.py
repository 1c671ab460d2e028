"""
L0 Data — Module-level constants.

Pure data. No logic. No imports beyond stdlib.
"""

from __future__ import annotations

# Machine name normalization (platform.machine() → action naming).
MACHINE_MAP: dict[str, str] = {
    "x86_64": "x64",
    "AMD64": "x64",        # Windows
    "amd64": "x64",
    "aarch64": "arm64",
    "ARM64": "arm64",      # Windows on ARM
    "arm64": "arm64",      # macOS (Darwin reports arm64)
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}

# Output directory appended to the ``dir`` input / RUNNER_WORKSPACE.
QT_SUBDIR = "Qt"

# The cache store rejects keys longer than this.
MAX_CACHE_KEY_LENGTH = 512

# Glob locating qmake two levels below a version-numbered directory:
# <dir>/6.4.2/gcc_64/bin/qmake
QMAKE_GLOB = "[0-9]*/*/bin/qmake*"

# Config file written next to qmake in cross-compiling installs.
TARGET_QT_CONF = "target_qt.conf"

# Native packages Qt's Linux binaries need but stock Ubuntu runners lack.
LINUX_DEPENDENCIES: tuple[str, ...] = (
    "build-essential",
    "libgl1-mesa-dev",
    "libgstreamer-gl1.0-0",
    "libpulse-dev",
    "libxcb-glx0",
    "libxcb-icccm4",
    "libxcb-image0",
    "libxcb-keysyms1",
    "libxcb-randr0",
    "libxcb-render-util0",
    "libxcb-render0",
    "libxcb-shape0",
    "libxcb-shm0",
    "libxcb-sync1",
    "libxcb-util1",
    "libxcb-xfixes0",
    "libxcb-xinerama0",
    "libxcb1",
    "libxkbcommon-dev",
    "libxkbcommon-x11-0",
    "libxcb-xkb-dev",
)

# Added in the Qt 6.5.0 release notes.
LINUX_DEPENDENCIES_QT_6_5: tuple[str, ...] = ("libxcb-cursor0",)

# Tool dirs that keep binaries at the top level instead of in bin/
# (Tools/Conan, not Tools/Conan/bin).
BINLESS_TOOL_DIRECTORIES: tuple[str, ...] = ("Conan", "Ninja")

# Globs (relative to the output dir) for tool executables to add to PATH.
TOOL_PATH_GLOBS: tuple[str, ...] = (
    "Tools/**/bin",
    "*.app/Contents/MacOS",
    "*.app/**/bin",
    "Tools/*/*.app/Contents/MacOS",
    "Tools/*/*.app/**/bin",
)

# aqtinstall gained --autodesktop in this release.
AUTODESKTOP_MIN_AQT_VERSION = "3.0.0"

# Environment variable names exported to later steps.
ENV_TOOLS = "IQTA_TOOLS"
ENV_ROOT = "QT_ROOT_DIR"
ENV_PLUGIN_PATH = "QT_PLUGIN_PATH"
ENV_QML_IMPORT_PATH = "QML2_IMPORT_PATH"
ENV_HOST_PATH = "QT_HOST_PATH"
ENV_LD_LIBRARY_PATH = "LD_LIBRARY_PATH"
ENV_PKG_CONFIG_PATH = "PKG_CONFIG_PATH"

# Declared action output.
OUTPUT_QT_PATH = "qtPath"
