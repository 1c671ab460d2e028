"""
L3 Detection — aqtinstall capability check.

Parses ``aqt version`` output to decide which flags the installed
aqtinstall understands.
"""

from __future__ import annotations

import re

from src.core.services.qt_install.data.constants import AUTODESKTOP_MIN_AQT_VERSION
from src.core.services.qt_install.domain.version_compare import compare_versions

_AQT_VERSION = re.compile(r"aqtinstall\(aqt\)\s+v(\d+\.\d+\.\d+)")


def parse_aqt_version(output: str) -> str | None:
    """Version reported by ``aqt version`` (stdout and stderr combined)."""
    match = _AQT_VERSION.search(output)
    return match.group(1) if match else None


def is_autodesktop_supported(output: str) -> bool:
    """Whether this aqtinstall accepts ``--autodesktop``."""
    version = parse_aqt_version(output)
    if version is None:
        return False
    return compare_versions(version, ">=", AUTODESKTOP_MIN_AQT_VERSION)
