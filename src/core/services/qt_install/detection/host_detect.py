"""
L3 Detection — Host platform detection.

The only place the action inspects the real OS. Everything downstream
receives the resulting ``HostEnvironment``.
"""

from __future__ import annotations

import os
import platform
import sys

from src.core.models.host import HostEnvironment
from src.core.services.qt_install.data.constants import MACHINE_MAP


def _normalise_system(system: str) -> str:
    if system.startswith("win"):
        return "win32"
    if system == "darwin":
        return "darwin"
    return "linux"


def detect_host_environment() -> HostEnvironment:
    """Snapshot the running interpreter's platform and environment."""
    machine = platform.machine()
    return HostEnvironment(
        system=_normalise_system(sys.platform),
        machine=MACHINE_MAP.get(machine, machine.lower()),
        os_release=platform.release(),
        python=sys.executable or ("python" if sys.platform == "win32" else "python3"),
        environ=dict(os.environ),
    )
