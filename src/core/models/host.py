"""
Host environment — the facts about the machine the action runs on.

Built once from the real process by
``src.core.services.qt_install.detection.host_detect.detect_host_environment``
and passed explicitly to everything that needs it. Tests build it directly
to simulate other platforms.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HostEnvironment(BaseModel):
    """Snapshot of the running process' platform."""

    model_config = ConfigDict(frozen=True)

    system: Literal["linux", "darwin", "win32"] = "linux"
    machine: str = "x64"            # normalised: x64, arm64, x86, ...
    os_release: str = ""            # kernel / OS release string
    python: str = "python3"         # interpreter used for pip and aqt
    environ: dict[str, str] = Field(default_factory=dict)

    @property
    def is_linux(self) -> bool:
        return self.system == "linux"

    @property
    def is_windows(self) -> bool:
        return self.system == "win32"

    def getenv(self, name: str, default: str = "") -> str:
        """Look up a variable in the captured environment."""
        return self.environ.get(name, default)
