"""
Action inputs — the validated, immutable configuration of one run.

Constructed once by the input resolver and never mutated afterward.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Host(StrEnum):
    """Host OS the Qt binaries are built for (aqt's ``host`` argument)."""

    WINDOWS = "windows"
    WINDOWS_ARM64 = "windows_arm64"
    MAC = "mac"
    LINUX = "linux"
    LINUX_ARM64 = "linux_arm64"
    ALL_OS = "all_os"

    @property
    def is_arm64(self) -> bool:
        return self in (Host.WINDOWS_ARM64, Host.LINUX_ARM64)


class Target(StrEnum):
    """Target platform (aqt's ``target`` argument)."""

    DESKTOP = "desktop"
    ANDROID = "android"
    IOS = "ios"
    WASM = "wasm"


class InstallDeps(StrEnum):
    """How to install native build dependencies on Linux runners."""

    SKIP = "false"
    SUDO = "true"
    NOSUDO = "nosudo"


class ActionInputs(BaseModel):
    """Resolved action inputs.

    List-valued inputs are tuples so the whole record stays hashable
    and immutable.
    """

    model_config = ConfigDict(frozen=True)

    host: Host
    target: Target
    version: str
    arch: str = ""
    dir: str

    modules: tuple[str, ...] = ()
    archives: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()         # "name variant arch", space separated
    add_tools_to_path: bool = False
    extra: tuple[str, ...] = ()

    src: bool = False
    src_archives: tuple[str, ...] = ()

    doc: bool = False
    doc_archives: tuple[str, ...] = ()
    doc_modules: tuple[str, ...] = ()

    example: bool = False
    example_archives: tuple[str, ...] = ()
    example_modules: tuple[str, ...] = ()

    install_deps: InstallDeps = InstallDeps.SKIP
    cache: bool = False
    cache_key_prefix: str = ""
    is_install_qt_binaries: bool = True
    set_env: bool = False

    aqt_source: str = ""
    aqt_version: str = ""
    py7zr_version: str = ""

    use_official: bool = False
    email: str = ""
    pw: str = ""

    @property
    def use_official_installer(self) -> bool:
        """Official installer path needs both credentials."""
        return self.use_official and bool(self.email) and bool(self.pw)

    def public_dict(self) -> dict:
        """Serialisable view with the password redacted."""
        data = self.model_dump(mode="json")
        if data.get("pw"):
            data["pw"] = "***"
        return data
