"""
L2 Resolver — Action inputs → validated ``ActionInputs``.

Reads every named input through a lookup function, validates the enum
inputs and fills in host- and version-dependent defaults. All errors
are raised here, before any external command runs.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from enum import StrEnum

from src.core.errors import InputError
from src.core.models.host import HostEnvironment
from src.core.models.inputs import ActionInputs, Host, InstallDeps, Target
from src.core.services.qt_install.data.constants import QT_SUBDIR
from src.core.services.qt_install.domain.arch_defaults import default_arch

logger = logging.getLogger(__name__)

InputLookup = Callable[[str], str]


def default_host(host_env: HostEnvironment) -> Host:
    """Derive the ``host`` input from the running platform."""
    arm64 = host_env.machine == "arm64"
    if host_env.system == "win32":
        return Host.WINDOWS_ARM64 if arm64 else Host.WINDOWS
    if host_env.system == "darwin":
        return Host.MAC
    return Host.LINUX_ARM64 if arm64 else Host.LINUX


def _parse_enum(name: str, value: str, enum_cls: type[StrEnum]) -> StrEnum:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = " | ".join(f'"{member.value}"' for member in enum_cls)
        raise InputError(f'{name}: "{value}" is not one of {allowed}') from None


def _bool_input(get_input: InputLookup, name: str) -> bool:
    return get_input(name).lower() == "true"


def _list_input(get_input: InputLookup, name: str) -> tuple[str, ...]:
    return tuple(get_input(name).split())


def _install_deps(value: str) -> InstallDeps:
    value = value.lower()
    if value == "nosudo":
        return InstallDeps.NOSUDO
    if value == "true":
        return InstallDeps.SUDO
    return InstallDeps.SKIP


def _output_dir(get_input: InputLookup, host_env: HostEnvironment) -> str:
    base = get_input("dir") or host_env.getenv("RUNNER_WORKSPACE")
    if not base:
        raise InputError('"dir" input may not be empty')
    return os.path.abspath(os.path.join(base, QT_SUBDIR))


def resolve_inputs(get_input: InputLookup, host_env: HostEnvironment) -> ActionInputs:
    """Build the validated inputs record for one run.

    Args:
        get_input: Returns the (stripped) value of a named input, or ``""``.
        host_env: Facts about the running platform.

    Raises:
        InputError: On an invalid host/target, an unparsable version
            used by the arch table, or when no output dir is available.
    """
    raw_host = get_input("host")
    host = _parse_enum("host", raw_host, Host) if raw_host else default_host(host_env)

    target = _parse_enum("target", get_input("target"), Target)

    version = get_input("version")

    arch = get_input("arch") or default_arch(host, target, version)

    tools = tuple(
        # tool name, variant and arch are comma-delimited in the input;
        # aqt wants them as separate arguments
        tool.replace(",", " ")
        for tool in _list_input(get_input, "tools")
    )

    inputs = ActionInputs(
        host=host,
        target=target,
        version=version,
        arch=arch,
        dir=_output_dir(get_input, host_env),
        modules=_list_input(get_input, "modules"),
        archives=_list_input(get_input, "archives"),
        tools=tools,
        add_tools_to_path=_bool_input(get_input, "add-tools-to-path"),
        extra=_list_input(get_input, "extra"),
        install_deps=_install_deps(get_input("install-deps")),
        cache=_bool_input(get_input, "cache"),
        cache_key_prefix=get_input("cache-key-prefix"),
        is_install_qt_binaries=(
            not _bool_input(get_input, "tools-only")
            and not _bool_input(get_input, "no-qt-binaries")
        ),
        set_env=_bool_input(get_input, "set-env"),
        aqt_source=get_input("aqtsource"),
        aqt_version=get_input("aqtversion"),
        py7zr_version=get_input("py7zrversion"),
        use_official=_bool_input(get_input, "use-official"),
        email=get_input("email"),
        pw=get_input("pw"),
        src=_bool_input(get_input, "source"),
        src_archives=_list_input(get_input, "src-archives"),
        doc=_bool_input(get_input, "documentation"),
        doc_modules=_list_input(get_input, "doc-modules"),
        doc_archives=_list_input(get_input, "doc-archives"),
        example=_bool_input(get_input, "examples"),
        example_modules=_list_input(get_input, "example-modules"),
        example_archives=_list_input(get_input, "example-archives"),
    )

    logger.debug("Resolved inputs: %s", inputs.public_dict())
    return inputs
