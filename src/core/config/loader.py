"""
Input loader — where the action's named inputs come from.

The runner passes inputs as ``INPUT_<NAME>`` environment variables
(name upper-cased, spaces replaced by ``_``, hyphens kept). For local
runs, an inputs YAML file can provide or override them:

    version: "6.8.1"
    target: desktop
    modules: [qtcharts, qtwebengine]
    cache: true

Scalars are read verbatim (``version: 6.10`` stays ``"6.10"``), so the
loader only produces strings. Validation happens in the resolver.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path

import yaml

from src.core.errors import ConfigError

logger = logging.getLogger(__name__)


def input_env_name(name: str) -> str:
    """``"add-tools-to-path"`` → ``"INPUT_ADD-TOOLS-TO-PATH"``."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


# YAML spellings of booleans and null, normalised the way the runner passes them
_SCALAR_WORDS = {
    "true": "true",
    "false": "false",
    "null": "",
    "~": "",
}


def _to_input_string(key: str, value: object) -> str:
    """Render a YAML scalar or list the way the runner would pass it."""
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(_to_input_string(key, item) for item in value)
    if isinstance(value, str):
        return _SCALAR_WORDS.get(value.lower(), value)
    raise ConfigError(f"Input '{key}' must be a string, number, boolean or list, got {type(value).__name__}")


def load_inputs_file(path: Path) -> dict[str, str]:
    """Read an inputs YAML file into a name → string mapping.

    Raises:
        ConfigError: If the file is missing or not a YAML mapping.
    """
    if not path.is_file():
        raise ConfigError(f"Inputs file not found: {path}")

    logger.debug("Loading inputs from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        # BaseLoader keeps every scalar as written: "6.10" must not become 6.1
        data = yaml.load(raw, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Files may wrap everything under an "inputs" key or be flat
    if isinstance(data.get("inputs"), dict):
        data = data["inputs"]

    return {str(key): _to_input_string(str(key), value) for key, value in data.items()}


def make_input_lookup(
    environ: Mapping[str, str],
    overrides: Mapping[str, str] | None = None,
) -> Callable[[str], str]:
    """Build the ``get_input(name)`` function used by the resolver.

    Overrides (from an inputs file) win over ``INPUT_*`` variables.
    Values are stripped, as the runner's toolkit does.
    """
    overrides = overrides or {}

    def get_input(name: str) -> str:
        if name in overrides:
            return overrides[name].strip()
        return environ.get(input_env_name(name), "").strip()

    return get_input
