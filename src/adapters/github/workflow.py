"""
GitHub Actions workflow reporter — outputs, env and PATH for later steps.

Writes the runner's command files (``GITHUB_ENV``, ``GITHUB_PATH``,
``GITHUB_OUTPUT``) and mirrors every change into this process'
environment so later code in the same run sees it too. Outside a
runner (files unset) the values are only logged.
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from collections.abc import MutableMapping
from pathlib import Path
from typing import TextIO

from src.adapters.base import WorkflowReporter

logger = logging.getLogger(__name__)


def _file_command_entry(name: str, value: str) -> str:
    """``name<<delim`` heredoc entry, safe for multi-line values."""
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: value contains the delimiter {delimiter!r}")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class GitHubWorkflow(WorkflowReporter):
    """Reporter backed by the runner's command files.

    Args:
        environ: Environment to read file locations from and mirror
            exports into (default: ``os.environ``).
        stream: Where workflow commands (``::error::``) are printed.
    """

    def __init__(
        self,
        environ: MutableMapping[str, str] | None = None,
        stream: TextIO | None = None,
    ):
        self._environ = os.environ if environ is None else environ
        self._stream = stream

    @property
    def environ(self) -> MutableMapping[str, str]:
        return self._environ

    def _command_file(self, variable: str) -> Path | None:
        location = self._environ.get(variable)
        return Path(location) if location else None

    def _append(self, variable: str, text: str) -> bool:
        path = self._command_file(variable)
        if path is None:
            return False
        with path.open("a", encoding="utf-8") as fh:
            fh.write(text)
        return True

    def _command(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout, flush=True)

    def export_variable(self, name: str, value: str) -> None:
        self._environ[name] = value
        if not self._append("GITHUB_ENV", _file_command_entry(name, value)):
            logger.info("%s=%s", name, value)

    def add_path(self, path: str) -> None:
        current = self._environ.get("PATH", "")
        self._environ["PATH"] = f"{path}{os.pathsep}{current}" if current else path
        if not self._append("GITHUB_PATH", f"{path}\n"):
            logger.info("PATH += %s", path)

    def set_output(self, name: str, value: str) -> None:
        if not self._append("GITHUB_OUTPUT", _file_command_entry(name, value)):
            logger.info("output %s=%s", name, value)

    def mask(self, secret: str) -> None:
        if secret:
            self._command(f"::add-mask::{secret}")

    def set_failed(self, message: str) -> None:
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        self._command(f"::error::{escaped}")
