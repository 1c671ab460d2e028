"""
Error taxonomy — every failure the action can report.

Validation errors abort before any external process runs.
Install errors carry the external tool's own diagnostic output.
The CLI catches ``QtActionError`` and reports it as a workflow failure.
"""

from __future__ import annotations


class QtActionError(Exception):
    """Base class for all errors reported as an action failure."""


class InputError(QtActionError, TypeError):
    """An action input has an invalid value (bad enum, empty dir, bad version)."""


class ConfigError(QtActionError):
    """The inputs file is missing, unreadable or malformed."""


class InstallError(QtActionError):
    """An external command (package manager, pip, aqt) exited non-zero."""

    def __init__(self, step: str, message: str, *, return_code: int | None = None, stderr: str = ""):
        self.step = step
        self.return_code = return_code
        self.stderr = stderr
        detail = f"{step}: {message}"
        if stderr:
            detail = f"{detail}\n{stderr}"
        super().__init__(detail)


class QtNotFoundError(QtActionError):
    """No Qt installation directory could be located under the output dir."""
