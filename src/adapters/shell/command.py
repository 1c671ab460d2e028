"""
Subprocess command runner — execute external commands for install steps.

The SINGLE PLACE where ``subprocess.run`` is called. Logging, secret
redaction and error capture are centralised here.
"""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Sequence

from src.adapters.base import CommandRunner
from src.core.models.action import Receipt
from src.core.services.qt_install.domain.commands import redact

logger = logging.getLogger(__name__)


class SubprocessCommandRunner(CommandRunner):
    """Run commands with ``subprocess.run`` and capture the outcome.

    Args:
        timeout: Seconds before a command is killed (``None`` = no limit).
        cwd: Working directory for every command.
        env: Environment for the child processes (default: inherited).
    """

    def __init__(
        self,
        timeout: float | None = None,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
    ):
        self._timeout = timeout
        self._cwd = cwd
        self._env = env

    def run(self, step: str, command: Sequence[str], *, capture: bool = False) -> Receipt:
        cmd = list(command)
        shown = redact(cmd)
        logger.info("[command]%s", " ".join(shown))
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                capture_output=capture,
                text=True,
                timeout=self._timeout,
                cwd=self._cwd,
                env=self._env,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                step=step,
                command=shown,
                error=f"Command timed out after {self._timeout}s",
                duration_ms=int((time.monotonic() - start) * 1000),
            )
        except OSError as e:
            # executable missing or not runnable
            return Receipt.failure(
                step=step,
                command=shown,
                error=f"Command execution error: {e}",
                duration_ms=int((time.monotonic() - start) * 1000),
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        # aqt writes to both streams depending on the command
        output = (result.stdout or "") + (result.stderr or "") if capture else ""

        if result.returncode == 0:
            return Receipt.success(
                step=step,
                command=shown,
                output=output,
                return_code=0,
                duration_ms=elapsed_ms,
            )

        return Receipt.failure(
            step=step,
            command=shown,
            error=f"Command exited with code {result.returncode}",
            output=output[-2000:],
            return_code=result.returncode,
            duration_ms=elapsed_ms,
        )
