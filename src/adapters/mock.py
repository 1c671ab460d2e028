"""
Mock adapters — in-memory test doubles for the three adapter contracts.

Used by tests to drive the orchestrator without touching processes,
the cache or workflow files. Every double records what it was asked
to do.
"""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence

from src.adapters.base import CacheStore, CommandRunner, WorkflowReporter
from src.core.models.action import Receipt


class MockCommandRunner(CommandRunner):
    """Command runner that succeeds unless told otherwise.

    Responses are matched by the first command argument that contains a
    configured fragment (e.g. ``"install-qt"`` or ``"apt-get"``).
    """

    def __init__(self, default_output: str = ""):
        self._default_output = default_output
        self._outputs: dict[str, str] = {}
        self._failures: dict[str, str] = {}
        self._call_log: list[list[str]] = []

    @property
    def call_log(self) -> list[list[str]]:
        """Every command this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def set_output(self, fragment: str, output: str) -> None:
        """Return ``output`` for commands containing ``fragment``."""
        self._outputs[fragment] = output

    def set_failure(self, fragment: str, error: str = "Mock failure") -> None:
        """Fail commands containing ``fragment``."""
        self._failures[fragment] = error

    def _match(self, table: dict[str, str], command: list[str]) -> str | None:
        for fragment, value in table.items():
            if any(fragment in arg for arg in command):
                return value
        return None

    def run(self, step: str, command: Sequence[str], *, capture: bool = False) -> Receipt:
        cmd = list(command)
        self._call_log.append(cmd)

        error = self._match(self._failures, cmd)
        if error is not None:
            return Receipt.failure(step=step, command=cmd, error=error, return_code=1)

        output = self._match(self._outputs, cmd)
        return Receipt.success(
            step=step,
            command=cmd,
            output=self._default_output if output is None else output,
            return_code=0,
        )

    def reset(self) -> None:
        """Clear call log and configured responses."""
        self._call_log.clear()
        self._outputs.clear()
        self._failures.clear()


class MemoryCacheStore(CacheStore):
    """Cache store that only remembers which keys were saved."""

    def __init__(self, keys: Sequence[str] = ()):
        self.entries: dict[str, list[str]] = {key: [] for key in keys}
        self.restored: list[str] = []
        self.saved: list[str] = []

    def restore(self, paths: Sequence[str], key: str) -> str | None:
        self.restored.append(key)
        return key if key in self.entries else None

    def save(self, paths: Sequence[str], key: str) -> str:
        self.saved.append(key)
        self.entries[key] = list(paths)
        return str(len(self.entries))


class RecordingWorkflow(WorkflowReporter):
    """Workflow reporter that keeps everything in memory."""

    def __init__(self, environ: MutableMapping[str, str] | None = None):
        self._environ: MutableMapping[str, str] = {} if environ is None else environ
        self.exported: dict[str, str] = {}
        self.paths: list[str] = []
        self.outputs: dict[str, str] = {}
        self.masked: list[str] = []
        self.failures: list[str] = []

    @property
    def environ(self) -> MutableMapping[str, str]:
        return self._environ

    def export_variable(self, name: str, value: str) -> None:
        self._environ[name] = value
        self.exported[name] = value

    def add_path(self, path: str) -> None:
        self.paths.append(path)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def mask(self, secret: str) -> None:
        self.masked.append(secret)

    def set_failed(self, message: str) -> None:
        self.failures.append(message)
