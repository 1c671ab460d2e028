"""
Adapter base — the contracts between the orchestrator and the outside world.

The orchestrator never runs a process, touches the cache or writes a
workflow file directly. It goes through one of these three interfaces,
so tests can swap in the in-memory doubles from ``src.adapters.mock``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableMapping, Sequence

from src.core.models.action import Receipt


class CommandRunner(ABC):
    """Runs external commands (apt-get, pip, aqt) and returns receipts.

    Runners NEVER raise on a non-zero exit. Failures are captured in the
    Receipt with status='failed'; the caller decides whether to abort.
    """

    @abstractmethod
    def run(self, step: str, command: Sequence[str], *, capture: bool = False) -> Receipt:
        """Run ``command`` to completion.

        Args:
            step: Human-readable label used in logs and errors.
            command: Argument list; ``command[0]`` is the executable.
            capture: Collect stdout+stderr into ``Receipt.output`` instead
                of streaming it to the runner log.
        """


class CacheStore(ABC):
    """Keyed archive cache for the Qt output directory."""

    @abstractmethod
    def restore(self, paths: Sequence[str], key: str) -> str | None:
        """Restore ``paths`` saved under ``key``.

        Returns:
            The matched key on a hit, ``None`` on a miss or an unreadable
            entry.
        """

    @abstractmethod
    def save(self, paths: Sequence[str], key: str) -> str | None:
        """Archive ``paths`` under ``key``.

        Returns:
            An identifier for the entry, or ``None`` if it could not be
            saved. Stores log their own failures and never raise.
        """


class WorkflowReporter(ABC):
    """Outputs, environment and PATH handed to later workflow steps."""

    @property
    @abstractmethod
    def environ(self) -> MutableMapping[str, str]:
        """The environment as later steps will see it."""

    @abstractmethod
    def export_variable(self, name: str, value: str) -> None:
        """Set ``name`` for this process and every later step."""

    @abstractmethod
    def add_path(self, path: str) -> None:
        """Prepend ``path`` to PATH for this process and every later step."""

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """Declare an action output."""

    @abstractmethod
    def mask(self, secret: str) -> None:
        """Keep ``secret`` out of the run log."""

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """Report the run as failed."""

    def append_variable(self, name: str, value: str, separator: str = ":") -> None:
        """Export ``name`` as its current value plus ``value``."""
        current = self.environ.get(name)
        self.export_variable(name, f"{current}{separator}{value}" if current else value)
