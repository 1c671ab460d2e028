"""
Receipt model — the result of one external command.

Command runners return receipts and never raise on a non-zero exit.
The orchestrator decides what a failed receipt means.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Receipt(BaseModel):
    """Outcome of running a command for an install step."""

    step: str                       # human-readable step label
    command: list[str] = Field(default_factory=list)
    status: Literal["ok", "failed"] = "ok"
    duration_ms: int = 0

    return_code: int | None = None
    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the command failed."""
        return self.status == "failed"

    @classmethod
    def success(
        cls,
        step: str,
        command: list[str],
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        return cls(step=step, command=command, status="ok", output=output, **kwargs)

    @classmethod
    def failure(
        cls,
        step: str,
        command: list[str],
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(step=step, command=command, status="failed", error=error, **kwargs)
