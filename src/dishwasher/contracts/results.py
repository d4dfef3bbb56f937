"""Command outcomes and cycle results.

These types answer: "What did a device command or a wash cycle produce?"

IMPORTANT:
- CommandResult.status uses Literal["ok", "fault"], NOT an enum
- RunResult.run_minutes is only meaningful for Status.SUCCESS and is 0
  for every other status (enforced in __post_init__)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from dishwasher.contracts.enums import Status


@dataclass(frozen=True)
class CommandResult:
    """Result of a side-effecting device command (pour, drain, run_program).

    Use the factory methods to create instances.
    """

    status: Literal["ok", "fault"]
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.status == "fault" and not self.reason:
            raise ValueError(
                "CommandResult with status='fault' MUST provide a reason. "
                "Use CommandResult.fault('...') to report device faults."
            )
        if self.status == "ok" and self.reason is not None:
            raise ValueError("CommandResult with status='ok' must not carry a reason")

    @classmethod
    def ok(cls) -> CommandResult:
        """Command completed."""
        return cls(status="ok")

    @classmethod
    def fault(cls, reason: str) -> CommandResult:
        """Command failed on the device side."""
        return cls(status="fault", reason=reason)

    @property
    def is_fault(self) -> bool:
        return self.status == "fault"


@dataclass(frozen=True)
class RunResult:
    """Terminal output of one wash cycle.

    Fields:
        status: Outcome of the cycle (required)
        run_minutes: Program duration for SUCCESS, 0 otherwise
        reason: Human-readable explanation for non-success results
    """

    status: Status
    run_minutes: int = 0
    reason: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.status, Status):
            raise TypeError(f"status must be a Status, got {type(self.status).__name__}")
        if self.status == Status.SUCCESS:
            if self.run_minutes <= 0:
                raise ValueError(f"Successful RunResult needs positive run_minutes, got {self.run_minutes}")
            if self.reason is not None:
                raise ValueError("Successful RunResult must not carry a reason")
        elif self.run_minutes != 0:
            raise ValueError(f"run_minutes is only defined for SUCCESS, got {self.run_minutes} for {self.status}")

    @classmethod
    def success(cls, run_minutes: int) -> RunResult:
        return cls(status=Status.SUCCESS, run_minutes=run_minutes)

    @classmethod
    def error(cls, status: Status, reason: str | None = None) -> RunResult:
        """Create a non-success result.

        Raises:
            ValueError: If status is SUCCESS
        """
        if status == Status.SUCCESS:
            raise ValueError("RunResult.error() cannot be used with Status.SUCCESS - use RunResult.success()")
        return cls(status=status, reason=reason)

    @classmethod
    def builder(cls) -> RunResultBuilder:
        return RunResultBuilder()

    @property
    def succeeded(self) -> bool:
        return self.status == Status.SUCCESS


class RunResultBuilder:
    """Fluent builder for RunResult. status is required; run_minutes defaults to 0."""

    def __init__(self) -> None:
        self._status: Status | None = None
        self._run_minutes = 0
        self._reason: str | None = None

    def with_status(self, status: Status) -> RunResultBuilder:
        self._status = status
        return self

    def with_run_minutes(self, run_minutes: int) -> RunResultBuilder:
        self._run_minutes = run_minutes
        return self

    def with_reason(self, reason: str) -> RunResultBuilder:
        self._reason = reason
        return self

    def build(self) -> RunResult:
        if self._status is None:
            raise ValueError("RunResult requires a status")
        return RunResult(status=self._status, run_minutes=self._run_minutes, reason=self._reason)
