# src/dishwasher/devices/protocols.py
"""Device protocols defining the contracts for each collaborator.

The orchestrator drives these devices but implements none of them. Real
hardware drivers, the simulated devices and test fakes all satisfy the
same protocols, so they are interchangeable.

Devices:
- Door: closed-state query, lock/unlock commands (always succeed)
- WaterPump: pour/drain commands (may fault)
- Engine: runs a program's step sequence (may fault)
- DirtFilter: capacity reading (pure query)

Commands that may fault return a CommandResult instead of raising.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dishwasher.contracts import CommandResult, FillLevel, ProgramStep


@runtime_checkable
class DoorProtocol(Protocol):
    """Protocol for the dishwasher door."""

    def closed(self) -> bool:
        """Return True if the door is closed. Side-effect free."""
        ...

    def lock(self) -> None:
        """Lock the door."""
        ...

    def unlock(self) -> None:
        """Unlock the door."""
        ...


@runtime_checkable
class WaterPumpProtocol(Protocol):
    """Protocol for the water pump.

    Example:
        class RelayPump:
            def pour(self, fill_level: FillLevel) -> CommandResult:
                if not self._valve.open_for(fill_level):
                    return CommandResult.fault("inlet valve stuck")
                return CommandResult.ok()
    """

    def pour(self, fill_level: "FillLevel") -> "CommandResult":
        """Fill the tub to the given level."""
        ...

    def drain(self) -> "CommandResult":
        """Empty the tub."""
        ...


@runtime_checkable
class EngineProtocol(Protocol):
    """Protocol for the heating/washing engine."""

    def run_program(self, steps: Sequence["ProgramStep"]) -> "CommandResult":
        """Execute the given steps in order.

        Args:
            steps: Ordered program steps (see WashingProgram.steps)

        Returns:
            CommandResult.ok() when all steps completed, CommandResult.fault()
            on any execution error.
        """
        ...


@runtime_checkable
class DirtFilterProtocol(Protocol):
    """Protocol for the dirt filter.

    Interpreting the reading is the orchestrator's job, not the filter's.
    """

    def capacity(self) -> float:
        """Return the current capacity reading (0 = clogged, 100 = clean)."""
        ...
