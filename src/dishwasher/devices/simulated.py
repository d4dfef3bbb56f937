# src/dishwasher/devices/simulated.py
"""In-memory simulated devices.

Production code wires real drivers into DishWasher. The CLI and tests use
these simulations instead: their state and fault injection come from
ApplianceSettings (or constructor arguments), and every command is
recorded so callers can inspect what happened.

Example:
    appliance = SimulatedAppliance.from_settings(settings)
    washer = DishWasher(
        water_pump=appliance.water_pump,
        engine=appliance.engine,
        dirt_filter=appliance.dirt_filter,
        door=appliance.door,
    )
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dishwasher.contracts import CommandResult, FillLevel, ProgramStep
from dishwasher.core.logging import get_logger

if TYPE_CHECKING:
    from dishwasher.core.config import ApplianceSettings

logger = get_logger(__name__)


class SimulatedDoor:
    """Door that is open or closed as configured and tracks its lock."""

    def __init__(self, *, closed: bool = True) -> None:
        self._closed = closed
        self.locked = False

    def closed(self) -> bool:
        return self._closed

    def lock(self) -> None:
        self.locked = True
        logger.debug("door_locked")

    def unlock(self) -> None:
        self.locked = False
        logger.debug("door_unlocked")


class SimulatedWaterPump:
    """Pump whose pour/drain commands fault on demand.

    Args:
        pour_fault: Reason returned by pour(), or None to succeed
        drain_fault: Reason returned by drain(), or None to succeed
    """

    def __init__(self, *, pour_fault: str | None = None, drain_fault: str | None = None) -> None:
        self._pour_fault = pour_fault
        self._drain_fault = drain_fault
        self.poured: list[FillLevel] = []
        self.drain_count = 0

    def pour(self, fill_level: FillLevel) -> CommandResult:
        self.poured.append(fill_level)
        if self._pour_fault is not None:
            return CommandResult.fault(self._pour_fault)
        logger.debug("water_poured", fill_level=fill_level.value)
        return CommandResult.ok()

    def drain(self) -> CommandResult:
        self.drain_count += 1
        if self._drain_fault is not None:
            return CommandResult.fault(self._drain_fault)
        logger.debug("water_drained")
        return CommandResult.ok()


class SimulatedEngine:
    """Engine that records executed programs and faults on demand."""

    def __init__(self, *, fault: str | None = None) -> None:
        self._fault = fault
        self.programs_run: list[tuple[ProgramStep, ...]] = []

    def run_program(self, steps: Sequence[ProgramStep]) -> CommandResult:
        self.programs_run.append(tuple(steps))
        if self._fault is not None:
            return CommandResult.fault(self._fault)
        logger.debug("program_executed", steps=[step.value for step in steps])
        return CommandResult.ok()


class SimulatedDirtFilter:
    """Filter reporting a fixed capacity reading."""

    def __init__(self, *, capacity: float = 100.0) -> None:
        self._capacity = capacity

    def capacity(self) -> float:
        return self._capacity


@dataclass(frozen=True)
class SimulatedAppliance:
    """The four simulated collaborators of one dishwasher."""

    door: SimulatedDoor
    water_pump: SimulatedWaterPump
    engine: SimulatedEngine
    dirt_filter: SimulatedDirtFilter

    @classmethod
    def from_settings(cls, settings: ApplianceSettings) -> SimulatedAppliance:
        """Build simulated devices matching the configured appliance state."""
        faults = settings.faults
        return cls(
            door=SimulatedDoor(closed=settings.door.closed),
            water_pump=SimulatedWaterPump(
                pour_fault="simulated pour fault" if faults.pour else None,
                drain_fault="simulated drain fault" if faults.drain else None,
            ),
            engine=SimulatedEngine(fault="simulated program fault" if faults.program else None),
            dirt_filter=SimulatedDirtFilter(capacity=settings.filter.capacity),
        )
