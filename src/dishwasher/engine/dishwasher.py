# src/dishwasher/engine/dishwasher.py
"""DishWasher: sequences one wash cycle across the four devices.

The cycle is a strictly sequential pipeline with early exit:

    closed -> [capacity] -> lock -> pour -> run_program -> drain -> unlock

Precondition failures (door open, dirty filter) are detected before the
door is locked. Device faults after locking end the cycle immediately and
skip every remaining step - including unlock. The door stays locked
because the tub may still hold water; releasing it is a service action.

start() never raises for precondition failures or device faults. It does
raise DeviceContractViolation when a device returns something other than a
CommandResult, because that is a driver bug.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from dishwasher.contracts import (
    CommandResult,
    CycleState,
    DeviceContractViolation,
    FaultReason,
    ProgramConfiguration,
    RunResult,
    Status,
)

if TYPE_CHECKING:
    from dishwasher.devices.protocols import (
        DirtFilterProtocol,
        DoorProtocol,
        EngineProtocol,
        WaterPumpProtocol,
    )

slog = structlog.get_logger(__name__)

# Lowest filter capacity reading at which tablets may be used. Readings
# below this mean the filter is too dirty for a tablet cycle.
MINIMAL_FILTER_CAPACITY: float = 50.0


class DishWasher:
    """Runs wash cycles against injected devices.

    The devices are shared for the washer's lifetime; no state is kept
    between start() calls. One cycle at a time per instance.

    Example:
        washer = DishWasher(water_pump, engine, dirt_filter, door)
        result = washer.start(config)
        if result.succeeded:
            print(f"Done in {result.run_minutes} minutes")
    """

    def __init__(
        self,
        water_pump: WaterPumpProtocol,
        engine: EngineProtocol,
        dirt_filter: DirtFilterProtocol,
        door: DoorProtocol,
    ) -> None:
        self._water_pump = water_pump
        self._engine = engine
        self._dirt_filter = dirt_filter
        self._door = door

    def start(self, config: ProgramConfiguration) -> RunResult:
        """Run one wash cycle.

        Args:
            config: Program, fill level and tablet usage for this cycle

        Returns:
            RunResult with SUCCESS and the program duration, or the status of
            the first failure.

        Raises:
            DeviceContractViolation: If a device command returns a non-CommandResult
        """
        log = slog.bind(
            program=config.program.value,
            fill_level=config.fill_level.value,
            tablets_used=config.tablets_used,
        )
        log.info("cycle_started")

        state = CycleState.CHECK_DOOR
        if not self._door.closed():
            return self._precondition_failed(log, state, RunResult.error(Status.DOOR_OPEN, "door is open"))

        if config.tablets_used:
            state = self._transition(log, state, CycleState.CHECK_FILTER)
            capacity = self._dirt_filter.capacity()
            # Written as "not >=" so a NaN reading fails the check
            if not capacity >= MINIMAL_FILTER_CAPACITY:
                reason = f"filter capacity {capacity} is below {MINIMAL_FILTER_CAPACITY}"
                return self._precondition_failed(log, state, RunResult.error(Status.ERROR_FILTER, reason))

        state = self._transition(log, state, CycleState.LOCKED_FILLING)
        self._door.lock()
        failure = self._run_command(
            log,
            state,
            Status.ERROR_PUMP,
            "water_pump",
            "pour",
            lambda: self._water_pump.pour(config.fill_level),
        )
        if failure is not None:
            return failure

        state = self._transition(log, state, CycleState.RUNNING)
        failure = self._run_command(
            log,
            state,
            Status.ERROR_PROGRAM,
            "engine",
            "run_program",
            lambda: self._engine.run_program(config.program.steps),
        )
        if failure is not None:
            return failure

        state = self._transition(log, state, CycleState.DRAINING)
        failure = self._run_command(log, state, Status.ERROR_PUMP, "water_pump", "drain", self._water_pump.drain)
        if failure is not None:
            return failure

        self._door.unlock()
        self._transition(log, state, CycleState.DONE)

        result = RunResult.success(config.program.time_in_minutes)
        log.info("cycle_completed", status=result.status.value, run_minutes=result.run_minutes)
        return result

    def _run_command(
        self,
        log: structlog.stdlib.BoundLogger,
        state: CycleState,
        fault_status: Status,
        device: str,
        command: str,
        call: Callable[[], CommandResult],
    ) -> RunResult | None:
        """Execute a device command; return the failure result on fault, else None."""
        outcome = call()
        if not isinstance(outcome, CommandResult):
            violation = DeviceContractViolation(device, command, outcome)
            self._transition(log, state, CycleState.FAILED)
            log.error(
                "cycle_contract_violation",
                failed_in=state.value,
                device=device,
                command=command,
                returned_type=type(outcome).__name__,
            )
            raise violation
        if not outcome.is_fault:
            return None

        fault: FaultReason = {
            "device": device,
            "command": command,
            # CommandResult guarantees a reason on faults
            "message": outcome.reason or "",
        }
        result = RunResult.error(fault_status, f"{device}.{command} failed: {fault['message']}")
        self._transition(log, state, CycleState.FAILED)
        log.warning("cycle_device_fault", failed_in=state.value, status=result.status.value, **fault)
        return result

    def _precondition_failed(
        self,
        log: structlog.stdlib.BoundLogger,
        state: CycleState,
        result: RunResult,
    ) -> RunResult:
        self._transition(log, state, CycleState.FAILED)
        log.info("cycle_precondition_failed", failed_in=state.value, status=result.status.value, reason=result.reason)
        return result

    @staticmethod
    def _transition(log: structlog.stdlib.BoundLogger, current: CycleState, target: CycleState) -> CycleState:
        # Terminal transitions end the cycle, so they are visible at INFO
        emit = log.info if target.is_terminal else log.debug
        emit("cycle_state_changed", from_state=current.value, to_state=target.value)
        return target
