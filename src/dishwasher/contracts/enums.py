"""All programs, levels, statuses and states used across subsystem boundaries.

Washing programs are fixed at import time. Each program carries its run
duration and the ordered step sequence handed to the engine; nothing about
a program can be changed at runtime.
"""

from enum import StrEnum


class ProgramStep(StrEnum):
    """A single engine step within a washing program.

    The orchestrator never interprets steps - it passes a program's
    sequence to the engine as-is.
    """

    PREWASH = "prewash"
    MAIN_WASH = "main_wash"
    RINSE = "rinse"
    HOT_RINSE = "hot_rinse"
    DRY = "dry"


class WashingProgram(StrEnum):
    """Washing program selected by the user.

    Values:
        ECO: Low-temperature program for lightly soiled loads
        INTENSIVE: Full program for heavily soiled loads
        NIGHT: Long, quiet program
        RINSE: Short rinse-only program
    """

    ECO = "eco"
    INTENSIVE = "intensive"
    NIGHT = "night"
    RINSE = "rinse"

    @property
    def time_in_minutes(self) -> int:
        """Fixed run duration of this program in minutes."""
        return _PROGRAM_MINUTES[self]

    @property
    def steps(self) -> tuple[ProgramStep, ...]:
        """Ordered engine steps for this program."""
        return _PROGRAM_STEPS[self]


_PROGRAM_MINUTES: dict[WashingProgram, int] = {
    WashingProgram.ECO: 90,
    WashingProgram.INTENSIVE: 120,
    WashingProgram.NIGHT: 240,
    WashingProgram.RINSE: 20,
}

_PROGRAM_STEPS: dict[WashingProgram, tuple[ProgramStep, ...]] = {
    WashingProgram.ECO: (ProgramStep.MAIN_WASH, ProgramStep.RINSE, ProgramStep.DRY),
    WashingProgram.INTENSIVE: (
        ProgramStep.PREWASH,
        ProgramStep.MAIN_WASH,
        ProgramStep.RINSE,
        ProgramStep.HOT_RINSE,
        ProgramStep.DRY,
    ),
    WashingProgram.NIGHT: (
        ProgramStep.PREWASH,
        ProgramStep.MAIN_WASH,
        ProgramStep.RINSE,
        ProgramStep.DRY,
    ),
    WashingProgram.RINSE: (ProgramStep.RINSE,),
}


class FillLevel(StrEnum):
    """Amount of water poured at the start of a cycle."""

    HALF = "half"
    FULL = "full"


class Status(StrEnum):
    """Terminal outcome of a wash cycle.

    Exactly one status is reported per cycle.

    Values:
        SUCCESS: All steps completed
        DOOR_OPEN: Door was not closed at cycle start (precondition)
        ERROR_FILTER: Filter too dirty to use tablets (precondition)
        ERROR_PROGRAM: Engine faulted while running the program
        ERROR_PUMP: Pump faulted while pouring or draining
    """

    SUCCESS = "success"
    DOOR_OPEN = "door_open"
    ERROR_FILTER = "error_filter"
    ERROR_PROGRAM = "error_program"
    ERROR_PUMP = "error_pump"


class CycleState(StrEnum):
    """State of the cycle sequencer.

    CHECK_DOOR is initial. DONE and FAILED are terminal. Transitions follow
    the fixed step order; any fault jumps straight to FAILED.
    """

    CHECK_DOOR = "check_door"
    CHECK_FILTER = "check_filter"
    LOCKED_FILLING = "locked_filling"
    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (CycleState.DONE, CycleState.FAILED)
