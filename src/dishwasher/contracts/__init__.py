"""Shared contracts for cross-boundary data types.

All dataclasses, enums and TypedDicts that cross subsystem boundaries
(devices <-> engine <-> CLI) are defined here.

This package is a LEAF MODULE with no outbound dependencies to core/engine.
Settings classes are NOT re-exported here - import them from
dishwasher.core.config.

Import patterns:
    from dishwasher.contracts import ProgramConfiguration, RunResult, Status
"""

from dishwasher.contracts.enums import (
    CycleState,
    FillLevel,
    ProgramStep,
    Status,
    WashingProgram,
)
from dishwasher.contracts.errors import DeviceContractViolation, FaultReason
from dishwasher.contracts.program import ProgramConfiguration, ProgramConfigurationBuilder
from dishwasher.contracts.results import CommandResult, RunResult, RunResultBuilder

__all__ = [
    "CommandResult",
    "CycleState",
    "DeviceContractViolation",
    "FaultReason",
    "FillLevel",
    "ProgramConfiguration",
    "ProgramConfigurationBuilder",
    "ProgramStep",
    "RunResult",
    "RunResultBuilder",
    "Status",
    "WashingProgram",
]
