# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Usage:
    from tests.property.conftest import program_configurations, fault_plans

    @given(config=program_configurations(), plan=fault_plans())
    def test_cycle(config, plan) -> None:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass

from hypothesis import strategies as st

from dishwasher.contracts import CommandResult, FillLevel, ProgramConfiguration, WashingProgram

# Readings a filter can report, including the edges around the threshold
filter_readings = st.floats(min_value=0.0, max_value=100.0, allow_nan=False)

fault_reasons = st.text(min_size=1, max_size=30)


def program_configurations(*, tablets_used: bool | None = None) -> st.SearchStrategy[ProgramConfiguration]:
    """Any valid configuration, optionally pinning tablet usage."""
    return st.builds(
        ProgramConfiguration,
        program=st.sampled_from(list(WashingProgram)),
        fill_level=st.sampled_from(list(FillLevel)),
        tablets_used=st.booleans() if tablets_used is None else st.just(tablets_used),
    )


def command_results() -> st.SearchStrategy[CommandResult]:
    return st.one_of(st.just(CommandResult.ok()), fault_reasons.map(CommandResult.fault))


@dataclass(frozen=True)
class FaultPlan:
    """What every device reports during one generated cycle."""

    door_closed: bool
    filter_reading: float
    pour: CommandResult
    run_program: CommandResult
    drain: CommandResult


@st.composite
def fault_plans(draw: st.DrawFn) -> FaultPlan:
    return FaultPlan(
        door_closed=draw(st.booleans()),
        filter_reading=draw(filter_readings),
        pour=draw(command_results()),
        run_program=draw(command_results()),
        drain=draw(command_results()),
    )
