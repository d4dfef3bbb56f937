# tests/conftest.py
"""Shared test fixtures.

Device fakes live in tests/fakes.py so property tests (which can't use
function-scoped fixtures under @given) can build them directly.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import os

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from dishwasher.contracts import FillLevel, ProgramConfiguration, WashingProgram
from tests.fakes import FakeAppliance


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo configure_logging() calls so one test's output format can't leak into the next."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def appliance() -> FakeAppliance:
    """Closed door, clean filter, devices that never fault."""
    return FakeAppliance.build()


@pytest.fixture
def intensive_without_tablets() -> ProgramConfiguration:
    return (
        ProgramConfiguration.builder()
        .with_program(WashingProgram.INTENSIVE)
        .with_fill_level(FillLevel.HALF)
        .with_tablets_used(False)
        .build()
    )


@pytest.fixture
def intensive_with_tablets() -> ProgramConfiguration:
    return (
        ProgramConfiguration.builder()
        .with_program(WashingProgram.INTENSIVE)
        .with_fill_level(FillLevel.HALF)
        .with_tablets_used(True)
        .build()
    )


# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
