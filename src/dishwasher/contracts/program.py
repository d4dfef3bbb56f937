"""Program configuration for a single wash cycle.

ProgramConfiguration is created once per cycle and never mutated.
program and fill_level are required; a configuration without them can't
be constructed, so the orchestrator never sees one.
"""

from __future__ import annotations

from dataclasses import dataclass

from dishwasher.contracts.enums import FillLevel, WashingProgram


@dataclass(frozen=True)
class ProgramConfiguration:
    """Requested wash program, water fill level and tablet usage."""

    program: WashingProgram
    fill_level: FillLevel
    tablets_used: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.program, WashingProgram):
            raise TypeError(f"program must be a WashingProgram, got {type(self.program).__name__}")
        if not isinstance(self.fill_level, FillLevel):
            raise TypeError(f"fill_level must be a FillLevel, got {type(self.fill_level).__name__}")
        if not isinstance(self.tablets_used, bool):
            raise TypeError(f"tablets_used must be a bool, got {type(self.tablets_used).__name__}")

    @classmethod
    def builder(cls) -> ProgramConfigurationBuilder:
        """Start a fluent builder.

        Example:
            config = (
                ProgramConfiguration.builder()
                .with_program(WashingProgram.INTENSIVE)
                .with_fill_level(FillLevel.HALF)
                .with_tablets_used(True)
                .build()
            )
        """
        return ProgramConfigurationBuilder()


class ProgramConfigurationBuilder:
    """Fluent builder for ProgramConfiguration."""

    def __init__(self) -> None:
        self._program: WashingProgram | None = None
        self._fill_level: FillLevel | None = None
        self._tablets_used = False

    def with_program(self, program: WashingProgram) -> ProgramConfigurationBuilder:
        self._program = program
        return self

    def with_fill_level(self, fill_level: FillLevel) -> ProgramConfigurationBuilder:
        self._fill_level = fill_level
        return self

    def with_tablets_used(self, tablets_used: bool) -> ProgramConfigurationBuilder:
        self._tablets_used = tablets_used
        return self

    def build(self) -> ProgramConfiguration:
        """Build the configuration.

        Raises:
            ValueError: If program or fill_level was never set
        """
        if self._program is None or self._fill_level is None:
            missing = [
                name
                for name, value in (("program", self._program), ("fill_level", self._fill_level))
                if value is None
            ]
            raise ValueError(f"ProgramConfiguration is missing required field(s): {', '.join(missing)}")
        return ProgramConfiguration(
            program=self._program,
            fill_level=self._fill_level,
            tablets_used=self._tablets_used,
        )
