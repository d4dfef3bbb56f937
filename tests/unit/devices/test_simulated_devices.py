# tests/unit/devices/test_simulated_devices.py
"""Tests for simulated devices and their protocol conformance."""

import pytest

from dishwasher.contracts import FillLevel, ProgramConfiguration, Status, WashingProgram
from dishwasher.core.config import ApplianceSettings, FaultSettings, FilterSettings
from dishwasher.devices import (
    DirtFilterProtocol,
    DoorProtocol,
    EngineProtocol,
    SimulatedAppliance,
    SimulatedDirtFilter,
    SimulatedDoor,
    SimulatedEngine,
    SimulatedWaterPump,
    WaterPumpProtocol,
)
from dishwasher.engine import DishWasher


class TestProtocolConformance:
    """Simulated devices satisfy the runtime-checkable device protocols."""

    @pytest.mark.parametrize(
        ("device", "protocol"),
        [
            (SimulatedDoor(), DoorProtocol),
            (SimulatedWaterPump(), WaterPumpProtocol),
            (SimulatedEngine(), EngineProtocol),
            (SimulatedDirtFilter(), DirtFilterProtocol),
        ],
    )
    def test_isinstance(self, device: object, protocol: type) -> None:
        assert isinstance(device, protocol)

    def test_door_is_not_a_pump(self) -> None:
        assert not isinstance(SimulatedDoor(), WaterPumpProtocol)


class TestSimulatedDevices:
    def test_door_tracks_lock(self) -> None:
        door = SimulatedDoor(closed=True)
        door.lock()
        assert door.locked
        door.unlock()
        assert not door.locked

    def test_pump_records_pours(self) -> None:
        pump = SimulatedWaterPump()
        assert not pump.pour(FillLevel.HALF).is_fault
        assert pump.poured == [FillLevel.HALF]

    def test_pump_drain_fault(self) -> None:
        pump = SimulatedWaterPump(drain_fault="outlet blocked")
        result = pump.drain()
        assert result.is_fault
        assert result.reason == "outlet blocked"
        assert pump.drain_count == 1

    def test_engine_records_steps(self) -> None:
        engine = SimulatedEngine()
        engine.run_program(WashingProgram.ECO.steps)
        assert engine.programs_run == [WashingProgram.ECO.steps]

    def test_filter_reading(self) -> None:
        assert SimulatedDirtFilter(capacity=42.5).capacity() == 42.5


class TestSimulatedAppliance:
    def test_defaults_complete_a_cycle(self) -> None:
        appliance = SimulatedAppliance.from_settings(ApplianceSettings())
        washer = DishWasher(appliance.water_pump, appliance.engine, appliance.dirt_filter, appliance.door)

        result = washer.start(ProgramConfiguration(program=WashingProgram.NIGHT, fill_level=FillLevel.FULL, tablets_used=True))

        assert result.status == Status.SUCCESS
        assert result.run_minutes == 240
        assert not appliance.door.locked

    def test_drain_fault_leaves_door_locked(self) -> None:
        settings = ApplianceSettings(faults=FaultSettings(drain=True))
        appliance = SimulatedAppliance.from_settings(settings)
        washer = DishWasher(appliance.water_pump, appliance.engine, appliance.dirt_filter, appliance.door)

        result = washer.start(ProgramConfiguration(program=WashingProgram.ECO, fill_level=FillLevel.HALF))

        assert result.status == Status.ERROR_PUMP
        assert appliance.door.locked
        assert appliance.engine.programs_run == [WashingProgram.ECO.steps]

    def test_filter_capacity_from_settings(self) -> None:
        settings = ApplianceSettings(filter=FilterSettings(capacity=10.0))
        appliance = SimulatedAppliance.from_settings(settings)
        washer = DishWasher(appliance.water_pump, appliance.engine, appliance.dirt_filter, appliance.door)

        result = washer.start(ProgramConfiguration(program=WashingProgram.ECO, fill_level=FillLevel.HALF, tablets_used=True))

        assert result.status == Status.ERROR_FILTER
        assert not appliance.door.locked
        assert appliance.water_pump.poured == []
