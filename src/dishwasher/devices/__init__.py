"""Device contracts and simulated implementations."""

from dishwasher.devices.protocols import (
    DirtFilterProtocol,
    DoorProtocol,
    EngineProtocol,
    WaterPumpProtocol,
)
from dishwasher.devices.simulated import (
    SimulatedAppliance,
    SimulatedDirtFilter,
    SimulatedDoor,
    SimulatedEngine,
    SimulatedWaterPump,
)

__all__ = [
    "DirtFilterProtocol",
    "DoorProtocol",
    "EngineProtocol",
    "SimulatedAppliance",
    "SimulatedDirtFilter",
    "SimulatedDoor",
    "SimulatedEngine",
    "SimulatedWaterPump",
    "WaterPumpProtocol",
]
