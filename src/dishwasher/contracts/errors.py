"""Error and reason schema contracts.

Device faults are NOT exceptions - they come back from commands as
CommandResult values and are mapped to a Status by the orchestrator.
Exceptions here signal bugs: a collaborator that breaks its contract.
"""

from typing import TypedDict


class FaultReason(TypedDict):
    """Schema for device fault payloads.

    Used when logging a fault and when building RunResult.reason.
    """

    device: str  # Collaborator name (e.g., "water_pump")
    command: str  # Command that faulted (e.g., "drain")
    message: str  # Device-reported explanation


class DeviceContractViolation(TypeError):
    """Raised when a collaborator returns something other than its declared type.

    This is a bug in the device driver (or in a test double), not a
    hardware fault, so it is never converted into a Status.
    """

    def __init__(self, device: str, command: str, returned: object) -> None:
        self.device = device
        self.command = command
        self.returned = returned
        super().__init__(
            f"{device}.{command}() must return CommandResult, got {type(returned).__name__}"
        )
