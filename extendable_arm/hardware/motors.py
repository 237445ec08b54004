"""Motor handle contract and the motor grouping used by the arm."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from ..common.constants import DEFAULT_MOTOR_TYPE, MotorType


class RunMode(Enum):
    """Operating mode of a motor."""

    FREE_RUN = "free_run"
    RUN_TO_POSITION = "run_to_position"


@runtime_checkable
class Motor(Protocol):
    """Anything the arm can command: a hardware binding, a simulator or a test fake."""

    def get_position(self) -> int:
        """Current encoder position in ticks."""
        ...

    def set_power(self, value: float) -> None:
        """Set commanded power, typically in [-1, 1]."""
        ...

    def set_target_position(self, ticks: int) -> None:
        """Set the target used in run-to-position mode."""
        ...

    def set_mode(self, mode: RunMode) -> None:
        """Switch between free-run and run-to-position."""
        ...


@dataclass(frozen=True)
class MotorConfig:
    """The arm's rotation and extension motors and their motor type."""

    rotation_motor: Motor
    extension_motor: Motor
    motor_type: MotorType = DEFAULT_MOTOR_TYPE

    def __post_init__(self):
        for role in ("rotation_motor", "extension_motor"):
            if not isinstance(getattr(self, role), Motor):
                raise TypeError(f"{role} does not implement the Motor interface")

        if self.rotation_motor is self.extension_motor:
            raise ValueError("rotation_motor and extension_motor must be different motors")

        object.__setattr__(self, "motor_type", MotorType(self.motor_type))
