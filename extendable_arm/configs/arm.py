"""Arm configuration: calibration constants and power settings."""

from pydantic import Field
from .base import BaseConfig
from ..common.constants import (
    CALIBRATION_FILE_NAME,
    DEFAULT_AXIS_POWER,
    DEFAULT_COMPENSATION_POWER,
    DEFAULT_MOTOR_TYPE,
    MotorType,
)
from ..hardware.calibration import ExtensionCalibration, RotationCalibration


class ArmConfig(BaseConfig):
    """Configuration for the rotating, extending arm."""

    motor_type: MotorType = Field(
        default=DEFAULT_MOTOR_TYPE, description="Motor family driving both axes"
    )

    # Rotation calibration
    rotation_min_ticks: int = Field(
        default=0, description="Lowest allowed rotation in encoder ticks"
    )
    rotation_max_ticks: int = Field(
        default=1200, description="Highest allowed rotation in encoder ticks"
    )
    rotation_ticks_per_degree: float = Field(
        default=8.0, description="Encoder ticks per degree of arm rotation"
    )

    # Extension calibration
    extension_min_ticks: int = Field(
        default=0, description="Fully retracted extension in encoder ticks"
    )
    extension_max_ticks: int = Field(
        default=3000, description="Fully extended extension in encoder ticks"
    )

    # Power settings
    rotation_power: float = Field(
        default=DEFAULT_AXIS_POWER, description="Power scale for rotation, 0 to 1"
    )
    extension_power: float = Field(
        default=DEFAULT_AXIS_POWER, description="Power scale for extension, 0 to 1"
    )
    compensation_power: float = Field(
        default=DEFAULT_COMPENSATION_POWER,
        description="Extension power used when compensating a rotation move",
    )
    clamp_extension_targets: bool = Field(
        default=False,
        description="Clamp extension position targets (including compensation) to extension bounds",
    )

    # Loop and storage
    control_loop_hz: float = Field(
        default=50.0, description="Control loop frequency (Hz)"
    )
    calibration_file: str = Field(
        default=CALIBRATION_FILE_NAME,
        description="Calibration file name inside the season directory",
    )
    simulated_max_ticks_per_cycle: int = Field(
        default=40,
        description="Simulated motor travel per control cycle at full power",
    )

    def rotation_calibration(self) -> RotationCalibration:
        """Build the rotation calibration value object."""
        return RotationCalibration(
            min_ticks=self.rotation_min_ticks,
            max_ticks=self.rotation_max_ticks,
            ticks_per_degree=self.rotation_ticks_per_degree,
        )

    def extension_calibration(self) -> ExtensionCalibration:
        """Build the extension calibration value object."""
        return ExtensionCalibration(
            min_ticks=self.extension_min_ticks,
            max_ticks=self.extension_max_ticks,
        )
