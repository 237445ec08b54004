"""Motion controller for a rotating, telescoping arm."""

import logging

from .geometry import (
    clamp_ticks,
    degrees_to_clamped_ticks,
    direction_sign,
    in_bounds,
    ticks_to_degrees,
)
from ..common.constants import DEFAULT_AXIS_POWER, DEFAULT_COMPENSATION_POWER
from ..configs.arm import ArmConfig
from ..hardware.calibration import ExtensionCalibration, RotationCalibration
from ..hardware.motors import Motor, MotorConfig, RunMode

logger = logging.getLogger(__name__)


class ArmController:
    """Turns arm intents into power and target-position commands for two motors.

    The rotation motor swings the arm up and down; the extension motor
    telescopes it in and out. Velocity commands (:meth:`rotate`,
    :meth:`extend`) cut power whenever the axis is already outside its travel
    limits. Position commands (:meth:`rotate_to_position`,
    :meth:`extend_to_position`) hand the target to the motor's
    run-to-position mode and return immediately.

    Rotating to a position also drives the extension motor to the negated
    rotation target at ``compensation_power`` so the arm keeps a constant
    reach as it swings.

    Extension position targets are sent as given unless
    ``clamp_extension_targets`` is set, in which case both
    :meth:`extend_to_position` and the compensation target are clamped to the
    extension limits.

    The controller is meant to be called once per control cycle from a single
    thread and keeps no state besides the two power scales.
    """

    def __init__(
        self,
        motors: MotorConfig,
        rotation: RotationCalibration,
        extension: ExtensionCalibration,
        compensation_power: float = DEFAULT_COMPENSATION_POWER,
        clamp_extension_targets: bool = False,
    ):
        """Initialize the arm controller.

        Args:
            motors: Rotation and extension motors
            rotation: Rotation limits and ticks per degree
            extension: Extension limits
            compensation_power: Extension power for compensation moves
            clamp_extension_targets: Clamp extension position targets to limits
        """
        self.rotation_motor: Motor = motors.rotation_motor
        self.extension_motor: Motor = motors.extension_motor
        self.motor_type = motors.motor_type

        self._rotation_power = DEFAULT_AXIS_POWER
        self._extension_power = DEFAULT_AXIS_POWER

        self._min_rotation = rotation.min_ticks
        self._max_rotation = rotation.max_ticks
        self._ticks_per_degree = rotation.ticks_per_degree

        self._min_extension = extension.min_ticks
        self._max_extension = extension.max_ticks

        self._compensation_power = compensation_power
        self._clamp_extension_targets = clamp_extension_targets

    @classmethod
    def from_config(cls, motors: MotorConfig, config: ArmConfig) -> "ArmController":
        """Build a controller from an arm configuration.

        Args:
            motors: Rotation and extension motors
            config: Arm configuration with calibration and power settings

        Returns:
            Configured ArmController
        """
        controller = cls(
            motors,
            config.rotation_calibration(),
            config.extension_calibration(),
            compensation_power=config.compensation_power,
            clamp_extension_targets=config.clamp_extension_targets,
        )
        controller.rotation_power = config.rotation_power
        controller.extension_power = config.extension_power
        return controller

    @property
    def rotation_power(self) -> float:
        """Power scale for rotation. Not range-checked."""
        return self._rotation_power

    @rotation_power.setter
    def rotation_power(self, value: float) -> None:
        self._rotation_power = value

    @property
    def extension_power(self) -> float:
        """Power scale for extension. Not range-checked."""
        return self._extension_power

    @extension_power.setter
    def extension_power(self, value: float) -> None:
        self._extension_power = value

    @property
    def compensation_power(self) -> float:
        return self._compensation_power

    @property
    def clamp_extension_targets(self) -> bool:
        return self._clamp_extension_targets

    @property
    def min_rotation_ticks(self) -> int:
        return self._min_rotation

    @property
    def max_rotation_ticks(self) -> int:
        return self._max_rotation

    @property
    def ticks_per_degree(self) -> float:
        return self._ticks_per_degree

    @property
    def min_extension_ticks(self) -> int:
        return self._min_extension

    @property
    def max_extension_ticks(self) -> int:
        return self._max_extension

    def rotation_degrees(self) -> float:
        """Current arm angle in degrees, read from the rotation motor."""
        return ticks_to_degrees(
            self.rotation_motor.get_position(), self._ticks_per_degree
        )

    def rotate(self, direction: float) -> None:
        """Rotate the arm with a set velocity.

        Stops the motor if the arm is out of bounds.

        Args:
            direction: Positive rotates up, negative rotates down, zero stops.
                The magnitude scales the rotation power.
        """
        position = self.rotation_motor.get_position()
        if not in_bounds(position, self._min_rotation, self._max_rotation):
            logger.debug(
                "Rotation at %d outside [%d, %d], cutting power",
                position,
                self._min_rotation,
                self._max_rotation,
            )
            self.rotation_motor.set_power(0)
            return

        self.rotation_motor.set_power(direction * self._rotation_power)

    def rotate_to_position(self, degrees: float) -> None:
        """Rotate the arm to an angle and compensate extension.

        Args:
            degrees: Target angle, the arm's starting position being 0 degrees
        """
        target = degrees_to_clamped_ticks(
            degrees, self._ticks_per_degree, self._min_rotation, self._max_rotation
        )
        logger.debug("Rotation to %s degrees targets %d ticks", degrees, target)

        direction = direction_sign(target - self.rotation_motor.get_position())
        self._seek(self.rotation_motor, target, direction * self._rotation_power)

        # keep the arm length constant while it swings
        compensation_target = -target
        if self._clamp_extension_targets:
            compensation_target = clamp_ticks(
                compensation_target, self._min_extension, self._max_extension
            )
        self._seek(self.extension_motor, compensation_target, self._compensation_power)

    def extend(self, direction: float) -> None:
        """Extend or retract the arm with a set velocity.

        Stops the motor if the extension is out of bounds.

        Args:
            direction: Positive extends, negative retracts, zero stops.
                Only the sign is used.
        """
        position = self.extension_motor.get_position()
        if not in_bounds(position, self._min_extension, self._max_extension):
            logger.debug(
                "Extension at %d outside [%d, %d], cutting power",
                position,
                self._min_extension,
                self._max_extension,
            )
            self.extension_motor.set_power(0)
            return

        self.extension_motor.set_power(direction_sign(direction) * self._extension_power)

    def extend_to_position(self, target: int) -> None:
        """Extend the arm to a tick position.

        The target is trusted and sent as is unless the controller clamps
        extension targets.

        Args:
            target: Extension target in ticks
        """
        if self._clamp_extension_targets:
            target = clamp_ticks(target, self._min_extension, self._max_extension)

        direction = direction_sign(target - self.extension_motor.get_position())
        self._seek(self.extension_motor, target, direction * self._extension_power)

    def _seek(self, motor: Motor, target: int, power: float) -> None:
        """Send a run-to-position command: target, then power, then mode."""
        motor.set_target_position(target)
        motor.set_power(power)
        motor.set_mode(RunMode.RUN_TO_POSITION)
