import pytest

from extendable_arm.hardware.calibration import ExtensionCalibration, RotationCalibration
from extendable_arm.hardware.motors import MotorConfig, RunMode


class RecordingMotor:
    """Motor fake that records every command and reports a scripted position."""

    def __init__(self, position: int = 0):
        self.position = position
        self.commands = []

    def get_position(self) -> int:
        return self.position

    def set_power(self, value: float) -> None:
        self.commands.append(("power", value))

    def set_target_position(self, ticks: int) -> None:
        self.commands.append(("target", ticks))

    def set_mode(self, mode: RunMode) -> None:
        self.commands.append(("mode", mode))

    def last(self, kind: str):
        for command, value in reversed(self.commands):
            if command == kind:
                return value
        return None


@pytest.fixture
def rotation_motor():
    return RecordingMotor()


@pytest.fixture
def extension_motor():
    return RecordingMotor()


@pytest.fixture
def motors(rotation_motor, extension_motor):
    return MotorConfig(rotation_motor, extension_motor)


@pytest.fixture
def rotation_calibration():
    return RotationCalibration(min_ticks=-300, max_ticks=300, ticks_per_degree=10)


@pytest.fixture
def extension_calibration():
    return ExtensionCalibration(min_ticks=0, max_ticks=500)


@pytest.fixture
def make_motor():
    return RecordingMotor
