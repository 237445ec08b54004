import math

import pytest

from extendable_arm.common.constants import DEFAULT_COMPENSATION_POWER, MotorType
from extendable_arm.configs.arm import ArmConfig
from extendable_arm.control.arm import ArmController
from extendable_arm.control.geometry import clamp_ticks
from extendable_arm.hardware.motors import RunMode


@pytest.fixture
def arm(motors, rotation_calibration, extension_calibration):
    return ArmController(motors, rotation_calibration, extension_calibration)


@pytest.fixture
def clamping_arm(motors, rotation_calibration, extension_calibration):
    return ArmController(
        motors,
        rotation_calibration,
        extension_calibration,
        clamp_extension_targets=True,
    )


def test_defaults(arm):
    assert arm.rotation_power == 1.0
    assert arm.extension_power == 1.0
    assert arm.compensation_power == DEFAULT_COMPENSATION_POWER
    assert arm.clamp_extension_targets is False
    assert arm.motor_type is MotorType.TETRIX_TORQUENADO
    assert (arm.min_rotation_ticks, arm.max_rotation_ticks) == (-300, 300)
    assert (arm.min_extension_ticks, arm.max_extension_ticks) == (0, 500)
    assert arm.ticks_per_degree == 10


def test_power_setters_accept_any_value(arm):
    arm.rotation_power = 2.5
    arm.extension_power = -0.3
    assert arm.rotation_power == 2.5
    assert arm.extension_power == -0.3


@pytest.mark.parametrize("position", [301, 1000, -301, -5000])
@pytest.mark.parametrize("direction", [1.0, -1.0, 0.5, 0.0])
def test_rotate_cuts_power_out_of_bounds(arm, rotation_motor, position, direction):
    rotation_motor.position = position
    arm.rotate(direction)
    assert rotation_motor.commands == [("power", 0)]


@pytest.mark.parametrize("position", [501, 9000, -1, -400])
@pytest.mark.parametrize("direction", [1.0, -1.0, 0.2, 0.0])
def test_extend_cuts_power_out_of_bounds(arm, extension_motor, position, direction):
    extension_motor.position = position
    arm.extend(direction)
    assert extension_motor.commands == [("power", 0)]


def test_rotate_scales_raw_direction(arm, rotation_motor):
    arm.rotation_power = 0.5
    rotation_motor.position = 100
    arm.rotate(-0.4)
    assert rotation_motor.last("power") == pytest.approx(-0.2)


@pytest.mark.parametrize("position", [-300, 300])
def test_rotate_bounds_are_inclusive(arm, rotation_motor, position):
    rotation_motor.position = position
    arm.rotate(1.0)
    assert rotation_motor.last("power") == 1.0


def test_rotate_out_of_bounds_stops_even_with_request(arm, rotation_motor):
    rotation_motor.position = 500
    arm.rotate(1.0)
    assert rotation_motor.last("power") == 0


@pytest.mark.parametrize(
    "direction, expected", [(-0.3, -1), (-1.0, -1), (0.0, 0), (0.01, 1), (7.0, 1)]
)
def test_extend_uses_direction_sign_only(arm, extension_motor, direction, expected):
    arm.extension_power = 0.8
    extension_motor.position = 250
    arm.extend(direction)
    assert extension_motor.last("power") == pytest.approx(expected * 0.8)


def test_velocity_commands_do_not_touch_target_or_mode(
    arm, rotation_motor, extension_motor
):
    arm.rotate(1.0)
    arm.extend(1.0)
    assert [c for c, _ in rotation_motor.commands] == ["power"]
    assert [c for c, _ in extension_motor.commands] == ["power"]


def test_rotate_to_position_clamps_and_compensates(arm, rotation_motor, extension_motor):
    arm.rotate_to_position(45)

    assert rotation_motor.commands == [
        ("target", 300),
        ("power", 1.0),
        ("mode", RunMode.RUN_TO_POSITION),
    ]
    assert extension_motor.commands == [
        ("target", -300),
        ("power", DEFAULT_COMPENSATION_POWER),
        ("mode", RunMode.RUN_TO_POSITION),
    ]


def test_rotate_to_position_direction_uses_clamped_target(arm, rotation_motor):
    arm.rotation_power = 0.7
    rotation_motor.position = 100
    arm.rotate_to_position(45)
    assert rotation_motor.last("target") == 300
    assert rotation_motor.last("power") == pytest.approx(0.7)


@pytest.mark.parametrize(
    "position, degrees, expected_sign",
    [(0, 10, 1), (200, 10, -1), (100, 10, 0), (-300, -90, 0), (0, -12.5, -1)],
)
def test_rotate_to_position_direction_sign(
    arm, rotation_motor, position, degrees, expected_sign
):
    rotation_motor.position = position
    arm.rotate_to_position(degrees)
    assert rotation_motor.last("power") == expected_sign * arm.rotation_power


@pytest.mark.parametrize("degrees", [-100, -30, -0.04, 0, 12.34, 29.96, 45, 1e6])
def test_rotate_to_position_target_is_stable_under_clamp(
    arm, rotation_motor, extension_motor, degrees
):
    arm.rotate_to_position(degrees)
    target = rotation_motor.last("target")
    assert clamp_ticks(target, -300, 300) == target
    assert extension_motor.last("target") == -target


@pytest.mark.parametrize(
    "degrees, expected", [(1e308, 300), (math.inf, 300), (-math.inf, -300), (math.nan, 0)]
)
def test_rotate_to_position_non_finite_targets_clamp(
    arm, rotation_motor, extension_motor, degrees, expected
):
    rotation_motor.position = 100
    arm.rotate_to_position(degrees)
    assert rotation_motor.last("target") == expected
    assert rotation_motor.last("mode") is RunMode.RUN_TO_POSITION
    assert extension_motor.last("target") == -expected


def test_rotate_to_position_uses_compensation_power(
    motors, rotation_calibration, extension_calibration, extension_motor
):
    arm = ArmController(
        motors, rotation_calibration, extension_calibration, compensation_power=0.25
    )
    arm.extension_power = 0.9
    arm.rotate_to_position(10)
    assert extension_motor.last("power") == 0.25


def test_extend_to_position_is_not_clamped_by_default(arm, extension_motor):
    arm.extend_to_position(9999)
    assert extension_motor.commands == [
        ("target", 9999),
        ("power", 1.0),
        ("mode", RunMode.RUN_TO_POSITION),
    ]


def test_extend_to_position_retracts(arm, extension_motor):
    arm.extension_power = 0.6
    extension_motor.position = 400
    arm.extend_to_position(100)
    assert extension_motor.last("power") == pytest.approx(-0.6)


def test_extend_to_position_at_target_has_zero_power(arm, extension_motor):
    extension_motor.position = 100
    arm.extend_to_position(100)
    assert extension_motor.last("power") == 0


def test_clamping_arm_clamps_extension_targets(clamping_arm, extension_motor):
    clamping_arm.extend_to_position(9999)
    assert extension_motor.last("target") == 500


def test_clamping_arm_clamps_compensation_target(
    clamping_arm, rotation_motor, extension_motor
):
    clamping_arm.rotate_to_position(20)
    assert rotation_motor.last("target") == 200
    assert extension_motor.last("target") == 0


def test_rotation_degrees(arm, rotation_motor):
    rotation_motor.position = 450
    assert arm.rotation_degrees() == pytest.approx(45.0)


def test_from_config(motors):
    config = ArmConfig(
        rotation_min_ticks=-100,
        rotation_max_ticks=100,
        rotation_ticks_per_degree=2.0,
        extension_min_ticks=0,
        extension_max_ticks=50,
        rotation_power=0.6,
        extension_power=0.3,
        compensation_power=0.2,
        clamp_extension_targets=True,
    )
    arm = ArmController.from_config(motors, config)

    assert arm.rotation_power == 0.6
    assert arm.extension_power == 0.3
    assert arm.compensation_power == 0.2
    assert arm.clamp_extension_targets is True
    assert (arm.min_rotation_ticks, arm.max_rotation_ticks) == (-100, 100)
    assert arm.ticks_per_degree == 2.0
    assert (arm.min_extension_ticks, arm.max_extension_ticks) == (0, 50)
