"""Constants for arm motors and control defaults."""

from enum import Enum


class MotorType(str, Enum):
    """Motor families the arm can be built with."""

    TETRIX_TORQUENADO = "tetrix_torquenado"
    REV_HD_HEX = "rev_hd_hex"
    GOBILDA_YELLOW_JACKET = "gobilda_yellow_jacket"


DEFAULT_MOTOR_TYPE = MotorType.TETRIX_TORQUENADO

# Power scale applied to operator-driven motion on either axis
DEFAULT_AXIS_POWER = 1.0
# Power cap for extension moves derived from a rotation position command
DEFAULT_COMPENSATION_POWER = 0.4

SEASON_DIRECTORY_NAME = "2024-2025IntoTheDeep"
CALIBRATION_FILE_NAME = "arm_calibration.json"
