"""Arm calibration value objects and their storage in the season directory."""

import json
import logging
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..common.constants import CALIBRATION_FILE_NAME
from ..common.file_manager import FileManager

logger = logging.getLogger(__name__)


class RotationCalibration(BaseModel):
    """Rotation travel limits in ticks and the ticks-per-degree ratio."""

    model_config = ConfigDict(frozen=True)

    min_ticks: int = Field(description="Minimum rotation of the arm in ticks")
    max_ticks: int = Field(description="Maximum rotation of the arm in ticks")
    ticks_per_degree: float = Field(
        gt=0, description="Ticks needed to rotate the arm by one degree"
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "RotationCalibration":
        if self.min_ticks > self.max_ticks:
            raise ValueError(
                f"min_ticks ({self.min_ticks}) exceeds max_ticks ({self.max_ticks})"
            )
        return self


class ExtensionCalibration(BaseModel):
    """Extension travel limits in ticks."""

    model_config = ConfigDict(frozen=True)

    min_ticks: int = Field(description="Minimum extension of the arm in ticks")
    max_ticks: int = Field(description="Maximum extension of the arm in ticks")

    @model_validator(mode="after")
    def _check_bounds(self) -> "ExtensionCalibration":
        if self.min_ticks > self.max_ticks:
            raise ValueError(
                f"min_ticks ({self.min_ticks}) exceeds max_ticks ({self.max_ticks})"
            )
        return self


def save_calibration(
    file_manager: FileManager,
    rotation: RotationCalibration,
    extension: ExtensionCalibration,
    file_name: str = CALIBRATION_FILE_NAME,
) -> None:
    """Save arm calibration as JSON in the season directory.

    Args:
        file_manager: Season file store
        rotation: Rotation calibration to save
        extension: Extension calibration to save
        file_name: File name inside the season directory
    """
    calibration_data = {
        "rotation": rotation.model_dump(),
        "extension": extension.model_dump(),
    }
    path = file_manager.write_file(file_name, json.dumps(calibration_data, indent=2))
    logger.info("Saved arm calibration to '%s'", path)


def load_calibration(
    file_manager: FileManager,
    file_name: str = CALIBRATION_FILE_NAME,
) -> Optional[Tuple[RotationCalibration, ExtensionCalibration]]:
    """Load arm calibration from the season directory.

    Args:
        file_manager: Season file store
        file_name: File name inside the season directory

    Returns:
        (rotation, extension) calibration, or None if no file was saved

    Raises:
        ValueError: If the calibration file is corrupted or invalid
    """
    raw = file_manager.read_file(file_name)
    if raw is None:
        logger.info("No saved arm calibration in '%s'", file_manager.season_directory)
        return None

    try:
        data = json.loads(raw)
        rotation = RotationCalibration(**data["rotation"])
        extension = ExtensionCalibration(**data["extension"])
    except json.JSONDecodeError as e:
        logger.error("Error decoding JSON from '%s': %s", file_name, e)
        raise ValueError(f"Error decoding JSON from '{file_name}': {e}")
    except (KeyError, TypeError, ValidationError) as e:
        logger.error("Invalid arm calibration in '%s': %s", file_name, e)
        raise ValueError(f"Invalid arm calibration in '{file_name}': {e}")

    logger.info("Loaded arm calibration from '%s'", file_name)
    return rotation, extension
