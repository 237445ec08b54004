"""Storage configuration for the season file store."""

from pathlib import Path
from pydantic import Field
from .base import BaseConfig
from ..common.constants import SEASON_DIRECTORY_NAME


class StorageConfig(BaseConfig):
    """Where the season's text files live."""

    storage_root: Path = Field(
        default_factory=Path.home,
        description="External storage root that holds season directories",
    )
    season_name: str = Field(
        default=SEASON_DIRECTORY_NAME,
        description="Name of the current season's directory",
    )

    @property
    def season_directory(self) -> Path:
        return self.storage_root / self.season_name
