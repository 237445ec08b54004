import re
import yaml
from pathlib import Path
from typing import TypeVar, Type, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

T = TypeVar("T", bound="BaseConfig")


class BaseConfig(BaseSettings):
    """Base configuration class with YAML section loading."""

    model_config = SettingsConfigDict(env_prefix="EXTENDABLE_ARM_")

    @classmethod
    def _camel_to_snake(cls, name: str) -> str:
        """Convert CamelCase to snake_case."""
        s1 = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name)
        return s1.lower()

    @classmethod
    def section_name(cls) -> str:
        """YAML section read for this class, e.g. ``ArmConfig`` -> ``arm``."""
        return cls._camel_to_snake(cls.__name__.replace("Config", ""))

    @classmethod
    def load(cls: Type[T], config_file: Optional[str] = None) -> T:
        """Load the configuration, optionally overridden by a YAML file.

        Args:
            config_file: Optional path to YAML config file

        Returns:
            Instance of the configuration class (with defaults if no file provided)

        Raises:
            FileNotFoundError: If config_file is given but does not exist
        """
        if config_file:
            if not Path(config_file).exists():
                raise FileNotFoundError(f"Configuration file not found: {config_file}")

            with open(config_file, "r") as f:
                data = yaml.safe_load(f) or {}

            section_data = data.get(cls.section_name(), {}) or {}
            return cls(**section_data)
        return cls()
