"""Configuration loading utilities."""

from typing import Optional

from .arm import ArmConfig
from .storage import StorageConfig


def get_arm_config(config_file: Optional[str] = None) -> ArmConfig:
    """Get arm configuration with optional YAML override.

    Args:
        config_file: Optional path to YAML config file

    Returns:
        ArmConfig instance
    """
    return ArmConfig.load(config_file)


def get_storage_config(config_file: Optional[str] = None) -> StorageConfig:
    """Get storage configuration with optional YAML override.

    Args:
        config_file: Optional path to YAML config file

    Returns:
        StorageConfig instance
    """
    return StorageConfig.load(config_file)
