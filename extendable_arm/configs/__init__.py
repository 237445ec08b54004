"""Configuration module for the extendable arm."""

from .loaders import (
    get_arm_config,
    get_storage_config,
)

__all__ = [
    "get_arm_config",
    "get_storage_config",
]
