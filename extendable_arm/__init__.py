"""Rotation and extension control for a telescoping robot arm."""

__version__ = "0.1.0"
