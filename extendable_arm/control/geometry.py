"""Unit conversion and bounds helpers for arm tick math."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    2.5 becomes 3 and -2.5 becomes -2. The fraction is compared directly so
    values just below a half, such as 0.49999999999999994, round down.
    """
    whole = math.floor(value)
    return whole + (1 if value - whole >= 0.5 else 0)


def degrees_to_clamped_ticks(
    degrees: float, ticks_per_degree: float, min_ticks: int, max_ticks: int
) -> int:
    """Convert an arm angle to ticks within [min_ticks, max_ticks].

    Infinite tick counts land on the nearest bound and NaN counts as 0 ticks
    before clamping, so any float input gives a valid target.
    """
    ticks = degrees * ticks_per_degree
    if math.isnan(ticks):
        ticks = 0.0
    return round_half_up(min(max(ticks, min_ticks), max_ticks))


def ticks_to_degrees(ticks: int, ticks_per_degree: float) -> float:
    """Convert encoder ticks back to an arm angle in degrees."""
    return ticks / ticks_per_degree


def clamp_ticks(ticks: int, min_ticks: int, max_ticks: int) -> int:
    """Clamp a tick value into [min_ticks, max_ticks]."""
    return min(max(ticks, min_ticks), max_ticks)


def in_bounds(position: int, min_ticks: int, max_ticks: int) -> bool:
    """Whether a position lies within [min_ticks, max_ticks]."""
    return min_ticks <= position <= max_ticks


def direction_sign(value: float) -> int:
    """Return -1, 0 or +1 for the sign of value (0 for NaN)."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
