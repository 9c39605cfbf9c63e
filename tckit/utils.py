"""
tckit.utils - Shared numeric and formatting helpers.

Contains common functions used across multiple modules to avoid duplication.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up.

    Python's round() uses banker's rounding; frame arithmetic must not.
    """
    return math.floor(value + 0.5)


def precision_round(value: float, digits: int = 12) -> float:
    """Round a float to a number of significant digits.

    Args:
        value: Value to round
        digits: Significant digits to keep

    Returns:
        The rounded value, e.g. 2.99999999999996 -> 3.0 for 12 digits
    """
    return float(f"{value:.{digits}g}")


def format_duration(seconds: float) -> str:
    """Format seconds as HH:MM:SS or MM:SS.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string (HH:MM:SS if >= 1 hour, otherwise MM:SS)
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
