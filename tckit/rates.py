"""
tckit.rates - Frame rate classification.

Only the two SMPTE drop-frame rates (29.97 and 59.94) use drop-frame
timecode. Any other rate, including exact integers and 23.976, is non-drop.
"""

from __future__ import annotations

from tckit.exceptions import ParameterError
from tckit.utils import round_half_up

DROP_FRAME_RATES: dict[float, int] = {
    29.97: 2,
    59.94: 4,
}

RATE_TOLERANCE = 0.01


def _drop_family(rate: float) -> float | None:
    for family in DROP_FRAME_RATES:
        if abs(rate - family) < RATE_TOLERANCE:
            return family
    return None


def is_drop_frame_rate(rate: float) -> bool:
    """Check if a frame rate supports drop-frame timecode.

    Args:
        rate: Frames per second

    Returns:
        True for rates within 0.01 of 29.97 or 59.94
    """
    return _drop_family(rate) is not None


def drop_quota(rate: float) -> int:
    """Number of frame labels skipped per dropping minute.

    Args:
        rate: A drop-frame rate

    Returns:
        2 for 29.97 fps, 4 for 59.94 fps

    Raises:
        ParameterError: If the rate is not a drop-frame rate
    """
    family = _drop_family(rate)
    if family is None:
        raise ParameterError(f"{rate} fps is not a drop-frame rate")
    return DROP_FRAME_RATES[family]


def nominal_fps(rate: float) -> int:
    """Integer frame radix used for timecode arithmetic (30 for 29.97)."""
    return round_half_up(rate)


def check_frame_rate(rate: float | None) -> float:
    """Reject missing or non-positive frame rates.

    Raises:
        ParameterError: If the rate is None or not positive
    """
    if rate is None:
        raise ParameterError("Frame rate must be specified")
    if rate <= 0:
        raise ParameterError(f"Frame rate must be positive, got {rate}")
    return rate
