"""
tckit - SMPTE timecode toolkit.

Converts between durations in seconds and broadcast timecode
(hh:mm:ss:ff), with drop-frame timecode (hh:mm:ss;ff) at 29.97 and
59.94 fps, and validates timecode strings against a frame rate.
"""

__version__ = "0.1.0"

from tckit.convert import (  # noqa: E402
    frames_to_timecode,
    seconds_to_timecode,
    short_timecode,
    timecode_to_frames,
    timecode_to_seconds,
)
from tckit.dropframe import drop_frame_to_frames, frames_to_drop_frame  # noqa: E402
from tckit.exceptions import ParameterError, TckitError  # noqa: E402
from tckit.formats import TimecodeComponents, is_drop_frame_timecode  # noqa: E402
from tckit.rates import drop_quota, is_drop_frame_rate, nominal_fps  # noqa: E402
from tckit.validation import TimecodeValidationResult, validate_timecode  # noqa: E402

__all__ = [
    "ParameterError",
    "TckitError",
    "TimecodeComponents",
    "TimecodeValidationResult",
    "drop_frame_to_frames",
    "drop_quota",
    "frames_to_drop_frame",
    "frames_to_timecode",
    "is_drop_frame_rate",
    "is_drop_frame_timecode",
    "nominal_fps",
    "seconds_to_timecode",
    "short_timecode",
    "timecode_to_frames",
    "timecode_to_seconds",
    "validate_timecode",
]
