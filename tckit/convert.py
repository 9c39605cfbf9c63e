"""
tckit.convert - Conversion between seconds, frames and timecode.

Drop-frame is used only at 29.97 and 59.94 fps. When the caller does not
say, seconds_to_timecode picks drop-frame for durations of a minute or more
at those rates; timecode_to_seconds follows the string's separator.
"""

from __future__ import annotations

import math

from tckit.dropframe import drop_frame_to_frames, frames_to_drop_frame
from tckit.exceptions import ParameterError
from tckit.formats import (
    format_timecode,
    is_drop_frame_timecode,
    pad_time_to_timecode,
    parse_timecode,
)
from tckit.logging import AdvisorySink, emit_advisory, logger
from tckit.rates import check_frame_rate, is_drop_frame_rate, nominal_fps
from tckit.utils import precision_round, round_half_up

AUTO_DROP_FRAME_MIN_SECONDS = 60
DRIFT_WARNING_MIN_SECONDS = 3600
DRIFT_SECONDS_PER_HOUR = 3.6


def _normalise_player_time(seconds: float, frame_rate: float) -> float:
    """Snap seconds to the start of the frame it falls in, to 2 decimals."""
    total_frames = math.floor(precision_round(frame_rate * seconds, 12))
    return round(total_frames / frame_rate, 2)


def seconds_to_ndf_timecode(seconds: float, frame_rate: float) -> str:
    """Convert seconds to non-drop-frame timecode.

    Args:
        seconds: Time in seconds
        frame_rate: Frames per second

    Returns:
        Timecode string in HH:MM:SS:FF format
    """
    normalised = _normalise_player_time(seconds, frame_rate)
    whole_seconds = math.floor(normalised)

    # Round to hundredths first so 7.9999999 becomes frame 8, not 7.
    fraction = normalised - whole_seconds
    ff = math.floor(round_half_up(fraction * frame_rate * 100) / 100)

    hh, remainder = divmod(whole_seconds, 3600)
    mm, ss = divmod(remainder, 60)
    return format_timecode(hh, mm, ss, ff)


def seconds_to_df_timecode(seconds: float, frame_rate: float) -> str:
    """Convert seconds to drop-frame timecode.

    Args:
        seconds: Time in seconds
        frame_rate: 29.97 or 59.94

    Returns:
        Timecode string in HH:MM:SS;FF format
    """
    total_frames = round_half_up(seconds * frame_rate)
    return str(frames_to_drop_frame(total_frames, frame_rate))


def seconds_to_timecode(
    seconds: float,
    frame_rate: float,
    drop_frame: bool | None = None,
    *,
    advise: AdvisorySink | None = None,
) -> str:
    """Convert seconds to broadcast timecode.

    When drop_frame is None it is auto-detected: drop-frame rates use
    drop-frame for durations of 60 seconds or more. For rates other than
    29.97 and 59.94 an explicit drop_frame=True is ignored and the result
    keeps colons; no error is raised.

    Args:
        seconds: Time in seconds
        frame_rate: Frames per second
        drop_frame: Force drop-frame on or off, or None to auto-detect
        advise: Sink for advisories; defaults to logging a warning

    Returns:
        Timecode string (HH:MM:SS:FF or HH:MM:SS;FF)
    """
    if seconds == 0:
        return "00:00:00:00"
    check_frame_rate(frame_rate)

    drop_capable = is_drop_frame_rate(frame_rate)
    if drop_frame is None:
        use_drop_frame = drop_capable and seconds >= AUTO_DROP_FRAME_MIN_SECONDS
    else:
        use_drop_frame = drop_capable and drop_frame

    if drop_frame is False and drop_capable and seconds >= DRIFT_WARNING_MIN_SECONDS:
        hours = seconds / 3600
        drift = round_half_up(hours * DRIFT_SECONDS_PER_HOUR)
        emit_advisory(
            f"Converting {seconds:.10g} seconds at {frame_rate:g} fps without drop-frame. "
            f"Non-drop timecode drifts from wall-clock time. "
            f"After {hours:.10g} hour(s), drift is approximately {drift} seconds.",
            advise,
        )

    logger.debug(
        "seconds_to_timecode: %s s at %s fps, drop_frame=%s", seconds, frame_rate, use_drop_frame
    )
    if use_drop_frame:
        return seconds_to_df_timecode(seconds, frame_rate)
    return seconds_to_ndf_timecode(seconds, frame_rate)


def timecode_to_seconds(
    timecode: str | float,
    frame_rate: float | None = None,
    *,
    advise: AdvisorySink | None = None,
) -> float:
    """Convert timecode (or a looser time string) to seconds.

    Accepts hh:mm:ss:ff, hh:mm:ss;ff, hh:mm:ss, mm:ss, m:ss, m.ss, ss and
    plain numbers. Numbers are already seconds and are returned as float.

    Args:
        timecode: Timecode string or seconds
        frame_rate: Frames per second; required for strings
        advise: Sink for advisories; defaults to logging a warning

    Returns:
        Time in seconds, rounded to 2 decimals for strings

    Raises:
        ParameterError: If a string is given without a frame rate, or its
            fields are not integers
    """
    if not isinstance(timecode, str):
        return float(timecode)

    if frame_rate is None:
        raise ParameterError(
            "Frame rate must be specified when converting timecode strings to seconds"
        )
    check_frame_rate(frame_rate)

    padded = pad_time_to_timecode(timecode)
    hh, mm, ss, ff = parse_timecode(padded).as_tuple()

    if is_drop_frame_timecode(padded):
        if is_drop_frame_rate(frame_rate):
            total_frames = drop_frame_to_frames(hh, mm, ss, ff, frame_rate)
            return round(total_frames / frame_rate, 2)
        emit_advisory(
            f"Drop-frame timecode format ({timecode}) used with non-drop-frame rate "
            f"{frame_rate:g} fps. Drop-frame is only valid for 29.97 and 59.94 fps; "
            f"using non-drop calculation.",
            advise,
        )

    total_frames = ff + ss * frame_rate + mm * frame_rate * 60 + hh * frame_rate * 3600
    return round(total_frames / frame_rate, 2)


def short_timecode(
    time: str | float,
    frame_rate: float,
    drop_frame: bool | None = None,
    *,
    advise: AdvisorySink | None = None,
) -> str:
    """Timecode without the frame field.

    Args:
        time: Seconds or a time string
        frame_rate: Frames per second
        drop_frame: Force drop-frame on or off; None follows the string's
            separator (numbers default to non-drop)
        advise: Sink for advisories. The non-drop drift advisory is only
            sent when drop_frame=False is passed explicitly.

    Returns:
        Timecode string in HH:MM:SS format
    """
    if time == 0:
        return "00:00:00"

    seconds = timecode_to_seconds(time, frame_rate, advise=advise)
    if drop_frame is not None:
        timecode = seconds_to_timecode(seconds, frame_rate, drop_frame, advise=advise)
    elif isinstance(time, str) and is_drop_frame_timecode(time):
        timecode = seconds_to_timecode(seconds, frame_rate, True, advise=advise)
    else:
        check_frame_rate(frame_rate)
        timecode = seconds_to_ndf_timecode(seconds, frame_rate)
    return timecode[:-3]


def frames_to_timecode(total_frames: int, frame_rate: float, drop_frame: bool = False) -> str:
    """Convert a frame count to timecode.

    Args:
        total_frames: Total number of frames
        frame_rate: Frames per second
        drop_frame: Whether to use drop-frame (ignored for non-drop rates)

    Returns:
        Timecode string
    """
    check_frame_rate(frame_rate)
    if drop_frame and is_drop_frame_rate(frame_rate):
        return str(frames_to_drop_frame(total_frames, frame_rate))

    fps = nominal_fps(frame_rate)
    total_seconds, ff = divmod(total_frames, fps)
    hh, remainder = divmod(total_seconds, 3600)
    mm, ss = divmod(remainder, 60)
    return format_timecode(hh, mm, ss, ff)


def timecode_to_frames(timecode: str, frame_rate: float) -> int:
    """Convert timecode to frame count.

    Args:
        timecode: Timecode string
        frame_rate: Frames per second

    Returns:
        Frame count
    """
    check_frame_rate(frame_rate)
    components = parse_timecode(pad_time_to_timecode(timecode))
    hh, mm, ss, ff = components.as_tuple()

    if components.drop_frame and is_drop_frame_rate(frame_rate):
        return drop_frame_to_frames(hh, mm, ss, ff, frame_rate)

    fps = nominal_fps(frame_rate)
    return (hh * 3600 + mm * 60 + ss) * fps + ff
