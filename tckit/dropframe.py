"""
tckit.dropframe - Drop-frame timecode codec.

Drop-frame timecode skips frame labels :00 and :01 (:00 to :03 at 59.94)
at the start of every minute except every 10th minute (00, 10, 20, ...).
No actual frames are dropped, only labels, so the timecode clock tracks
wall-clock time at 29.97 and 59.94 fps.

Encoding runs in two phases. Minute accounting splits a frame count into
10-minute blocks and minutes. Label correction then adds the skipped
labels back so the frame field reads as the legal SMPTE label.
"""

from __future__ import annotations

from tckit.formats import TimecodeComponents
from tckit.rates import drop_quota, nominal_fps


def dropped_frame_labels(hours: int, minutes: int, frame_rate: float) -> int:
    """Count the frame labels skipped before the start of a given minute.

    Args:
        hours: Hours field
        minutes: Minutes field
        frame_rate: A drop-frame rate (29.97 or 59.94)

    Returns:
        Number of skipped labels
    """
    total_minutes = hours * 60 + minutes
    dropping_minutes = total_minutes - total_minutes // 10
    return dropping_minutes * drop_quota(frame_rate)


def drop_frame_to_frames(
    hours: int,
    minutes: int,
    seconds: int,
    frames: int,
    frame_rate: float,
) -> int:
    """Convert drop-frame timecode fields to a frame count.

    Out-of-range labels are not rejected; see tckit.validation for that.

    Args:
        hours: Hours field
        minutes: Minutes field
        seconds: Seconds field
        frames: Frames field
        frame_rate: A drop-frame rate (29.97 or 59.94)

    Returns:
        Zero-based frame count
    """
    fps = nominal_fps(frame_rate)
    nominal_count = frames + seconds * fps + minutes * fps * 60 + hours * fps * 3600
    return nominal_count - dropped_frame_labels(hours, minutes, frame_rate)


def _minute_accounting(frame_count: int, fps: int, quota: int) -> tuple[int, int]:
    """Split a frame count into whole minutes and frames into the last minute."""
    frames_per_minute = fps * 60
    frames_per_dropping_minute = frames_per_minute - quota
    frames_per_10_minutes = frames_per_dropping_minute * 9 + frames_per_minute

    blocks, remainder = divmod(frame_count, frames_per_10_minutes)

    # The first minute of each block keeps all of its labels.
    extra_minutes = 0
    if remainder >= frames_per_minute:
        remainder -= frames_per_minute
        dropped, remainder = divmod(remainder, frames_per_dropping_minute)
        extra_minutes = 1 + dropped

    return blocks * 10 + extra_minutes, remainder


def _display_label(
    total_minutes: int, frames_into_minute: int, fps: int, quota: int
) -> tuple[int, int]:
    """Turn frames elapsed within a minute into (seconds, frames) labels."""
    label = frames_into_minute
    if total_minutes % 10 != 0:
        label += quota
    return divmod(label, fps)


def frames_to_drop_frame(frame_count: int, frame_rate: float) -> TimecodeComponents:
    """Convert a frame count to drop-frame timecode components.

    Args:
        frame_count: Zero-based frame count
        frame_rate: A drop-frame rate (29.97 or 59.94)

    Returns:
        Timecode components flagged as drop-frame. Hours do not wrap at 24.
    """
    fps = nominal_fps(frame_rate)
    quota = drop_quota(frame_rate)

    total_minutes, frames_into_minute = _minute_accounting(frame_count, fps, quota)
    ss, ff = _display_label(total_minutes, frames_into_minute, fps, quota)
    hh, mm = divmod(total_minutes, 60)

    return TimecodeComponents(hours=hh, minutes=mm, seconds=ss, frames=ff, drop_frame=True)
