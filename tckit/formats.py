"""
tckit.formats - Timecode strings: detection, parsing, rendering, padding.

Non-drop timecode is written hh:mm:ss:ff. Drop-frame timecode uses a
semicolon before the frame field: hh:mm:ss;ff. The separator alone decides
which calculation path a string takes.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from tckit.exceptions import ParameterError

FIELD_SEPARATORS = re.compile(r"[:;]")


class TimecodeComponents(BaseModel):
    """Hours, minutes, seconds and frames of a timecode label."""

    model_config = ConfigDict(frozen=True)

    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)
    frames: int = Field(default=0, ge=0)
    drop_frame: bool = False

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.hours, self.minutes, self.seconds, self.frames)

    def __str__(self) -> str:
        return format_timecode(
            self.hours, self.minutes, self.seconds, self.frames, drop_frame=self.drop_frame
        )


def is_drop_frame_timecode(text: str) -> bool:
    """Check if a timecode string is in drop-frame format (hh:mm:ss;ff)."""
    return ";" in text


def format_timecode(
    hours: int, minutes: int, seconds: int, frames: int, drop_frame: bool = False
) -> str:
    """Render timecode fields in canonical form.

    Args:
        hours: Hours, zero-padded to at least two digits
        minutes: Minutes
        seconds: Seconds
        frames: Frames
        drop_frame: Use ';' before the frame field

    Returns:
        Timecode string like 01:00:00:00 or 01:00:00;00
    """
    separator = ";" if drop_frame else ":"
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}{separator}{frames:02d}"


def split_timecode(text: str) -> list[str]:
    """Split a timecode string on both ':' and ';'."""
    return FIELD_SEPARATORS.split(text)


def parse_timecode(text: str) -> TimecodeComponents:
    """Parse a four-field timecode string.

    Args:
        text: Timecode in hh:mm:ss:ff or hh:mm:ss;ff form

    Returns:
        Parsed components, flagged drop-frame when text contains ';'

    Raises:
        ParameterError: If the string does not hold four non-negative integers
    """
    parts = split_timecode(text.strip())
    if len(parts) != 4:
        raise ParameterError(f"Invalid timecode format. Expected hh:mm:ss:ff, got {text}")
    # str.isdigit() also accepts superscripts, which int() rejects.
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise ParameterError(f"Timecode fields must be non-negative integers, got {text}")

    hh, mm, ss, ff = (int(part) for part in parts)
    return TimecodeComponents(
        hours=hh,
        minutes=mm,
        seconds=ss,
        frames=ff,
        drop_frame=is_drop_frame_timecode(text),
    )


def pad_time_to_timecode(time: str) -> str:
    """Pad a loose time string to hh:mm:ss:ff.

    Accepted shapes:
        hh:mm:ss:ff / hh:mm:ss;ff - returned as-is
        hh:mm:ss                  - frames appended
        m:ss, mm:ss               - minutes and seconds
        m.ss, mm.ss               - minutes and seconds with a full stop
        s, ss                     - seconds only

    Args:
        time: Time string

    Returns:
        Four-field timecode string
    """
    time = time.strip()
    parts = split_timecode(time)

    if len(parts) == 4:
        return time
    if len(parts) == 3:
        return f"{time}:00"
    if len(parts) == 2:
        minutes, seconds = parts
        return f"00:{minutes.zfill(2)}:{seconds}:00"

    if "." in time:
        minutes, seconds = time.split(".", 1)
        return f"00:{minutes.zfill(2)}:{seconds}:00"
    return f"00:00:{time.zfill(2)}:00"
