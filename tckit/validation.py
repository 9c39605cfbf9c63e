"""
tckit.validation - Timecode validation and reporting.

Validation findings are returned as data, never raised, so callers decide
what to do with a malformed or illegal timecode.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from tckit.formats import TimecodeComponents, is_drop_frame_timecode, split_timecode
from tckit.logging import AdvisorySink, emit_advisory
from tckit.rates import drop_quota, is_drop_frame_rate, nominal_fps

TimecodeFormatName = Literal["drop-frame", "non-drop"]


class TimecodeValidationResult(BaseModel):
    """Outcome of validate_timecode."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    format: TimecodeFormatName | None = None
    components: TimecodeComponents | None = None


def _parse_field(value: str) -> int | None:
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def _check_range(
    errors: list[str], name: str, value: int | None, maximum: int | None
) -> None:
    if value is None:
        errors.append(f"{name} must be a valid non-negative number")
    elif maximum is not None and value > maximum:
        errors.append(f"{name} cannot exceed {maximum}")


def validate_timecode(
    timecode: str,
    frame_rate: float | None = None,
    *,
    advise: AdvisorySink | None = None,
) -> TimecodeValidationResult:
    """Validate a timecode string and report every problem found.

    Args:
        timecode: Timecode string to validate
        frame_rate: Frame rate to validate frames against (optional)
        advise: Optional sink that also receives each warning

    Returns:
        Validation result with errors, warnings, format, and parsed
        components (components only when there are no errors)

    Example:
        >>> validate_timecode("00:01:00;00", 29.97).errors
        ["Invalid drop-frame timecode. Frames 00 and 01 don't exist at minute 1"]
    """
    errors: list[str] = []
    warnings: list[str] = []

    drop_frame_format = is_drop_frame_timecode(timecode)
    format_name: TimecodeFormatName = "drop-frame" if drop_frame_format else "non-drop"

    parts = split_timecode(timecode)
    if len(parts) != 4:
        errors.append(
            f"Invalid timecode format. Expected hh:mm:ss:ff or hh:mm:ss;ff, got {timecode}"
        )
        return TimecodeValidationResult(valid=False, errors=errors, warnings=warnings)

    hours, minutes, seconds, frames = (_parse_field(part) for part in parts)

    _check_range(errors, "Hours", hours, 23)
    _check_range(errors, "Minutes", minutes, 59)
    _check_range(errors, "Seconds", seconds, 59)
    _check_range(errors, "Frames", frames, None)

    if frame_rate is not None:
        max_frames = nominal_fps(frame_rate) - 1
        if frames is not None and frames > max_frames:
            errors.append(f"Frames cannot exceed {max_frames} for {frame_rate:g} fps")

        if drop_frame_format:
            if not is_drop_frame_rate(frame_rate):
                warnings.append(
                    f"Drop-frame format used with non-drop-frame rate {frame_rate:g} fps. "
                    f"Drop-frame is only valid for 29.97 and 59.94 fps."
                )
            elif (
                seconds == 0
                and minutes is not None
                and minutes % 10 != 0
                and frames is not None
                and frames < drop_quota(frame_rate)
            ):
                labels = [f"{label:02d}" for label in range(drop_quota(frame_rate))]
                missing = f"{', '.join(labels[:-1])} and {labels[-1]}"
                errors.append(
                    f"Invalid drop-frame timecode. "
                    f"Frames {missing} don't exist at minute {minutes}"
                )
    elif drop_frame_format:
        warnings.append("Drop-frame format detected but no frame rate provided for validation")

    if advise is not None:
        for warning in warnings:
            emit_advisory(warning, advise)

    components = None
    if not errors:
        components = TimecodeComponents(
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            frames=frames,
            drop_frame=drop_frame_format,
        )

    return TimecodeValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        format=format_name,
        components=components,
    )


def format_validation_report(timecode: str, result: TimecodeValidationResult) -> str:
    """Format a validation result as plain text.

    Args:
        timecode: The timecode that was validated
        result: Result from validate_timecode

    Returns:
        Multi-line human-readable report
    """
    status = "valid" if result.valid else "INVALID"
    lines = [f"{timecode}: {status}"]
    if result.format:
        lines.append(f"  format: {result.format}")
    if result.components:
        c = result.components
        lines.append(f"  components: {c.hours}h {c.minutes}m {c.seconds}s {c.frames}f")
    lines.extend(f"  error: {error}" for error in result.errors)
    lines.extend(f"  warning: {warning}" for warning in result.warnings)
    return "\n".join(lines)
