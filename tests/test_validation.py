"""Tests for tckit.validation module."""

from __future__ import annotations

from tckit.formats import TimecodeComponents
from tckit.validation import format_validation_report, validate_timecode


class TestStructure:
    def test_valid_non_drop(self) -> None:
        result = validate_timecode("01:30:45:12", 25)
        assert result.valid is True
        assert result.format == "non-drop"
        assert result.errors == []
        assert result.components == TimecodeComponents(
            hours=1, minutes=30, seconds=45, frames=12
        )

    def test_valid_drop_frame(self) -> None:
        result = validate_timecode("01:00:00;00", 29.97)
        assert result.valid is True
        assert result.format == "drop-frame"
        assert result.errors == []
        assert result.components.drop_frame is True

    def test_wrong_field_count(self) -> None:
        result = validate_timecode("1:30:45")
        assert result.valid is False
        assert result.errors == [
            "Invalid timecode format. Expected hh:mm:ss:ff or hh:mm:ss;ff, got 1:30:45"
        ]
        assert result.format is None
        assert result.components is None

    def test_without_frame_rate(self) -> None:
        result = validate_timecode("10:20:30:40")
        assert result.valid is True
        assert result.warnings == []

    def test_non_numeric_field(self) -> None:
        result = validate_timecode("aa:00:00:00", 25)
        assert result.valid is False
        assert "Hours must be a valid non-negative number" in result.errors

    def test_non_ascii_digit_field(self) -> None:
        result = validate_timecode("00:00:00:²", 25)
        assert result.valid is False
        assert "Frames must be a valid non-negative number" in result.errors
        assert result.components is None


class TestRanges:
    def test_hours(self) -> None:
        result = validate_timecode("24:00:00:00", 25)
        assert result.valid is False
        assert "Hours cannot exceed 23" in result.errors

    def test_minutes(self) -> None:
        result = validate_timecode("00:60:00:00", 25)
        assert "Minutes cannot exceed 59" in result.errors

    def test_seconds(self) -> None:
        result = validate_timecode("00:00:60:00", 25)
        assert "Seconds cannot exceed 59" in result.errors

    def test_frames_exceed_rate(self) -> None:
        result = validate_timecode("00:00:00:25", 25)
        assert result.valid is False
        assert "Frames cannot exceed 24 for 25 fps" in result.errors

    def test_maximum_frame_accepted(self) -> None:
        assert validate_timecode("00:00:00:24", 25).valid is True

    def test_2997_frame_limit(self) -> None:
        result = validate_timecode("00:00:00:30", 29.97)
        assert "Frames cannot exceed 29 for 29.97 fps" in result.errors

    def test_reports_all_errors(self) -> None:
        result = validate_timecode("24:60:60:25", 25)
        assert result.valid is False
        assert len(result.errors) == 4
        assert result.components is None


class TestDropFrameLabels:
    def test_missing_labels_at_minute_one(self) -> None:
        result = validate_timecode("00:01:00;00", 29.97)
        assert result.valid is False
        assert result.errors == [
            "Invalid drop-frame timecode. Frames 00 and 01 don't exist at minute 1"
        ]

    def test_missing_labels_at_minute_two(self) -> None:
        result = validate_timecode("00:02:00;01", 29.97)
        assert "Invalid drop-frame timecode. Frames 00 and 01 don't exist at minute 2" in (
            result.errors
        )

    def test_ten_minute_boundaries_keep_labels(self) -> None:
        assert validate_timecode("00:10:00;00", 29.97).valid is True
        assert validate_timecode("00:20:00;01", 29.97).valid is True

    def test_frame_two_is_legal(self) -> None:
        assert validate_timecode("00:01:00;02", 29.97).valid is True

    def test_5994_drops_four_labels(self) -> None:
        result = validate_timecode("00:01:00;03", 59.94)
        assert result.valid is False
        assert "minute 1" in result.errors[0]
        assert validate_timecode("00:01:00;04", 59.94).valid is True

    def test_colon_format_not_checked_for_drop_labels(self) -> None:
        assert validate_timecode("00:01:00:00", 29.97).valid is True


class TestWarnings:
    def test_drop_frame_with_non_drop_rate(self) -> None:
        result = validate_timecode("00:00:00;00", 25)
        assert result.valid is True
        assert result.warnings == [
            "Drop-frame format used with non-drop-frame rate 25 fps. "
            "Drop-frame is only valid for 29.97 and 59.94 fps."
        ]

    def test_drop_frame_without_rate(self) -> None:
        result = validate_timecode("00:00:00;00")
        assert result.valid is True
        assert result.warnings == [
            "Drop-frame format detected but no frame rate provided for validation"
        ]

    def test_warnings_forwarded_to_sink(self, advisories: list[str]) -> None:
        validate_timecode("00:00:00;00", 25, advise=advisories.append)
        assert len(advisories) == 1
        assert "non-drop-frame rate 25 fps" in advisories[0]


class TestFormatValidationReport:
    def test_valid_report(self) -> None:
        result = validate_timecode("01:00:00;00", 29.97)
        report = format_validation_report("01:00:00;00", result)
        assert report.startswith("01:00:00;00: valid")
        assert "format: drop-frame" in report
        assert "components: 1h 0m 0s 0f" in report

    def test_invalid_report_lists_errors(self) -> None:
        result = validate_timecode("00:01:00;00", 29.97)
        report = format_validation_report("00:01:00;00", result)
        assert "INVALID" in report
        assert "error: Invalid drop-frame timecode" in report
