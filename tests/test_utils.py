"""Tests for tckit.utils module."""

from __future__ import annotations

from tckit.utils import format_duration, precision_round, round_half_up


class TestFormatDuration:
    def test_seconds_only(self) -> None:
        assert format_duration(45.0) == "0:45"

    def test_hours_minutes_seconds(self) -> None:
        assert format_duration(3725.0) == "1:02:05"

    def test_zero(self) -> None:
        assert format_duration(0.0) == "0:00"

    def test_float_seconds(self) -> None:
        assert format_duration(90.7) == "1:30"


class TestRoundHalfUp:
    def test_halves_round_up(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(44.955) == 45

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(1798.2) == 1798


class TestPrecisionRound:
    def test_removes_float_noise(self) -> None:
        assert precision_round(0.1 + 0.2) == 0.3
        assert precision_round(256.99999999999997) == 257.0

    def test_keeps_significant_digits(self) -> None:
        assert precision_round(2195.80800000001) == 2195.808
