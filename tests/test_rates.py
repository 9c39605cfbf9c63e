"""Tests for tckit.rates module."""

from __future__ import annotations

import pytest

from tckit.exceptions import ParameterError
from tckit.rates import check_frame_rate, drop_quota, is_drop_frame_rate, nominal_fps


class TestIsDropFrameRate:
    def test_drop_frame_rates(self) -> None:
        assert is_drop_frame_rate(29.97) is True
        assert is_drop_frame_rate(59.94) is True

    def test_ntsc_fractions_within_tolerance(self) -> None:
        assert is_drop_frame_rate(30000 / 1001) is True
        assert is_drop_frame_rate(60000 / 1001) is True

    def test_non_drop_rates(self) -> None:
        for rate in (23.976, 24, 25, 30, 50, 60):
            assert is_drop_frame_rate(rate) is False

    def test_outside_tolerance(self) -> None:
        assert is_drop_frame_rate(29.95) is False
        assert is_drop_frame_rate(59.96) is False


class TestDropQuota:
    def test_2997_drops_two(self) -> None:
        assert drop_quota(29.97) == 2

    def test_5994_drops_four(self) -> None:
        assert drop_quota(59.94) == 4

    def test_non_drop_rate_raises(self) -> None:
        with pytest.raises(ParameterError):
            drop_quota(25)


class TestNominalFps:
    def test_rounds_fractional_rates(self) -> None:
        assert nominal_fps(29.97) == 30
        assert nominal_fps(59.94) == 60
        assert nominal_fps(23.976) == 24

    def test_integer_rates_unchanged(self) -> None:
        assert nominal_fps(25) == 25
        assert nominal_fps(50) == 50


class TestCheckFrameRate:
    def test_missing_rate_raises(self) -> None:
        with pytest.raises(ParameterError):
            check_frame_rate(None)

    def test_non_positive_rate_raises(self) -> None:
        with pytest.raises(ParameterError):
            check_frame_rate(0)
        with pytest.raises(ParameterError):
            check_frame_rate(-25)

    def test_positive_rate_returned(self) -> None:
        assert check_frame_rate(25) == 25
