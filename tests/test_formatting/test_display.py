"""Tests for locale-free display formatting."""

from __future__ import annotations

from decimal import Decimal

import pytest

from fitness_analytics.formatting.display import (
    format_distance,
    format_duration,
    format_fixed,
    format_number,
    format_rest,
    format_signed_delta,
    format_weight,
    round_half_up,
)


class TestRounding:
    def test_half_up_on_decimal_repr(self) -> None:
        assert round_half_up(67.25, 1) == Decimal("67.3")
        assert round_half_up(0.05, 1) == Decimal("0.1")
        assert round_half_up(2.5) == Decimal("3")

    def test_negative_half_away_from_zero(self) -> None:
        assert round_half_up(-2.5) == Decimal("-3")

    def test_fixed_pads_decimals(self) -> None:
        assert format_fixed(2.5, 2) == "2.50"

    def test_fixed_drops_negative_zero(self) -> None:
        assert format_fixed(-0.04, 1) == "0.0"


class TestNumbers:
    @pytest.mark.parametrize(
        "value, expected",
        [(100.0, "100"), (67.25, "67.3"), (2.96, "3"), (0.0, "0"), (-1.5, "-1.5")],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    @pytest.mark.parametrize(
        "delta, expected",
        [(5.0, "+5"), (2.5, "+2.5"), (0.0, "0"), (0.01, "0"), (-2.5, "-2.5")],
    )
    def test_signed_delta(self, delta: float, expected: str) -> None:
        assert format_signed_delta(delta) == expected


class TestDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(1800, "30m 0s"), (45, "45s"), (60, "1m 0s"), (59, "59s"), (3665, "61m 5s"), (0, "0s")],
    )
    def test_minutes_and_seconds(self, seconds: int, expected: str) -> None:
        assert format_duration(seconds) == expected


class TestDistance:
    @pytest.mark.parametrize(
        "meters, expected",
        [(5000.0, "5.00km"), (2500.0, "2.50km"), (1000.0, "1.00km"), (800.0, "800m"), (0.0, "0m")],
    )
    def test_km_threshold(self, meters: float, expected: str) -> None:
        assert format_distance(meters) == expected


class TestWeightAndRest:
    @pytest.mark.parametrize(
        "kilograms, expected",
        [(100.0, "100kg"), (67.25, "67.3kg"), (22.5, "22.5kg")],
    )
    def test_weight(self, kilograms: float, expected: str) -> None:
        assert format_weight(kilograms) == expected

    def test_rest(self) -> None:
        assert format_rest(90) == "rest: 90s"


class TestExtremeValues:
    def test_huge_weight(self) -> None:
        assert format_weight(1e30) == "1" + "0" * 30 + "kg"

    @pytest.mark.parametrize(
        "value, expected",
        [(float("inf"), "inf"), (float("-inf"), "-inf"), (float("nan"), "nan")],
    )
    def test_non_finite_render_without_error(self, value: float, expected: str) -> None:
        assert format_fixed(value, 1) == expected
        assert format_number(value) == expected

    def test_non_finite_duration(self) -> None:
        assert format_duration(float("inf")) == "infs"

    def test_round_half_up_rejects_non_finite(self) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            round_half_up(float("nan"), 1)
