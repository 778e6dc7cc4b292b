"""Tests for the temperature conversion formulas."""

from __future__ import annotations

import pytest

from tempconv._internal.units import celsius_to_fahrenheit, fahrenheit_to_celsius

SAMPLES = [-459.67, -273.15, -40.0, -17.5, 0.0, 0.1, 32.0, 37.0, 98.6, 100.0, 212.0, 1e6]


class TestFixedPoints:
    def test_freezing_f_to_c(self) -> None:
        assert fahrenheit_to_celsius(32) == 0

    def test_boiling_f_to_c(self) -> None:
        assert fahrenheit_to_celsius(212) == 100

    def test_freezing_c_to_f(self) -> None:
        assert celsius_to_fahrenheit(0) == 32

    def test_boiling_c_to_f(self) -> None:
        assert celsius_to_fahrenheit(100) == 212

    def test_minus_forty_is_the_same_on_both_scales(self) -> None:
        assert fahrenheit_to_celsius(-40) == -40
        assert celsius_to_fahrenheit(-40) == -40

    def test_body_temperature(self) -> None:
        assert fahrenheit_to_celsius(98.6) == pytest.approx(37.0)

    def test_results_are_not_rounded(self) -> None:
        assert fahrenheit_to_celsius(100) == pytest.approx(37.777777, rel=1e-6)


class TestRoundTrip:
    @pytest.mark.parametrize("value", SAMPLES)
    def test_f_to_c_to_f(self, value: float) -> None:
        assert celsius_to_fahrenheit(fahrenheit_to_celsius(value)) == pytest.approx(value)

    @pytest.mark.parametrize("value", SAMPLES)
    def test_c_to_f_to_c(self, value: float) -> None:
        assert fahrenheit_to_celsius(celsius_to_fahrenheit(value)) == pytest.approx(value)
