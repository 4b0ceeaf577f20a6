"""
tests/test_display.py
=====================
Solar Panel / Accumulator Ratio — Display Formatting Tests

Durations show one decimal place, the ratio three.
"""

import pytest

from solar_ratio.calculator import CalculatorInputs, recompute
from solar_ratio.display import (
    format_duration,
    format_panel_power,
    format_capacity,
    format_modifier,
    format_ratio,
)


class TestDisplayFormatting:

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(84.0, "84.0 s"), (42.0, "42.0 s"), (0.25, "0.2 s"), (1234.56, "1234.6 s")],
    )
    def test_duration_one_decimal(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_ratio_three_decimals(self):
        assert format_ratio(0.84672) == "0.847"
        assert format_ratio(0.504) == "0.504"
        assert format_ratio(12.0) == "12.000"

    def test_units(self):
        assert format_panel_power(60.0) == "60 kW"
        assert format_capacity(5.0) == "5 MJ"
        assert format_capacity(2.5) == "2.5 MJ"

    @pytest.mark.parametrize(
        ("power_modifier_pct", "expected"),
        [(100.0, "100%"), (50.0, "50%"), (150.0, "150%"), (12.5, "12.5%"), (0.0, "0%")],
    )
    def test_modifier_as_percentage(self, power_modifier_pct, expected):
        assert format_modifier(power_modifier_pct) == expected

    def test_default_result_display(self):
        result = recompute(CalculatorInputs())
        assert [format_duration(s) for s in (
            result.phases.dawn_s, result.phases.day_s,
            result.phases.dusk_s, result.phases.night_s,
        )] == ["84.0 s", "210.0 s", "84.0 s", "42.0 s"]
        assert format_ratio(result.panel_accumulator_ratio) == "0.847"
