"""
solar_ratio/display.py
======================
Solar Panel / Accumulator Ratio — Display Formatting

Turns raw calculator values into the strings shown to the user.
Formatting only; nothing here feeds back into a calculation.
"""

from __future__ import annotations

from solar_ratio.config import DURATION_DECIMALS, RATIO_DECIMALS
from solar_ratio.calculator import modifier_fraction_from_pct


def format_duration(seconds: float) -> str:
    """e.g. ``84.0 s``"""
    return f"{seconds:.{DURATION_DECIMALS}f} s"


def format_panel_power(panel_power_kw: float) -> str:
    """e.g. ``60 kW``"""
    return f"{panel_power_kw:g} kW"


def format_capacity(accumulator_capacity_mj: float) -> str:
    """e.g. ``5 MJ``"""
    return f"{accumulator_capacity_mj:g} MJ"


def format_modifier(power_modifier_pct: float) -> str:
    """Show a raw-percent modifier the way a percent control does, e.g. ``150%``."""
    return f"{modifier_fraction_from_pct(power_modifier_pct):.1%}".replace(".0%", "%")


def format_ratio(ratio: float) -> str:
    """e.g. ``0.847``"""
    return f"{ratio:.{RATIO_DECIMALS}f}"
