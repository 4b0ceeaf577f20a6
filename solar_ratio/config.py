"""
solar_ratio/config.py
=====================
Solar Panel / Accumulator Ratio — Calculator Constants

Raw constants for the day/night cycle model and the calculator defaults.

Rules:
    - No calculations or derived quantities here.
    - Time in seconds [s], panel power in kilowatts [kW],
      accumulator capacity in megajoules [MJ].
    - The power modifier is stored in raw percent units (100.0 == 100 %).
    - No simulation logic or conditional expressions.
"""


# ---------------------------------------------------------------------------
# Day/night cycle phase split
# ---------------------------------------------------------------------------

# Fractions of one full cycle. They sum to exactly 1.0.
DAWN_FRACTION:  float = 0.2     # sunrise transition
DAY_FRACTION:   float = 0.5     # full daylight
DUSK_FRACTION:  float = 0.2     # sunset transition
NIGHT_FRACTION: float = 0.1     # complete darkness


# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------

PERCENT_SCALE: float = 100.0
"""Raw percent units per unit fraction (100 % == 1.0).

The modifier control works in fractions; the engine works in percent.
"""

KJ_PER_MJ: float = 1000.0
"""Kilojoules per megajoule.

Panel output in kW over one second is kJ; accumulator capacity is in MJ.
"""


# ---------------------------------------------------------------------------
# Calculator defaults
# ---------------------------------------------------------------------------

DEFAULT_CYCLE_LENGTH_S: float = 420.0
"""Default length of a full day/night cycle [s]."""

DEFAULT_POWER_MODIFIER_PCT: float = 100.0
"""Default solar power modifier [%]."""

DEFAULT_PANEL_POWER_KW: float = 60.0
"""Default rated output of one solar panel [kW]."""

DEFAULT_ACCUMULATOR_CAPACITY_MJ: float = 5.0
"""Default storage capacity of one accumulator [MJ]."""


# ---------------------------------------------------------------------------
# Display precision
# ---------------------------------------------------------------------------

DURATION_DECIMALS: int = 1      # phase durations, e.g. "84.0 s"
RATIO_DECIMALS:    int = 3      # panel/accumulator ratio, e.g. "0.847"
