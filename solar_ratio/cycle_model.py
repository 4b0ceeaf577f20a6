"""
solar_ratio/cycle_model.py
==========================
Solar Panel / Accumulator Ratio — Pure Cycle-Ratio Functions

Splits a day/night cycle into its four lighting phases and derives the
number of solar panels needed per accumulator.

Rules:
    - Every function is a pure, deterministic mathematical mapping.
    - No validation here; inputs are checked at the calculator boundary
      (see solar_ratio/validation.py).
    - Total over all floats: a zero denominator yields inf or NaN, never
      an exception.
    - No I/O, no side effects, no rounding beyond float precision.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from solar_ratio.config import (
    DAWN_FRACTION,
    DAY_FRACTION,
    DUSK_FRACTION,
    NIGHT_FRACTION,
    PERCENT_SCALE,
    KJ_PER_MJ,
)


# ---------------------------------------------------------------------------
# Data containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PhaseDurations:
    """Lengths of the four lighting phases of one cycle.

    Attributes:
        dawn_s:   Sunrise transition [s].
        day_s:    Full daylight [s].
        dusk_s:   Sunset transition [s].
        night_s:  Complete darkness [s].
    """
    dawn_s:  float
    day_s:   float
    dusk_s:  float
    night_s: float

    @property
    def total_s(self) -> float:
        """Sum of all four phases [s]; equals the cycle length."""
        return self.dawn_s + self.day_s + self.dusk_s + self.night_s


# ---------------------------------------------------------------------------
# Float division
# ---------------------------------------------------------------------------

def _divide(numerator: float, denominator: float) -> float:
    """IEEE 754 division: x / 0 is ±inf, 0 / 0 is NaN."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


# ---------------------------------------------------------------------------
# Phase lengths
# ---------------------------------------------------------------------------

def compute_dawn_length(cycle_length_s: float) -> float:
    """Dawn length [s]:  t_dawn = 0.2 · T"""
    return cycle_length_s * DAWN_FRACTION


def compute_day_length(cycle_length_s: float) -> float:
    """Day length [s]:  t_day = 0.5 · T"""
    return cycle_length_s * DAY_FRACTION


def compute_dusk_length(cycle_length_s: float) -> float:
    """Dusk length [s]:  t_dusk = 0.2 · T"""
    return cycle_length_s * DUSK_FRACTION


def compute_night_length(cycle_length_s: float) -> float:
    """Night length [s]:  t_night = 0.1 · T"""
    return cycle_length_s * NIGHT_FRACTION


def derive_phase_durations(cycle_length_s: float) -> PhaseDurations:
    """Split a full day/night cycle into its four lighting phases.

    Args:
        cycle_length_s: Total length of one day/night cycle [s].

    Returns:
        :class:`PhaseDurations` for dawn, day, dusk and night [s].

    Example:
        >>> derive_phase_durations(420.0)
        PhaseDurations(dawn_s=84.0, day_s=210.0, dusk_s=84.0, night_s=42.0)
    """
    return PhaseDurations(
        dawn_s=compute_dawn_length(cycle_length_s),
        day_s=compute_day_length(cycle_length_s),
        dusk_s=compute_dusk_length(cycle_length_s),
        night_s=compute_night_length(cycle_length_s),
    )


# ---------------------------------------------------------------------------
# Ratio building blocks
# ---------------------------------------------------------------------------

def compute_dawn_dusk_length(phases: PhaseDurations) -> float:
    """Average length of the two half-light transitions.

    Equation:
        t_dd = (t_dawn + t_dusk) / 2

    Returns:
        t_dd [s].
    """
    return (phases.dawn_s + phases.dusk_s) / 2.0


def compute_power_duration(phases: PhaseDurations, cycle_length_s: float) -> float:
    """Fraction of the cycle counted as generating time.

    Equation:
        f_gen = (t_day + t_dd) / T

    Args:
        phases:          Phase split of the cycle.
        cycle_length_s:  Total cycle length [s].

    Returns:
        f_gen — dimensionless fraction of the cycle.

    Example:
        >>> compute_power_duration(derive_phase_durations(420.0), 420.0)
        0.7
    """
    dawn_dusk_s = compute_dawn_dusk_length(phases)
    return _divide(phases.day_s + dawn_dusk_s, cycle_length_s)


def compute_accumulator_duration(phases: PhaseDurations, cycle_length_s: float) -> float:
    """Effective time the accumulators must carry the load.

    The whole night plus the dark share of the transitions, weighted by
    how much of the cycle is lit:

        t_acc = t_night + t_dd · (t_dd + t_day) / T

    Args:
        phases:          Phase split of the cycle.
        cycle_length_s:  Total cycle length [s].

    Returns:
        t_acc [s].

    Example:
        >>> compute_accumulator_duration(derive_phase_durations(420.0), 420.0)
        100.8
    """
    dawn_dusk_s = compute_dawn_dusk_length(phases)
    return phases.night_s + _divide(dawn_dusk_s * (dawn_dusk_s + phases.day_s), cycle_length_s)


def compute_power_per_capacity(
    panel_power_kw: float,
    accumulator_capacity_mj: float,
    power_modifier_pct: float,
) -> float:
    """Modified panel output expressed per unit of accumulator capacity.

    Equation:
        p = P_panel · (m / 100) / (E_acc · 1000)

    Args:
        panel_power_kw:           Rated output of one panel [kW].
        accumulator_capacity_mj:  Storage of one accumulator [MJ].
        power_modifier_pct:       Solar power modifier in raw percent
                                  (100.0 means 100 %).

    Returns:
        p [1/s] — fraction of one accumulator filled per panel per second.
    """
    modifier = power_modifier_pct / PERCENT_SCALE
    return _divide(panel_power_kw * modifier, accumulator_capacity_mj * KJ_PER_MJ)


# ---------------------------------------------------------------------------
# Panel / accumulator ratio
# ---------------------------------------------------------------------------

def compute_panel_accumulator_ratio(
    cycle_length_s: float,
    panel_power_kw: float,
    accumulator_capacity_mj: float,
    power_modifier_pct: float,
) -> float:
    """Compute the number of solar panels needed per accumulator.

    Equation:
        ratio = f_gen · t_acc · p

    where f_gen, t_acc and p come from :func:`compute_power_duration`,
    :func:`compute_accumulator_duration` and
    :func:`compute_power_per_capacity`. The phase split is always derived
    here from ``cycle_length_s``; it is never taken from the caller.

    A zero ``cycle_length_s`` or ``accumulator_capacity_mj`` gives a
    non-finite ratio (inf or NaN). Use :func:`solar_ratio.calculator.recompute`
    to reject such inputs before they reach a display.

    Args:
        cycle_length_s:           Total cycle length [s].
        panel_power_kw:           Rated output of one panel [kW].
        accumulator_capacity_mj:  Storage of one accumulator [MJ].
        power_modifier_pct:       Solar power modifier in raw percent.

    Returns:
        Panels per accumulator (dimensionless).

    Example:
        >>> round(compute_panel_accumulator_ratio(420.0, 60.0, 5.0, 100.0), 5)
        0.84672
    """
    phases = derive_phase_durations(cycle_length_s)
    power_duration = compute_power_duration(phases, cycle_length_s)
    accumulator_duration_s = compute_accumulator_duration(phases, cycle_length_s)
    power = compute_power_per_capacity(
        panel_power_kw, accumulator_capacity_mj, power_modifier_pct
    )
    return power_duration * accumulator_duration_s * power
