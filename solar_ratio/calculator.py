"""
solar_ratio/calculator.py
=========================
Solar Panel / Accumulator Ratio — Calculator Session

Ties the cycle model to a caller that edits one input at a time.

Update protocol:
    1. The caller holds an immutable :class:`CalculatorInputs` snapshot.
    2. Any change builds a complete replacement snapshot.
    3. :func:`recompute` validates it and derives every output
       (four phase durations and the ratio) in one step.
    4. Inputs and result are swapped together, or not at all.

Scope:
    - Single-threaded and synchronous; every recompute is constant time.
    - No persistence. A session starts from the defaults in config.py.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from solar_ratio.config import (
    DEFAULT_CYCLE_LENGTH_S,
    DEFAULT_POWER_MODIFIER_PCT,
    DEFAULT_PANEL_POWER_KW,
    DEFAULT_ACCUMULATOR_CAPACITY_MJ,
    PERCENT_SCALE,
)
from solar_ratio.cycle_model import (
    PhaseDurations,
    derive_phase_durations,
    compute_panel_accumulator_ratio,
)
from solar_ratio.validation import InvalidInputError, require_finite, validate_inputs

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CalculatorInputs:
    """The four primary inputs, replaced wholesale on every change.

    Attributes:
        cycle_length_s:           Total day/night cycle length [s].
        power_modifier_pct:       Solar power modifier [%], 100.0 == 100 %.
        panel_power_kw:           Rated output of one solar panel [kW].
        accumulator_capacity_mj:  Storage of one accumulator [MJ].
    """
    cycle_length_s:          float = DEFAULT_CYCLE_LENGTH_S
    power_modifier_pct:      float = DEFAULT_POWER_MODIFIER_PCT
    panel_power_kw:          float = DEFAULT_PANEL_POWER_KW
    accumulator_capacity_mj: float = DEFAULT_ACCUMULATOR_CAPACITY_MJ


@dataclass(frozen=True)
class CalculatorResult:
    """Every derived value for one input snapshot.

    Attributes:
        inputs:                   Snapshot the values were derived from.
        phases:                   Dawn/day/dusk/night split [s].
        panel_accumulator_ratio:  Solar panels needed per accumulator.
    """
    inputs:                  CalculatorInputs
    phases:                  PhaseDurations
    panel_accumulator_ratio: float


# ---------------------------------------------------------------------------
# Percent conversion
# ---------------------------------------------------------------------------

def modifier_pct_from_fraction(fraction: float) -> float:
    """Convert a fractional modifier (1.0 == 100 %) to raw percent units.

    Example:
        >>> modifier_pct_from_fraction(1.5)
        150.0
    """
    return fraction * PERCENT_SCALE


def modifier_fraction_from_pct(power_modifier_pct: float) -> float:
    """Convert raw percent units back to a fraction for display."""
    return power_modifier_pct / PERCENT_SCALE


# ---------------------------------------------------------------------------
# Recompute
# ---------------------------------------------------------------------------

def recompute(inputs: CalculatorInputs) -> CalculatorResult:
    """Validate ``inputs`` and derive every output from them.

    The phase split and the ratio are always computed together from the
    same snapshot.

    Raises:
        InvalidInputError: If an input is outside its accepted range, or
                           the inputs overflow to a non-finite ratio.

    Example:
        >>> result = recompute(CalculatorInputs())
        >>> result.phases.night_s
        42.0
        >>> round(result.panel_accumulator_ratio, 3)
        0.847
    """
    validate_inputs(inputs)

    phases = derive_phase_durations(inputs.cycle_length_s)
    ratio = compute_panel_accumulator_ratio(
        cycle_length_s=inputs.cycle_length_s,
        panel_power_kw=inputs.panel_power_kw,
        accumulator_capacity_mj=inputs.accumulator_capacity_mj,
        power_modifier_pct=inputs.power_modifier_pct,
    )
    if not math.isfinite(ratio):
        raise InvalidInputError(
            "panel_accumulator_ratio", "inputs produce a non-finite ratio", ratio
        )

    logger.debug("recomputed %s -> ratio=%r", inputs, ratio)
    return CalculatorResult(
        inputs=inputs,
        phases=phases,
        panel_accumulator_ratio=ratio,
    )


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class CalculatorSession:
    """Owns the current input snapshot and its derived result.

    Each setter replaces the whole snapshot and recomputes before anything
    becomes visible through :attr:`inputs` or :attr:`result`. A rejected
    update raises and leaves the previous snapshot in place.

    Args:
        inputs: Starting snapshot. Defaults to the config defaults.

    Raises:
        InvalidInputError: If the starting snapshot is invalid.

    Example:
        >>> session = CalculatorSession()
        >>> session.set_cycle_length(600.0).phases.dawn_s
        120.0
    """

    def __init__(self, inputs: CalculatorInputs | None = None) -> None:
        if inputs is None:
            inputs = CalculatorInputs()
        self._result: CalculatorResult = recompute(inputs)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def update(self, **changes: float) -> CalculatorResult:
        """Replace one or more inputs and recompute everything downstream.

        Args:
            **changes: Field names of :class:`CalculatorInputs` with their
                       new values.

        Returns:
            The new :class:`CalculatorResult`.

        Raises:
            TypeError:         If a key is not a calculator input.
            InvalidInputError: If the new snapshot is invalid.
        """
        candidate = replace(self._result.inputs, **changes)
        try:
            result = recompute(candidate)
        except InvalidInputError as exc:
            logger.warning("rejected update %s: %s", changes, exc)
            raise
        self._result = result
        return result

    def set_cycle_length(self, cycle_length_s: float) -> CalculatorResult:
        return self.update(cycle_length_s=cycle_length_s)

    def set_power_modifier(self, power_modifier_pct: float) -> CalculatorResult:
        """Set the modifier in raw percent units (100.0 == 100 %)."""
        return self.update(power_modifier_pct=power_modifier_pct)

    def set_power_modifier_fraction(self, fraction: float) -> CalculatorResult:
        """Set the modifier from a percentage control (1.0 == 100 %)."""
        try:
            fraction = require_finite("power_modifier_pct", fraction)
        except InvalidInputError as exc:
            logger.warning("rejected update %s: %s", {"power_modifier_fraction": fraction}, exc)
            raise
        return self.set_power_modifier(modifier_pct_from_fraction(fraction))

    def set_panel_power(self, panel_power_kw: float) -> CalculatorResult:
        return self.update(panel_power_kw=panel_power_kw)

    def set_accumulator_capacity(self, accumulator_capacity_mj: float) -> CalculatorResult:
        return self.update(accumulator_capacity_mj=accumulator_capacity_mj)

    def reset(self) -> CalculatorResult:
        """Return to the default inputs."""
        self._result = recompute(CalculatorInputs())
        return self._result

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def inputs(self) -> CalculatorInputs:
        """Current input snapshot."""
        return self._result.inputs

    @property
    def result(self) -> CalculatorResult:
        """Derived values for :attr:`inputs`."""
        return self._result
