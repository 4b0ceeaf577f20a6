"""
solar_ratio/validation.py
=========================
Solar Panel / Accumulator Ratio — Input Validation

Boundary checks applied before the cycle model runs. The model itself
stays total; anything that would divide by zero, or yield a negative or
non-finite ratio, is rejected here with an :class:`InvalidInputError`.

Accepted ranges:
    cycle_length_s           > 0
    accumulator_capacity_mj  > 0
    panel_power_kw           >= 0
    power_modifier_pct       >= 0
"""

from __future__ import annotations

import math
import numbers
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solar_ratio.calculator import CalculatorInputs


class InvalidInputError(ValueError):
    """A calculator input is outside its accepted range.

    Attributes:
        kind:    Always ``"invalid-input"``.
        field:   Name of the offending input.
        reason:  Human-readable constraint that was violated.
        value:   The rejected value.
    """

    kind: str = "invalid-input"

    def __init__(self, field: str, reason: str, value: object) -> None:
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(
            f"Invalid input for {field}: {reason}; received {field}={value!r}"
        )


def require_finite(field: str, value: object) -> float:
    """Return ``value`` as a float, rejecting non-numbers, NaN and infinity.

    An empty numeric field reaches the calculator as NaN, so NaN gets the
    same treatment as any other unusable value.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(field, "must be a real number", value)
    try:
        number = float(value)
    except OverflowError:
        raise InvalidInputError(field, "must be a finite number", value) from None
    if not math.isfinite(number):
        raise InvalidInputError(field, "must be a finite number", value)
    return number


def require_positive(field: str, value: object) -> float:
    number = require_finite(field, value)
    if number <= 0.0:
        raise InvalidInputError(field, "must be greater than zero", value)
    return number


def require_non_negative(field: str, value: object) -> float:
    number = require_finite(field, value)
    if number < 0.0:
        raise InvalidInputError(field, "must not be negative", value)
    return number


def validate_inputs(inputs: CalculatorInputs) -> None:
    """Check every field of a calculator snapshot.

    Fields are checked in display order, so the first failing field is
    the one reported.

    Raises:
        InvalidInputError: On the first field outside its accepted range.
    """
    require_positive("cycle_length_s", inputs.cycle_length_s)
    require_non_negative("power_modifier_pct", inputs.power_modifier_pct)
    require_non_negative("panel_power_kw", inputs.panel_power_kw)
    require_positive("accumulator_capacity_mj", inputs.accumulator_capacity_mj)
