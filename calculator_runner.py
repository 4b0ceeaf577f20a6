"""
calculator_runner.py
====================
Solar Panel / Accumulator Ratio — Calculator Runner

Command-line front end for the solar_ratio modules.

Execution sequence:
    1. Parse game settings from the command line
    2. Validate and recompute                (calculator.recompute)
    3. Print cycle, power and result sections
    4. Print the ratio breakdown             (cycle_model building blocks)
    5. Optionally plot the phase split and a ratio sweep over cycle length

Usage:
    python calculator_runner.py
    python calculator_runner.py --cycle-length 600 --panel-power 100 \\
        --accumulator-capacity 10 --power-modifier 50
    python calculator_runner.py --power-modifier-fraction 1.5 --plot
"""

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from solar_ratio.config import (
    DEFAULT_CYCLE_LENGTH_S,
    DEFAULT_POWER_MODIFIER_PCT,
    DEFAULT_PANEL_POWER_KW,
    DEFAULT_ACCUMULATOR_CAPACITY_MJ,
)
from solar_ratio.cycle_model import (
    compute_dawn_dusk_length,
    compute_power_duration,
    compute_accumulator_duration,
    compute_power_per_capacity,
    compute_panel_accumulator_ratio,
)
from solar_ratio.calculator import (
    CalculatorInputs,
    CalculatorResult,
    modifier_pct_from_fraction,
    recompute,
)
from solar_ratio.display import (
    format_duration,
    format_panel_power,
    format_capacity,
    format_modifier,
    format_ratio,
)
from solar_ratio.validation import InvalidInputError

logger = logging.getLogger("calculator_runner")


# ---------------------------------------------------------------------------
# Plot configuration (presentation only)
# ---------------------------------------------------------------------------

PLOT_OUTPUT_FILE: str = "panel_accumulator_ratio.png"
SWEEP_POINTS: int = 200
SWEEP_MAX_FACTOR: float = 3.0     # sweep cycle length up to 3x the current value

EXIT_INVALID_INPUT: int = 2


# ---------------------------------------------------------------------------
# Step 1: Command line
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Calculate the optimal ratio of solar panels to accumulators "
                    "for a day/night cycle.",
    )
    parser.add_argument("--cycle-length", type=float, default=DEFAULT_CYCLE_LENGTH_S,
                        help="Total length of a full day-night cycle in seconds "
                             "(default: %(default)g)")
    modifier = parser.add_mutually_exclusive_group()
    modifier.add_argument("--power-modifier", type=float, default=None,
                          help="Solar power modifier in percent, 100 = 100%% "
                               f"(default: {DEFAULT_POWER_MODIFIER_PCT:g})")
    modifier.add_argument("--power-modifier-fraction", type=float, default=None,
                          help="Solar power modifier as a fraction, 1.0 = 100%%")
    parser.add_argument("--panel-power", type=float, default=DEFAULT_PANEL_POWER_KW,
                        help="Base power output of one solar panel in kW "
                             "(default: %(default)g)")
    parser.add_argument("--accumulator-capacity", type=float,
                        default=DEFAULT_ACCUMULATOR_CAPACITY_MJ,
                        help="Storage capacity of one accumulator in MJ "
                             "(default: %(default)g)")
    parser.add_argument("--plot", action="store_true",
                        help="Plot the phase split and a ratio sweep over cycle length")
    parser.add_argument("--plot-file", default=PLOT_OUTPUT_FILE,
                        help="Where to save the plot (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def inputs_from_args(args: argparse.Namespace) -> CalculatorInputs:
    """Build the input snapshot, converting a fractional modifier to percent."""
    if args.power_modifier_fraction is not None:
        power_modifier_pct = modifier_pct_from_fraction(args.power_modifier_fraction)
    elif args.power_modifier is not None:
        power_modifier_pct = args.power_modifier
    else:
        power_modifier_pct = DEFAULT_POWER_MODIFIER_PCT
    return CalculatorInputs(
        cycle_length_s=args.cycle_length,
        power_modifier_pct=power_modifier_pct,
        panel_power_kw=args.panel_power,
        accumulator_capacity_mj=args.accumulator_capacity,
    )


# ---------------------------------------------------------------------------
# Step 3–4: Console summary
# ---------------------------------------------------------------------------

def print_console_summary(result: CalculatorResult) -> None:
    """Print the settings and the result the way the calculator shows them."""

    inputs = result.inputs
    phases = result.phases
    sep = "─" * 60

    print(f"\n{'═' * 60}")
    print("  FACTORIO SOLAR CALCULATOR")
    print(f"{'═' * 60}")

    print(f"\n{sep}")
    print("  DAY-NIGHT CYCLE SETTINGS")
    print(sep)
    print(f"    Day-Night Cycle             :  {format_duration(inputs.cycle_length_s):>12}")
    print(f"    Dawn Length                 :  {format_duration(phases.dawn_s):>12}")
    print(f"    Day Length                  :  {format_duration(phases.day_s):>12}")
    print(f"    Dusk Length                 :  {format_duration(phases.dusk_s):>12}")
    print(f"    Night Length                :  {format_duration(phases.night_s):>12}")

    print(f"\n{sep}")
    print("  POWER SETTINGS")
    print(sep)
    print(f"    Solar Power Modifier        :  {format_modifier(inputs.power_modifier_pct):>12}")
    print(f"    Solar Panel Power           :  {format_panel_power(inputs.panel_power_kw):>12}")
    print(f"    Accumulator Capacity        :  {format_capacity(inputs.accumulator_capacity_mj):>12}")

    print(f"\n{sep}")
    print("  RESULT")
    print(sep)
    print(f"    Panel/Accumulator Ratio     :  "
          f"{format_ratio(result.panel_accumulator_ratio)} panels per accumulator")
    print(f"{'═' * 60}\n")


def print_ratio_breakdown(result: CalculatorResult) -> None:
    """Print each factor of the ratio equation."""

    inputs = result.inputs
    phases = result.phases
    cycle_s = inputs.cycle_length_s

    rows = [
        ("Average dawn/dusk length",    compute_dawn_dusk_length(phases),              "s"),
        ("Generating share of cycle",   compute_power_duration(phases, cycle_s),       "-"),
        ("Accumulator-covered time",    compute_accumulator_duration(phases, cycle_s), "s"),
        ("Output per capacity",         compute_power_per_capacity(
                                            inputs.panel_power_kw,
                                            inputs.accumulator_capacity_mj,
                                            inputs.power_modifier_pct),                "1/s"),
        ("Panels per accumulator",      result.panel_accumulator_ratio,                "-"),
    ]

    sep = "─" * 60
    print(f"  {'Factor':<35} {'Value':>12}  {'Unit':<4}")
    print(sep)
    for label, value, unit in rows:
        print(f"  {label:<35} {value:>12.6g}  {unit:<4}")
    print(f"{'═' * 60}\n")


# ---------------------------------------------------------------------------
# Step 5: Plot — phase split and ratio vs cycle length
# ---------------------------------------------------------------------------

def sweep_cycle_length(inputs: CalculatorInputs, points: int = SWEEP_POINTS) -> tuple[list[float], list[float]]:
    """Evaluate the ratio over (0, SWEEP_MAX_FACTOR · cycle_length_s].

    The other three inputs are held at their current values.
    """
    upper_s = inputs.cycle_length_s * SWEEP_MAX_FACTOR
    lengths = [upper_s * (n + 1) / points for n in range(points)]
    ratios = [
        compute_panel_accumulator_ratio(
            cycle_length_s=length,
            panel_power_kw=inputs.panel_power_kw,
            accumulator_capacity_mj=inputs.accumulator_capacity_mj,
            power_modifier_pct=inputs.power_modifier_pct,
        )
        for length in lengths
    ]
    return lengths, ratios


def plot_cycle_and_ratio(result: CalculatorResult, output_file: str) -> None:
    """Render and save the phase split and the ratio sweep."""
    inputs = result.inputs
    phases = result.phases
    lengths, ratios = sweep_cycle_length(inputs)

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 7),
                                   gridspec_kw={"height_ratios": [1, 3]})
    fig.suptitle(
        "Solar Panel / Accumulator Ratio\n"
        f"Panel = {format_panel_power(inputs.panel_power_kw)}  |  "
        f"Accumulator = {format_capacity(inputs.accumulator_capacity_mj)}  |  "
        f"Modifier = {format_modifier(inputs.power_modifier_pct)}",
        fontsize=12, fontweight="bold",
    )

    # ── Phase split ──────────────────────────────────────────────────────
    segments = [
        ("Dawn",  phases.dawn_s,  "#FFB74D"),
        ("Day",   phases.day_s,   "#FFEB3B"),
        ("Dusk",  phases.dusk_s,  "#FF7043"),
        ("Night", phases.night_s, "#37474F"),
    ]
    start_s = 0.0
    for label, length_s, color in segments:
        ax1.barh(0, length_s, left=start_s, color=color, edgecolor="black",
                 label=f"{label} ({format_duration(length_s)})")
        start_s += length_s
    ax1.set_xlim(0, phases.total_s)
    ax1.set_yticks([])
    ax1.set_xlabel("Time within cycle [s]", fontsize=11)
    ax1.legend(fontsize=9, loc="upper center", ncol=4, bbox_to_anchor=(0.5, -0.45))

    # ── Ratio sweep ──────────────────────────────────────────────────────
    ax2.plot(lengths, ratios, color="#2196F3", linewidth=2, label="Ratio")
    ax2.plot(inputs.cycle_length_s, result.panel_accumulator_ratio, "o",
             color="#F44336",
             label=f"Current ({format_ratio(result.panel_accumulator_ratio)} "
                   f"@ {format_duration(inputs.cycle_length_s)})")
    ax2.set_xlabel("Day-Night Cycle [s]", fontsize=11)
    ax2.set_ylabel("Panels per accumulator", fontsize=11)
    ax2.set_xlim(0, lengths[-1])
    ax2.set_ylim(bottom=0)
    ax2.yaxis.set_major_formatter(mticker.FormatStrFormatter("%.2f"))
    ax2.legend(fontsize=9, loc="upper left")
    ax2.grid(True, linestyle="--", alpha=0.5)

    plt.tight_layout()
    plt.savefig(output_file, dpi=150, bbox_inches="tight")
    print(f"  [plot] Saved → {output_file}")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    inputs = inputs_from_args(args)
    try:
        result = recompute(inputs)
    except InvalidInputError as exc:
        logger.error("%s", exc)
        return EXIT_INVALID_INPUT

    print_console_summary(result)
    print_ratio_breakdown(result)

    if args.plot:
        plot_cycle_and_ratio(result, args.plot_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
