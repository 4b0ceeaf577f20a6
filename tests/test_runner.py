"""
tests/test_runner.py
====================
Solar Panel / Accumulator Ratio — Command-Line Runner Tests

The first group calls main() in-process; the second runs the script
through a subprocess the way a user would.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

import calculator_runner
from calculator_runner import build_parser, inputs_from_args, main, sweep_cycle_length
from solar_ratio.calculator import CalculatorInputs

REPO_ROOT = Path(__file__).parent.parent
RUNNER_PATH = REPO_ROOT / "calculator_runner.py"


def _run_cli(*args, timeout=60):
    """Run the runner script and return the CompletedProcess."""
    env = dict(os.environ, MPLBACKEND="Agg")
    cmd = [sys.executable, str(RUNNER_PATH)] + list(args)
    return subprocess.run(
        cmd, capture_output=True, text=True, timeout=timeout, cwd=str(REPO_ROOT), env=env
    )


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

class TestArguments:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert inputs_from_args(args) == CalculatorInputs()

    def test_percent_modifier(self):
        args = build_parser().parse_args(["--power-modifier", "50"])
        assert inputs_from_args(args).power_modifier_pct == 50.0

    def test_fraction_modifier_converted_to_percent(self):
        args = build_parser().parse_args(["--power-modifier-fraction", "0.5"])
        assert inputs_from_args(args).power_modifier_pct == 50.0

    def test_modifier_flags_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--power-modifier", "50", "--power-modifier-fraction", "0.5"])


# ---------------------------------------------------------------------------
# In-process
# ---------------------------------------------------------------------------

class TestMain:

    def test_default_summary(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "DAY-NIGHT CYCLE SETTINGS" in out
        assert "84.0 s" in out
        assert "210.0 s" in out
        assert "42.0 s" in out
        assert "0.847 panels per accumulator" in out

    def test_scenario_summary(self, capsys):
        code = main(["--cycle-length", "600", "--panel-power", "100",
                     "--accumulator-capacity", "10", "--power-modifier", "50"])
        assert code == 0
        out = capsys.readouterr().out
        assert "120.0 s" in out
        assert "300.0 s" in out
        assert "0.504 panels per accumulator" in out
        assert "50%" in out

    def test_invalid_input_exits_2(self, capsys):
        assert main(["--accumulator-capacity", "0"]) == calculator_runner.EXIT_INVALID_INPUT
        captured = capsys.readouterr()
        assert "panels per accumulator" not in captured.out

    def test_plot_written(self, tmp_path, capsys):
        plot_file = tmp_path / "ratio.png"
        assert main(["--plot", "--plot-file", str(plot_file)]) == 0
        assert plot_file.exists()
        assert plot_file.stat().st_size > 0

    def test_sweep_passes_through_current_point(self):
        inputs = CalculatorInputs()
        lengths, ratios = sweep_cycle_length(inputs, points=3)
        assert lengths == pytest.approx([420.0, 840.0, 1260.0])
        assert ratios[0] == pytest.approx(0.84672, rel=1e-9)
        assert ratios == sorted(ratios)


# ---------------------------------------------------------------------------
# Subprocess
# ---------------------------------------------------------------------------

def test_runner_exits_0():
    result = _run_cli()
    assert result.returncode == 0, f"stderr: {result.stderr}"
    assert "0.847" in result.stdout


def test_runner_reports_invalid_field():
    result = _run_cli("--cycle-length", "-5")
    assert result.returncode == 2
    assert "cycle_length_s" in result.stderr
    assert "greater than zero" in result.stderr
