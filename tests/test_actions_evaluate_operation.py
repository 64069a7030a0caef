"""
Tests for the evaluate_operation action.

**Purpose**: Verify the command-line surface end to end: output format,
IEEE-754 special values, configured precision, and exit codes for bad input.
The script's main() is called in-process with an argv list and its SystemExit
is captured.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so we can import actions module
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actions.evaluate_operation import main, parse_operand


def run_main(argv):
    """Run main() and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_binary_operation_prints_expression(capsys):
    code = run_main(["divide", "10", "4"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "10 / 4 = 2.5"


def test_unary_operation_with_negative_operand(capsys):
    code = run_main(["cbrt", "-27"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "cbrt(-27) = -3"


def test_division_by_zero_prints_infinity(capsys):
    """Test the CLI reports inf instead of crashing on ZeroDivisionError."""
    code = run_main(["divide", "1", "0"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "1 / 0 = inf"


def test_sqrt_of_negative_prints_nan(capsys):
    code = run_main(["sqrt", "-1"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "sqrt(-1) = nan"


def test_add_five_camel_case_alias(capsys):
    code = run_main(["addFive", "10"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "add_five(10) = 15"


def test_display_precision_from_environment(monkeypatch, capsys):
    """Test ARITHMETIC_DISPLAY_PRECISION controls significant digits."""
    monkeypatch.setenv("ARITHMETIC_DISPLAY_PRECISION", "3")

    code = run_main(["divide", "1", "3"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "1 / 3 = 0.333"


def test_unknown_operation_exits_1(capsys):
    code = run_main(["modulo", "5", "2"])

    assert code == 1
    err = capsys.readouterr().err
    assert "Error: Unknown operation 'modulo'" in err


def test_wrong_operand_count_exits_1(capsys):
    code = run_main(["add", "1"])

    assert code == 1
    assert "takes 2 operand(s), got 1" in capsys.readouterr().err


def test_non_numeric_operand_exits_1(capsys):
    code = run_main(["add", "one", "2"])

    assert code == 1
    assert "Operand must be a number" in capsys.readouterr().err


def test_invalid_settings_exit_1(monkeypatch, capsys):
    monkeypatch.setenv("ARITHMETIC_DISPLAY_PRECISION", "many")

    code = run_main(["add", "1", "2"])

    assert code == 1
    assert "ARITHMETIC_DISPLAY_PRECISION" in capsys.readouterr().err


def test_list_prints_every_operation(capsys):
    code = run_main(["--list"])

    assert code == 0
    out = capsys.readouterr().out
    for name in ("add", "divide", "exponentiate", "cbrt", "add_five"):
        assert name in out
    assert "a / b" in out
    assert "sqrt(a)" in out


def test_missing_operation_is_usage_error():
    """Test argparse rejects a command line with no operation."""
    assert run_main([]) == 2


def test_parse_operand_accepts_special_values():
    assert parse_operand("inf") == float("inf")
    assert parse_operand("1e-3") == 0.001

    with pytest.raises(ValueError, match="Operand must be a number"):
        parse_operand("abc")
