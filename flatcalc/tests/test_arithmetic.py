"""Tests for flat left-to-right arithmetic."""
import pytest

from flatcalc.tests.utils import run_source


@pytest.mark.parametrize("source, expected", [
    ("1 + 1", "2"),
    ("10 - 5", "5"),
    ("2 * 6", "12"),
    ("10 / 2", "5"),
])
def test_basic_operators(source, expected):
    assert run_source(source) == [expected]


def test_no_precedence_between_operators():
    assert run_source("2 + 3 * 4") == ["20"]
    assert run_source("1 + 2 * 3 - 4 / 2") == ["2"]


def test_left_associative_chains():
    assert run_source("10 - 2 - 3") == ["5"]
    assert run_source("20 / 2 / 5") == ["2"]


def test_division_truncates_toward_zero():
    assert run_source("7 / 2") == ["3"]
    assert run_source("-7 / 2") == ["-3"]
    assert run_source("7 / -2") == ["-3"]
    assert run_source("-7 / -2") == ["3"]


def test_signed_literals():
    assert run_source("-5 + 2") == ["-3"]
    assert run_source("+4 * -1") == ["-4"]


def test_large_integers_do_not_overflow():
    assert run_source("9223372036854775807 + 1") == ["9223372036854775808"]


def test_one_result_per_statement_line():
    source = (
        "1 + 1\n"
        "10 - 5\n"
        "2 * 6\n"
        "10 / 2\n"
    )
    assert run_source(source) == ["2", "5", "12", "5"]


def test_results_longer_than_int_conversion_limit():
    source = "x = 10\n" + "x = x * x\n" * 13 + "x\n0 - x"
    digits = "1" + "0" * 8192
    assert run_source(source) == [digits, "-" + digits]
