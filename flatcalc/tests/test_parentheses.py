"""Tests for parenthesized groups."""
import io

import pytest

from flatcalc.exceptions import ExpectedClosingParenException, NestingTooDeepException
from flatcalc.interpreter import Interpreter
from flatcalc.parser import DEFAULT_MAX_DEPTH
from flatcalc.tests.utils import run_source


def nested(depth: int, inner: str = "1") -> str:
    return " ".join(["("] * depth + [inner] + [")"] * depth)


def test_group_evaluates_first():
    assert run_source("( 2 + 3 ) * 4") == ["20"]
    assert run_source("2 * ( 3 + 4 )") == ["14"]
    assert run_source("10 - ( 2 - 3 )") == ["11"]


def test_single_term_groups():
    assert run_source("( 5 )") == ["5"]
    assert run_source("( ( 7 ) )") == ["7"]


def test_chained_groups():
    assert run_source("( ( 1 + 2 ) * ( 3 + 4 ) )") == ["21"]
    assert run_source("( 1 + 2 ) * ( 3 + 4 ) - ( 10 / 5 )") == ["19"]


def test_group_after_assignment():
    assert run_source("y = ( 2 + 3 ) * 4\ny") == ["20"]


def test_unclosed_group_at_end_of_input():
    with pytest.raises(ExpectedClosingParenException):
        run_source("( 1 + 2")


def test_group_followed_by_stray_term():
    with pytest.raises(ExpectedClosingParenException) as exc:
        run_source("( 1 2 )")
    assert exc.value.text == "2"


def test_deep_nesting_within_limit():
    assert run_source(nested(DEFAULT_MAX_DEPTH, "1 + 1")) == ["2"]


def test_nesting_limit_is_configurable():
    interpreter = Interpreter("<test>", out=io.StringIO(), max_depth=3)
    interpreter.run(nested(3))
    with pytest.raises(NestingTooDeepException) as exc:
        interpreter.run(nested(4))
    assert exc.value.limit == 3


def test_nesting_beyond_default_limit():
    with pytest.raises(NestingTooDeepException):
        run_source(nested(DEFAULT_MAX_DEPTH + 1))
