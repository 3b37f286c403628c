"""Tests for statement boundaries and the statement loop."""
import io

import pytest

from flatcalc.exceptions import UnexpectedTokenException
from flatcalc.interpreter import Interpreter
from flatcalc.tests.utils import run_source
from flatcalc.tokens import TokenKind


def test_empty_program_prints_nothing():
    assert run_source("") == []
    assert run_source("\n\n   \n") == []


def test_leading_identifier_is_only_a_reference():
    out = io.StringIO()
    interpreter = Interpreter("<test>", out=out)
    with pytest.raises(UnexpectedTokenException) as exc:
        interpreter.run("a = 4\na + 1")
    assert out.getvalue().splitlines() == ["4"]
    assert exc.value.kind == TokenKind.PLUS


def test_identifier_inside_expression_is_evaluated():
    assert run_source("a = 4\n1 + a + 1") == ["6"]
    assert run_source("a = 4\n( a + 1 )") == ["5"]


def test_statements_are_not_newline_delimited():
    assert run_source("1 + 2\n* 3") == ["9"]


def test_several_statements_on_one_line():
    assert run_source("1 2 3") == ["1", "2", "3"]
    assert run_source("a = 1 a") == ["1"]


def test_trailing_closing_paren_starts_a_new_statement():
    out = io.StringIO()
    interpreter = Interpreter("<test>", out=out)
    with pytest.raises(UnexpectedTokenException) as exc:
        interpreter.run("1 + 2 )")
    assert out.getvalue().splitlines() == ["3"]
    assert exc.value.kind == TokenKind.RPAREN


def test_default_output_is_stdout(capsys):
    Interpreter("<test>").run("3 * 3")
    assert capsys.readouterr().out.strip().splitlines() == ["9"]
