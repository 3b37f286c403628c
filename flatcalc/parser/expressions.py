"""Expression parsing utilities for flatcalc.

These functions operate on a `flatcalc.parser.parser.Parser` instance and
evaluate expressions while they are being recognized.

There is a single precedence tier. The four arithmetic operators are folded
strictly in source order, so ``2 + 3 * 4`` evaluates to ``(2 + 3) * 4 = 20``.
Parentheses are the only way to group.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from flatcalc.exceptions import (
    DivisionByZeroException,
    ExpectedClosingParenException,
    MalformedNumberException,
    NestingTooDeepException,
    UnexpectedTokenException,
)
from flatcalc.lexer import parse_integer
from flatcalc.tokens import OPERATORS, TokenKind

if TYPE_CHECKING:
    from flatcalc.parser import Parser


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def apply_operator(parser: 'Parser', op_tok, left: int, right: int) -> int:
    """
    Fold one operator into the running accumulator.

    Raises:
        DivisionByZeroException: If dividing by zero.
    """
    match op_tok.kind:
        case TokenKind.PLUS:
            return left + right
        case TokenKind.MINUS:
            return left - right
        case TokenKind.STAR:
            return left * right
        case TokenKind.SLASH:
            if right == 0:
                raise DivisionByZeroException(op_tok.line, parser.source_file)
            return truncating_div(left, right)
    raise UnexpectedTokenException(op_tok.kind, op_tok.text, op_tok.line, parser.source_file)


def parse_expression(parser: 'Parser') -> int:
    """
    Parse and evaluate ``term ((+|-|*|/) term)*`` left to right.

    A closing parenthesis met right after an operator has been folded ends the
    expression without being consumed; the enclosing group consumes it.
    """
    result = parser.term()
    while parser.curr_token.kind in OPERATORS:
        op_tok = parser.curr_token
        parser.advance()
        right = parser.term()
        result = apply_operator(parser, op_tok, result, right)

        if parser.curr_token.kind == TokenKind.RPAREN:
            return result
    return result


def parse_term(parser: 'Parser') -> int:
    """Parse a number, a variable reference, or a parenthesized expression."""
    tok = parser.curr_token

    if tok.kind == TokenKind.NUMBER:
        try:
            value = parse_integer(tok.text)
        except ValueError:
            raise MalformedNumberException(tok.text, tok.line, parser.source_file) from None
        parser.eat(TokenKind.NUMBER)
        return value

    if tok.kind == TokenKind.IDENTIFIER:
        parser.eat(TokenKind.IDENTIFIER)
        return parser.environment.get(tok.text, tok.line, parser.source_file)

    if tok.kind == TokenKind.LPAREN:
        if parser.depth >= parser.max_depth:
            raise NestingTooDeepException(parser.max_depth, tok.line, parser.source_file)
        parser.eat(TokenKind.LPAREN)
        parser.depth += 1
        try:
            value = parser.expr()
        finally:
            parser.depth -= 1

        closing = parser.curr_token
        if closing.kind != TokenKind.RPAREN:
            raise ExpectedClosingParenException(
                closing.kind, closing.text, closing.line, parser.source_file
            )
        parser.eat(TokenKind.RPAREN)
        return value

    raise UnexpectedTokenException(tok.kind, tok.text, tok.line, parser.source_file)
