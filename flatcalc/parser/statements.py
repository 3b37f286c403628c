"""Statement parsing utilities for flatcalc.

These functions operate on a `flatcalc.parser.parser.Parser` instance. A
statement is either an assignment, which binds a name and prints nothing, or
a bare expression, whose value is printed on its own line.

Statements are not delimited by newlines. The token stream is flat, and a
statement ends where its expression can no longer be extended.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from flatcalc.tokens import TokenKind

if TYPE_CHECKING:
    from flatcalc.parser import Parser


def parse_statement(parser: 'Parser') -> None:
    """
    Parse and execute one statement.

    Syntax:
        <identifier> = <expression>
        <identifier>
        <expression>

    A leading identifier that is not followed by ``=`` is only a variable
    reference: its value is printed and the statement ends there. An
    expression such as ``a + 1`` is therefore not evaluated as a whole when it
    opens a statement; the ``+`` starts the next statement and fails.
    """
    tok = parser.curr_token
    if tok.kind == TokenKind.IDENTIFIER:
        parser.advance()
        if parser.curr_token.kind == TokenKind.ASSIGN:
            parse_assignment(parser, tok.text)
        else:
            parser.emit(parser.environment.get(tok.text, tok.line, parser.source_file))
        return

    parser.emit(parser.expr())


def parse_assignment(parser: 'Parser', name: str) -> None:
    """
    Bind ``name`` to the value of the expression after ``=``.
    """
    parser.eat(TokenKind.ASSIGN)
    value = parser.expr()
    parser.environment.set(name, value)
