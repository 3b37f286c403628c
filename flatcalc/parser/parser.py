"""Main parser entry point for flatcalc.

This module defines the `Parser` class, which drives a recursive descent over
a token stream with a single token of lookahead. Parsing and evaluation are
interleaved: each statement is computed as soon as it is recognized, then its
value is printed or bound in the environment and discarded. No syntax tree is
kept.

The actual routines are split across `flatcalc.parser.expressions` and
`flatcalc.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys

from flatcalc.environment import Environment
from flatcalc.exceptions import UnexpectedTokenException
from flatcalc.lexer import Token, TokenStream, format_integer
from flatcalc.tokens import TokenKind

from . import expressions as _expr
from . import statements as _stmt


# Python's own recursion limit sits well above this.
DEFAULT_MAX_DEPTH = 100


class Parser:
    """flatcalc parser and evaluator."""

    def __init__(
        self,
        tokens: TokenStream,
        file: str = '<input>',
        environment: Environment | None = None,
        out=None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """
        Initialize the parser and prime the lookahead with the first token.

        Parameters:
            tokens (TokenStream): The token stream to consume.
            file (str): The name of the script, for error messages.
            environment (Environment): Variable store; a fresh one if omitted.
            out: Text sink for printed results; stdout if omitted.
            max_depth (int): Deepest parenthesis nesting accepted.
        """
        self.tokens = tokens
        self.source_file = file
        self.environment = environment if environment is not None else Environment()
        self.out = out
        self.max_depth = max_depth
        self.depth = 0
        self.curr_token: Token = self.tokens.next_token()

    def advance(self) -> None:
        """
        Move the lookahead to the next token in the stream.
        """
        self.curr_token = self.tokens.next_token()

    def eat(self, kind: TokenKind) -> Token:
        """
        Consume the current token if it is of the expected kind.

        Parameters:
            kind (TokenKind): The expected token kind.

        Returns:
            Token: The consumed token.

        Raises:
            UnexpectedTokenException: If the token is of another kind.
        """
        tok = self.curr_token
        if tok.kind != kind:
            raise UnexpectedTokenException(tok.kind, tok.text, tok.line, self.source_file)
        self.advance()
        return tok

    def at_end(self) -> bool:
        """
        Check whether the stream is exhausted.
        """
        return self.curr_token.kind == TokenKind.EOF

    def emit(self, value: int) -> None:
        """
        Print one result line to the output sink.
        """
        print(format_integer(value), file=self.out if self.out is not None else sys.stdout)


    # Expression wrappers
    def term(self) -> int:
        """
        Parse and evaluate a number, variable reference, or parenthesized group.
        """
        return _expr.parse_term(self)

    def expr(self) -> int:
        """
        Parse and evaluate a flat left-to-right chain of terms.
        """
        return _expr.parse_expression(self)


    # Statement wrappers
    def statement(self) -> None:
        """
        Parse and execute a single statement.
        """
        _stmt.parse_statement(self)


    def parse(self) -> None:
        """
        Execute statements until the token stream is exhausted.
        """
        while not self.at_end():
            self.statement()
