"""Token kinds.

Shared definitions for the token kinds produced by the lexer and consumed by
the parser. Keeping them in one place stops the two components from drifting
apart when a new operator is added.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenKind(str, Enum):
    """
    Enumeration of lexical token kinds.
    """

    # Literals
    NUMBER = "NUMBER"
    IDENTIFIER = "IDENTIFIER"

    # Arithmetic operators
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"

    # Assignment
    ASSIGN = "ASSIGN"

    # Delimiters
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"

    # Miscellaneous
    EOF = "EOF"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Single-character words that map straight to a token kind.
PUNCTUATION: dict[str, TokenKind] = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.STAR,
    '/': TokenKind.SLASH,
    '=': TokenKind.ASSIGN,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
}

OPERATORS = frozenset({
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.STAR,
    TokenKind.SLASH,
})


__all__ = ["TokenKind", "PUNCTUATION", "OPERATORS"]
