"""flatcalc.

A small line-oriented integer calculator language: whitespace-separated
tokens, assignments, bare expressions and a single flat precedence tier.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from flatcalc.environment import Environment
from flatcalc.interpreter import Interpreter
from flatcalc.lexer import Token, TokenStream, tokenize
from flatcalc.parser import Parser
from flatcalc.tokens import TokenKind

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "Interpreter",
    "Parser",
    "Token",
    "TokenKind",
    "TokenStream",
    "tokenize",
]
