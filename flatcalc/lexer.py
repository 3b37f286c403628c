"""Lexer for flatcalc.

The lexer works one physical line at a time. Each line is split on whitespace
and every resulting word becomes exactly one :class:`Token`; words are never
split further, so ``x1`` and ``a+b`` are single tokens.

1. Classification
A word is classified in priority order:
    - an exact match against the single-character punctuation set
      (``+ - * / = ( )``) yields the corresponding operator token,
    - a word that is entirely a base-10 integer (with an optional sign)
      yields a NUMBER token,
    - a word whose first character is a letter yields an IDENTIFIER token,
    - anything else yields an UNKNOWN token.

2. Unknown input
UNKNOWN tokens are not rejected here. The parser has no production for them,
so malformed input fails during parsing, never during lexing.

3. End of input
The resulting :class:`TokenStream` hands out its tokens in order and then
keeps returning an EOF token, however many times it is asked.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass

from flatcalc.tokens import PUNCTUATION, TokenKind


INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a kind and the exact text that produced it.
    """
    kind: TokenKind
    text: str
    line: int = 0

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind}, {self.text!r}, line={self.line})"


class TokenStream:
    """
    Ordered, finite sequence of tokens terminated by EOF.
    """
    def __init__(self, tokens: list[Token], last_line: int = 0):
        """
        Initialize the stream.

        Parameters:
            tokens (list[Token]): The tokens to hand out, in order.
            last_line (int): Line number stamped on the EOF token.
        """
        self.tokens = list(tokens)
        self.position = 0
        self.eof = Token(TokenKind.EOF, '', last_line)

    def next_token(self) -> Token:
        """
        Return the next token, or EOF once the stream is exhausted.
        """
        if self.position >= len(self.tokens):
            return self.eof
        token = self.tokens[self.position]
        self.position += 1
        return token

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __repr__(self) -> str:
        return f"TokenStream({self.tokens!r})"


# Decimal digits converted at a time; below the interpreter's int/str
# conversion limit so literals and results of any length round-trip.
DIGIT_CHUNK = 1000


def is_integer(text: str) -> bool:
    """
    Check whether a word reads as a base-10 integer.
    """
    return INTEGER_PATTERN.fullmatch(text) is not None


def parse_integer(text: str) -> int:
    """
    Convert the text of a base-10 integer word to an int of any length.

    Raises:
        ValueError: If the text is not a base-10 integer.
    """
    if not is_integer(text):
        raise ValueError(f"not a base-10 integer: {text!r}")
    digits = text.lstrip('+-')
    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start:start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if text.startswith('-') else value


def format_integer(value: int) -> str:
    """
    Render an int of any length as signed decimal text.
    """
    if value < 0:
        return '-' + format_integer(-value)
    chunks = []
    while True:
        value, chunk = divmod(value, 10 ** DIGIT_CHUNK)
        if not value:
            chunks.append(str(chunk))
            break
        chunks.append(str(chunk).zfill(DIGIT_CHUNK))
    return ''.join(reversed(chunks))


def classify(word: str) -> TokenKind:
    """
    Determine the kind of a single whitespace-delimited word.

    Parameters:
        word (str): A non-empty word.

    Returns:
        TokenKind: The kind the word is classified as.
    """
    if word in PUNCTUATION:
        return PUNCTUATION[word]
    if is_integer(word):
        return TokenKind.NUMBER
    if word[0].isalpha():
        return TokenKind.IDENTIFIER
    return TokenKind.UNKNOWN


def tokenize_line(line: str, line_num: int = 0) -> list[Token]:
    """
    Tokenize a single line of source.
    """
    return [Token(classify(word), word, line_num) for word in line.split()]


def tokenize(code: str) -> TokenStream:
    """
    Convert a string of source code into a stream of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        TokenStream: The tokens of every line, in source order.
    """
    tokens = []
    line_num = 0
    for line_num, line in enumerate(code.splitlines(), start=1):
        tokens.extend(tokenize_line(line, line_num))
    return TokenStream(tokens, line_num)


__all__ = [
    "Token",
    "TokenStream",
    "tokenize",
    "tokenize_line",
    "classify",
    "is_integer",
    "parse_integer",
    "format_integer",
]
