"""Errors.

Every error raised while parsing or evaluating a program. All of them are
fatal to a run: they are raised where the condition is detected and propagate
up through the recursive parse calls to the statement loop.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _locate(message, line=None, file=None):
    if line:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class UndefinedVariableException(NameError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        self.line = line
        super().__init__(_locate(f"Undefined variable '{varname}'", line, file))


class DivisionByZeroException(ZeroDivisionError):
    """
    Error for a division whose right operand is zero.
    """
    def __init__(self, line=None, file=None):
        self.line = line
        super().__init__(_locate("Division by zero", line, file))


class MalformedNumberException(ValueError):
    """
    Error for a NUMBER token whose text is not an integer.
    """
    def __init__(self, text, line=None, file=None):
        self.text = text
        self.line = line
        super().__init__(_locate(f"Malformed number '{text}'", line, file))


class UnexpectedTokenException(SyntaxError):
    """
    Error for a token with no production where a term is required.
    """
    def __init__(self, kind, text=None, line=None, file=None):
        self.kind = kind
        self.text = text
        self.line = line
        message = f"Unexpected token {kind}"
        if text:
            message += f" '{text}'"
        super().__init__(_locate(message, line, file))


class ExpectedClosingParenException(SyntaxError):
    """
    Error for an opened parenthesis that is never closed.
    """
    def __init__(self, kind, text=None, line=None, file=None):
        self.kind = kind
        self.text = text
        self.line = line
        found = f"{kind} '{text}'" if text else f"{kind}"
        super().__init__(_locate(f"Expected ')' but got {found}", line, file))


class NestingTooDeepException(SyntaxError):
    """
    Error for parentheses nested deeper than the parser allows.
    """
    def __init__(self, limit, line=None, file=None):
        self.limit = limit
        self.line = line
        super().__init__(_locate(f"Parentheses nested deeper than {limit}", line, file))
