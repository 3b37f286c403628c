"""Variable environment.

A single flat mapping from variable name to integer value. Names are
case-sensitive, the last write wins and nothing is ever removed. One
environment lives for the whole of a run and is owned by the parser that
evaluates it.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from flatcalc.exceptions import UndefinedVariableException


class Environment:
    """
    Name to integer variable store.
    """
    def __init__(self):
        self.vars: dict[str, int] = {}

    def set(self, name: str, value: int) -> None:
        """
        Bind a name, overwriting any previous value.
        """
        self.vars[name] = value

    def get(self, name: str, line=None, file=None) -> int:
        """
        Look up a name.

        Parameters:
            name (str): The variable name.
            line (int): Source line of the reference, for error reporting.
            file (str): Source file of the reference, for error reporting.

        Raises:
            UndefinedVariableException: If the name was never set.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise UndefinedVariableException(name, line, file) from None

    def as_dict(self) -> dict[str, int]:
        """
        Return a snapshot of every binding.
        """
        return dict(self.vars)

    def __contains__(self, name) -> bool:
        return name in self.vars

    def __iter__(self):
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        return f"Environment({self.vars!r})"


__all__ = ["Environment"]
