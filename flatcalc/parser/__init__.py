"""Parser package for flatcalc.

The parser is split into the :class:`Parser` driver and the expression and
statement routines it delegates to. :class:`Parser` is exposed at the package
level for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .parser import DEFAULT_MAX_DEPTH, Parser

__all__ = ["Parser", "DEFAULT_MAX_DEPTH"]
