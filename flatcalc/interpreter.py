"""Interpreter.

Drives one program run: the source is tokenized in full, a parser is primed
on the resulting stream, and statements are parsed and evaluated until the
stream is exhausted.

1. Execution Model
There is no separate evaluation pass. The parser computes each statement as
it recognizes it, printing bare expressions and binding assignments.

2. Environment
The interpreter owns a single `Environment`. Every call to `run()` shares it,
which lets an interactive session build on earlier input while separate
`Interpreter` instances stay fully independent.

3. Error Handling
The first error halts the run and propagates to the caller. Output already
printed for earlier statements stays printed; nothing is printed for the
failing statement.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from flatcalc.environment import Environment
from flatcalc.lexer import TokenStream, tokenize
from flatcalc.parser import DEFAULT_MAX_DEPTH, Parser


class Interpreter:
    """
    Run driver for flatcalc programs.
    """
    def __init__(self, file: str = '<input>', out=None, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Name used for the source in error messages.
            out: Text sink for printed results; stdout if omitted.
            max_depth (int): Deepest parenthesis nesting accepted.
        """
        self.file = file
        self.out = out
        self.max_depth = max_depth
        self.environment = Environment()

    @property
    def vars(self) -> dict[str, int]:
        """
        Snapshot of the current variable bindings.
        """
        return self.environment.as_dict()

    def execute(self, tokens: TokenStream) -> None:
        """
        Evaluate every statement in an already tokenized program.
        """
        parser = Parser(
            tokens,
            self.file,
            environment=self.environment,
            out=self.out,
            max_depth=self.max_depth,
        )
        parser.parse()

    def run(self, source: str) -> None:
        """
        Tokenize and evaluate a program.
        """
        self.execute(tokenize(source))
