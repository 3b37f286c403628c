"""
Utility functions shared across flatcalc tests.
"""
import io

from flatcalc.interpreter import Interpreter


def run_source(source: str, interpreter: Interpreter | None = None) -> list[str]:
    """
    Run source code and return the printed lines.
    """
    out = io.StringIO()
    if interpreter is None:
        interpreter = Interpreter("<test>", out=out)
    else:
        interpreter.out = out
    interpreter.run(source)
    return out.getvalue().splitlines()
