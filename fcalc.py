"""
flatcalc Interpreter

This is the main entry point for the flatcalc interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer splits every line into whitespace-delimited tokens.
3. The Parser consumes the tokens one at a time, evaluating each statement as
   soon as it is recognized and printing the value of bare expressions.

With no script argument an interactive shell is started instead.


File: fcalc.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import argparse
import os
import sys

from flatcalc.interpreter import Interpreter
from flatcalc.lexer import format_integer, tokenize
from flatcalc.parser import DEFAULT_MAX_DEPTH


def positive_int(text: str) -> int:
    """
    Argument type for counts that must be at least 1.
    """
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command-line argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="fcalc",
        description="flatcalc interpreter. Run with no arguments to enter interactive mode.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help="Path to a flatcalc source file to execute"
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream before evaluating (same as setting FCALCDEBUG)"
    )
    parser.add_argument(
        "--max-depth",
        type=positive_int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Deepest parenthesis nesting accepted (default: {DEFAULT_MAX_DEPTH})"
    )
    return parser


def debug_print_tokens(tokens):
    """
    Print tokenized source
    """
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print(" ")


def run_script(script_name: str, show_tokens: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """
    Run a flatcalc script, halting on the first error.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Error opening file: {e}")
        return 1

    try:
        interpreter = Interpreter(script_name, max_depth=max_depth)
        tokens = tokenize(code)

        if show_tokens:
            debug_print_tokens(tokens)

        interpreter.execute(tokens)
    except Exception as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl(show_tokens: bool = False, max_depth: int = DEFAULT_MAX_DEPTH):
    """
    Run the interactive REPL
    """
    print("flatcalc Interpreter - REPL")
    print("Type `vars` to list variables, `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>", max_depth=max_depth)
    while True:
        try:
            line = input(">>> ")
            command = line.strip()
            if command in {"exit", "quit"}:
                break
            if command == "vars" and "vars" not in interpreter.environment:
                for name, value in interpreter.vars.items():
                    print(f"{name} = {format_integer(value)}")
                continue
            try:
                tokens = tokenize(line)
                if show_tokens:
                    debug_print_tokens(tokens)
                interpreter.execute(tokens)
            except Exception as e:
                print(f"{type(e).__name__}: {e}")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No script argument: enter the REPL.
    - A script argument: run it and return a non-zero exit code on error.
    """
    args = build_arg_parser().parse_args(argv[1:])
    show_tokens = args.tokens or bool(os.environ.get('FCALCDEBUG'))
    if args.script is None:
        run_repl(show_tokens, args.max_depth)
        return 0
    return run_script(args.script, show_tokens, args.max_depth)


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
