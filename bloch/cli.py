"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .lexer import Lexer

BANNER = "Bloch: A General Purpose Quantum Programming Language"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the banner and run the lexer over an empty program."""
    parser = argparse.ArgumentParser(prog="bloch", description=BANNER)
    parser.parse_args(argv)

    print(BANNER, end="")
    Lexer("").tokenize()
    return 0