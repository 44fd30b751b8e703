"""Lexer, parser and semantic analyser for the Bloch quantum programming language."""

__version__ = "0.1.0"