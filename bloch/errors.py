"""Error types raised by the lexer, parser and semantic analyser."""

from __future__ import annotations


class BlochRuntimeError(RuntimeError):
    """An error tied to a position in Bloch source code."""

    def __init__(self, prefix: str, line: int, column: int, message: str) -> None:
        self.prefix = prefix
        self.line = line
        self.column = column
        self.message = message
        super().__init__(self._format(prefix, line, column, message))

    @staticmethod
    def _format(prefix: str, line: int, column: int, message: str) -> str:
        return f"[{prefix}]\nLine {line}, Col {column}: {message}\n"


class LexerError(BlochRuntimeError):
    """Raised when the source text cannot be split into tokens."""

    def __init__(self, line: int, column: int, message: str) -> None:
        super().__init__("Bloch Lexer Error", line, column, message)


class ParserError(BlochRuntimeError):
    """Raised when the token stream does not match the grammar."""

    def __init__(self, line: int, column: int, message: str) -> None:
        super().__init__("Bloch Parser Error", line, column, message)


class SemanticError(BlochRuntimeError):
    """Raised when a program is well formed but semantically invalid."""

    def __init__(self, line: int, column: int, message: str) -> None:
        super().__init__("Bloch Semantic Error", line, column, message)