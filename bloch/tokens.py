"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the lexer can produce."""

    # Literals
    IDENTIFIER = auto()
    INTEGER_LITERAL = auto()
    FLOAT_LITERAL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()

    # Keywords
    INT = auto()
    FLOAT = auto()
    STRING = auto()
    CHAR = auto()
    QUBIT = auto()
    BIT = auto()
    LOGICAL = auto()
    VOID = auto()
    FUNCTION = auto()
    IMPORT = auto()
    RETURN = auto()
    IF = auto()
    ELSE = auto()
    FOR = auto()
    CLASS = auto()
    MEASURE = auto()
    FINAL = auto()
    RESET = auto()
    PUBLIC = auto()
    PRIVATE = auto()

    # Annotations
    AT = auto()
    QUANTUM = auto()
    STATE = auto()
    ADJOINT = auto()
    MEMBERS = auto()
    METHODS = auto()

    # Operators and punctuation
    EQUALS = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    SEMICOLON = auto()
    COMMA = auto()
    DOT = auto()
    COLON = auto()
    ARROW = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()

    # Built-ins
    ECHO = auto()

    # Control
    EOF = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    """A lexeme together with its kind and source position."""

    type: TokenType
    value: str
    line: int
    column: int