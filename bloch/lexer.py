"""Turns Bloch source text into a list of tokens."""

from __future__ import annotations

from .errors import LexerError
from .tokens import Token, TokenType

_WHITESPACE = frozenset(" \t\n\v\f\r")

_KEYWORDS: dict[str, TokenType] = {
    # Primitives
    "int": TokenType.INT,
    "float": TokenType.FLOAT,
    "string": TokenType.STRING,
    "char": TokenType.CHAR,
    "qubit": TokenType.QUBIT,
    "bit": TokenType.BIT,
    "logical": TokenType.LOGICAL,
    # Keywords
    "void": TokenType.VOID,
    "function": TokenType.FUNCTION,
    "import": TokenType.IMPORT,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "for": TokenType.FOR,
    "class": TokenType.CLASS,
    "measure": TokenType.MEASURE,
    "final": TokenType.FINAL,
    "reset": TokenType.RESET,
    "public": TokenType.PUBLIC,
    "private": TokenType.PRIVATE,
    # Annotation values
    "quantum": TokenType.QUANTUM,
    "adjoint": TokenType.ADJOINT,
    "state": TokenType.STATE,
    "members": TokenType.MEMBERS,
    "methods": TokenType.METHODS,
    # Built-ins
    "echo": TokenType.ECHO,
}

_SINGLE_CHAR: dict[str, TokenType] = {
    "=": TokenType.EQUALS,
    "+": TokenType.PLUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ":": TokenType.COLON,
    "@": TokenType.AT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

# first char -> (second char, combined kind, single kind)
_TWO_CHAR: dict[str, tuple[str, TokenType, TokenType]] = {
    "-": (">", TokenType.ARROW, TokenType.MINUS),
    ">": ("=", TokenType.GREATER_EQUAL, TokenType.GREATER),
    "<": ("=", TokenType.LESS_EQUAL, TokenType.LESS),
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9" and len(c) == 1


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


class Lexer:
    """Scans source text into tokens, tracking line and column."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._reset()

    def _reset(self) -> None:
        self._pos = 0
        self._line = 1
        self._column = 1

    def tokenize(self) -> list[Token]:
        """Return every token in the source, ending with an EOF token."""
        self._reset()
        tokens: list[Token] = []
        while not self._at_end():
            self._skip_whitespace()
            if not self._at_end():
                tokens.append(self._scan_token())
        tokens.append(self._make_token(TokenType.EOF, ""))
        return tokens

    # Character access

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        return self._source[self._pos] if self._pos < len(self._source) else ""

    def _peek_next(self) -> str:
        nxt = self._pos + 1
        return self._source[nxt] if nxt < len(self._source) else ""

    def _advance(self) -> str:
        c = self._source[self._pos]
        self._pos += 1
        self._column += 1
        return c

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._pos += 1
        self._column += 1
        return True

    def _skip_whitespace(self) -> None:
        while not self._at_end():
            c = self._peek()
            if c in _WHITESPACE:
                self._advance()
                if c == "\n":
                    self._line += 1
                    self._column = 1
            elif c == "/" and self._peek_next() == "/":
                self._advance()
                self._advance()
                self._skip_comment()
            else:
                break

    def _skip_comment(self) -> None:
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _error(self, message: str) -> LexerError:
        return LexerError(self._line, self._column, message)

    def _make_token(self, kind: TokenType, value: str) -> Token:
        return Token(kind, value, self._line, self._column - len(value))

    # Scanning

    def _scan_token(self) -> Token:
        c = self._advance()

        if _is_digit(c):
            return self._scan_number()
        if _is_alpha(c) or c == "_":
            return self._scan_identifier_or_keyword()

        if c in _TWO_CHAR:
            second, combined, single = _TWO_CHAR[c]
            if self._match(second):
                return self._make_token(combined, c + second)
            return self._make_token(single, c)
        if c in _SINGLE_CHAR:
            return self._make_token(_SINGLE_CHAR[c], c)
        if c == '"':
            return self._scan_string()
        if c == "'":
            return self._scan_char()
        return self._make_token(TokenType.UNKNOWN, c)

    def _scan_number(self) -> Token:
        start = self._pos - 1
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == ".":
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
            if self._peek() != "f":
                raise self._error("Float literal must end with 'f'")
            self._advance()
            return self._make_token(TokenType.FLOAT_LITERAL, self._source[start : self._pos])

        return self._make_token(TokenType.INTEGER_LITERAL, self._source[start : self._pos])

    def _scan_identifier_or_keyword(self) -> Token:
        start = self._pos - 1
        while _is_alnum(self._peek()) or self._peek() == "_":
            self._advance()
        text = self._source[start : self._pos]
        return self._make_token(_KEYWORDS.get(text, TokenType.IDENTIFIER), text)

    def _scan_string(self) -> Token:
        start = self._pos
        while not self._at_end() and self._peek() != '"':
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._peek() != '"':
            raise self._error("Unterminated string literal")
        self._advance()
        return self._make_token(TokenType.STRING_LITERAL, self._source[start - 1 : self._pos])

    def _scan_char(self) -> Token:
        start = self._pos
        if not self._at_end():
            self._advance()

        if self._peek() != "'":
            raise self._error("Unterminated char literal")
        self._advance()
        return self._make_token(TokenType.CHAR_LITERAL, self._source[start - 1 : start + 2])


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole source string."""
    return Lexer(source).tokenize()