"""Recursive-descent parsing of Bloch expressions and type annotations."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import ParserError
from .nodes import (
    ArrayType,
    AssignmentExpression,
    BinaryExpression,
    CallExpression,
    ConstructorCallExpression,
    Expression,
    LiteralExpression,
    LogicalType,
    MeasureExpression,
    MemberAccessExpression,
    ParenthesizedExpression,
    PrimitiveType,
    Type,
    UnaryExpression,
    VariableExpression,
    VoidType,
)
from .tokens import Token, TokenType

PRIMITIVE_TYPES = (
    TokenType.INT,
    TokenType.FLOAT,
    TokenType.CHAR,
    TokenType.STRING,
    TokenType.BIT,
    TokenType.QUBIT,
)

_BUILTIN_TYPES = (TokenType.VOID, TokenType.LOGICAL, *PRIMITIVE_TYPES)

_LITERALS = (
    TokenType.INTEGER_LITERAL,
    TokenType.FLOAT_LITERAL,
    TokenType.STRING_LITERAL,
    TokenType.CHAR_LITERAL,
)

_COMPARISON = (
    TokenType.GREATER,
    TokenType.LESS,
    TokenType.GREATER_EQUAL,
    TokenType.LESS_EQUAL,
)
_ADDITIVE = (TokenType.PLUS, TokenType.MINUS)
_MULTIPLICATIVE = (TokenType.STAR, TokenType.SLASH, TokenType.PERCENT)


class ExpressionParser:
    """Parses expressions and types from a token list ending in EOF."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: list[Token] = list(tokens)
        if not self._tokens:
            raise ValueError("token list must not be empty")
        self._current = 0

    # Token access

    def _peek(self) -> Token:
        if self._current >= len(self._tokens):
            return self._tokens[-1]
        return self._tokens[self._current]

    def _previous(self) -> Token:
        return self._tokens[self._current - 1]

    def _advance(self) -> Token:
        if not self._is_at_end():
            self._current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type is TokenType.EOF

    def _check(self, *kinds: TokenType) -> bool:
        if self._is_at_end():
            return False
        return self._peek().type in kinds

    def _check_next(self, kind: TokenType) -> bool:
        nxt = self._current + 1
        return nxt < len(self._tokens) and self._tokens[nxt].type is kind

    def _match(self, *kinds: TokenType) -> bool:
        if self._check(*kinds):
            self._advance()
            return True
        return False

    def _expect(self, kind: TokenType, message: str) -> Token:
        if self._check(kind):
            return self._advance()
        raise self._error(message)

    def _error(self, message: str) -> ParserError:
        token = self._peek()
        return ParserError(token.line, token.column, message)

    # Expressions

    def parse_expression(self) -> Expression:
        """Parse one expression, starting at the lowest precedence level."""
        return self._parse_assignment_expression()

    def _parse_assignment_expression(self) -> Expression:
        expr = self._parse_comparison()

        if self._match(TokenType.EQUALS):
            equals = self._previous()
            if not isinstance(expr, VariableExpression):
                raise self._error("Invalid assignment target")
            value = self._parse_assignment_expression()
            return AssignmentExpression(
                expr.name, value, line=equals.line, column=equals.column
            )

        return expr

    def _parse_binary_level(self, operators: tuple[TokenType, ...], operand) -> Expression:
        expr = operand()
        while self._match(*operators):
            op = self._previous().value
            right = operand()
            expr = BinaryExpression(op, expr, right)
        return expr

    def _parse_comparison(self) -> Expression:
        return self._parse_binary_level(_COMPARISON, self._parse_additive)

    def _parse_additive(self) -> Expression:
        return self._parse_binary_level(_ADDITIVE, self._parse_multiplicative)

    def _parse_multiplicative(self) -> Expression:
        return self._parse_binary_level(_MULTIPLICATIVE, self._parse_unary)

    def _parse_unary(self) -> Expression:
        if self._match(TokenType.STAR):
            class_name = self._expect(TokenType.IDENTIFIER, "Expected class name after '*'")
            self._expect(TokenType.LPAREN, "Expected '(' after class name")
            args = self.parse_argument_list()
            self._expect(TokenType.RPAREN, "Expected ')' after arguments")
            return ConstructorCallExpression(class_name.value, args)

        if self._match(TokenType.MINUS):
            op = self._previous().value
            return UnaryExpression(op, self._parse_unary())

        return self._parse_call()

    def _parse_call(self) -> Expression:
        expr = self._parse_primary()

        while True:
            if self._match(TokenType.DOT):
                self._expect(TokenType.IDENTIFIER, "Expected member name after '.'")
                expr = MemberAccessExpression(expr, self._previous().value)
            elif self._match(TokenType.LPAREN):
                args: list[Expression] = []
                if not self._check(TokenType.RPAREN):
                    args.append(self.parse_expression())
                    while self._match(TokenType.COMMA):
                        args.append(self.parse_expression())
                self._expect(TokenType.RPAREN, "Expected ')' after arguments")
                expr = CallExpression(expr, args)
            else:
                return expr

    def _parse_primary(self) -> Expression:
        if self._match(*_LITERALS):
            return LiteralExpression(self._previous().value)

        if self._match(TokenType.MEASURE):
            return MeasureExpression(self.parse_expression())

        if self._match(TokenType.IDENTIFIER):
            token = self._previous()
            return VariableExpression(token.value, line=token.line, column=token.column)

        if self._match(TokenType.LPAREN):
            expr = self.parse_expression()
            self._expect(TokenType.RPAREN, "Expected ')' after expression")
            return ParenthesizedExpression(expr)

        raise self._error("Expected expression")

    def parse_literal(self) -> LiteralExpression:
        """Consume one token and return it as a literal expression."""
        token = self._advance()
        if token.type in _LITERALS:
            return LiteralExpression(token.value)
        raise self._error("Expected a literal value.")

    def parse_argument_list(self) -> list[Expression]:
        """Parse comma-separated arguments.

        An empty list leaves the closing ')' in place; a non-empty one consumes it.
        """
        if self._check(TokenType.RPAREN):
            return []

        args = [self.parse_expression()]
        while self._match(TokenType.COMMA):
            args.append(self.parse_expression())

        self._expect(TokenType.RPAREN, "Expected ')' after argument list")
        return args

    # Types

    def parse_type(self) -> Type:
        """Parse a built-in type (optionally an array of it) or a class type."""
        if self._check(*_BUILTIN_TYPES):
            base = self._parse_primitive_type()
            # Array types are only allowed for built-in types.
            if self._match(TokenType.LBRACKET):
                self._expect(TokenType.RBRACKET, "Expected ']' after '[' in array type")
                return ArrayType(base)
            return base

        if self._check(TokenType.IDENTIFIER):
            from .nodes import ObjectType

            return ObjectType(self._advance().value)

        raise self._error("Expected type")

    def _parse_primitive_type(self) -> Type:
        if self._match(TokenType.VOID):
            return VoidType()

        if self._match(TokenType.LOGICAL):
            self._expect(TokenType.LESS, "Expected '<' after 'logical'")
            if not self._check(TokenType.IDENTIFIER):
                raise self._error("Expected code identifier inside logical<>")
            code = self._advance().value
            self._expect(TokenType.GREATER, "Expected '>' after code identifier")
            return LogicalType(code)

        if self._check(*PRIMITIVE_TYPES):
            return PrimitiveType(self._advance().value)

        raise self._error("Expected primitive type")