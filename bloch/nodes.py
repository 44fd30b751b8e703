"""Syntax tree nodes for Bloch programs and the visitor that walks them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass
class Node:
    """Base of every syntax tree node; carries a source position."""

    _visit_method: ClassVar[str | None] = None

    line: int = field(default=0, kw_only=True)
    column: int = field(default=0, kw_only=True)

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._visit_method = None if abstract else f"visit_{_snake_case(cls.__name__)}"

    def accept(self, visitor: ASTVisitor) -> Any:
        """Call the visitor method for this node's kind and return its result."""
        method_name = type(self)._visit_method
        if method_name is None:
            raise TypeError(f"{type(self).__name__} is an abstract node and cannot be visited")
        method = getattr(visitor, method_name, None)
        if method is None:
            raise TypeError(
                f"{type(visitor).__name__} has no {method_name} for {type(self).__name__}"
            )
        return method(self)


@dataclass
class Statement(Node, abstract=True):
    """Base of statement nodes."""


@dataclass
class Expression(Node, abstract=True):
    """Base of expression nodes."""


@dataclass
class Type(Node, abstract=True):
    """Base of type nodes."""


# Statements


@dataclass
class ImportStatement(Statement):
    module: str = ""


@dataclass
class VariableDeclaration(Statement):
    name: str = ""
    access: str = ""
    var_type: Type | None = None
    initializer: Expression | None = None
    annotations: list[AnnotationNode] = field(default_factory=list)
    is_final: bool = False


@dataclass
class BlockStatement(Statement):
    statements: list[Statement] = field(default_factory=list)


@dataclass
class ExpressionStatement(Statement):
    expression: Expression | None = None


@dataclass
class ReturnStatement(Statement):
    value: Expression | None = None


@dataclass
class IfStatement(Statement):
    condition: Expression | None = None
    then_branch: Statement | None = None
    else_branch: Statement | None = None


@dataclass
class ForStatement(Statement):
    initializer: Statement | None = None
    condition: Expression | None = None
    increment: Expression | None = None
    body: Statement | None = None


@dataclass
class EchoStatement(Statement):
    value: Expression | None = None


@dataclass
class ResetStatement(Statement):
    target: Expression | None = None


@dataclass
class MeasureStatement(Statement):
    qubit: Expression | None = None


@dataclass
class AssignmentStatement(Statement):
    name: str = ""
    value: Expression | None = None


# Expressions


@dataclass
class BinaryExpression(Expression):
    op: str
    left: Expression | None
    right: Expression | None


@dataclass
class UnaryExpression(Expression):
    op: str
    right: Expression | None


@dataclass
class LiteralExpression(Expression):
    value: str


@dataclass
class VariableExpression(Expression):
    name: str


@dataclass
class CallExpression(Expression):
    callee: Expression | None
    arguments: list[Expression] = field(default_factory=list)


@dataclass
class IndexExpression(Expression):
    collection: Expression | None = None
    index: Expression | None = None


@dataclass
class ParenthesizedExpression(Expression):
    expression: Expression | None


@dataclass
class MeasureExpression(Expression):
    qubit: Expression | None


@dataclass
class AssignmentExpression(Expression):
    name: str
    value: Expression | None


@dataclass
class ConstructorCallExpression(Expression):
    class_name: str
    arguments: list[Expression] = field(default_factory=list)


@dataclass
class MemberAccessExpression(Expression):
    object: Expression | None
    member: str


# Types


@dataclass
class PrimitiveType(Type):
    name: str


@dataclass
class LogicalType(Type):
    code: str


@dataclass
class ArrayType(Type):
    element_type: Type | None


@dataclass
class VoidType(Type):
    pass


@dataclass
class ObjectType(Type):
    class_name: str


# Declarations


@dataclass
class Parameter(Node):
    name: str = ""
    type: Type | None = None


@dataclass
class AnnotationNode(Node):
    name: str = ""
    value: str = ""


@dataclass
class FunctionDeclaration(Node):
    name: str = ""
    params: list[Parameter] = field(default_factory=list)
    return_type: Type | None = None
    body: BlockStatement | None = None
    annotations: list[AnnotationNode] = field(default_factory=list)
    has_quantum_annotation: bool = False
    is_constructor: bool = False


@dataclass
class ClassDeclaration(Node):
    name: str = ""
    members: list[VariableDeclaration] = field(default_factory=list)
    methods: list[FunctionDeclaration] = field(default_factory=list)


@dataclass
class Program(Node):
    imports: list[ImportStatement] = field(default_factory=list)
    functions: list[FunctionDeclaration] = field(default_factory=list)
    classes: list[ClassDeclaration] = field(default_factory=list)
    statements: list[Statement] = field(default_factory=list)


class ASTVisitor:
    """Base for tree walkers.

    Subclasses define ``visit_<node_kind>`` methods, for example
    ``visit_binary_expression`` or ``visit_program``.
    """

    def visit(self, node: Node) -> Any:
        """Dispatch ``node`` to the matching ``visit_*`` method."""
        return node.accept(self)