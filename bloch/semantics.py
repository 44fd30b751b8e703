"""Scope and declaration checks over a parsed Bloch program."""

from __future__ import annotations

from collections import Counter

from .errors import SemanticError
from .nodes import (
    AnnotationNode,
    ArrayType,
    AssignmentExpression,
    AssignmentStatement,
    ASTVisitor,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    ClassDeclaration,
    ConstructorCallExpression,
    EchoStatement,
    ExpressionStatement,
    ForStatement,
    FunctionDeclaration,
    IfStatement,
    ImportStatement,
    IndexExpression,
    LiteralExpression,
    LogicalType,
    MeasureExpression,
    MeasureStatement,
    MemberAccessExpression,
    Node,
    ObjectType,
    Parameter,
    ParenthesizedExpression,
    PrimitiveType,
    Program,
    ResetStatement,
    ReturnStatement,
    Type,
    UnaryExpression,
    VariableDeclaration,
    VariableExpression,
    VoidType,
)


class SemanticAnalyser(ASTVisitor):
    """Checks declarations, scoping, final assignment and return types.

    While walking a program it also records the imported module names in
    ``imports`` and how many leaf nodes of each kind it met in ``leaf_counts``.
    """

    def __init__(self) -> None:
        # Each scope maps a variable name to whether it is final.
        self._scopes: list[dict[str, bool]] = []
        self._return_type: Type | None = None
        self.imports: list[str] = []
        self.leaf_counts: Counter[str] = Counter()

    def analyse(self, program: Program) -> None:
        """Walk the program, raising SemanticError on the first problem found."""
        self._scopes = [{}]
        self._return_type = None
        self.imports = []
        self.leaf_counts = Counter()
        try:
            program.accept(self)
        finally:
            self._scopes = []
            self._return_type = None

    # Scope handling

    def _begin_scope(self) -> None:
        self._scopes.append({})

    def _end_scope(self) -> None:
        self._scopes.pop()

    def _declare(self, name: str, is_final: bool) -> None:
        if self._scopes:
            self._scopes[-1][name] = is_final

    def _is_declared(self, name: str) -> bool:
        return any(name in scope for scope in reversed(self._scopes))

    def _is_final(self, name: str) -> bool:
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        return False

    def _visit_optional(self, *nodes: Node | None) -> None:
        for node in nodes:
            if node is not None:
                node.accept(self)

    def _count_leaf(self, node: Node) -> None:
        self.leaf_counts[type(node).__name__] += 1

    def _check_assignable(self, name: str, node: Node) -> None:
        if not self._is_declared(name):
            raise SemanticError(node.line, node.column, f"Variable '{name}' not declared")
        if self._is_final(name):
            raise SemanticError(
                node.line, node.column, f"Cannot assign to final variable '{name}'"
            )

    # Statements

    def visit_import_statement(self, node: ImportStatement) -> None:
        self.imports.append(node.module)

    def visit_variable_declaration(self, node: VariableDeclaration) -> None:
        if self._is_declared(node.name):
            raise SemanticError(node.line, node.column, f"Variable '{node.name}' redeclared")
        self._declare(node.name, node.is_final)
        self._visit_optional(node.initializer)

    def visit_block_statement(self, node: BlockStatement) -> None:
        self._begin_scope()
        for stmt in node.statements:
            stmt.accept(self)
        self._end_scope()

    def visit_expression_statement(self, node: ExpressionStatement) -> None:
        self._visit_optional(node.expression)

    def visit_return_statement(self, node: ReturnStatement) -> None:
        is_void = isinstance(self._return_type, VoidType)
        if node.value is not None and is_void:
            raise SemanticError(node.line, node.column, "Void function cannot return a value")
        if node.value is None and not is_void:
            raise SemanticError(
                node.line, node.column, "Non-void function must return a value"
            )
        self._visit_optional(node.value)

    def visit_if_statement(self, node: IfStatement) -> None:
        self._visit_optional(node.condition, node.then_branch, node.else_branch)

    def visit_for_statement(self, node: ForStatement) -> None:
        self._begin_scope()
        self._visit_optional(node.initializer, node.condition, node.increment, node.body)
        self._end_scope()

    def visit_echo_statement(self, node: EchoStatement) -> None:
        self._visit_optional(node.value)

    def visit_reset_statement(self, node: ResetStatement) -> None:
        self._visit_optional(node.target)

    def visit_measure_statement(self, node: MeasureStatement) -> None:
        self._visit_optional(node.qubit)

    def visit_assignment_statement(self, node: AssignmentStatement) -> None:
        self._check_assignable(node.name, node)
        self._visit_optional(node.value)

    # Expressions

    def visit_binary_expression(self, node: BinaryExpression) -> None:
        self._visit_optional(node.left, node.right)

    def visit_unary_expression(self, node: UnaryExpression) -> None:
        self._visit_optional(node.right)

    def visit_literal_expression(self, node: LiteralExpression) -> None:
        self._count_leaf(node)

    def visit_variable_expression(self, node: VariableExpression) -> None:
        if not self._is_declared(node.name):
            raise SemanticError(node.line, node.column, f"Variable '{node.name}' not declared")

    def visit_call_expression(self, node: CallExpression) -> None:
        self._visit_optional(node.callee, *node.arguments)

    def visit_index_expression(self, node: IndexExpression) -> None:
        self._visit_optional(node.collection, node.index)

    def visit_parenthesized_expression(self, node: ParenthesizedExpression) -> None:
        self._visit_optional(node.expression)

    def visit_measure_expression(self, node: MeasureExpression) -> None:
        self._visit_optional(node.qubit)

    def visit_assignment_expression(self, node: AssignmentExpression) -> None:
        self._check_assignable(node.name, node)
        self._visit_optional(node.value)

    def visit_constructor_call_expression(self, node: ConstructorCallExpression) -> None:
        self._visit_optional(*node.arguments)

    def visit_member_access_expression(self, node: MemberAccessExpression) -> None:
        self._visit_optional(node.object)

    # Types

    def visit_primitive_type(self, node: PrimitiveType) -> None:
        self._count_leaf(node)

    def visit_logical_type(self, node: LogicalType) -> None:
        self._count_leaf(node)

    def visit_array_type(self, node: ArrayType) -> None:
        self._visit_optional(node.element_type)

    def visit_void_type(self, node: VoidType) -> None:
        self._count_leaf(node)

    def visit_object_type(self, node: ObjectType) -> None:
        self._count_leaf(node)

    # Declarations

    def visit_parameter(self, node: Parameter) -> None:
        self._visit_optional(node.type)

    def visit_annotation_node(self, node: AnnotationNode) -> None:
        self._count_leaf(node)

    def visit_function_declaration(self, node: FunctionDeclaration) -> None:
        if node.has_quantum_annotation:
            return_type = node.return_type
            valid = isinstance(return_type, VoidType) or (
                isinstance(return_type, PrimitiveType) and return_type.name == "bit"
            )
            if not valid:
                raise SemanticError(
                    node.line, node.column, "@quantum functions must return 'bit' or 'void'"
                )

        previous_return = self._return_type
        self._return_type = node.return_type

        self._begin_scope()
        for param in node.params:
            if self._is_declared(param.name):
                raise SemanticError(
                    param.line, param.column, f"Parameter '{param.name}' redeclared"
                )
            self._declare(param.name, False)
            param.accept(self)
        self._visit_optional(node.body)
        self._end_scope()

        self._return_type = previous_return

    def visit_class_declaration(self, node: ClassDeclaration) -> None:
        for member in node.members:
            member.accept(self)
        for method in node.methods:
            method.accept(self)

    def visit_program(self, node: Program) -> None:
        for item in (*node.imports, *node.functions, *node.classes, *node.statements):
            item.accept(self)


def analyse(program: Program) -> None:
    """Run a fresh SemanticAnalyser over ``program``."""
    SemanticAnalyser().analyse(program)