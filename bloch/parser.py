"""Recursive-descent parser producing a syntax tree for a Bloch program."""

from __future__ import annotations

from .expressions import PRIMITIVE_TYPES, ExpressionParser
from .lexer import tokenize
from .nodes import (
    AnnotationNode,
    AssignmentStatement,
    BlockStatement,
    ClassDeclaration,
    EchoStatement,
    ExpressionStatement,
    ForStatement,
    FunctionDeclaration,
    IfStatement,
    ImportStatement,
    MeasureStatement,
    Parameter,
    Program,
    ResetStatement,
    ReturnStatement,
    Statement,
    Type,
    VariableDeclaration,
)
from .tokens import TokenType

_FUNCTION_ANNOTATIONS = (TokenType.QUANTUM, TokenType.ADJOINT)
_VARIABLE_ANNOTATIONS = (TokenType.QUANTUM, TokenType.ADJOINT, TokenType.STATE)
_ACCESS_MODIFIERS = ('"public"', '"private"')


class Parser(ExpressionParser):
    """Parses a whole token list into a :class:`Program`."""

    def parse(self) -> Program:
        """Parse the token list into imports, functions, classes and statements."""
        program = Program()

        while not self._is_at_end():
            if self._check(TokenType.IMPORT):
                program.imports.append(self._parse_import())
            elif self._check(TokenType.FUNCTION) or self._check_function_annotation():
                program.functions.append(self._parse_function())
            elif self._check(TokenType.CLASS):
                program.classes.append(self._parse_class())
            else:
                program.statements.append(self.parse_statement())

        return program

    def _check_function_annotation(self) -> bool:
        if not self._check(TokenType.AT):
            return False
        return any(self._check_next(kind) for kind in _FUNCTION_ANNOTATIONS)

    # Top level

    def _parse_import(self) -> ImportStatement:
        self._expect(TokenType.IMPORT, "Expected 'import' keyword")
        if not self._check(TokenType.IDENTIFIER):
            raise self._error("Expected module name after 'import'")
        stmt = ImportStatement(module=self._advance().value)
        self._expect(TokenType.SEMICOLON, "Expected ';' after import statement")
        return stmt

    def _parse_function(self) -> FunctionDeclaration:
        func = FunctionDeclaration()

        while self._check(TokenType.AT):
            self._advance()
            if not self._match(*_FUNCTION_ANNOTATIONS):
                raise self._error("Expected annotation name after '@'")
            func.annotations.append(AnnotationNode(self._previous().value, ""))
            func.has_quantum_annotation = True

        self._expect(TokenType.FUNCTION, "Expected 'function' keyword")

        if self._match(TokenType.STAR):
            func.is_constructor = True
            missing_name = "Expected constructor name after '*'"
        else:
            func.is_constructor = False
            missing_name = "Expected function name after 'function' keyword"

        if not self._check(TokenType.IDENTIFIER):
            raise self._error(missing_name)
        name_token = self._advance()
        func.name = name_token.value
        func.line = name_token.line
        func.column = name_token.column

        self._expect(TokenType.LPAREN, "Expected '(' after function name")
        while not self._check(TokenType.RPAREN):
            param_type = self.parse_type()
            if not self._check(TokenType.IDENTIFIER):
                raise self._error("Expected parameter name")
            param_token = self._advance()
            func.params.append(
                Parameter(
                    name=param_token.value,
                    type=param_type,
                    line=param_token.line,
                    column=param_token.column,
                )
            )
            if not self._match(TokenType.COMMA):
                break
        self._expect(TokenType.RPAREN, "Expected ')' after parameters")

        self._expect(TokenType.ARROW, "Expected '->' before return type")
        func.return_type = self.parse_type()
        func.body = self._parse_block()
        return func

    def _parse_class(self) -> ClassDeclaration:
        self._expect(TokenType.CLASS, "Expected 'class' keyword")

        if not self._check(TokenType.IDENTIFIER):
            raise self._error("Expected class name after 'class'")
        clazz = ClassDeclaration(name=self._advance().value)

        self._expect(TokenType.LBRACE, "Expected '{' to start class body")

        while not self._check(TokenType.RBRACE) and not self._is_at_end():
            if self._check(TokenType.AT) and self._check_next(TokenType.MEMBERS):
                self._advance()
                self._advance()
                access = self._parse_access_modifier()
                while not self._check(TokenType.AT) and not self._check(TokenType.RBRACE):
                    is_final = self._match(TokenType.FINAL)
                    member = self._parse_variable_declaration(None, is_final)
                    member.access = access
                    clazz.members.append(member)
            elif self._check(TokenType.AT) and self._check_next(TokenType.METHODS):
                self._advance()
                self._advance()
                self._expect(TokenType.COLON, "Expected ':' after @methods")
                while not self._check(TokenType.AT) and not self._check(TokenType.RBRACE):
                    clazz.methods.append(self._parse_function())
            else:
                raise self._error("Only @members(...) or @methods are allowed inside class body")

        self._expect(TokenType.RBRACE, "Expected '}' to end class body")
        return clazz

    def _parse_access_modifier(self) -> str:
        self._expect(TokenType.LPAREN, "Expected '(' after @members")
        if not self._check(TokenType.STRING_LITERAL):
            raise self._error("Expected access modifier string in @members")
        modifier = self._advance().value
        if modifier not in _ACCESS_MODIFIERS:
            raise self._error('Access modifier must be "public" or "private"')
        self._expect(TokenType.RPAREN, "Expected ')' after access modifier")
        self._expect(TokenType.COLON, "Expected ':' after @members(...)")
        return modifier[1:-1]

    # Declarations

    def _parse_variable_declaration(
        self, pre_parsed_type: Type | None, is_final: bool
    ) -> VariableDeclaration:
        var = VariableDeclaration(is_final=is_final)
        var.annotations = self._parse_annotations()
        var.var_type = pre_parsed_type if pre_parsed_type is not None else self.parse_type()

        if not self._check(TokenType.IDENTIFIER):
            raise self._error("Expected variable name")
        name_token = self._advance()
        var.name = name_token.value
        var.line = name_token.line
        var.column = name_token.column

        if self._match(TokenType.EQUALS):
            var.initializer = self.parse_expression()

        self._expect(TokenType.SEMICOLON, "Expected ';' after variable declaration")
        return var

    def _parse_annotation(self) -> AnnotationNode:
        self._expect(TokenType.AT, "Expected '@' to begin annotation")
        if not self._check(*_VARIABLE_ANNOTATIONS):
            raise self._error("Unknown annotation")

        annotation = AnnotationNode(name=self._advance().value)
        if annotation.name == "state":
            self._expect(TokenType.LPAREN, "Expected '(' after @state")
            if not self._check(TokenType.CHAR_LITERAL, TokenType.STRING_LITERAL):
                raise self._error("Expected character or string inside @state(...)")
            annotation.value = self._advance().value
            self._expect(TokenType.RPAREN, "Expected ')' after @state argument")
        return annotation

    def _parse_annotations(self) -> list[AnnotationNode]:
        annotations: list[AnnotationNode] = []
        while self._check(TokenType.AT):
            annotations.append(self._parse_annotation())
        return annotations

    # Statements

    def parse_statement(self) -> Statement:
        """Parse a single statement, including blocks and declarations."""
        if self._check(TokenType.LBRACE):
            return self._parse_block()

        is_final = self._match(TokenType.FINAL)

        # A user-defined type declaration looks like: Identifier Identifier
        if self._check(TokenType.IDENTIFIER) and self._check_next(TokenType.IDENTIFIER):
            declared_type = self.parse_type()
            return self._parse_variable_declaration(declared_type, is_final)

        if self._check(TokenType.AT, *PRIMITIVE_TYPES):
            return self._parse_variable_declaration(None, is_final)

        if self._match(TokenType.RETURN):
            return self._parse_return()
        if self._match(TokenType.IF):
            return self._parse_if()
        if self._match(TokenType.FOR):
            return self._parse_for()
        if self._match(TokenType.ECHO):
            return self._parse_echo()
        if self._match(TokenType.RESET):
            return self._parse_reset()
        if self._match(TokenType.MEASURE):
            return self._parse_measure()

        if self._check(TokenType.IDENTIFIER) and self._check_next(TokenType.EQUALS):
            return self._parse_assignment()

        return self._parse_expression_statement()

    def _parse_block(self) -> BlockStatement:
        lbrace = self._expect(TokenType.LBRACE, "Expected '{' to start block")
        block = BlockStatement(line=lbrace.line, column=lbrace.column)
        while not self._check(TokenType.RBRACE) and not self._is_at_end():
            block.statements.append(self.parse_statement())
        self._expect(TokenType.RBRACE, "Expected '}' to end block")
        return block

    def _parse_return(self) -> ReturnStatement:
        keyword = self._previous()
        stmt = ReturnStatement(line=keyword.line, column=keyword.column)
        if not self._check(TokenType.SEMICOLON):
            stmt.value = self.parse_expression()
        self._expect(TokenType.SEMICOLON, "Expected ';' after return value")
        return stmt

    def _parse_if(self) -> IfStatement:
        self._expect(TokenType.LPAREN, "Expected '(' after 'if'")
        condition = self.parse_expression()
        self._expect(TokenType.RPAREN, "Expected ')' after condition")
        then_branch = self._parse_block()
        else_branch = self._parse_block() if self._match(TokenType.ELSE) else None
        return IfStatement(condition=condition, then_branch=then_branch, else_branch=else_branch)

    def _parse_for(self) -> ForStatement:
        self._expect(TokenType.LPAREN, "Expected '(' after 'for'")

        initializer: Statement | None = None
        if not self._check(TokenType.SEMICOLON):
            is_final = self._match(TokenType.FINAL)
            if self._check(*PRIMITIVE_TYPES):
                initializer = self._parse_variable_declaration(None, is_final)
            else:
                if is_final:
                    raise self._error("Expected variable type after 'final'")
                initializer = self._parse_expression_statement()
        else:
            self._advance()

        condition = self.parse_expression()
        self._expect(TokenType.SEMICOLON, "Expected ';' after loop condition")
        increment = self.parse_expression()
        self._expect(TokenType.RPAREN, "Expected ')' after for clause")
        body = self._parse_block()

        return ForStatement(
            initializer=initializer, condition=condition, increment=increment, body=body
        )

    def _parse_echo(self) -> EchoStatement:
        self._expect(TokenType.LPAREN, "Expected '(' after 'echo'")
        value = self.parse_expression()
        self._expect(TokenType.RPAREN, "Expected ')' after echo argument")
        self._expect(TokenType.SEMICOLON, "Expected ';' after echo statement")
        return EchoStatement(value=value)

    def _parse_reset(self) -> ResetStatement:
        target = self.parse_expression()
        self._expect(TokenType.SEMICOLON, "Expected ';' after reset target")
        return ResetStatement(target=target)

    def _parse_measure(self) -> MeasureStatement:
        qubit = self.parse_expression()
        self._expect(TokenType.SEMICOLON, "Expected ';' after measure target")
        return MeasureStatement(qubit=qubit)

    def _parse_assignment(self) -> AssignmentStatement:
        if not self._check(TokenType.IDENTIFIER):
            raise self._error("Expected variable name in assignment")
        name_token = self._advance()
        self._expect(TokenType.EQUALS, "Expected '=' in assignment")
        stmt = AssignmentStatement(
            name=name_token.value, line=name_token.line, column=name_token.column
        )
        stmt.value = self.parse_expression()
        self._expect(TokenType.SEMICOLON, "Expected ';' after assignment")
        return stmt

    def _parse_expression_statement(self) -> ExpressionStatement:
        expr = self.parse_expression()
        self._expect(TokenType.SEMICOLON, "Expected ';' after expression")
        return ExpressionStatement(expression=expr)

    # Parameters

    def parse_parameter_list(self) -> list[Parameter]:
        """Parse typed parameters up to, but not including, the closing ')'."""
        parameters: list[Parameter] = []
        while not self._check(TokenType.RPAREN):
            param_type = self.parse_type()
            if not self._check(TokenType.IDENTIFIER):
                raise self._error("Expected parameter name.")
            parameters.append(Parameter(name=self._advance().value, type=param_type))
            if not self._match(TokenType.COMMA):
                break
        return parameters


def parse(source: str) -> Program:
    """Tokenize and parse a whole source string."""
    return Parser(tokenize(source)).parse()