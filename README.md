# bloch

The front end of Bloch, a general purpose quantum programming language.
It has three parts. A lexer turns source text into tokens. A parser builds
an abstract syntax tree from those tokens. A semantic analyser checks
scoping, `final` variables and return types.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
bloch
```

This prints the language banner, with no trailing newline, and exits with
status 0. `bloch --help` shows the usage. The command does not read any
source files.

## Library use

### Tokenizing

```python
from bloch.lexer import tokenize
from bloch.tokens import TokenType

tokens = tokenize("int x = 10;")
assert tokens[0].type is TokenType.INT
assert tokens[-1].type is TokenType.EOF
```

`tokenize(source)` is shorthand for `Lexer(source).tokenize()`. Each
`Token` is a frozen dataclass with the fields `type` (a `TokenType`),
`value`, `line` and `column`. Lexing follows these rules:

- Float literals must end in `f`, as in `3.14f`.
- String and char literals keep their quotes in `value`.
- Comments start with `//` and run to the end of the line.
- A character that is not recognised becomes a `TokenType.UNKNOWN` token.

### Parsing

```python
from bloch.parser import parse

program = parse("""
import math;

@quantum function flip() -> bit {
    @state("+") qubit q;
    return measure q;
}

class Counter {
    @members("private"):
        int count = 0;
    @methods:
        function *Counter() -> void { }
}
""")

print([imp.module for imp in program.imports])   # ['math']
print([fn.name for fn in program.functions])     # ['flip']
print([cls.name for cls in program.classes])     # ['Counter']
```

`parse(source)` tokenizes the source and runs `Parser(tokens).parse()`.
The result is a `Program` node from `bloch.nodes`. It holds `imports`,
`functions`, `classes` and top-level `statements`.

`Parser` builds on `bloch.expressions.ExpressionParser`. It can also parse
pieces of a program on their own:

- `parse_statement()`
- `parse_expression()`
- `parse_type()`
- `parse_argument_list()`
- `parse_literal()`
- `parse_parameter_list()`

### Walking the tree

The nodes in `bloch.nodes` are dataclasses. Each one has a `line` and a
`column`. `node.accept(visitor)` calls the visitor's
`visit_<node_kind>` method, for example `visit_binary_expression` or
`visit_program`. For a subclass of `ASTVisitor`, `visitor.visit(node)`
does the same.

```python
from bloch.nodes import ASTVisitor
from bloch.parser import parse

class Names(ASTVisitor):
    def visit_program(self, node):
        return [stmt.name for stmt in node.statements]

print(Names().visit(parse("int a; int b;")))     # ['a', 'b']
```

### Semantic analysis

```python
from bloch.parser import parse
from bloch.semantics import analyse
from bloch.errors import SemanticError

analyse(parse("int x; x = 5;"))           # fine

try:
    analyse(parse("final int x = 1; x = 2;"))
except SemanticError as err:
    print(err.line, err.column)
    print(err)
```

The analyser reports the following:

- undeclared variables;
- variables and parameters that are declared twice, including in an inner scope;
- assignment to a `final` variable;
- a `return` that does not match the function's return type;
- an `@quantum` function whose return type is not `bit` or `void`.

`analyse(program)` runs a fresh `SemanticAnalyser`. You can also create a
`SemanticAnalyser` yourself and call `analyse`. After the run, its
`imports` attribute lists the imported module names. Its `leaf_counts`
attribute is a `Counter` that records how many literal, type and
annotation nodes of each kind the analyser met.

### Errors

Every problem is raised as a subclass of `bloch.errors.BlochRuntimeError`:
`LexerError`, `ParserError` or `SemanticError`. Each error carries the
`line`, `column` and `message` of the problem. Its text has this form:

```
[Bloch Semantic Error]
Line 1, Col 1: Variable 'x' not declared
```

## What it does not do

This package checks Bloch programs but does not run them. It has no
interpreter, no quantum simulator and no code generation. The analyser
checks scopes and declarations only. It does not check types beyond the
return-type rules above, and it does not resolve imports or class members.