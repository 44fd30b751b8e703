import pytest

from bloch.errors import BlochRuntimeError, LexerError
from bloch.lexer import Lexer, tokenize
from bloch.tokens import Token, TokenType


def kinds(source):
    return [tok.type for tok in tokenize(source)]


def test_identifiers():
    tokens = Lexer("hello world").tokenize()
    assert len(tokens) >= 3
    assert tokens[0].type is TokenType.IDENTIFIER
    assert tokens[0].value == "hello"
    assert tokens[1].type is TokenType.IDENTIFIER
    assert tokens[1].value == "world"
    assert tokens[-1].type is TokenType.EOF


def test_integer_literal():
    tokens = Lexer("12345").tokenize()
    assert len(tokens) == 2
    assert tokens[0].type is TokenType.INTEGER_LITERAL
    assert tokens[0].value == "12345"


def test_float_literal():
    tokens = Lexer("3.14f").tokenize()
    assert len(tokens) == 2
    assert tokens[0].type is TokenType.FLOAT_LITERAL
    assert tokens[0].value == "3.14f"


def test_keyword_detection():
    tokens = Lexer("int float return").tokenize()
    assert tokens[0].type is TokenType.INT
    assert tokens[1].type is TokenType.FLOAT
    assert tokens[2].type is TokenType.RETURN


def test_logical_keyword():
    tokens = Lexer("logical").tokenize()
    assert len(tokens) == 2
    assert tokens[0].type is TokenType.LOGICAL
    assert tokens[0].value == "logical"


def test_operators():
    tokens = Lexer("-> + - * / ;").tokenize()
    assert [t.type for t in tokens[:6]] == [
        TokenType.ARROW,
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.STAR,
        TokenType.SLASH,
        TokenType.SEMICOLON,
    ]


def test_string_literal():
    tokens = Lexer('"hello"').tokenize()
    assert tokens[0].type is TokenType.STRING_LITERAL
    assert tokens[0].value == '"hello"'


def test_char_literal():
    tokens = Lexer("'a'").tokenize()
    assert tokens[0].type is TokenType.CHAR_LITERAL
    assert tokens[0].value == "'a'"


def test_unterminated_string_throws():
    with pytest.raises(BlochRuntimeError):
        Lexer('"hello').tokenize()


def test_unterminated_char_throws():
    with pytest.raises(BlochRuntimeError):
        Lexer("'a").tokenize()


def test_malformed_float_throws():
    with pytest.raises(BlochRuntimeError):
        Lexer("3.14").tokenize()


def test_line_and_column_tracking():
    tokens = Lexer("a\nb").tokenize()
    assert len(tokens) >= 3
    assert (tokens[0].line, tokens[0].column) == (1, 1)
    assert (tokens[1].line, tokens[1].column) == (2, 1)


def test_skips_comments():
    tokens = Lexer("int x // comment\ny").tokenize()
    assert len(tokens) >= 4
    assert tokens[0].type is TokenType.INT
    assert tokens[1].type is TokenType.IDENTIFIER
    assert tokens[1].value == "x"
    assert tokens[2].type is TokenType.IDENTIFIER
    assert tokens[2].value == "y"


def test_empty_source_gives_only_eof():
    assert tokenize("") == [Token(TokenType.EOF, "", 1, 1)]


def test_comment_only_source():
    assert kinds("// nothing here") == [TokenType.EOF]


def test_error_is_lexer_error_with_position():
    with pytest.raises(LexerError) as info:
        tokenize('"hello')
    assert info.value.line == 1
    assert info.value.column == 7
    assert "Unterminated string literal" in str(info.value)


def test_float_error_message():
    with pytest.raises(LexerError) as info:
        tokenize("1.5")
    assert info.value.message == "Float literal must end with 'f'"


def test_comparison_operators():
    tokens = tokenize(">= > <= <")
    assert [(t.type, t.value) for t in tokens[:4]] == [
        (TokenType.GREATER_EQUAL, ">="),
        (TokenType.GREATER, ">"),
        (TokenType.LESS_EQUAL, "<="),
        (TokenType.LESS, "<"),
    ]


def test_punctuation():
    assert kinds("= % , . : @ ( ) { } [ ]")[:-1] == [
        TokenType.EQUALS,
        TokenType.PERCENT,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.COLON,
        TokenType.AT,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.LBRACKET,
        TokenType.RBRACKET,
    ]


def test_annotation_keywords():
    assert kinds("quantum adjoint state members methods echo")[:-1] == [
        TokenType.QUANTUM,
        TokenType.ADJOINT,
        TokenType.STATE,
        TokenType.MEMBERS,
        TokenType.METHODS,
        TokenType.ECHO,
    ]


def test_unknown_character():
    tokens = tokenize("#")
    assert tokens[0] == Token(TokenType.UNKNOWN, "#", 1, 1)


def test_identifier_with_underscore_and_digits():
    tokens = tokenize("_q0 x1")
    assert [(t.type, t.value) for t in tokens[:2]] == [
        (TokenType.IDENTIFIER, "_q0"),
        (TokenType.IDENTIFIER, "x1"),
    ]


def test_columns_on_one_line():
    tokens = tokenize("int x = 10;")
    assert [t.column for t in tokens[:5]] == [1, 5, 7, 9, 11]


def test_tokenize_is_repeatable():
    lexer = Lexer("int x;")
    first = lexer.tokenize()
    second = lexer.tokenize()
    expected = [TokenType.INT, TokenType.IDENTIFIER, TokenType.SEMICOLON, TokenType.EOF]
    assert [t.type for t in first] == expected
    assert [t.type for t in second] == expected
    assert first == second


def test_declaration_stream():
    assert kinds('@state("+") qubit q;') == [
        TokenType.AT,
        TokenType.STATE,
        TokenType.LPAREN,
        TokenType.STRING_LITERAL,
        TokenType.RPAREN,
        TokenType.QUBIT,
        TokenType.IDENTIFIER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]