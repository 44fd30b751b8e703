import dataclasses

import pytest

from bloch.tokens import Token, TokenType


def test_tokens_with_same_fields_are_equal():
    a = Token(TokenType.INT, "int", 1, 1)
    b = Token(TokenType.INT, "int", 1, 1)
    assert a == b
    assert hash(a) == hash(b)


def test_tokens_differing_in_type_are_unequal():
    a = Token(TokenType.IDENTIFIER, "int", 1, 1)
    b = Token(TokenType.INT, "int", 1, 1)
    assert (a == b) is False


def test_token_is_immutable():
    tok = Token(TokenType.IDENTIFIER, "x", 2, 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.value = "y"
    assert tok.value == "x"


def test_replace_changes_only_given_field():
    tok = Token(TokenType.IDENTIFIER, "x", 2, 5)
    moved = dataclasses.replace(tok, column=9)
    assert moved.type is TokenType.IDENTIFIER
    assert moved.value == "x"
    assert moved.line == 2
    assert moved.column == 9


def test_astuple_round_trip():
    tok = Token(TokenType.ARROW, "->", 3, 4)
    assert Token(*dataclasses.astuple(tok)) == tok


def test_token_type_lookup_by_name():
    tok = Token(TokenType["EOF"], "", 1, 1)
    assert tok.type is TokenType.EOF
    assert tok == Token(TokenType.EOF, "", 1, 1)
    with pytest.raises(KeyError):
        Token(TokenType["NOT_A_KIND"], "", 1, 1)