"""Tests for the PFX lexer."""
from pfxlang.lexer import (
    IdentifierToken,
    KeywordToken,
    LiteralToken,
    SeparatorToken,
    classify,
    tokenize,
)
from pfxlang.operations import Op
from pfxlang.values import BoolValue, IntValue


def test_tokenize_let_statement():
    tokens = tokenize("let x 5 ;")
    assert tokens == [
        KeywordToken(Op.LET, 1),
        IdentifierToken("x", 1),
        LiteralToken(IntValue(5), 1),
        SeparatorToken(";", 1),
    ]


def test_separator_attached_to_operand_is_split_off():
    tokens = tokenize("println x;")
    assert [t.type for t in tokens] == ["KEYWORD", "IDENTIFIER", "SEPARATOR"]


def test_keywords_win_over_identifiers():
    for op in Op:
        token = classify(op.value)
        assert token == KeywordToken(op)


def test_boolean_literals_win_over_identifiers():
    assert classify("true") == LiteralToken(BoolValue(True))
    assert classify("false") == LiteralToken(BoolValue(False))
    assert classify("True") == IdentifierToken("True")


def test_identifier_shapes():
    assert classify("_count") == IdentifierToken("_count")
    assert classify("x1_y") == IdentifierToken("x1_y")
    assert classify("printer") == IdentifierToken("printer")
    assert classify("1abc") is None
    assert classify("__x") is None
    assert classify("_") is None


def test_unrecognized_lexemes_are_dropped():
    tokens = tokenize("let @x 5 + ;")
    assert [t.type for t in tokens] == ["KEYWORD", "LITERAL", "SEPARATOR"]


def test_empty_and_comment_only_input():
    assert tokenize("") == []
    assert tokenize("   \n\t\n") == []
    assert tokenize("// nothing here\n    // nor here\n") == []


def test_comment_lines_contribute_nothing():
    tokens = tokenize("// println 2 ;\nprintln 1 ;\n")
    assert tokens == [
        KeywordToken(Op.PRINTLN, 2),
        LiteralToken(IntValue(1), 2),
        SeparatorToken(";", 2),
    ]


def test_comment_marker_mid_line_is_not_a_comment():
    tokens = tokenize("println 1 ; // trailing")
    assert [t.type for t in tokens] == ["KEYWORD", "LITERAL", "SEPARATOR", "IDENTIFIER"]


def test_tokens_span_lines_in_order():
    tokens = tokenize("let\n  x\n\n 7 ;")
    assert [t.line for t in tokens] == [1, 2, 4, 4]
    assert isinstance(tokens[2], LiteralToken)
    assert tokens[2].value == IntValue(7)


def test_first_line_offset():
    tokens = tokenize("println 1 ;", first_line=10)
    assert {t.line for t in tokens} == {10}
