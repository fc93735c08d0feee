"""Lexer for PFX.

The lexer works line by line. Lines whose trimmed text starts with ``//``
are full-line comments and are dropped before anything else happens. Every
other line is cut into lexemes on runs of whitespace, with ``;`` always
standing as a lexeme of its own, and each lexeme is classified against the
token specification below. The first category whose pattern matches the
whole lexeme wins; a lexeme that matches nothing produces no token.

Tokens carry the line they came from so runtime errors can point at it.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass
from typing import Union

from pfxlang.operations import Op
from pfxlang.values import BoolValue, IntValue, Value, parse_int

COMMENT_MARKER = "//"
SEPARATOR = ";"


@dataclass(frozen=True)
class KeywordToken:
    """
    A statement keyword such as ``let`` or ``println``.
    """
    op: Op
    line: int = 0

    type = "KEYWORD"


@dataclass(frozen=True)
class IdentifierToken:
    """
    A variable name.
    """
    name: str
    line: int = 0

    type = "IDENTIFIER"


@dataclass(frozen=True)
class LiteralToken:
    """
    An integer or boolean literal carrying its value.
    """
    value: Value
    line: int = 0

    type = "LITERAL"


@dataclass(frozen=True)
class SeparatorToken:
    """
    The ``;`` statement terminator.
    """
    separator: str = SEPARATOR
    line: int = 0

    type = "SEPARATOR"


Token = Union[KeywordToken, IdentifierToken, LiteralToken, SeparatorToken]

# Order is precedence: the first pattern matching the whole lexeme wins.
token_specification: list[tuple[str, str]] = [
    ('KEYWORD',     '|'.join(op.value for op in Op)),
    ('INT',         r'\d+'),
    ('BOOL',        r'true|false'),
    ('IDENTIFIER',  r'_?[A-Za-z]+[A-Za-z0-9_]*'),
    ('SEPARATOR',   re.escape(SEPARATOR)),
]

tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.ASCII,
)
lexeme_regex = re.compile(rf'{re.escape(SEPARATOR)}|[^\s{re.escape(SEPARATOR)}]+')


def strip_comments(code: str, first_line: int = 1) -> list[tuple[int, str]]:
    """
    Drop full-line comments.

    Parameters:
        code (str): The script source.
        first_line (int): Number given to the first line of ``code``.

    Returns:
        list[tuple[int, str]]: ``(line_number, trimmed_text)`` for every
        line that is not a comment.
    """
    kept = []
    for line_num, line in enumerate(code.splitlines(), start=first_line):
        text = line.strip()
        if text.startswith(COMMENT_MARKER):
            continue
        kept.append((line_num, text))
    return kept


def classify(lexeme: str, line: int = 0) -> Token | None:
    """
    Classify a single lexeme.

    Parameters:
        lexeme (str): A whitespace-delimited unit of source text.
        line (int): The source line the lexeme came from.

    Returns:
        Token | None: The token, or None when the lexeme matches no category.
    """
    match_obj = tok_regex.fullmatch(lexeme)
    if match_obj is None:
        return None

    kind = match_obj.lastgroup
    if kind == 'KEYWORD':
        return KeywordToken(Op(lexeme), line)
    if kind == 'INT':
        return LiteralToken(IntValue(parse_int(lexeme)), line)
    if kind == 'BOOL':
        return LiteralToken(BoolValue(lexeme == 'true'), line)
    if kind == 'IDENTIFIER':
        return IdentifierToken(lexeme, line)
    return SeparatorToken(lexeme, line)


def tokenize(code: str, first_line: int = 1) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        first_line (int): Line number of the first line, for diagnostics.

    Returns:
        list[Token]: Tokens in source order. Unrecognized lexemes are dropped.
    """
    tokens = []
    for line_num, text in strip_comments(code, first_line):
        for lexeme in lexeme_regex.findall(text):
            token = classify(lexeme, line_num)
            if token is not None:
                tokens.append(token)
    return tokens


__all__ = [
    "KeywordToken",
    "IdentifierToken",
    "LiteralToken",
    "SeparatorToken",
    "Token",
    "classify",
    "strip_comments",
    "tokenize",
]
