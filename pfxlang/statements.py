"""Statement splitting.

A statement is the run of tokens up to and including a ``;`` separator.
Tokens after the last separator never close into a statement and are not
executed.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass

from pfxlang.lexer import SeparatorToken, Token


@dataclass(frozen=True)
class Statement:
    """
    One separator-terminated run of tokens.
    """
    tokens: tuple[Token, ...]

    @property
    def body(self) -> tuple[Token, ...]:
        """
        The tokens before the terminating separator.
        """
        return self.tokens[:-1]

    @property
    def line(self) -> int:
        """
        Line of the first token in the statement.
        """
        return self.tokens[0].line

    def __len__(self) -> int:
        return len(self.tokens)


def split_statements(tokens: list[Token]) -> list[Statement]:
    """
    Partition tokens into statements.

    Parameters:
        tokens (list[Token]): Tokens in source order.

    Returns:
        list[Statement]: Statements in source order, each ending with its separator.
    """
    statements = []
    builder: list[Token] = []
    for token in tokens:
        builder.append(token)
        if isinstance(token, SeparatorToken):
            statements.append(Statement(tuple(builder)))
            builder = []
    return statements


def pending_tokens(tokens: list[Token]) -> list[Token]:
    """
    Return the tokens after the last separator.

    These are the tokens ``split_statements`` discards. The REPL keeps them
    so a statement can span several input lines.
    """
    for index in range(len(tokens) - 1, -1, -1):
        if isinstance(tokens[index], SeparatorToken):
            return tokens[index + 1:]
    return list(tokens)


__all__ = ["Statement", "split_statements", "pending_tokens"]
