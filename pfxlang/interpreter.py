"""Interpreter.

This is a statement-at-a-time evaluator for PFX scripts. There is no parse
tree: the token stream from the lexer is cut into separator-terminated
statements and each statement is executed directly.

1. Execution Model
Statements run in source order via `execute()`. Each statement is a keyword
followed by its operands in prefix form, e.g. ``let x 5 ;`` or ``add x 1 ;``.
`execute_statement()` reads the keyword, then exactly as many operands as the
keyword takes, left to right.

2. Environment
The interpreter owns an `Environment` created empty for each instance. `let`
is the only statement that writes to it. Separate interpreter instances never
share bindings.

3. Operations
- `let a b`: bind identifier `a` to the value of `b`.
- `eq a b`: compare two values of the same kind.
- `add`, `sub`, `mul`, `div`: integer arithmetic. `div` truncates toward zero.
- `print a` / `println a`: write a value, with or without a trailing newline.
The results of `eq` and the arithmetic keywords are returned from
`execute_statement()` but are not stored anywhere by `execute()`.

4. Error Handling
Referencing an unbound identifier raises `UndefinedIdentifierException`,
which aborts the run. A statement whose shape does not match its keyword,
or whose operand kinds do not fit the operation, is skipped without output.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from pfxlang.environment import Environment
from pfxlang.lexer import (
    IdentifierToken,
    KeywordToken,
    LiteralToken,
    Token,
    tokenize,
)
from pfxlang.operations import ARITHMETIC_OPS, Op
from pfxlang.statements import Statement, split_statements
from pfxlang.values import BoolValue, IntValue, Value


def truncating_div(lhs: int, rhs: int) -> int:
    """
    Integer division rounding toward zero.
    """
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


class Interpreter:
    """Statement evaluator for PFX."""

    def __init__(self, file: str, stdout=None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name used in error messages.
            stdout: Stream for `print`/`println`. Defaults to ``sys.stdout``
                at the time of writing.
        """
        self.file = file
        self.env = Environment(file)
        self.stdout = stdout

    @property
    def vars(self) -> dict[str, Value]:
        """The current bindings."""
        return self.env.vars

    def run(self, source: str) -> None:
        """
        Tokenize, split and execute a whole script.
        """
        self.execute(split_statements(tokenize(source)))

    def execute(self, statements: list[Statement]):
        """
        Executes a list of statements in order.

        Raises:
            UndefinedIdentifierException: On the first unbound identifier.
        """
        for stmt in statements:
            self.execute_statement(stmt)

    def resolve(self, token: Token) -> Value:
        """
        Resolve an operand token to its value.

        Raises:
            UndefinedIdentifierException: If an identifier is not bound.
        """
        if isinstance(token, LiteralToken):
            return token.value
        return self.env.lookup(token.name, token.line)

    def execute_statement(self, stmt: Statement) -> Value | None:
        """
        Execute one statement.

        Parameters:
            stmt (Statement): A separator-terminated statement.

        Returns:
            Value | None: The result of `eq` or an arithmetic keyword, or
            None when the statement produces no result.
        """
        body = stmt.body
        if not body or not isinstance(body[0], KeywordToken):
            return None

        op = body[0].op
        operands = body[1:]
        if len(operands) != op.arity:
            return None
        if not all(isinstance(t, (LiteralToken, IdentifierToken)) for t in operands):
            return None

        match op:
            case Op.LET:
                target, source = operands
                if not isinstance(target, IdentifierToken):
                    return None
                self.env.bind(target.name, self.resolve(source))
                return None
            case Op.PRINT | Op.PRINTLN:
                value = self.resolve(operands[0])
                end = "\n" if op == Op.PRINTLN else ""
                print(value, end=end, file=self.stdout)
                return None
            case Op.EQ:
                lhs = self.resolve(operands[0])
                rhs = self.resolve(operands[1])
                return self.compare(lhs, rhs)
            case _ if op in ARITHMETIC_OPS:
                lhs = self.resolve(operands[0])
                rhs = self.resolve(operands[1])
                return self.arithmetic(op, lhs, rhs)
        return None

    @staticmethod
    def compare(lhs: Value, rhs: Value) -> BoolValue | None:
        """
        Equality of two values of the same kind, otherwise None.
        """
        if lhs.kind != rhs.kind:
            return None
        return BoolValue(lhs.value == rhs.value)

    @staticmethod
    def arithmetic(op: Op, lhs: Value, rhs: Value) -> IntValue | None:
        """
        Apply an arithmetic keyword to two integers, otherwise None.
        """
        if not (isinstance(lhs, IntValue) and isinstance(rhs, IntValue)):
            return None
        match op:
            case Op.ADD:
                return IntValue(lhs.value + rhs.value)
            case Op.SUB:
                return IntValue(lhs.value - rhs.value)
            case Op.MUL:
                return IntValue(lhs.value * rhs.value)
            case Op.DIV:
                if rhs.value == 0:
                    return None
                return IntValue(truncating_div(lhs.value, rhs.value))
        return None
