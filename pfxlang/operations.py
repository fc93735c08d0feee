"""Keyword operations understood by the evaluator.

The lexer and the interpreter both key off this enum so the keyword set
and the arity of each keyword are defined in one place.
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of statement keywords.
    """

    # Binding
    LET = "let"

    # Output
    PRINT = "print"
    PRINTLN = "println"

    # Comparison
    EQ = "eq"

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    @property
    def arity(self) -> int:
        """
        Number of operands the keyword takes.
        """
        if self in (Op.PRINT, Op.PRINTLN):
            return 1
        return 2

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


ARITHMETIC_OPS = (Op.ADD, Op.SUB, Op.MUL, Op.DIV)


__all__ = ["Op", "ARITHMETIC_OPS"]
