"""Runtime values.

PFX has exactly two kinds of value: integers and booleans. Both are
immutable, so binding a value to a second name copies it in effect and a
later rebinding of the source can never be observed through the target.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Union

# Decimal digits converted per step; stays under the interpreter's
# int/str conversion limit (4300 digits by default).
DIGIT_CHUNK = 1000
CHUNK_BASE = 10 ** DIGIT_CHUNK


def parse_int(digits: str) -> int:
    """
    Convert a string of decimal digits of any length to an int.
    """
    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start:start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_int(value: int) -> str:
    """
    Render an int of any size in decimal.
    """
    if value < 0:
        return "-" + format_int(-value)
    chunks = []
    while value >= CHUNK_BASE:
        value, rest = divmod(value, CHUNK_BASE)
        chunks.append(f"{rest:0{DIGIT_CHUNK}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


@dataclass(frozen=True)
class IntValue:
    """
    An integer value.
    """
    value: int

    kind = "int"

    def __str__(self) -> str:
        return format_int(self.value)


@dataclass(frozen=True)
class BoolValue:
    """
    A boolean value, rendered as ``true`` or ``false``.
    """
    value: bool

    kind = "bool"

    def __str__(self) -> str:
        return "true" if self.value else "false"


Value = Union[IntValue, BoolValue]


__all__ = ["IntValue", "BoolValue", "Value", "parse_int", "format_int"]
