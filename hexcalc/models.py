"""Value types for the hexcalc pipeline.

Base, Number, Operation and the Token union — the typed structures that flow
through tokenizer → shunting_yard → rpn → engine.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from hexcalc.errors import EmptyNumber, InvalidBase, InvalidNumber, InvalidOperator

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"[+-]?[0-9A-Fa-f]+")


def wrap_int64(value: int) -> int:
    """Wrap an arbitrary Python int into the signed 64-bit range."""
    value &= (1 << 64) - 1
    if value > INT64_MAX:
        value -= 1 << 64
    return value


class Base(str, Enum):
    """Numeric base, selected by a single marker character."""

    DECIMAL = "d"
    HEXADECIMAL = "h"

    @classmethod
    def parse(cls, char: str) -> Base:
        """Return the base for marker ``d`` or ``h`` (case-sensitive)."""
        for base in cls:
            if base.value == char:
                return base
        raise InvalidBase(char)

    @property
    def label(self) -> str:
        return "decimal" if self is Base.DECIMAL else "hexadecimal"

    @property
    def radix(self) -> int:
        return 10 if self is Base.DECIMAL else 16


@dataclass(frozen=True)
class Number:
    """A signed 64-bit integer tagged with the base it is written in."""

    value: int
    base: Base = Base.DECIMAL

    @classmethod
    def parse(cls, text: str) -> Number:
        """Parse a base-prefixed literal such as ``d42`` or ``hFF``.

        Raises:
            EmptyNumber: text is empty.
            InvalidBase: the first character is not a base marker.
            InvalidNumber: the digits are missing, malformed for the base,
                or outside the 64-bit signed range.
        """
        if not text:
            raise EmptyNumber()

        base = Base.parse(text[0])
        digits = text[1:]

        pattern = _DECIMAL_RE if base is Base.DECIMAL else _HEX_RE
        if not pattern.fullmatch(digits):
            raise InvalidNumber(digits, base.label)

        value = int(digits, base.radix)
        if not INT64_MIN <= value <= INT64_MAX:
            raise InvalidNumber(digits, base.label)
        return cls(value=value, base=base)

    def format(self) -> str:
        """Render as base-prefixed text; negative hex is signed magnitude (h-A)."""
        if self.base is Base.DECIMAL:
            return f"d{self.value}"
        sign = "-" if self.value < 0 else ""
        return f"h{sign}{abs(self.value):X}"

    def __str__(self) -> str:
        return self.format()


class Operation(Enum):
    """Binary operators and parentheses, keyed by their source character."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"

    @classmethod
    def parse(cls, char: str) -> Operation:
        try:
            return cls(char)
        except ValueError:
            raise InvalidOperator(char) from None

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    def apply(self, left: int, right: int) -> int:
        """Compute ``left OP right`` with 64-bit wraparound."""
        if self is Operation.ADD:
            return wrap_int64(left + right)
        if self is Operation.SUBTRACT:
            return wrap_int64(left - right)
        if self is Operation.MULTIPLY:
            return wrap_int64(left * right)
        raise TypeError(f"{self.name} is not an arithmetic operation")

    def __str__(self) -> str:
        return self.value


_PRECEDENCE: dict[Operation, int] = {
    Operation.ADD: 1,
    Operation.SUBTRACT: 1,
    Operation.MULTIPLY: 2,
    Operation.OPEN_PAREN: 0,
    Operation.CLOSE_PAREN: 0,
}

Token = Union[Number, Operation]


def describe(tokens: list[Token]) -> str:
    """Space-separated rendering of a token sequence, for traces."""
    return " ".join(str(t) for t in tokens)
