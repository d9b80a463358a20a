"""Split an expression body into Number and Operation tokens.

Literals are collected in an accumulator that always starts with its base
marker; a new marker or an operator closes the current literal. Digits are
only checked against their base when the literal is parsed, so 'd1F' gets
as far as Number.parse before it is rejected.
"""

from __future__ import annotations

import string

from hexcalc.errors import InvalidCharacter
from hexcalc.models import Base, Number, Operation, Token

_MARKERS = frozenset(b.value for b in Base)
_OPERATORS = frozenset(op.value for op in Operation)
_HEX_DIGITS = frozenset(string.hexdigits)


def tokenize(text: str) -> list[Token]:
    """Convert expression text into a list of tokens.

    Whitespace anywhere in the text is ignored.

    Raises:
        InvalidCharacter: a character is not a marker, hex digit or operator.
        CalcError: any failure from Number.parse on a completed literal.
    """
    tokens: list[Token] = []
    current = ""

    for char in (c for c in text if not c.isspace()):
        if char in _MARKERS:
            if current:
                tokens.append(Number.parse(current))
            current = char
        elif char in _HEX_DIGITS:
            current += char
        elif char in _OPERATORS:
            if current:
                tokens.append(Number.parse(current))
                current = ""
            tokens.append(Operation.parse(char))
        else:
            raise InvalidCharacter(char)

    if current:
        tokens.append(Number.parse(current))

    return tokens
