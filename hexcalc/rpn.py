"""Postfix (RPN) evaluation with a single value stack."""

from __future__ import annotations

from typing import Iterable

from hexcalc.errors import InvalidExpression
from hexcalc.models import Number, Token


def evaluate(tokens: Iterable[Token]) -> int:
    """Evaluate a postfix token sequence to a signed 64-bit integer.

    Operands are popped right first, so ``d10 d3 -`` is 7. Results wrap on
    64-bit overflow.

    Raises:
        InvalidExpression: an operator lacks two operands, or the sequence
            does not reduce to exactly one value.
    """
    stack: list[int] = []

    for token in tokens:
        if isinstance(token, Number):
            stack.append(token.value)
            continue
        if len(stack) < 2:
            raise InvalidExpression()
        right = stack.pop()
        left = stack.pop()
        stack.append(token.apply(left, right))

    # Missing operators (e.g. "d1 d2") leave more than one value behind
    if len(stack) != 1:
        raise InvalidExpression()
    return stack[0]
