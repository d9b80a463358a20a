"""Infix → postfix conversion (Dijkstra's shunting-yard algorithm).

All operators are left-associative: an incoming operator first pops every
stacked operator of equal or higher precedence.
"""

from __future__ import annotations

from typing import Iterable

from hexcalc.errors import UnmatchedOpenParen
from hexcalc.models import Operation, Token


def _binds_tighter(top: Operation, incoming: Operation) -> bool:
    """True when the stacked operator must be emitted before the incoming one."""
    if top is Operation.OPEN_PAREN:
        return False
    return top.precedence >= incoming.precedence


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """Reorder infix tokens into Reverse Polish Notation.

    A closing parenthesis with no opening partner is dropped silently; an
    opening parenthesis still on the stack at the end raises.

    Raises:
        UnmatchedOpenParen: an '(' was never closed.
    """
    output: list[Token] = []
    stack: list[Operation] = []

    for token in tokens:
        if not isinstance(token, Operation):
            output.append(token)
        elif token is Operation.OPEN_PAREN:
            stack.append(token)
        elif token is Operation.CLOSE_PAREN:
            while stack:
                top = stack.pop()
                if top is Operation.OPEN_PAREN:
                    break
                output.append(top)
        else:
            while stack and _binds_tighter(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)

    while stack:
        top = stack.pop()
        if top is Operation.OPEN_PAREN:
            raise UnmatchedOpenParen()
        output.append(top)

    return output
