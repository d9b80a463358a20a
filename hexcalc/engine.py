"""Expression orchestrator — output base → tokenize → postfix → evaluate → format.

Data flow per expression:
1. Trim the input; reject it if nothing is left
2. Take the last character as the output base marker
3. Tokenize the remaining body
4. Reorder the tokens into postfix with the shunting-yard converter
5. Evaluate the postfix sequence to a 64-bit integer
6. Re-tag the integer with the output base and format it

Any stage may raise a CalcError; the first one reaches the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hexcalc.errors import EmptyExpression
from hexcalc.models import Base, Number, Token
from hexcalc.rpn import evaluate
from hexcalc.shunting_yard import to_postfix
from hexcalc.tokenizer import tokenize


@dataclass
class Evaluation:
    """Every intermediate product of one pass through the pipeline."""

    expression: str
    body: str
    output_base: Base
    tokens: list[Token] = field(default_factory=list)
    postfix: list[Token] = field(default_factory=list)
    value: int = 0

    @property
    def number(self) -> Number:
        return Number(value=self.value, base=self.output_base)

    @property
    def result(self) -> str:
        return self.number.format()


def split_output_base(text: str) -> tuple[str, Base]:
    """Split ``"d1+d2 h"`` into the body ``"d1+d2"`` and the output base."""
    text = text.strip()
    if not text:
        raise EmptyExpression()
    output_base = Base.parse(text[-1])
    return text[:-1].strip(), output_base


def trace(text: str) -> Evaluation:
    """Run the full pipeline and keep each stage's output."""
    body, output_base = split_output_base(text)
    evaluation = Evaluation(expression=text, body=body, output_base=output_base)

    evaluation.tokens = tokenize(body)
    evaluation.postfix = to_postfix(evaluation.tokens)
    evaluation.value = evaluate(evaluation.postfix)
    return evaluation


def process(text: str) -> str:
    """Evaluate an expression line and return the formatted result.

    >>> process("d2+d3*d4d")
    'd14'
    >>> process("d255h")
    'hFF'
    """
    return trace(text).result


def convert(literal: str, base: Base) -> str:
    """Re-tag a single literal in another base (``hFF`` → ``d255``)."""
    number = Number.parse(literal.strip())
    return Number(value=number.value, base=base).format()
