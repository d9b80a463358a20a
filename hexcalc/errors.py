"""Error taxonomy for hexcalc.

Every failure the core can report derives from CalcError (a ValueError), and
str(exc) is the diagnostic shown to the user after "Error: ".
"""

from __future__ import annotations


class CalcError(ValueError):
    """Base class for all user-facing evaluation failures."""

    message = "Calculation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class EmptyExpression(CalcError):
    message = "Empty expression"


class EmptyNumber(CalcError):
    message = "Empty number"


class InvalidBase(CalcError):
    """Base marker is not 'd' or 'h'."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid base: {char}")


class InvalidNumber(CalcError):
    """Literal body does not parse in its declared base."""

    def __init__(self, text: str, base_name: str) -> None:
        self.text = text
        self.base_name = base_name
        super().__init__(f"Invalid {base_name} number: {text}")


class InvalidCharacter(CalcError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid character: {char}")


class InvalidOperator(CalcError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid operator: {char}")


class UnmatchedOpenParen(CalcError):
    message = "Unmatched open parenthesis"


class InvalidExpression(CalcError):
    """Value stack underflow or leftover values during RPN evaluation."""

    message = "Invalid expression"
