"""Error taxonomy for stepcalc.

Every failure aborts the whole evaluation. Each exception carries an
ErrorKind so callers can branch on the category without isinstance chains,
and the two arithmetic-flavoured ones also subclass the matching builtin.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of evaluation failure."""

    INVALID_FORMAT = "invalid_format"
    MISMATCHED_BRACKETS = "mismatched_brackets"
    UNCLOSED_BRACKETS = "unclosed_brackets"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_OPERATOR = "invalid_operator"


class CalcError(Exception):
    """Base class for all evaluation errors."""

    kind: ErrorKind = ErrorKind.INVALID_FORMAT
    default_message = "Invalid expression"

    def __init__(self, message: str | None = None, position: int | None = None):
        self.message = message or self.default_message
        self.position = position
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": self.message, "position": self.position}


class InvalidFormat(CalcError, ValueError):
    kind = ErrorKind.INVALID_FORMAT
    default_message = "Invalid expression format"


class MismatchedBrackets(CalcError, ValueError):
    kind = ErrorKind.MISMATCHED_BRACKETS
    default_message = "Mismatched brackets"


class UnclosedBrackets(CalcError, ValueError):
    kind = ErrorKind.UNCLOSED_BRACKETS
    default_message = "Unclosed brackets"


class DivisionByZero(CalcError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO
    default_message = "Division by zero"


class InvalidOperator(CalcError, ValueError):
    kind = ErrorKind.INVALID_OPERATOR
    default_message = "Invalid operator"


def render_error(error: CalcError) -> str:
    """Render an error the way the shell shows it to the user."""
    return f"Error: {error.message}"
