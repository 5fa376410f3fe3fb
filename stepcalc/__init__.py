"""stepcalc — arithmetic expression evaluator with step-by-step traces.

Evaluates expressions built from integers, decimals, `+ - * / ^` and the
bracket pairs `()` / `{}`, innermost bracket first, and records every
simplification as a human-readable step.

Usage:
    >>> from stepcalc import evaluate
    >>> result = evaluate("(2 + 3) * 4")
    >>> result.value
    20.0
    >>> result.steps
    ['2 + 3 = 5', '5 * 4', '5 * 4 = 20', '20']
"""

from stepcalc.config import Settings, load_settings
from stepcalc.errors import (
    CalcError,
    DivisionByZero,
    ErrorKind,
    InvalidFormat,
    InvalidOperator,
    MismatchedBrackets,
    UnclosedBrackets,
    render_error,
)
from stepcalc.evaluator import Evaluator, evaluate
from stepcalc.formatting import format_number, parse_number, render_trace
from stepcalc.models import EvalResult, Token, TokenType
from stepcalc.validator import validate

__all__ = [
    "CalcError",
    "DivisionByZero",
    "ErrorKind",
    "EvalResult",
    "Evaluator",
    "InvalidFormat",
    "InvalidOperator",
    "MismatchedBrackets",
    "Settings",
    "Token",
    "TokenType",
    "UnclosedBrackets",
    "evaluate",
    "format_number",
    "load_settings",
    "parse_number",
    "render_error",
    "render_trace",
    "validate",
]
