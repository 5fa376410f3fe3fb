"""Two-stack operator-precedence reduction of a flat (bracket-free) span.

Operands go on one stack, pending operators on another. An incoming
operator first applies every stacked operator whose precedence is greater
than or equal to its own, which makes all operators left-associative,
including '^' (2^3^2 == 64).
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, Optional

from stepcalc.errors import DivisionByZero, InvalidFormat, InvalidOperator
from stepcalc.formatting import DEFAULT_PRECISION, format_number

logger = logging.getLogger(__name__)

PRECEDENCE: dict[str, int] = {
    "^": 3,
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
}

# Working text is produced by substitution, so an operand may carry a sign
# ("1--3" after "(0-3)" resolves) or be a non-finite rendering.
_LITERAL = r"-?(?:\d+(?:\.\d+)?|inf|nan)"
_OPERAND_RE = re.compile(rf"\s*({_LITERAL})", re.ASCII)
_OPERATOR_RE = re.compile(r"\s*(\S)", re.ASCII)
_LITERAL_RE = re.compile(rf"\s*{_LITERAL}\s*", re.ASCII)
_BLANK_RE = re.compile(r"\s*", re.ASCII)

Recorder = Callable[[str], None]


def is_literal(span: str) -> bool:
    """True when a span is one numeric literal with no operator to apply."""
    return _LITERAL_RE.fullmatch(span) is not None


def apply_operation(left: float, right: float, op: str) -> float:
    """Apply one binary operator.

    Raises:
        DivisionByZero: for '/' with a right operand of exactly zero.
        InvalidOperator: for a symbol outside the operator table.
    """
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise DivisionByZero()
        return left / right
    if op == "^":
        return _power(left, right)
    raise InvalidOperator(f"Invalid operator: {op}")


def _power(base: float, exponent: float) -> float:
    # Real exponentiation: domain errors become nan, overflow becomes inf.
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and exponent.is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            return math.inf
        return math.nan


def _apply_top(
    values: list[float],
    operators: list[str],
    record: Optional[Recorder],
    precision: int,
) -> None:
    """Pop one operator and its two operands, push the result."""
    if len(values) < 2:
        raise InvalidFormat()
    op = operators.pop()
    right = values.pop()
    left = values.pop()
    result = apply_operation(left, right, op)
    values.append(result)

    step = (
        f"{format_number(left, precision)} {op} {format_number(right, precision)}"
        f" = {format_number(result, precision)}"
    )
    logger.debug("Reduced %s", step)
    if record is not None:
        record(step)


def reduce_flat(
    span: str,
    record: Optional[Recorder] = None,
    precision: int = DEFAULT_PRECISION,
) -> float:
    """Evaluate a bracket-free span and return its value.

    Args:
        span: Text with numbers and operators only.
        record: Called with "<left> <op> <right> = <result>" for every
            operator application, in application order.
        precision: Decimal places used when rendering step records.

    Raises:
        DivisionByZero, InvalidOperator, InvalidFormat
    """
    values: list[float] = []
    operators: list[str] = []
    pos = 0
    end = len(span)
    expect_operand = True

    while pos < end:
        if _BLANK_RE.fullmatch(span, pos):
            break

        if expect_operand:
            m = _OPERAND_RE.match(span, pos)
            if not m:
                raise InvalidFormat(position=pos)
            values.append(float(m.group(1)))
            expect_operand = False
        else:
            m = _OPERATOR_RE.match(span, pos)
            op = m.group(1)
            if op not in PRECEDENCE:
                raise InvalidOperator(f"Invalid operator: {op}", position=m.start(1))
            while operators and PRECEDENCE[operators[-1]] >= PRECEDENCE[op]:
                _apply_top(values, operators, record, precision)
            operators.append(op)
            expect_operand = True
        pos = m.end()

    if expect_operand:
        # empty span or a trailing operator
        raise InvalidFormat(position=pos)

    while operators:
        _apply_top(values, operators, record, precision)

    if len(values) != 1:
        raise InvalidFormat()
    return values[0]
