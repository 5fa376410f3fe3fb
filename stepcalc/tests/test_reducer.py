"""Tests for the flat-span precedence reducer."""

import math

import pytest

from stepcalc.errors import DivisionByZero, ErrorKind, InvalidFormat, InvalidOperator
from stepcalc.reducer import PRECEDENCE, apply_operation, is_literal, reduce_flat


def _reduce(span, precision=2):
    steps = []
    value = reduce_flat(span, steps.append, precision)
    return value, steps


# --- Precedence and associativity ---

def test_single_operation():
    value, steps = _reduce("2+3")
    assert value == 5
    assert steps == ["2 + 3 = 5"]


def test_multiplication_before_addition():
    value, steps = _reduce("2+3*4")
    assert value == 14
    assert steps == ["3 * 4 = 12", "2 + 12 = 14"]


def test_equal_precedence_is_left_to_right():
    value, steps = _reduce("10 - 4 - 3")
    assert value == 3
    assert steps == ["10 - 4 = 6", "6 - 3 = 3"]


def test_power_is_left_associative():
    value, steps = _reduce("2^3^2")
    assert value == 64
    assert steps == ["2 ^ 3 = 8", "8 ^ 2 = 64"]


def test_power_binds_tighter_than_multiplication():
    value, _ = _reduce("2*3^2")
    assert value == 18


def test_mixed_precedence_chain():
    value, steps = _reduce("10 - 2 * 3 + 4 / 2")
    assert value == 6
    assert steps == ["2 * 3 = 6", "10 - 6 = 4", "4 / 2 = 2", "4 + 2 = 6"]


def test_precedence_table():
    assert PRECEDENCE["^"] > PRECEDENCE["*"] == PRECEDENCE["/"] > PRECEDENCE["+"] == PRECEDENCE["-"]


# --- Step rendering ---

def test_steps_are_formatted_but_stack_keeps_precision():
    """1/3 shows as 0.33 in the step, but 3 * (1/3) still uses the exact value."""
    value, steps = _reduce("1/3*3")
    assert steps == ["1 / 3 = 0.33", "0.33 * 3 = 1"]
    assert value == pytest.approx(1.0)


def test_precision_argument():
    _, steps = _reduce("1/3", precision=4)
    assert steps == ["1 / 3 = 0.3333"]


def test_record_is_optional():
    assert reduce_flat("6 / 4") == 1.5


# --- Working-text literals ---

def test_negative_operand_after_substitution():
    value, steps = _reduce("2--3")
    assert value == 5
    assert steps == ["2 - -3 = 5"]


def test_leading_negative_literal():
    value, _ = _reduce("-3*2")
    assert value == -6


def test_non_finite_literals():
    value, _ = _reduce("inf - 1")
    assert math.isinf(value)
    value, _ = _reduce("nan + 1")
    assert math.isnan(value)


def test_is_literal():
    assert is_literal("42")
    assert is_literal(" 3.5 ")
    assert is_literal("-3")
    assert is_literal("nan")
    assert not is_literal("2+3")
    assert not is_literal("")
    assert not is_literal("\uff13")


# --- Operation semantics ---

def test_division_by_zero():
    with pytest.raises(DivisionByZero) as exc:
        _reduce("5/0")
    assert exc.value.kind == ErrorKind.DIVISION_BY_ZERO
    assert exc.value.message == "Division by zero"


def test_division_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        apply_operation(1.0, 0.0, "/")


def test_division_by_zero_decimal_literal():
    with pytest.raises(DivisionByZero):
        _reduce("1 / 0.00")


def test_power_domain_error_is_nan():
    assert math.isnan(apply_operation(-8.0, 0.5, "^"))


def test_power_overflow_is_inf():
    assert apply_operation(10.0, 400.0, "^") == math.inf
    assert apply_operation(-10.0, 401.0, "^") == -math.inf


def test_zero_to_negative_power_is_inf():
    assert apply_operation(0.0, -1.0, "^") == math.inf


def test_invalid_operator():
    with pytest.raises(InvalidOperator) as exc:
        apply_operation(1.0, 2.0, "%")
    assert exc.value.kind == ErrorKind.INVALID_OPERATOR


def test_invalid_operator_in_span():
    with pytest.raises(InvalidOperator):
        _reduce("1 % 2")


@pytest.mark.parametrize("span", ["", "2 +", "+ 2", "2 + * 3", "\u0663 + 1"])
def test_malformed_span(span):
    with pytest.raises(InvalidFormat):
        _reduce(span)
