"""
Single-accumulator arithmetic.

A pending equation fragment is the first operand followed by one operator,
e.g. ``"12+"``; ``calculate`` applies it to the operand currently shown.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Callable, Dict

from calcengine.errors import (
    DivisionByZeroError,
    InvalidEquationError,
    InvalidInputError,
    InvalidOperationError,
    InvalidResultError,
)
from calcengine.numberformat import number_to_string, parse_number, sanitize, to_fixed

logger = logging.getLogger(__name__)

FRACTION_DIGITS = 8


def _remainder(a: float, b: float) -> float:
    # truncated remainder; a zero divisor gives NaN instead of raising
    if b == 0: return math.nan
    return math.fmod(a, b)


OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": _remainder,
}


def calculate(equation: str, operand: str) -> float:
    """Apply the pending ``equation`` fragment to ``operand``.

    Raises:
        InvalidInputError: the operand is not a finite number.
        InvalidEquationError: the fragment's first operand is not a finite number.
        InvalidOperationError: the fragment ends in an unknown operator.
        DivisionByZeroError: ``/`` with a zero operand.
    """
    equation, operand = sanitize(equation), sanitize(operand)
    second = parse_number(operand)
    if not math.isfinite(second):
        logger.debug("rejected operand %r", operand)
        raise InvalidInputError(f"Invalid input: {operand!r}.")
    if not equation:
        return second

    op, first = equation[-1], parse_number(equation[:-1])
    if not math.isfinite(first):
        logger.debug("rejected equation %r", equation)
        raise InvalidEquationError(f"Invalid equation: {equation!r}.")
    func = OPERATORS.get(op)
    if func is None:
        raise InvalidOperationError(f"Unknown operator: {op!r}.")
    if op == "/" and second == 0:
        raise DivisionByZeroError("Division by zero.")
    return func(first, second)


def format_result(value: float) -> str:
    """Render ``value`` for the display, with at most 8 fractional digits."""
    value = float(value)
    if not math.isfinite(value):
        raise InvalidResultError(f"Result is not finite: {value!r}.")
    text = number_to_string(value)
    if "." in text and len(text.split(".", 1)[1]) > FRACTION_DIGITS:
        return to_fixed(value, FRACTION_DIGITS)
    return text
