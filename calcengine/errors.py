"""Failure kinds raised by the calculator engines.

Every engine call either returns a value or raises exactly one subclass of
CalculationError. The session layer keeps the ``kind`` so a front end can
pick the message to show.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    INVALID_EQUATION = "InvalidEquation"
    INVALID_OPERATION = "InvalidOperation"
    DIVISION_BY_ZERO = "DivisionByZero"
    INVALID_RESULT = "InvalidResult"


class CalculationError(Exception):
    kind: ClassVar[ErrorKind]

    def __init__(self, message: str = "") -> None:
        super().__init__(message or type(self).__name__)


class InvalidInputError(CalculationError):
    kind = ErrorKind.INVALID_INPUT


class InvalidEquationError(CalculationError):
    kind = ErrorKind.INVALID_EQUATION


class InvalidOperationError(CalculationError):
    kind = ErrorKind.INVALID_OPERATION


class DivisionByZeroError(CalculationError):
    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidResultError(CalculationError):
    kind = ErrorKind.INVALID_RESULT
