"""
Calculator evaluation engine: standard arithmetic, scientific functions,
32-bit programmer operations and unit conversion, plus an immutable session
that routes user events to them.
"""

from calcengine.errors import (
    CalculationError,
    DivisionByZeroError,
    ErrorKind,
    InvalidEquationError,
    InvalidInputError,
    InvalidOperationError,
    InvalidResultError,
)
from calcengine.programmer import IntegerOperation, IntegerResult, NumberBase
from calcengine.scientific import ScientificFunction
from calcengine.converter import UNIT_CATEGORIES, Unit, UnitCategory
from calcengine.session import CalculatorMode, SessionState
from calcengine.settings import Settings

__version__ = "1.0.0"

__all__ = [
    "CalculationError",
    "CalculatorMode",
    "DivisionByZeroError",
    "ErrorKind",
    "IntegerOperation",
    "IntegerResult",
    "InvalidEquationError",
    "InvalidInputError",
    "InvalidOperationError",
    "InvalidResultError",
    "NumberBase",
    "ScientificFunction",
    "SessionState",
    "Settings",
    "UNIT_CATEGORIES",
    "Unit",
    "UnitCategory",
]
