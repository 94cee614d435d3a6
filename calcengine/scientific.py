"""Single-operand scientific functions. Trigonometry takes degrees."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Dict, Union

from calcengine.errors import InvalidOperationError

logger = logging.getLogger(__name__)


class ScientificFunction(str, Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SQRT = "sqrt"
    SQUARE = "square"
    CUBE = "cube"
    LOG = "log"
    LN = "ln"
    PI = "pi"
    E = "e"


def _degrees(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        if not math.isfinite(x): return math.nan
        return func((x * math.pi) / 180)
    return wrapped


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _logarithm(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        if x > 0: return func(x)
        return -math.inf if x == 0 else math.nan
    return wrapped


_FUNCTIONS: Dict[ScientificFunction, Callable[[float], float]] = {
    ScientificFunction.SIN: _degrees(math.sin),
    ScientificFunction.COS: _degrees(math.cos),
    ScientificFunction.TAN: _degrees(math.tan),
    ScientificFunction.SQRT: _sqrt,
    ScientificFunction.SQUARE: lambda x: x * x,
    ScientificFunction.CUBE: lambda x: x * x * x,
    ScientificFunction.LOG: _logarithm(math.log10),
    ScientificFunction.LN: _logarithm(math.log),
    ScientificFunction.PI: lambda _x: math.pi,
    ScientificFunction.E: lambda _x: math.e,
}


def apply(function: Union[ScientificFunction, str], operand: float = 0.0) -> float:
    """Evaluate ``function`` at ``operand``.

    Domain errors come back as NaN or an infinity rather than raising, so
    they surface when the caller formats the result.
    """
    try:
        func = _FUNCTIONS[ScientificFunction(function)]
    except ValueError:
        raise InvalidOperationError(f"Unknown function: {function}.") from None
    result = func(float(operand))
    if not math.isfinite(result):
        logger.debug("%s(%r) is not finite", function, operand)
    return result
