"""
Calculator session: the interaction state and the events that change it.

``SessionState`` is immutable. Each event is a function taking the current
state and returning the next one, so a caller owns exactly one state value
and nothing is shared between sessions. When an engine raises, the event
returns the previous state with ``error`` set to the failure kind; a front
end shows it and later calls ``clear_error``.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, TypeVar, Union

from calcengine import arithmetic, converter, programmer, scientific
from calcengine.converter import UNIT_CATEGORIES, Unit
from calcengine.errors import CalculationError, ErrorKind, InvalidInputError, InvalidOperationError
from calcengine.numberformat import parse_float, parse_int
from calcengine.programmer import NumberBase
from calcengine.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "length"
_DECIMAL_DIGITS = "0123456789"


class CalculatorMode(str, Enum):
    STANDARD = "standard"
    SCIENTIFIC = "scientific"
    PROGRAMMER = "programmer"
    CONVERTER = "converter"


@dataclass(frozen=True)
class SessionState:
    display: str = "0"
    equation: str = ""
    has_decimal: bool = False
    mode: CalculatorMode = CalculatorMode.STANDARD
    base: NumberBase = NumberBase.DEC
    category: str = DEFAULT_CATEGORY
    from_unit: Unit = UNIT_CATEGORIES[DEFAULT_CATEGORY].units[0]
    to_unit: Unit = UNIT_CATEGORIES[DEFAULT_CATEGORY].units[1]
    error: Optional[ErrorKind] = None


F = TypeVar("F", bound=Callable[..., SessionState])


def _recover(func: F) -> F:
    @functools.wraps(func)
    def wrapper(state: SessionState, *args, **kwargs) -> SessionState:
        try:
            return func(state, *args, **kwargs)
        except CalculationError as exc:
            logger.info("%s failed with %s: %s", func.__name__, exc.kind.value, exc)
            return replace(state, error=exc.kind)
    return wrapper  # type: ignore[return-value]


# ----------------------------- Entry -------------------------------------

@_recover
def press_digit(state: SessionState, digit: str, settings: Optional[Settings] = None) -> SessionState:
    settings = settings or Settings()
    if state.mode is CalculatorMode.PROGRAMMER:
        if not state.base.accepts(digit):
            raise InvalidInputError(f"{digit!r} is not a {state.base.name} digit.")
    elif len(digit) != 1 or digit not in _DECIMAL_DIGITS:
        raise InvalidInputError(f"{digit!r} is not a digit.")
    if len(state.display) >= settings.max_display_length:
        return state
    # a zero display, grouped or not, is replaced rather than extended
    display = digit if not state.display.strip("0 ") else state.display + digit
    return replace(state, display=display)


def press_operator(state: SessionState, op: str) -> SessionState:
    return replace(state, equation=state.display + op, display="0", has_decimal=False)


def press_decimal(state: SessionState) -> SessionState:
    if state.has_decimal or state.mode is CalculatorMode.PROGRAMMER:
        return state
    return replace(state, display=state.display + ".", has_decimal=True)


def backspace(state: SessionState) -> SessionState:
    display = state.display[:-1] if len(state.display) > 1 else "0"
    return replace(state, display=display, has_decimal="." in display)


def clear(state: SessionState) -> SessionState:
    return replace(state, display="0", equation="", has_decimal=False, error=None)


def clear_error(state: SessionState) -> SessionState:
    return replace(state, error=None)


@_recover
def set_mode(state: SessionState, mode: Union[CalculatorMode, str]) -> SessionState:
    try:
        mode = CalculatorMode(mode)
    except ValueError:
        raise InvalidOperationError(f"Unknown mode: {mode}.") from None
    return replace(state, mode=mode)


# ----------------------------- Engines -----------------------------------

@_recover
def equals(state: SessionState) -> SessionState:
    text = arithmetic.format_result(arithmetic.calculate(state.equation, state.display))
    return replace(state, display=text, equation="", has_decimal="." in text)


@_recover
def apply_scientific(state: SessionState, function: Union[scientific.ScientificFunction, str]) -> SessionState:
    text = arithmetic.format_result(scientific.apply(function, parse_float(state.display)))
    return replace(state, display=text, equation="", has_decimal="." in text)


@_recover
def apply_programmer(state: SessionState,
                     operation: Union[programmer.IntegerOperation, str]) -> SessionState:
    operand = programmer.parse_in_base(state.display, state.base)
    # the pending slot is always read in base 10; no digits counts as 0
    second = parse_int(state.equation, 10) or 0
    result = programmer.apply(operation, operand, second, state.base)
    base = result.new_base or state.base
    return replace(state, display=programmer.format_integer(result.value, base),
                   equation="", has_decimal=False, base=base)


# ----------------------------- Converter ---------------------------------

@_recover
def select_category(state: SessionState, key: str) -> SessionState:
    units = converter.get_category(key).units
    return replace(state, category=key, from_unit=units[0], to_unit=units[1])


@_recover
def set_from_unit(state: SessionState, symbol: str) -> SessionState:
    return replace(state, from_unit=converter.get_category(state.category).find(symbol))


@_recover
def set_to_unit(state: SessionState, symbol: str) -> SessionState:
    return replace(state, to_unit=converter.get_category(state.category).find(symbol))


@_recover
def convert(state: SessionState) -> SessionState:
    value = converter.convert(parse_float(state.display), state.from_unit, state.to_unit, state.category)
    text = converter.format_result(value)
    return replace(state, display=text, has_decimal="." in text)
