"""
Unit conversion over a fixed table of categories.

Linear categories scale through the category's base unit. Temperature is
affine and goes through Celsius instead of using factors.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Tuple

from calcengine.errors import InvalidInputError, InvalidResultError
from calcengine.numberformat import to_exponential, to_precision

logger = logging.getLogger(__name__)

TEMPERATURE = "temperature"


@dataclass(frozen=True)
class Unit:
    name: str
    symbol: str
    factor: float


@dataclass(frozen=True)
class UnitCategory:
    name: str
    base_unit: str
    units: Tuple[Unit, ...]

    def find(self, symbol: str) -> Unit:
        for unit in self.units:
            if unit.symbol == symbol: return unit
        raise InvalidInputError(f"No unit {symbol!r} in {self.name}.")


UNIT_CATEGORIES: Mapping[str, UnitCategory] = MappingProxyType({
    "length": UnitCategory("Length", "m", (
        Unit("Kilometer", "km", 1000.0),
        Unit("Meter", "m", 1.0),
        Unit("Centimeter", "cm", 0.01),
        Unit("Millimeter", "mm", 0.001),
        Unit("Mile", "mi", 1609.34),
        Unit("Yard", "yd", 0.9144),
        Unit("Foot", "ft", 0.3048),
        Unit("Inch", "in", 0.0254),
    )),
    "area": UnitCategory("Area", "m²", (
        Unit("Square Kilometer", "km²", 1e6),
        Unit("Square Meter", "m²", 1.0),
        Unit("Square Mile", "mi²", 2589988.11),
        Unit("Acre", "ac", 4046.86),
        Unit("Hectare", "ha", 10000.0),
    )),
    "volume": UnitCategory("Volume", "L", (
        Unit("Cubic Meter", "m³", 1000.0),
        Unit("Liter", "L", 1.0),
        Unit("Milliliter", "mL", 0.001),
        Unit("Gallon (US)", "gal", 3.78541),
        Unit("Quart (US)", "qt", 0.946353),
        Unit("Pint (US)", "pt", 0.473176),
    )),
    "mass": UnitCategory("Mass", "kg", (
        Unit("Tonne", "t", 1000.0),
        Unit("Kilogram", "kg", 1.0),
        Unit("Gram", "g", 0.001),
        Unit("Milligram", "mg", 1e-6),
        Unit("Pound", "lb", 0.453592),
        Unit("Ounce", "oz", 0.0283495),
    )),
    TEMPERATURE: UnitCategory("Temperature", "°C", (
        Unit("Celsius", "°C", 1.0),
        Unit("Fahrenheit", "°F", 1.0),
        Unit("Kelvin", "K", 1.0),
    )),
})

_TO_CELSIUS: Dict[str, Callable[[float], float]] = {
    "°C": lambda v: v,
    "°F": lambda v: (v - 32) * 5 / 9,
    "K": lambda v: v - 273.15,
}
_FROM_CELSIUS: Dict[str, Callable[[float], float]] = {
    "°C": lambda c: c,
    "°F": lambda c: c * 9 / 5 + 32,
    "K": lambda c: c + 273.15,
}


def get_category(key: str) -> UnitCategory:
    try:
        return UNIT_CATEGORIES[key]
    except KeyError:
        raise InvalidInputError(f"Unknown unit category: {key!r}.") from None


def convert_temperature(value: float, from_symbol: str, to_symbol: str) -> float:
    # unknown symbols pass the value through instead of failing
    to_c = _TO_CELSIUS.get(from_symbol)
    if to_c is None:
        logger.debug("unknown temperature unit %r, value passed through", from_symbol)
        return value
    celsius = to_c(value)
    from_c = _FROM_CELSIUS.get(to_symbol)
    return celsius if from_c is None else from_c(celsius)


def convert(value: float, from_unit: Unit, to_unit: Unit, category: str) -> float:
    if category == TEMPERATURE:
        return convert_temperature(value, from_unit.symbol, to_unit.symbol)
    return value * from_unit.factor / to_unit.factor


def format_result(value: float) -> str:
    """Scientific notation outside [1e-6, 999999], else 7 significant digits."""
    value = float(value)
    if not math.isfinite(value):
        raise InvalidResultError(f"Result is not finite: {value!r}.")
    if abs(value) < 1e-6 or abs(value) > 999999:
        return to_exponential(value, 6)
    text = to_precision(value, 7)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
