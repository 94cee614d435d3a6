"""
Number parsing and rendering shared by the engines.

Display text follows the ECMAScript number conversions (``Number()``,
``parseFloat``, ``parseInt``, ``toString``, ``toFixed``, ``toExponential``,
``toPrecision``). Rounding works on the exact binary value of the float via
Decimal, half away from zero, which is what those conversions do.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

_CTX = Context(prec=64, rounding=ROUND_HALF_UP)

_SANITIZE_RE = re.compile(r"[^0-9+\-*/.%\s]")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def sanitize(text: str) -> str:
    """Drop everything but digits, arithmetic operators, '.' and whitespace."""
    return _SANITIZE_RE.sub("", text)


def parse_number(text: str) -> float:
    """``Number(text)`` for sanitized text: blank is 0, malformed is NaN."""
    s = text.strip()
    if not s: return 0.0
    if not _DECIMAL_RE.fullmatch(s): return math.nan
    return float(s)


def parse_float(text: str) -> float:
    """``parseFloat(text)``: longest numeric prefix, NaN when there is none."""
    m = _FLOAT_PREFIX_RE.match(text.lstrip())
    if m is None: return math.nan
    token = m.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def parse_int(text: str, radix: int = 10) -> Optional[int]:
    """``parseInt(text, radix)``; None stands for NaN."""
    s = text.lstrip()
    negative = s[:1] == "-"
    if s[:1] in ("+", "-"): s = s[1:]
    if radix == 16 and s[:2].lower() == "0x": s = s[2:]
    n, count = 0, 0
    for ch in s:
        d = DIGITS.find(ch.upper()) if len(ch.upper()) == 1 else -1
        if d < 0 or d >= radix: break
        n = n * radix + d; count += 1
    if not count: return None
    return -n if negative else n


def number_to_string(x: float) -> str:
    """Shortest round-trip rendering, positional for 1e-6 <= |x| < 1e21."""
    if math.isnan(x): return "NaN"
    if math.isinf(x): return "Infinity" if x > 0 else "-Infinity"
    if x == 0: return "0"
    d = Decimal(repr(float(x))).normalize(_CTX)
    exp = d.adjusted()
    if -6 <= exp < 21:
        return format(d, "f")
    sign, digits, _ = d.as_tuple()
    mantissa = "".join(map(str, digits))
    if len(mantissa) > 1: mantissa = mantissa[0] + "." + mantissa[1:]
    return f"{'-' if sign else ''}{mantissa}e{exp:+d}"


def to_fixed(x: float, digits: int) -> str:
    if not math.isfinite(x) or abs(x) >= 1e21: return number_to_string(x)
    if x == 0: x = 0.0
    q = Decimal(x).quantize(Decimal(1).scaleb(-digits), context=_CTX)
    return format(q, "f")


def to_exponential(x: float, digits: int) -> str:
    if not math.isfinite(x): return number_to_string(x)
    if x == 0:
        return ("0." + "0" * digits if digits else "0") + "e+0"
    d = Decimal(x)
    exp = d.adjusted()
    quantum = Decimal(1).scaleb(-digits)
    q = d.scaleb(-exp, _CTX).quantize(quantum, context=_CTX)
    if abs(q) >= 10:
        exp += 1
        q = d.scaleb(-exp, _CTX).quantize(quantum, context=_CTX)
    return f"{format(q, 'f')}e{exp:+d}"


def to_precision(x: float, precision: int) -> str:
    if not math.isfinite(x): return number_to_string(x)
    if x == 0:
        return "0." + "0" * (precision - 1) if precision > 1 else "0"
    d = Decimal(x)
    exp = d.adjusted()
    q = d.quantize(Decimal(1).scaleb(exp - precision + 1), context=_CTX)
    if q.adjusted() > exp:
        exp += 1
        q = d.quantize(Decimal(1).scaleb(exp - precision + 1), context=_CTX)
    if exp < -6 or exp >= precision:
        return to_exponential(x, precision - 1)
    return format(q, "f")
