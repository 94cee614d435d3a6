"""
Programmer mode: fixed-width integers in binary, octal, decimal and hex.

Every value lives in a 32-bit signed two's-complement word. Non-decimal
bases show the word's bit pattern, so negative numbers appear as their
two's complement (``-1`` in HEX is ``FF FF FF FF``).
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Union

from calcengine.errors import InvalidInputError, InvalidOperationError
from calcengine.numberformat import DIGITS

logger = logging.getLogger(__name__)

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
_SIGN_BIT = 1 << (WORD_BITS - 1)


def to_word(n: int) -> int:
    """Wrap ``n`` into the signed 32-bit range."""
    n &= WORD_MASK
    return n - (1 << WORD_BITS) if n & _SIGN_BIT else n


class NumberBase(Enum):
    DEC = (10, 0)
    HEX = (16, 2)
    BIN = (2, 4)
    OCT = (8, 3)

    def __init__(self, radix: int, group_width: int) -> None:
        self.radix = radix
        self.group_width = group_width

    @property
    def digits(self) -> str:
        return DIGITS[:self.radix]

    def accepts(self, ch: str) -> bool:
        return len(ch) == 1 and ch.upper() in self.digits


class IntegerOperation(str, Enum):
    HEX = "HEX"
    DEC = "DEC"
    OCT = "OCT"
    BIN = "BIN"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    NOT = "NOT"
    LSH = "LSH"
    RSH = "RSH"


@dataclass(frozen=True)
class IntegerResult:
    value: int
    new_base: Optional[NumberBase] = None


_BINARY: Dict[IntegerOperation, Callable[[int, int], int]] = {
    IntegerOperation.AND: operator.and_,
    IntegerOperation.OR: operator.or_,
    IntegerOperation.XOR: operator.xor,
}

_UNARY: Dict[IntegerOperation, Callable[[int], int]] = {
    IntegerOperation.NOT: operator.invert,
    IntegerOperation.LSH: lambda a: a << 1,
    IntegerOperation.RSH: lambda a: a >> 1,
}


def parse_in_base(text: str, base: NumberBase) -> int:
    """Parse display text as a signed integer in ``base``.

    Group separators (whitespace) are ignored. Only DEC takes a sign; the
    other bases are read as a bit pattern, the way ``format_integer`` writes
    them. Raises InvalidInputError when there are no digits or a character is
    not a digit of the base.
    """
    s = "".join(text.split())
    signed = base is NumberBase.DEC and s[:1] in ("+", "-")
    negative = signed and s[0] == "-"
    digits = s[1:] if signed else s
    if not digits or not all(base.accepts(ch) for ch in digits):
        raise InvalidInputError(f"{text!r} is not a base-{base.radix} integer.")
    n = int(digits, base.radix)
    return to_word(-n if negative else n)


def apply(operation: Union[IntegerOperation, str], operand: int, second: int = 0,
          base: NumberBase = NumberBase.DEC) -> IntegerResult:
    """Run one programmer-mode operation.

    Base switches return the operand unchanged with ``new_base`` set. AND, OR
    and XOR combine ``operand`` with ``second``; NOT, LSH and RSH ignore it.
    Shifts move exactly one bit, RSH keeps the sign. ``base`` is the active
    base of the caller; the arithmetic is the same in every base, so it only
    shows up in the debug log.
    """
    try:
        op = IntegerOperation(operation)
    except ValueError:
        raise InvalidOperationError(f"Unknown operation: {operation}.") from None
    a, b = to_word(operand), to_word(second)
    if op.name in NumberBase.__members__:
        return IntegerResult(a, NumberBase[op.name])
    if op in _BINARY:
        value = _BINARY[op](a, b)
    else:
        value = _UNARY[op](a)
    logger.debug("%s %s -> %d (%s)", op.value, a, value, base.name)
    return IntegerResult(to_word(value))


def _to_radix(n: int, radix: int) -> str:
    if n == 0: return "0"
    r = []
    while n: n, m = divmod(n, radix); r.append(DIGITS[m])
    return "".join(reversed(r))


def group_digits(digits: str, width: int) -> str:
    """Zero-pad to a multiple of ``width`` and space-separate the groups."""
    if width <= 0: return digits
    padded = digits.zfill(-(-len(digits) // width) * width)
    return " ".join(padded[i:i + width] for i in range(0, len(padded), width))


def format_integer(value: int, base: NumberBase) -> str:
    value = to_word(value)
    if base is NumberBase.DEC:
        return str(value)
    return group_digits(_to_radix(value & WORD_MASK, base.radix), base.group_width)
