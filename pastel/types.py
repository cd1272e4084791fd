"""Runtime values for the Pastel interpreter.

Every value the interpreter produces is one of five frozen dataclasses,
one per scalar kind. Values never change after construction; arithmetic
builds new ones. ``kind`` names the value's type the way Pastel source
spells it, and ``display()`` gives the text ``writeln`` prints.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union
import math


INTEGER = 'integer'
REAL = 'real'
BOOLEAN = 'boolean'
CHAR = 'char'
STRING = 'string'

# Integers are signed 64-bit.
INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1


def in_int_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def format_real(x: float) -> str:
    """Format a real the way Pastel prints it.

    The shortest digit string that round-trips is used. Plain notation is
    kept while the decimal exponent lies in [-4, 6); outside that range
    the value is printed in scientific notation with at least two exponent
    digits, e.g. ``1e+06`` or ``2.5e-07``.
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return '+Inf' if x > 0 else '-Inf'
    d = Decimal(repr(x)).normalize()
    exponent = d.adjusted()
    if -4 <= exponent < 6:
        return format(d, 'f')
    digits = len(d.as_tuple().digits)
    return f"{x:.{digits - 1}e}"


@dataclass(frozen=True)
class IntegerValue:
    value: int
    kind = INTEGER

    def display(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RealValue:
    value: float
    kind = REAL

    def display(self) -> str:
        return format_real(self.value)


@dataclass(frozen=True)
class BooleanValue:
    value: bool
    kind = BOOLEAN

    def display(self) -> str:
        return 'true' if self.value else 'false'


@dataclass(frozen=True)
class CharValue:
    value: str
    kind = CHAR

    def display(self) -> str:
        return self.value


@dataclass(frozen=True)
class StringValue:
    value: str
    kind = STRING

    def display(self) -> str:
        return self.value


Value = Union[IntegerValue, RealValue, BooleanValue, CharValue, StringValue]


def default_value(type_name: str) -> Value:
    """Return the zero value for a declared type.

    Unknown type names fall back to integer zero.
    """
    if type_name == REAL:
        return RealValue(0.0)
    if type_name == BOOLEAN:
        return BooleanValue(False)
    if type_name == CHAR:
        return CharValue(' ')
    if type_name == STRING:
        return StringValue('')
    return IntegerValue(0)


def is_numeric(value: Value) -> bool:
    return isinstance(value, (IntegerValue, RealValue))


def is_textual(value: Value) -> bool:
    return isinstance(value, (CharValue, StringValue))
