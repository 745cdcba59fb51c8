"""Runtime value helpers for Lox.

Lox values map directly onto Python objects: `None` is nil, `bool` is a
boolean, every number is a `float` and strings are `str`. The helpers in this
module implement the language rules that differ from Python's own, namely
truthiness, equality, arithmetic on zero divisors and the display format used
by `print`.
"""

from __future__ import annotations

import math
from typing import Any


def is_number(value: Any) -> bool:
    # bool is a subclass of int, never of float
    return isinstance(value, float)


def is_truthy(value: Any) -> bool:
    """Only nil and false are falsy; 0 and "" are truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    """Equality without implicit conversion.

    nil equals only nil, and values of different types are never equal, so
    `1 == true` is false even though Python considers 1.0 == True.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if type(a) is not type(b):
        return False
    return a == b


def divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor yields an infinity or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        sign = math.copysign(1.0, a) * math.copysign(1.0, b)
        return math.copysign(math.inf, sign)
    return a / b


def number_to_string(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if 'e' in text:
        # 1e-07 -> 1e-7, 1e+21 stays as is
        mantissa, exponent = text.split('e')
        exp = int(exponent)
        text = f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
    return text


def stringify(value: Any) -> str:
    """Convert a runtime value to the text `print` writes."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return number_to_string(value)
    return str(value)


def type_name(value: Any) -> str:
    """Return the Lox type name of a runtime value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return type(value).__name__
