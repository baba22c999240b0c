"""Runtime value model for Lox.

Lox values are represented with native Python objects wherever a native
object carries the right semantics:

* Number  -> ``float`` (always a float, never an ``int``)
* String  -> ``str``
* Boolean -> ``bool``
* Nil     -> the :data:`NIL` singleton

A variable declared without an initializer holds no value at all. That
absent value is the Python ``None``; it prints as ``nil`` and behaves like
Nil under every operator.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Union
import math


class Nil:
    """Marker type for the Lox ``nil`` value."""
    _instance: Optional['Nil'] = None

    def __new__(cls) -> 'Nil':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'nil'

    def __bool__(self) -> bool:
        return False


NIL = Nil()

Value = Union[float, str, bool, Nil]


def format_number(value: float) -> str:
    """Return the canonical text of a Lox number.

    Finite whole numbers print without a fractional part or exponent
    (``2``, ``-3``, ``-0``, ``100000000000000000000``), using the digits of
    the shortest repr so large values are not padded with binary noise.
    Everything else uses Python's shortest round-trip repr (``1.5``,
    ``inf``, ``nan``). The same rule is used for token literals, rendered
    expressions and printed values.
    """
    if math.isfinite(value) and value.is_integer():
        text = format(Decimal(repr(value)), 'f')
        return text[:-2] if text.endswith('.0') else text
    return repr(value)


def type_name(value: Any) -> str:
    """Return the Lox tag name of a runtime value."""
    if value is None or isinstance(value, Nil):
        return 'Nil'
    if isinstance(value, bool):
        return 'Boolean'
    if isinstance(value, float):
        return 'Number'
    if isinstance(value, str):
        return 'String'
    raise TypeError(f"not a Lox value: {value!r}")


def to_string(value: Any) -> str:
    """Convert a Lox value to its canonical printed form."""
    if value is None or isinstance(value, Nil):
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"not a Lox value: {value!r}")


def is_truthy(value: Any) -> bool:
    # nil and false are the only falsy values; 0 and "" are truthy
    if value is None or isinstance(value, Nil):
        return False
    if isinstance(value, bool):
        return value
    return True


def values_equal(a: Any, b: Any) -> bool:
    """Lox equality: same tag and same canonical printed text.

    There is no coercion, so ``"1" == 1`` and ``"true" == true`` are both
    false.
    """
    return type_name(a) == type_name(b) and to_string(a) == to_string(b)
