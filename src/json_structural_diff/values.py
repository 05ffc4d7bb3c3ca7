"""ValueKind StrEnum and classification helpers for JSON-like values.

Every value handed to the diff engine falls into exactly one of four kinds:

- NULL      -> ``None``
- PRIMITIVE -> bool, int, float, str, and any other opaque object
- SEQUENCE  -> ``list`` or ``tuple``
- MAPPING   -> any ``collections.abc.Mapping``

Strings and bytes are primitives even though they are iterable.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

__all__ = ["ValueKind", "classify", "loose_equal", "strict_equal"]


class ValueKind(StrEnum):
    """The four value shapes distinguished by the diff engine.

    StrEnum values are the lowercased member names:
    - NULL      -> "null"
    - PRIMITIVE -> "primitive"
    - SEQUENCE  -> "sequence"
    - MAPPING   -> "mapping"
    """

    NULL = auto()
    PRIMITIVE = auto()
    SEQUENCE = auto()
    MAPPING = auto()


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of *value*.

    Args:
        value: Any Python object.

    Returns:
        The matching ValueKind.  Objects that are neither ``None``, a
        list/tuple, nor a Mapping are PRIMITIVE.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.PRIMITIVE


def strict_equal(a: Any, b: Any) -> bool:
    """Compare two primitives without cross-type coercion.

    - ``bool`` never equals a non-``bool`` (``True`` vs ``1`` differ).
    - ``int`` and ``float`` compare numerically (``1 == 1.0``).
    - NaN never equals anything, itself included.
    - Everything else requires matching types and ``a == b``.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b

    if _is_number(a) and _is_number(b):
        if _is_nan(a) or _is_nan(b):
            return False
        return bool(a == b)

    if type(a) is not type(b):
        return False
    return _safe_eq(a, b)


def loose_equal(a: Any, b: Any) -> bool:
    """Compare two primitives with plain ``==``, NaN still never equal."""
    if _is_nan(a) or _is_nan(b):
        return False
    return _safe_eq(a, b)


def _safe_eq(a: Any, b: Any) -> bool:
    if a is b:
        return True
    # Ambiguous results (e.g. an array-valued __eq__) count as not equal
    try:
        return bool(a == b)
    except (ValueError, TypeError):
        return False


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float))


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
