"""Shallow equality of plain objects.

Roughly based on react-redux's shallowEqual: two values are shallowly equal
when they are the same object, or when they have the same number of own keys
and every key of the first maps to a strictly equal value in the second.

Note that only the keys of ``a`` are checked against ``b``; key sets are
assumed equal when the key counts match.
"""

import math
from numbers import Number
from typing import Any

from .nodes import own_keys

_MISSING = object()


def strict_equal(a: Any, b: Any) -> bool:
    """Identity for objects, value equality for numbers and strings.

    ``1`` and ``1.0`` are strictly equal, ``True`` and ``1`` are not, and NaN
    is never equal to anything.
    """
    if isinstance(a, float) and math.isnan(a):
        return False
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, Number) and isinstance(b, Number):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return False


def shallow_equal(a: Any, b: Any) -> bool:
    """Check if all *top-level* values of ``a`` and ``b`` are strictly equal.

    Args:
        a: The first object
        b: The second object

    Returns:
        True if ``a`` is ``b``, or both have the same key count and every
        key of ``a`` has a strictly equal value in ``b``
    """
    if strict_equal(a, b):
        return True

    keys_a = own_keys(a)
    if len(keys_a) != len(own_keys(b)):
        return False

    return all(strict_equal(a[key], _get(b, key)) for key in keys_a)


def _get(node: Any, key: Any) -> Any:
    try:
        return node[key]
    except (KeyError, IndexError, TypeError):
        return _MISSING
