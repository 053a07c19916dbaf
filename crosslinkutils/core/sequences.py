"""Sequence helpers."""

from typing import Any, List


def align(data: List[List[Any]]) -> List[List[Any]]:
    """Pad lists in place so all of them have the same length.

    Shorter lists are padded with None up to the length of the longest one;
    nothing is ever truncated.

    Args:
        data: A list of possibly unequal-length lists

    Returns:
        ``data`` itself, for chaining
    """
    max_length = max((len(array) for array in data), default=0)
    for array in data:
        if len(array) < max_length:
            array.extend([None] * (max_length - len(array)))
    return data
