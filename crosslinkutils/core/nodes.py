"""Node classification for crosslinkutils.

Only two kinds of container are ever traversed: plain mappings (dicts) and
sequences (lists and tuples). Everything else, including strings, dates,
sets and arbitrary objects, is a leaf.
"""

from typing import Any, List


def is_plain_object(value: Any) -> bool:
    """Check if value is a plain key-value mapping (a dict)."""
    return isinstance(value, dict)


def is_sequence(value: Any) -> bool:
    """Check if value is an ordered, indexable container (list or tuple)."""
    return isinstance(value, (list, tuple))


def is_container(value: Any) -> bool:
    """Check if value is a dict, list or tuple."""
    return is_plain_object(value) or is_sequence(value)


def own_keys(node: Any) -> List[Any]:
    """Snapshot the keys of a container in enumeration order.

    Dicts yield their keys in insertion order, sequences yield ``0..n-1``.
    Any other value has no own keys.
    """
    if is_plain_object(node):
        return list(node.keys())
    if is_sequence(node):
        return list(range(len(node)))
    return []

