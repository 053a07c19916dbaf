"""Array descent policy for object walks."""

from typing import Any, Container, Optional

from .nodes import is_sequence


def should_descend_array(key: Any,
                         value: Any,
                         walk_arrays: bool,
                         walk_arrays_matching_keys: Optional[Container[Any]] = None) -> bool:
    """Decide whether the sequence at ``key`` should be walked into.

    Args:
        key: Key under which ``value`` sits in its parent
        value: Candidate value
        walk_arrays: Descend into every sequence
        walk_arrays_matching_keys: Keys whose sequences are descended into

    Returns:
        False if value isn't a sequence, otherwise whether it is permitted
    """
    if not is_sequence(value):
        return False

    if walk_arrays:
        return True

    if walk_arrays_matching_keys and key in walk_arrays_matching_keys:
        return True

    return False
