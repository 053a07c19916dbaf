"""High-level API for crosslinkutils.

This module provides simple, functional interfaces over the walker and
copier classes. These functions are what most callers need.
"""

from typing import Any, List, Mapping, Optional, Union

from .config import PathType, WalkConfig
from .core.copier import CopyCallback, StructuralCopier
from .core.walker import ObjectWalker, Visitor, VisitResult

ConfigLike = Union[WalkConfig, Mapping[str, Any], None]


def walk_object(input: Any,
                visitor: Visitor,
                config: ConfigLike = None,
                **options) -> None:
    """Walk a dict or list and call ``visitor`` for each key.

    Dicts are always descended into. Lists and tuples are only descended
    into when ``walk_arrays`` is set, or when their key is one of
    ``walk_arrays_matching_keys``.

    Args:
        input: The dict, list or tuple to walk
        visitor: Called as ``visitor(key, parent, path)``. Return
            VisitResult.SKIP (or True) to keep the walk out of
            ``parent[key]``; returning nothing walks everything.
        config: WalkConfig, or a dict of options. The original camelCase
            option names (``walkArrays``, ``walkArraysMatchingKeys``,
            ``pathType``) are accepted.
        **options: Individual options overriding ``config``:
            walk_arrays (bool), walk_arrays_matching_keys (iterable of
            keys), path_type ('segmented' or 'flattened'). Segmented paths
            are lists of keys up to the parent; flattened paths are
            ``a.b[0].c`` strings including the current key.

    Raises:
        InvalidInputError: If input is neither a dict nor a list/tuple
        InvalidPathTypeError: If path_type is not recognized
        InvalidConfigError: If an option is unknown or invalid

    Example:
        >>> def show(key, parent, path):
        ...     print(path)
        >>> walk_object({'x': {'y': 5}}, show, path_type='flattened')
        x
        x.y
    """
    walker = ObjectWalker(WalkConfig.from_options(config, **options))
    walker.walk(input, visitor)


def copy_object(input: Any, should_copy: Optional[CopyCallback] = None) -> Any:
    """Copy a dict or list structurally.

    Every nested dict and list is copied (lists are always walked here);
    other values are carried over by reference.

    Args:
        input: The dict, list or tuple to copy
        should_copy: Called as ``should_copy(key, parent, path)``. If it
            returns ``False`` the key and everything under it is left out.

    Returns:
        A copy of the input

    Raises:
        InvalidInputError: If input is neither a dict nor a list/tuple

    Example:
        >>> copy_object({'a': {'b': 1}, 'c': 2}, lambda key, parent, path: key != 'a')
        {'c': 2}
    """
    return StructuralCopier(should_copy).copy(input)


def get_object_paths(input: Any, config: ConfigLike = None, **options) -> List[str]:
    """Get the flattened path of every key a walk visits.

    Args:
        input: The dict, list or tuple to walk
        config: Walk options (see walk_object); path_type is forced to
            'flattened'
        **options: Individual options overriding ``config``

    Returns:
        Paths in visit order, e.g. ``['a', 'a.b', 'c']``

    Example:
        >>> get_object_paths({'a': {'b': 1}, 'c': [1, 2]}, walk_arrays=True)
        ['a', 'a.b', 'c', 'c[0]', 'c[1]']
    """
    options['path_type'] = PathType.FLATTENED
    paths: List[str] = []

    def collect(key, parent, path):
        paths.append(path)
        return VisitResult.CONTINUE

    walk_object(input, collect, config, **options)
    return paths


def count_keys(input: Any, config: ConfigLike = None, **options) -> int:
    """Count the keys a walk visits.

    Args:
        input: The dict, list or tuple to walk
        config: Walk options (see walk_object)
        **options: Individual options overriding ``config``

    Returns:
        Number of visited keys
    """
    count = 0

    def tally(key, parent, path):
        nonlocal count
        count += 1

    walk_object(input, tally, config, **options)
    return count
