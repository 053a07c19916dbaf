"""Depth-first walking of nested dicts and lists.

The ObjectWalker visits every key of every plain mapping reachable from the
input (and of sequences, when the WalkConfig allows it), calling a visitor
with ``(key, parent, path)``. The visitor decides whether the value at that
key is descended into.
"""

import logging
from enum import Enum
from typing import Any, Callable, Iterator, List, Mapping, Tuple, Union

from ..config import WalkConfig
from ..errors import InvalidInputError
from .nodes import is_container, is_plain_object, own_keys
from .path import Path, PathAccumulator, create_path_accumulator
from .policy import should_descend_array

logger = logging.getLogger(__name__)


class VisitResult(Enum):
    """What a visitor wants the walker to do with the value at the visited key.

    CONTINUE is falsy and SKIP is truthy, so visitors written against the
    older "return True to stop" convention keep working unchanged.
    """
    CONTINUE = "continue"   # Descend into the value if it's a container
    SKIP = "skip"           # Don't descend; siblings are still visited

    def __bool__(self) -> bool:
        return self is VisitResult.SKIP


# visitor(key, parent, path) -> VisitResult, bool or None
Visitor = Callable[[Any, Any, Path], Any]

_MISSING = object()


class ObjectWalker:
    """Pre-order, depth-first walker over plain nested data.

    Uses an explicit work stack instead of recursion, so very deep inputs
    don't hit the interpreter's recursion limit. Visit order and reported
    paths are those of the straightforward recursive walk.

    Example:
        >>> seen = []
        >>> ObjectWalker().walk({'a': {'b': 1}}, lambda k, p, path: seen.append(k))
        >>> seen
        ['a', 'b']
    """

    def __init__(self, config: Union[WalkConfig, Mapping[str, Any], None] = None):
        """Initialize walker with a configuration.

        Args:
            config: WalkConfig or dict of options (defaults to WalkConfig()).
                It is normalized and validated here, so a hand-built config
                with a string key set or a non-bool walk_arrays is rejected.

        Raises:
            InvalidConfigError: If the config fails validation
            InvalidPathTypeError: If the path type is unknown
        """
        self.config = WalkConfig.from_options(config)

    def walk(self, input: Any, visitor: Visitor) -> None:
        """Walk ``input`` and call ``visitor`` for every key.

        Args:
            input: dict, list or tuple to walk
            visitor: Called as ``visitor(key, parent, path)``. Returning
                VisitResult.SKIP (or any truthy value) prevents descent
                into ``parent[key]``.

        Raises:
            InvalidInputError: If input is not a dict, list or tuple
            InvalidPathTypeError: If the config's path type is unknown
        """
        if not is_container(input):
            raise InvalidInputError(
                f"The input must be an object. Got {type(input).__name__}."
            )

        root = create_path_accumulator(self.config.path_type)
        logger.debug(
            f"Walking {type(input).__name__} with {len(input)} top-level keys, "
            f"config={self.config!r}"
        )

        walk_arrays = self.config.walk_arrays
        matching_keys = self.config.walk_arrays_matching_keys

        # Stack entries are (container, remaining keys, path to container)
        stack: List[Tuple[Any, Iterator[Any], PathAccumulator]] = [
            (input, iter(own_keys(input)), root)
        ]

        while stack:
            node, keys, accumulator = stack[-1]
            key = next(keys, _MISSING)
            if key is _MISSING:
                stack.pop()
                continue

            path = accumulator.current_path(node, key)
            # Visitor can force traversal to stop by returning a truthy value
            if visitor(key, node, path):
                continue

            value = _child(node, key)
            if is_plain_object(value) or should_descend_array(
                    key, value, walk_arrays, matching_keys):
                stack.append(
                    (value, iter(own_keys(value)), accumulator.extend(node, key))
                )


def _child(node: Any, key: Any) -> Any:
    """Value at node[key], or _MISSING if the visitor removed it."""
    try:
        return node[key]
    except (KeyError, IndexError):
        return _MISSING
