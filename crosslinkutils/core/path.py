"""Path accumulation for object walks.

A PathAccumulator tracks where the walker currently is, relative to the walk
root. Accumulators are immutable: descending into a child produces a new
accumulator, so sibling subtrees never see each other's path segments.

Two representations are supported:

- SEGMENTED: a list of keys from the root to the *parent* of the visited
  key, e.g. ``['traces', 0]`` when visiting ``'type'``.
- FLATTENED: a ``nestedProperty`` style string that *includes* the visited
  key, e.g. ``'traces[0].type'``.
"""

from dataclasses import dataclass
from typing import Any, Tuple, Union

from ..config import PathType
from .nodes import is_sequence

# Path value as reported to a visitor.
Path = Union[list, str]


@dataclass(frozen=True)
class PathAccumulator:
    """Immutable path to the container currently being walked."""

    path_type: PathType
    segments: Tuple[Any, ...] = ()
    flattened: str = ''

    def extend(self, parent: Any, key: Any) -> 'PathAccumulator':
        """Return the accumulator for ``parent[key]``.

        Args:
            parent: Container that owns ``key`` (the node this accumulator
                points at)
            key: Key or index being descended into

        Returns:
            New PathAccumulator one level deeper
        """
        if self.path_type is PathType.SEGMENTED:
            return PathAccumulator(self.path_type, segments=self.segments + (key,))

        if not self.flattened:
            next_path = str(key)
        elif is_sequence(parent):
            next_path = f"{self.flattened}[{key}]"
        else:
            next_path = f"{self.flattened}.{key}"
        return PathAccumulator(self.path_type, flattened=next_path)

    def current_path(self, parent: Any, key: Any) -> Path:
        """Path reported to the visitor for ``parent[key]``.

        In SEGMENTED mode the visited key is *not* included; the visitor
        receives the path to ``parent``. In FLATTENED mode the key is
        included.
        """
        if self.path_type is PathType.SEGMENTED:
            return list(self.segments)
        return self.extend(parent, key).flattened


def create_path_accumulator(path_type: Union[PathType, str, None] = None) -> PathAccumulator:
    """Create an empty accumulator for the walk root.

    Args:
        path_type: PathType or its name ('segmented'/'array',
            'flattened'/'nestedProperty'); None means SEGMENTED

    Returns:
        PathAccumulator pointing at the root

    Raises:
        InvalidPathTypeError: If path_type is not recognized
    """
    return PathAccumulator(PathType.parse(path_type))
