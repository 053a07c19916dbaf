"""Core building blocks for crosslinkutils.

This package contains the walker, copier and the small helpers they are
built from. Most callers should use the functions in crosslinkutils.api.
"""

from .nodes import is_plain_object, is_sequence
from .path import PathAccumulator, create_path_accumulator
from .policy import should_descend_array
from .walker import ObjectWalker, VisitResult
from .copier import StructuralCopier
from .attr_path import make_attr_setter_path
from .sequences import align
from .equality import shallow_equal

__all__ = [
    "is_plain_object",
    "is_sequence",
    "PathAccumulator",
    "create_path_accumulator",
    "should_descend_array",
    "ObjectWalker",
    "VisitResult",
    "StructuralCopier",
    "make_attr_setter_path",
    "align",
    "shallow_equal",
]
