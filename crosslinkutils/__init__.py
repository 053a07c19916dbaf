"""crosslinkutils - Object walking and copying utilities for crossfiltering.

crosslinkutils walks and copies nested plain data (dicts and lists), the
shape of a plotting library's figure state, and turns the paths it visits
into attribute setter strings.

Typical use:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Walk:
    from crosslinkutils import walk_object
    walk_object(figure, visitor, walk_arrays_matching_keys={'transforms'})

Copy:
    from crosslinkutils import copy_object
    state = copy_object(figure, lambda key, parent, path: key != '_module')
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import PathType, WalkConfig
from .errors import (
    CrosslinkUtilsError,
    InvalidInputError,
    InvalidPathTypeError,
    InvalidConfigError,
)
from .core import (
    is_plain_object,
    is_sequence,
    PathAccumulator,
    create_path_accumulator,
    should_descend_array,
    ObjectWalker,
    VisitResult,
    StructuralCopier,
    make_attr_setter_path,
    align,
    shallow_equal,
)
from .api import (
    walk_object,
    copy_object,
    get_object_paths,
    count_keys,
)

__all__ = [
    "__version__",
    # API
    "align",
    "shallow_equal",
    "walk_object",
    "copy_object",
    "make_attr_setter_path",
    "get_object_paths",
    "count_keys",
    # Node kinds
    "is_plain_object",
    "is_sequence",
    # Core
    "ObjectWalker",
    "VisitResult",
    "StructuralCopier",
    "PathAccumulator",
    "create_path_accumulator",
    "should_descend_array",
    # Config
    "WalkConfig",
    "PathType",
    # Errors
    "CrosslinkUtilsError",
    "InvalidInputError",
    "InvalidPathTypeError",
    "InvalidConfigError",
]
