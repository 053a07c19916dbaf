"""Attribute setter paths.

Turns a segmented path, as reported by a walk over a plotting library's
internal figure state, into the accessor string used to update an attribute:

    ['_fullData', 0, 'transforms', 3, 'type'] -> 'transforms[3].type'

The internal roots (``_fullData`` with its trace index, ``_fullInput`` and
``_fullLayout``) are stripped since they are implied when the change is
applied, e.g. through the trace's user data index.
"""

from numbers import Number
from typing import Any, Sequence

FULL_DATA = '_fullData'
FULL_INPUT = '_fullInput'
FULL_LAYOUT = '_fullLayout'


def make_attr_setter_path(parts: Sequence[Any]) -> str:
    """Flatten path segments into a ``a.b[0].c`` accessor string.

    Args:
        parts: Path segments. Numbers, and single-element lists holding a
            number, become ``[n]``; everything else becomes ``.name``.

    Returns:
        The accessor string (empty if nothing is left after stripping)
    """
    # Truncate the leading parts that aren't interesting when applying changes
    i0 = 0
    if _part(parts, i0) == FULL_DATA:
        i0 += 2
    if _part(parts, i0) == FULL_INPUT:
        i0 += 1
    if _part(parts, i0) == FULL_LAYOUT:
        i0 += 1

    path = ''
    for i in range(i0, len(parts)):
        part = parts[i]
        if _is_index(part):
            path += f"[{part}]"
        elif isinstance(part, (list, tuple)) and len(part) == 1:
            path += f"[{part[0]}]"
        else:
            path += ('.' if i > i0 else '') + str(part)
    return path


def _part(parts: Sequence[Any], i: int) -> Any:
    return parts[i] if i < len(parts) else None


def _is_index(part: Any) -> bool:
    return isinstance(part, Number) and not isinstance(part, bool)
