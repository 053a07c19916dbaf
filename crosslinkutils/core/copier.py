"""Structural copying of nested dicts and lists.

The StructuralCopier rebuilds the container graph of its input, driven by an
ObjectWalker with array walking enabled. A caller-supplied ``should_copy``
callback can prune any key (and so its whole subtree) from the output.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..config import WalkConfig
from .nodes import is_plain_object, is_sequence
from .path import Path
from .walker import ObjectWalker, VisitResult

logger = logging.getLogger(__name__)

# should_copy(key, parent, path) -> False to prune
CopyCallback = Callable[[Any, Any, Path], Any]


class StructuralCopier:
    """Copies every dict/list/tuple reachable from an input, leaves by reference.

    Output containers are fresh objects: no container in the output is
    shared with the input. Leaf values (numbers, strings, dates, custom
    objects, ...) are placed in the output as-is.

    Tuples are copied as lists, since the output is built by assignment.
    """

    def __init__(self, should_copy: Optional[CopyCallback] = None):
        """Initialize copier.

        Args:
            should_copy: Called as ``should_copy(key, parent, path)`` for
                every key. Returning exactly ``False`` leaves the key and its
                subtree out of the output. None copies everything.
        """
        self.should_copy = should_copy
        self._walker = ObjectWalker(WalkConfig.all_arrays())

    def copy(self, input: Any) -> Any:
        """Copy ``input``.

        Args:
            input: dict, list or tuple to copy

        Returns:
            New list (for sequence input) or dict holding the copied graph

        Raises:
            InvalidInputError: If input is not a dict, list or tuple
        """
        output = [] if is_sequence(input) else {}

        # Input containers are related to output containers by identity.
        # Holding the input objects in the table keeps their ids stable.
        copies: Dict[int, Any] = {id(input): output}
        held: List[Any] = [input]

        def visit(key: Any, input_parent: Any, path: Path) -> VisitResult:
            # The caller can prevent copying portions of the input
            if self.should_copy is not None and self.should_copy(key, input_parent, path) is False:
                return VisitResult.SKIP

            output_parent = copies[id(input_parent)]
            input_value = input_parent[key]
            if is_plain_object(input_value) or is_sequence(input_value):
                output_value = {} if is_plain_object(input_value) else []
                copies[id(input_value)] = output_value
                held.append(input_value)
                _assign(output_parent, key, output_value)
            else:
                _assign(output_parent, key, input_value)

            return VisitResult.CONTINUE

        logger.debug(f"Copying {type(input).__name__}")
        self._walker.walk(input, visit)
        logger.debug(f"Copied {len(held)} container(s)")
        return output


def _assign(output_parent: Any, key: Any, value: Any) -> None:
    """Set ``output_parent[key] = value``, growing a list output as needed.

    Indices skipped because the caller pruned them are filled with None.
    """
    if isinstance(output_parent, list):
        if key >= len(output_parent):
            output_parent.extend([None] * (key + 1 - len(output_parent)))
        output_parent[key] = value
    else:
        output_parent[key] = value
