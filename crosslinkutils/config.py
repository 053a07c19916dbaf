"""Configuration system for crosslinkutils.

This module defines how callers specify a walk: whether arrays are descended
into (globally or only under specific keys) and which path representation
the visitor receives.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from .errors import InvalidConfigError, InvalidPathTypeError

logger = logging.getLogger(__name__)


class PathType(Enum):
    """How the accumulated path is reported to a visitor.

    SEGMENTED paths are lists of keys from the root to the *parent* of the
    visited key. FLATTENED paths are a single accessor string such as
    ``"x.y[1].z"`` that *includes* the visited key.
    """
    SEGMENTED = "segmented"     # ['a', 0, 'b'] up to the parent
    FLATTENED = "flattened"     # 'a[0].b.key' including the key

    @classmethod
    def parse(cls, value: Union['PathType', str, None]) -> 'PathType':
        """Turn a PathType, one of its names, or None into a PathType.

        Args:
            value: PathType member, string name/alias, or None for the default

        Returns:
            The matching PathType

        Raises:
            InvalidPathTypeError: If the name is not recognized
        """
        if value is None:
            return cls.SEGMENTED
        if isinstance(value, cls):
            return value

        aliases = {
            'segmented': cls.SEGMENTED,
            'array': cls.SEGMENTED,
            'flattened': cls.FLATTENED,
            'nestedproperty': cls.FLATTENED,
            'nested_property': cls.FLATTENED,
        }
        if isinstance(value, str) and value.lower() in aliases:
            return aliases[value.lower()]

        raise InvalidPathTypeError(
            f"unrecognized pathType {value!r}. "
            f"Choose from: {', '.join(aliases.keys())}"
        )


# Option names accepted by WalkConfig.from_options, including the camelCase
# spelling used by plotting-library callers.
_OPTION_NAMES = {
    'walk_arrays': 'walk_arrays',
    'walkArrays': 'walk_arrays',
    'walk_arrays_matching_keys': 'walk_arrays_matching_keys',
    'walkArraysMatchingKeys': 'walk_arrays_matching_keys',
    'path_type': 'path_type',
    'pathType': 'path_type',
}


@dataclass
class WalkConfig:
    """Complete configuration for an object walk.

    This is the primary way callers specify how walk_object traverses
    nested dicts and lists. Plain dicts are always descended into; lists
    and tuples only when allowed here.
    """

    # Array descent
    walk_arrays: bool = False
    walk_arrays_matching_keys: FrozenSet[Any] = field(default_factory=frozenset)

    # Path reporting
    path_type: PathType = PathType.SEGMENTED

    # Convenience constructors for common configurations

    @classmethod
    def all_arrays(cls, path_type: Union[PathType, str] = PathType.SEGMENTED) -> 'WalkConfig':
        """Create config that descends into every list and tuple.

        This is the configuration copy_object uses internally.
        """
        return cls(walk_arrays=True, path_type=PathType.parse(path_type))

    @classmethod
    def flattened(cls,
                  walk_arrays: bool = False,
                  matching_keys: Optional[Iterable[Any]] = None) -> 'WalkConfig':
        """Create config reporting ``a.b[0].c`` style paths.

        Args:
            walk_arrays: Descend into every list
            matching_keys: Keys whose list values are descended into

        Returns:
            WalkConfig with FLATTENED paths
        """
        return cls.from_options(
            walk_arrays=walk_arrays,
            walk_arrays_matching_keys=matching_keys,
            path_type=PathType.FLATTENED,
        )

    @classmethod
    def from_options(cls,
                     config: Union['WalkConfig', Mapping[str, Any], None] = None,
                     **overrides) -> 'WalkConfig':
        """Normalize any accepted form of walk options into a WalkConfig.

        Args:
            config: An existing WalkConfig, a dict of options (snake_case or
                camelCase names), or None for the defaults
            **overrides: Individual options that win over ``config``

        Returns:
            A validated WalkConfig

        Raises:
            InvalidConfigError: On unknown option names or invalid values
            InvalidPathTypeError: On an unrecognized path type
        """
        options: Dict[str, Any] = {}
        if isinstance(config, WalkConfig):
            options.update(
                walk_arrays=config.walk_arrays,
                walk_arrays_matching_keys=config.walk_arrays_matching_keys,
                path_type=config.path_type,
            )
        elif config is not None:
            if not isinstance(config, Mapping):
                raise InvalidConfigError(
                    f"config must be a WalkConfig or a mapping, not {type(config).__name__}"
                )
            options.update(_normalize_names(config))
        options.update(_normalize_names(overrides))

        normalized = cls(
            walk_arrays=options.get('walk_arrays', False),
            walk_arrays_matching_keys=_to_key_set(options.get('walk_arrays_matching_keys')),
            path_type=PathType.parse(options.get('path_type')),
        )

        errors = normalized.validate()
        if errors:
            raise InvalidConfigError(f"Invalid configuration: {'; '.join(errors)}")

        logger.debug(f"Normalized walk options {options!r} -> {normalized!r}")
        return normalized

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.walk_arrays, bool):
            errors.append("walk_arrays must be a boolean")

        if not isinstance(self.walk_arrays_matching_keys, frozenset):
            errors.append("walk_arrays_matching_keys must be a frozenset")

        if not isinstance(self.path_type, PathType):
            errors.append(f"path_type must be a PathType, not {self.path_type!r}")

        return errors


def _normalize_names(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Map snake_case/camelCase option names onto WalkConfig field names."""
    normalized = {}
    unknown = []
    for name, value in options.items():
        if name not in _OPTION_NAMES:
            unknown.append(name)
            continue
        normalized[_OPTION_NAMES[name]] = value

    if unknown:
        raise InvalidConfigError(
            f"Unknown walk option(s): {', '.join(sorted(map(str, unknown)))}"
        )
    return normalized


def _to_key_set(keys: Optional[Iterable[Any]]) -> FrozenSet[Any]:
    """Turn the matching-keys option into a frozenset."""
    if keys is None:
        return frozenset()
    if isinstance(keys, (str, bytes)):
        # A bare string would otherwise become a set of characters
        raise InvalidConfigError(
            "walk_arrays_matching_keys must be a collection of keys, not a string"
        )
    try:
        return frozenset(keys)
    except TypeError as e:
        raise InvalidConfigError(f"walk_arrays_matching_keys is not a set of keys: {e}") from e
