"""Exceptions raised by crosslinkutils.

All library errors derive from CrosslinkUtilsError. Each concrete error also
derives from the matching builtin so callers can catch TypeError/ValueError
without importing this module.
"""


class CrosslinkUtilsError(Exception):
    """Base class for all crosslinkutils errors."""
    pass


class InvalidInputError(CrosslinkUtilsError, TypeError):
    """Raised when a walk or copy is started on something that isn't a container."""
    pass


class InvalidPathTypeError(CrosslinkUtilsError, ValueError):
    """Raised when an unrecognized path representation is requested."""
    pass


class InvalidConfigError(CrosslinkUtilsError, ValueError):
    """Raised when walk options can't be turned into a valid WalkConfig."""
    pass
