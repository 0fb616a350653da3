"""
objectdiff.errors — Exception taxonomy.

Every error raised by the library derives from ObjectDiffError.  Each
concrete error also derives from the builtin exception that best matches
its meaning, so callers that already catch TypeError or
NotImplementedError keep working.

    UnsupportedOperationError  root accessor asked to set/unset
    InvalidArgumentError       accessor given a parent of the wrong shape
    TypeConflictError          corresponding values have incompatible types
"""

from typing import Iterable, Optional


class ObjectDiffError(Exception):
    """Base class for all objectdiff errors."""


class UnsupportedOperationError(ObjectDiffError, NotImplementedError):
    """The operation is not defined for this accessor (e.g. root set/unset)."""


class InvalidArgumentError(ObjectDiffError, TypeError):
    """
    An accessor was handed a parent value of the wrong shape.

    The offending runtime type is kept on the exception so the caller can
    pick a different accessor or skip the node.
    """

    def __init__(self, offending_type: type, expected: Optional[str] = None):
        self.offending_type = offending_type
        name = f"{offending_type.__module__}.{offending_type.__qualname__}"
        message = name if expected is None else f"{name} (expected {expected})"
        super().__init__(message)


class TypeConflictError(ObjectDiffError, TypeError):
    """
    Working, base and fresh values have mutually incompatible types.

    Raised by Instances.type when the values cannot be unified, not even
    by collapsing them to a common container shape.  There is no recovery
    policy for this case.
    """

    def __init__(self, types: Iterable[type]):
        self.types = frozenset(types)
        names = sorted(t.__qualname__ for t in self.types)
        super().__init__(
            f"Detected instances of different types {names}. "
            f"Instances must either be None or have the exact same type."
        )
