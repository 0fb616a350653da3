"""
Process-wide defaults for objectdiff.

The library has no configuration files and reads no environment
variables.  What can be tuned lives here as module state with explicit
getters and setters, so a test or an application can swap a default in
one place instead of threading it through every accessor.
"""

from typing import Tuple

from objectdiff.identity import EqualsIdentityStrategy, IdentityStrategy


# Types whose absence cannot be expressed by the value itself; a zero
# value stands in as their "nothing happened here" baseline.
PRIMITIVE_TYPES: Tuple[type, ...] = (bool, int, float, complex)

_default_identity_strategy: IdentityStrategy = EqualsIdentityStrategy()


def get_default_identity_strategy() -> IdentityStrategy:
    """Strategy used by collection item accessors built without one."""
    return _default_identity_strategy


def set_default_identity_strategy(strategy: IdentityStrategy) -> None:
    """Replace the default collection item identity strategy.

    Args:
        strategy: Any object with an ``equals(working, base)`` method
    """
    global _default_identity_strategy
    if not isinstance(strategy, IdentityStrategy):
        raise TypeError(f"Not an identity strategy: {strategy!r}")
    _default_identity_strategy = strategy


def reset_defaults() -> None:
    """Restore every default to its initial value."""
    global _default_identity_strategy
    _default_identity_strategy = EqualsIdentityStrategy()
