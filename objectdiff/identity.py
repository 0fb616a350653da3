"""
objectdiff.identity — Equality oracles.

Two notions of "the same" are used when comparing snapshots:

    • is_equal(a, b)
        Structural equality between a base and a working value.  This
        is what decides whether a node CHANGED.

    • IdentityStrategy.equals(a, b)
        Whether two collection elements represent the same LOGICAL item
        across snapshots.  This is what lets a collection item be found
        again after intervening inserts and deletes shifted its position.
        Strategies are pluggable and need not be hash-compatible.

Examples:
    is_equal(1, 1)                                    → True
    is_equal(True, 1)                                 → False
    ReferenceIdentityStrategy().equals([1], [1])      → False
    KeyIdentityStrategy("id").equals(u1, u1_renamed)  → True
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Union, runtime_checkable


def is_equal(a: Any, b: Any) -> bool:
    """
    Structural equality between two values, either of which may be None.

    bool is a subclass of int in Python (True == 1, False == 0), so a
    bool is never considered equal to a non-bool.  Without this guard a
    flag flipping from False to 0 would look unchanged.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False

    a_is_bool = type(a) is bool
    b_is_bool = type(b) is bool
    if a_is_bool != b_is_bool:
        return False

    return bool(a == b)


# ═══════════════════════════════════════════════════════════════════
#  IDENTITY STRATEGIES
# ═══════════════════════════════════════════════════════════════════

@runtime_checkable
class IdentityStrategy(Protocol):
    """Decides whether two collection elements are the same logical item."""

    def equals(self, working: Any, base: Any) -> bool: ...


@dataclass(frozen=True)
class EqualsIdentityStrategy:
    """Items are identical when they are structurally equal.  The default."""

    def equals(self, working: Any, base: Any) -> bool:
        return is_equal(working, base)


@dataclass(frozen=True)
class ReferenceIdentityStrategy:
    """Items are identical only when they are the very same object."""

    def equals(self, working: Any, base: Any) -> bool:
        return working is base


@dataclass(frozen=True)
class KeyIdentityStrategy:
    """
    Items are identical when their keys are equal.

    `key` is either an attribute name or a callable.  Mappings are
    looked up by item when `key` is a string, so the same strategy works
    for records and for dict-shaped items:

        KeyIdentityStrategy("id")
        KeyIdentityStrategy(lambda user: user.email.lower())

    An item without a key (missing, or None) matches nothing but itself.
    """
    key: Union[str, Callable[[Any], Any]]

    def key_of(self, item: Any) -> Any:
        if callable(self.key):
            return self.key(item)
        if isinstance(item, Mapping):
            return item.get(self.key)
        return getattr(item, self.key, None)

    def equals(self, working: Any, base: Any) -> bool:
        if working is None or base is None:
            return working is base
        working_key = self.key_of(working)
        base_key = self.key_of(base)
        if working_key is None or base_key is None:
            return working is base
        return is_equal(working_key, base_key)
