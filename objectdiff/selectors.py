"""
objectdiff.selectors — Where a node sits relative to its parent.

A selector is the reportable half of an accessor: it names the position
without knowing how to read or write it.  Selectors are immutable,
hashable and compare equal when they denote the same logical position.

    ROOT_SELECTOR                                  ""
    PropertyElementSelector("name")                "name"
    CollectionItemElementSelector({"id": 1})       "[{'id': 1}]"
    MapKeyElementSelector("port")                  "{port}"
"""

from typing import Any, Optional

from objectdiff.identity import IdentityStrategy, is_equal


class ElementSelector:
    """Base class for element selectors.  Not instantiated directly."""
    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class RootElementSelector(ElementSelector):
    """Selects the object the comparison started from."""
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RootElementSelector)

    def __hash__(self) -> int:
        return hash(RootElementSelector)

    def __str__(self) -> str:
        return ""


ROOT_SELECTOR = RootElementSelector()


class PropertyElementSelector(ElementSelector):
    """Selects a named field of a record."""
    __slots__ = ("property_name",)

    def __init__(self, property_name: str):
        self.property_name = property_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyElementSelector):
            return NotImplemented
        return self.property_name == other.property_name

    def __hash__(self) -> int:
        return hash((PropertyElementSelector, self.property_name))

    def __str__(self) -> str:
        return self.property_name


class CollectionItemElementSelector(ElementSelector):
    """
    Selects a collection element by identity rather than position.

    Two selectors are equal when their items are identical under the
    carried identity strategy (structural equality when none is set).
    Strategies are not required to be hash-compatible, so the hash only
    reflects the strategy and not the item.
    """
    __slots__ = ("item", "identity_strategy")

    def __init__(self, item: Any, identity_strategy: Optional[IdentityStrategy] = None):
        self.item = item
        self.identity_strategy = identity_strategy

    def with_identity_strategy(self, identity_strategy: IdentityStrategy) -> "CollectionItemElementSelector":
        return CollectionItemElementSelector(self.item, identity_strategy)

    def _identical(self, other_item: Any) -> bool:
        if self.identity_strategy is None:
            return is_equal(self.item, other_item)
        if self.item is None or other_item is None:
            return self.item is other_item
        return self.identity_strategy.equals(self.item, other_item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CollectionItemElementSelector):
            return NotImplemented
        return (self.identity_strategy == other.identity_strategy
                and self._identical(other.item))

    def __hash__(self) -> int:
        return hash((CollectionItemElementSelector, type(self.identity_strategy)))

    def __str__(self) -> str:
        return f"[{self.item!r}]"


class MapKeyElementSelector(ElementSelector):
    """Selects a mapping entry by key equality."""
    __slots__ = ("key",)

    def __init__(self, key: Any):
        self.key = key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapKeyElementSelector):
            return NotImplemented
        return is_equal(self.key, other.key)

    def __hash__(self) -> int:
        try:
            return hash((MapKeyElementSelector, self.key))
        except TypeError:
            return hash(MapKeyElementSelector)

    def __str__(self) -> str:
        return f"{{{self.key}}}"
