"""
objectdiff.accessors — Reading and writing one position inside a parent.

An accessor is a capability: given a parent container it can get, set
and unset the value at one addressable position.  Four variants exist:

    RootAccessor            the comparison target itself
    PropertyAccessor        a named field of a record
    CollectionItemAccessor  a collection element, matched by IDENTITY
    MapEntryAccessor        a mapping entry, matched by KEY

Why identity and not index
──────────────────────────
Between a base and a working snapshot, elements are inserted and
removed.  Addressing an element by position would pair unrelated
elements once positions shift:

    base    = [A, B]
    working = [B, C]

Index 0 pairs A with B and reports a change.  Identity addressing
pairs A with nothing (removed), B with B (untouched) and C with
nothing (added).  The identity strategy is pluggable and not required
to be hash-compatible, so lookup is a linear scan.

Absent parents
──────────────
Every accessor treats a None parent as "nothing here": get returns
None and set/unset do nothing.  A parent of the wrong shape raises
InvalidArgumentError naming the offending type.
"""

from collections.abc import MutableMapping, MutableSequence, MutableSet
from dataclasses import fields, is_dataclass
from typing import Any, FrozenSet, Iterable, List, Optional, Protocol, get_type_hints, runtime_checkable

from objectdiff.config import get_default_identity_strategy
from objectdiff.errors import InvalidArgumentError, UnsupportedOperationError
from objectdiff.identity import IdentityStrategy
from objectdiff.introspection import concrete_type, is_collection_like, is_map_like_value
from objectdiff.selectors import (
    ROOT_SELECTOR,
    CollectionItemElementSelector,
    ElementSelector,
    MapKeyElementSelector,
    PropertyElementSelector,
)


# ═══════════════════════════════════════════════════════════════════
#  PROTOCOLS
# ═══════════════════════════════════════════════════════════════════

@runtime_checkable
class Accessor(Protocol):
    """Get, set and unset the value at one position inside a parent."""

    @property
    def element_selector(self) -> ElementSelector: ...

    def get(self, target: Any) -> Any: ...

    def set(self, target: Any, value: Any) -> None: ...

    def unset(self, target: Any) -> None: ...


@runtime_checkable
class TypeAwareAccessor(Accessor, Protocol):
    """An accessor that knows the type of the value it addresses."""

    @property
    def type(self) -> Optional[type]: ...


@runtime_checkable
class CategoryAware(Protocol):
    @property
    def categories(self) -> FrozenSet[str]: ...


# ═══════════════════════════════════════════════════════════════════
#  ROOT
# ═══════════════════════════════════════════════════════════════════

class RootAccessor:
    """Identity access to the whole target.  There is no parent to rewrite."""

    @property
    def element_selector(self) -> ElementSelector:
        return ROOT_SELECTOR

    def get(self, target: Any) -> Any:
        return target

    def set(self, target: Any, value: Any) -> None:
        raise UnsupportedOperationError("The root element cannot be set")

    def unset(self, target: Any) -> None:
        raise UnsupportedOperationError("The root element cannot be unset")

    def __str__(self) -> str:
        return "root element"

    def __repr__(self) -> str:
        return "RootAccessor()"


ROOT_ACCESSOR = RootAccessor()


# ═══════════════════════════════════════════════════════════════════
#  PROPERTY
# ═══════════════════════════════════════════════════════════════════

class PropertyAccessor:
    """
    Access to a named attribute of a record (dataclass, plain object).

    The declared type, when known, makes this accessor authoritative for
    the node's type even when both snapshots lack a value.  Unsetting a
    property assigns None; the attribute itself is never deleted.
    """

    def __init__(self, property_name: str,
                 property_type: Optional[type] = None,
                 categories: Iterable[str] = ()):
        self.property_name = property_name
        self.type = property_type
        self.categories = frozenset(categories)

    @property
    def element_selector(self) -> ElementSelector:
        return PropertyElementSelector(self.property_name)

    def _check(self, target: Any) -> None:
        if not hasattr(target, self.property_name):
            raise InvalidArgumentError(
                type(target), f"an object with attribute {self.property_name!r}")

    def get(self, target: Any) -> Any:
        if target is None:
            return None
        self._check(target)
        return getattr(target, self.property_name)

    def set(self, target: Any, value: Any) -> None:
        if target is None:
            return
        self._check(target)
        setattr(target, self.property_name, value)

    def unset(self, target: Any) -> None:
        self.set(target, None)

    def __str__(self) -> str:
        return f"property {self.property_name}"

    def __repr__(self) -> str:
        return f"PropertyAccessor({self.property_name!r}, {self.type!r})"


def property_accessors(cls: Any) -> List[PropertyAccessor]:
    """
    One PropertyAccessor per dataclass field, in declaration order.

    Field types come from the resolved annotations (Optional[int] → int,
    List[str] → list).  Categories are read from the field metadata:

        @dataclass
        class Server:
            port: int = field(default=80, metadata={"categories": ["network"]})
    """
    if not is_dataclass(cls):
        raise InvalidArgumentError(cls if isinstance(cls, type) else type(cls), "a dataclass")
    if not isinstance(cls, type):
        cls = type(cls)

    hints = get_type_hints(cls)
    return [
        PropertyAccessor(
            f.name,
            concrete_type(hints.get(f.name)),
            f.metadata.get("categories", ()),
        )
        for f in fields(cls)
    ]


# ═══════════════════════════════════════════════════════════════════
#  COLLECTION ITEM
# ═══════════════════════════════════════════════════════════════════

class CollectionItemAccessor:
    """
    Access to the collection element identical to `reference_item`.

    get     first element the identity strategy matches, or None
    unset   remove the first match (no match: container unchanged)
    set     remove every existing match, then append/add the new value

    Reads accept any collection (list, tuple, set, frozenset, deque).
    Writes need a mutable sequence or a mutable set.  None elements are
    never matched.
    """

    def __init__(self, reference_item: Any,
                 identity_strategy: Optional[IdentityStrategy] = None):
        self.reference_item = reference_item
        if identity_strategy is None:
            identity_strategy = get_default_identity_strategy()
        self.identity_strategy = identity_strategy

    @property
    def type(self) -> Optional[type]:
        if self.reference_item is None:
            return None
        return type(self.reference_item)

    @property
    def element_selector(self) -> ElementSelector:
        return CollectionItemElementSelector(self.reference_item).with_identity_strategy(
            self.identity_strategy)

    def _as_collection(self, target: Any, mutable: bool = False) -> Any:
        if target is None:
            return None
        if not is_collection_like(target):
            raise InvalidArgumentError(type(target), "a collection")
        if mutable and not isinstance(target, (MutableSequence, MutableSet)):
            raise InvalidArgumentError(type(target), "a mutable sequence or set")
        return target

    def _matches(self, item: Any) -> bool:
        return item is not None and self.identity_strategy.equals(item, self.reference_item)

    def get(self, target: Any) -> Any:
        collection = self._as_collection(target)
        if collection is None:
            return None
        return next((item for item in collection if self._matches(item)), None)

    def unset(self, target: Any) -> None:
        collection = self._as_collection(target, mutable=True)
        if collection is None:
            return

        if isinstance(collection, MutableSequence):
            # Delete by position: list.remove() would drop the first EQUAL
            # element, which is not necessarily the identical one.
            for index, item in enumerate(collection):
                if self._matches(item):
                    del collection[index]
                    return
        else:
            for item in collection:
                if self._matches(item):
                    collection.discard(item)
                    return

    def set(self, target: Any, value: Any) -> None:
        collection = self._as_collection(target, mutable=True)
        if collection is None:
            return

        # Every match goes, not just the first: at most one remains afterwards.
        if isinstance(collection, MutableSequence):
            for index in reversed(range(len(collection))):
                if self._matches(collection[index]):
                    del collection[index]
            collection.append(value)
        else:
            for item in [item for item in collection if self._matches(item)]:
                collection.discard(item)
            collection.add(value)

    def __str__(self) -> str:
        return f"collection item {self.element_selector}"

    def __repr__(self) -> str:
        return f"CollectionItemAccessor({self.reference_item!r}, {self.identity_strategy!r})"


# ═══════════════════════════════════════════════════════════════════
#  MAP ENTRY
# ═══════════════════════════════════════════════════════════════════

class MapEntryAccessor:
    """
    Access to the mapping entry under `reference_key`.

    The key is matched by its own equality, not by an identity strategy.
    """

    def __init__(self, reference_key: Any):
        self.reference_key = reference_key

    @property
    def element_selector(self) -> ElementSelector:
        return MapKeyElementSelector(self.reference_key)

    def _as_mapping(self, target: Any, mutable: bool = False) -> Any:
        if target is None:
            return None
        if not is_map_like_value(target):
            raise InvalidArgumentError(type(target), "a mapping")
        if mutable and not isinstance(target, MutableMapping):
            raise InvalidArgumentError(type(target), "a mutable mapping")
        return target

    def get_key(self, target: Any) -> Any:
        """The key object stored in `target` that equals the reference key."""
        mapping = self._as_mapping(target)
        if mapping is None:
            return None
        return next((k for k in mapping if k == self.reference_key), None)

    def get(self, target: Any) -> Any:
        mapping = self._as_mapping(target)
        if mapping is None:
            return None
        return mapping.get(self.reference_key)

    def set(self, target: Any, value: Any) -> None:
        mapping = self._as_mapping(target, mutable=True)
        if mapping is None:
            return
        # Re-insert so the stored key becomes the reference key (1.0 → 1).
        mapping.pop(self.reference_key, None)
        mapping[self.reference_key] = value

    def unset(self, target: Any) -> None:
        mapping = self._as_mapping(target, mutable=True)
        if mapping is None:
            return
        mapping.pop(self.reference_key, None)

    def __str__(self) -> str:
        return f"map key {self.element_selector}"

    def __repr__(self) -> str:
        return f"MapEntryAccessor({self.reference_key!r})"
