"""
objectdiff
==========

Node addressing and per-node classification for structural object diffs.

Given a BASE snapshot and a WORKING snapshot of an object graph,
objectdiff locates corresponding sub-values on both sides and tells you
what happened to each pair:

    root  = Instances.of({"x": 1, "y": 2}, {"x": 1})
    y     = root.access(MapEntryAccessor("y"))
    y.has_been_added                                  → True

    users = Instances.of([bob, carol], [alice, bob])
    a     = users.access(CollectionItemAccessor(alice, ReferenceIdentityStrategy()))
    a.has_been_removed                                → True

Collection elements are matched by IDENTITY, not position, so
reordering and intervening inserts/deletes never pair unrelated items.
Map entries are matched by key.  Record fields are matched by name.

What objectdiff does NOT do: walk a whole graph, decide which fields to
visit, or render a report.  Those belong to the caller; this package
supplies the primitives they are built from.
"""

from objectdiff.accessors import (
    Accessor,
    TypeAwareAccessor,
    CategoryAware,
    RootAccessor,
    ROOT_ACCESSOR,
    PropertyAccessor,
    property_accessors,
    CollectionItemAccessor,
    MapEntryAccessor,
)
from objectdiff.config import (
    get_default_identity_strategy,
    set_default_identity_strategy,
    reset_defaults,
)
from objectdiff.errors import (
    ObjectDiffError,
    UnsupportedOperationError,
    InvalidArgumentError,
    TypeConflictError,
)
from objectdiff.identity import (
    IdentityStrategy,
    EqualsIdentityStrategy,
    ReferenceIdentityStrategy,
    KeyIdentityStrategy,
    is_equal,
)
from objectdiff.instances import Instances, NodeState
from objectdiff.selectors import (
    ElementSelector,
    RootElementSelector,
    ROOT_SELECTOR,
    PropertyElementSelector,
    CollectionItemElementSelector,
    MapKeyElementSelector,
)

__version__ = "0.1.0"
__all__ = [
    "Accessor", "TypeAwareAccessor", "CategoryAware",
    "RootAccessor", "ROOT_ACCESSOR",
    "PropertyAccessor", "property_accessors",
    "CollectionItemAccessor", "MapEntryAccessor",
    "get_default_identity_strategy", "set_default_identity_strategy", "reset_defaults",
    "ObjectDiffError", "UnsupportedOperationError",
    "InvalidArgumentError", "TypeConflictError",
    "IdentityStrategy", "EqualsIdentityStrategy",
    "ReferenceIdentityStrategy", "KeyIdentityStrategy", "is_equal",
    "Instances", "NodeState",
    "ElementSelector", "RootElementSelector", "ROOT_SELECTOR",
    "PropertyElementSelector", "CollectionItemElementSelector", "MapKeyElementSelector",
]
