"""
objectdiff.instances — The tri-state node of a comparison.

An Instances bundles, for ONE addressed node of the object graph:

    working   the current value            (may be None)
    base      the prior value              (may be None)
    fresh     a zero/default baseline      (may be None, built lazily)

plus the accessor that produced it from its parent.  Descending into a
child is always the same move: run one accessor against all three
values at once.

    root  = Instances.of(working_config, base_config)
    port  = root.access(PropertyAccessor("port", int))
    port.state                                   → NodeState.CHANGED

TYPE UNIFICATION
════════════════
The three values were captured independently, so the type of the node
has to be reconciled from them:

    1. A type-aware accessor that reports a primitive type wins.  A
       collection item accessor knows its item's type even when the
       item is gone from both snapshots.
    2. Otherwise the distinct runtime types of the present values:
           none  → None
           one   → that type
           many  → Mapping   if every type is map-like
                   Iterable  if every type is iterable-like
                   else TypeConflictError

PRIMITIVE BASELINES
═══════════════════
An int field is never "absent", it is 0.  So for primitive nodes a move
away from the zero value counts as an addition and a move back to it
counts as a removal:

    base   working   added   removed
    None   5         yes     no
    0      5         yes     no
    5      0         no      yes
    3      5         no      no      (modified)
"""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum, auto
from functools import cached_property
from typing import Any, Optional

from objectdiff.accessors import ROOT_ACCESSOR, Accessor, TypeAwareAccessor
from objectdiff.errors import TypeConflictError
from objectdiff.identity import is_equal
from objectdiff.introspection import all_assignable_to, fresh_instance_of, is_primitive, types_of


logger = logging.getLogger(__name__)

_MISSING = object()


class NodeState(Enum):
    """Classification of one node between base and working."""
    UNTOUCHED = auto()
    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()


class Instances:
    """
    Working, base and fresh values of one node, plus the accessor that
    addressed it.

    Instances are never mutated after construction; `fresh` and `type`
    are computed once per instance on first use.
    """

    def __init__(self, source_accessor: Accessor, working: Any, base: Any, fresh: Any = None):
        self.source_accessor = source_accessor
        self.working = working
        self.base = base
        self._fresh = fresh

    @classmethod
    def of(cls, working: Any, base: Any, fresh: Any = _MISSING,
           accessor: Accessor = ROOT_ACCESSOR) -> "Instances":
        """
        Build the Instances for the top of a comparison run.

        When no fresh value is given, one is constructed from the type of
        `working` (nothing is constructed when `working` is None).
        """
        if fresh is _MISSING:
            fresh = fresh_instance_of(type(working)) if working is not None else None
        return cls(accessor, working, base, fresh)

    def access(self, accessor: Accessor) -> "Instances":
        """The child node addressed by `accessor`.  The sources are only read."""
        return Instances(
            accessor,
            accessor.get(self.working),
            accessor.get(self.base),
            accessor.get(self._fresh),
        )

    # ───────────────────────────────────────────────────────────────
    #  Fresh value
    # ───────────────────────────────────────────────────────────────

    @cached_property
    def fresh(self) -> Any:
        if self._fresh is not None:
            return self._fresh
        if self.is_primitive_type:
            logger.debug(f"Synthesizing zero value for {self.type.__qualname__} at {self.source_accessor}")
            return fresh_instance_of(self.type)
        return None

    def get_fresh(self, tp: type) -> Any:
        """The fresh value converted to `tp`, or None when there is none."""
        value = self.fresh
        if value is None:
            return None
        return tp(value)

    # ───────────────────────────────────────────────────────────────
    #  Type
    # ───────────────────────────────────────────────────────────────

    def _type_from_source_accessor(self) -> Optional[type]:
        if isinstance(self.source_accessor, TypeAwareAccessor):
            return self.source_accessor.type
        return None

    @cached_property
    def type(self) -> Optional[type]:
        accessor_type = self._type_from_source_accessor()
        if is_primitive(accessor_type):
            return accessor_type

        types = types_of(self.working, self.base, self._fresh)
        if not types:
            return None
        if len(types) == 1:
            return next(iter(types))

        if all_assignable_to(Mapping, types):
            logger.debug(f"Collapsing {sorted(t.__qualname__ for t in types)} to Mapping")
            return Mapping
        if all_assignable_to(Iterable, types):
            logger.debug(f"Collapsing {sorted(t.__qualname__ for t in types)} to Iterable")
            return Iterable
        raise TypeConflictError(types)

    @property
    def is_primitive_type(self) -> bool:
        return is_primitive(self.type)

    # ───────────────────────────────────────────────────────────────
    #  Classification
    # ───────────────────────────────────────────────────────────────

    @property
    def are_equal(self) -> bool:
        return is_equal(self.base, self.working)

    @property
    def are_same(self) -> bool:
        return self.working is self.base

    @property
    def are_null(self) -> bool:
        return self.working is None and self.base is None

    @property
    def has_been_added(self) -> bool:
        if self.working is not None and self.base is None:
            return True
        # Zero-baseline clause only applies when both sides hold a value;
        # presence alone decides otherwise.
        if self.working is None or self.base is None:
            return False
        return (self.is_primitive_type
                and is_equal(self.fresh, self.base)
                and not is_equal(self.base, self.working))

    @property
    def has_been_removed(self) -> bool:
        if self.base is not None and self.working is None:
            return True
        if self.working is None or self.base is None:
            return False
        return (self.is_primitive_type
                and is_equal(self.fresh, self.working)
                and not is_equal(self.base, self.working))

    @property
    def has_changed(self) -> bool:
        return not self.are_equal

    @property
    def state(self) -> NodeState:
        if self.has_been_added:
            return NodeState.ADDED
        if self.has_been_removed:
            return NodeState.REMOVED
        if self.has_changed:
            return NodeState.CHANGED
        return NodeState.UNTOUCHED

    def __repr__(self) -> str:
        return (f"Instances({self.source_accessor}, working={self.working!r}, "
                f"base={self.base!r}, fresh={self._fresh!r})")
