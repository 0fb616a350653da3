"""
objectdiff.introspection — Runtime type utilities.

Snapshots are plain Python objects, so "the type of a node" has to be
recovered from the live values.  These helpers answer the questions the
accessors and Instances ask about types:

    is_primitive(int)                        → True
    fresh_instance_of(int)                   → 0
    types_of(1, None, 2.0)                   → frozenset({int, float})
    all_assignable_to(Mapping, {dict, OrderedDict}) → True

Shapes
──────
Two container shapes matter for diffing:

    map-like       any collections.abc.Mapping
    iterable-like  any collections.abc.Iterable that is not text or bytes

Strings are iterable in Python, but a diff treats them as leaf values,
so they never collapse into the iterable shape.
"""

import enum
import logging
import types
from collections.abc import Collection, Iterable, Mapping
from typing import Any, FrozenSet, Optional, Union, get_args, get_origin

from objectdiff.config import PRIMITIVE_TYPES

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)


def is_primitive(tp: Optional[type]) -> bool:
    """True for bool and the numeric builtins (and their subclasses, except enums)."""
    if tp is None or not isinstance(tp, type):
        return False
    if issubclass(tp, enum.Enum):
        return False
    return issubclass(tp, PRIMITIVE_TYPES)


def fresh_instance_of(tp: Optional[type]) -> Any:
    """
    Build a default instance of `tp` by calling it without arguments.

    int → 0, bool → False, dict → {}, a dataclass whose fields all have
    defaults → its default instance.  Returns None when `tp` is None or
    needs constructor arguments.
    """
    if tp is None:
        return None
    try:
        return tp()
    except TypeError as e:
        logger.debug(f"No fresh instance for {tp.__qualname__}: {e}")
        return None


def types_of(*values: Any) -> FrozenSet[type]:
    """Distinct runtime types among the values that are not None."""
    return frozenset(type(v) for v in values if v is not None)


# ═══════════════════════════════════════════════════════════════════
#  CONTAINER SHAPES
# ═══════════════════════════════════════════════════════════════════

def is_map_like(tp: type) -> bool:
    return isinstance(tp, type) and issubclass(tp, Mapping)


def is_iterable_like(tp: type) -> bool:
    return (isinstance(tp, type)
            and issubclass(tp, Iterable)
            and not issubclass(tp, _TEXT_TYPES))


_SHAPE_PREDICATES = {
    Mapping: is_map_like,
    Iterable: is_iterable_like,
}


def all_assignable_to(shape: type, types: Iterable) -> bool:
    """
    True when every type in `types` fits the container `shape`.

    `shape` is collections.abc.Mapping or collections.abc.Iterable.
    An empty set of types is trivially assignable.
    """
    predicate = _SHAPE_PREDICATES.get(shape)
    if predicate is None:
        raise ValueError(f"Unsupported container shape: {shape!r}")
    return all(predicate(t) for t in types)


def is_collection_like(value: Any) -> bool:
    """A sized, iterable container of elements: not a mapping, not text."""
    return (isinstance(value, Collection)
            and not isinstance(value, Mapping)
            and not isinstance(value, _TEXT_TYPES))


def is_map_like_value(value: Any) -> bool:
    return isinstance(value, Mapping)


def concrete_type(hint: Any) -> Optional[type]:
    """
    Reduce a type annotation to the runtime class it constrains.

        int              → int
        Optional[int]    → int
        List[str]        → list
        Union[int, str]  → None   (no single class)
    """
    if isinstance(hint, type):
        return hint
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return concrete_type(args[0])
        return None
    if isinstance(origin, type):
        return origin
    return None
