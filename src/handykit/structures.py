"""Recursive operations over nested mappings, sequences and primitives."""
from __future__ import annotations

import math
from collections.abc import Mapping, MutableMapping
from copy import deepcopy
from enum import Enum
from typing import Any, Dict, Set, Tuple

from .errors import CycleError, SerializationError, TypeKindError

PRIMITIVE_TYPES = (str, int, float, bool, type(None))


class _Absent(Enum):
    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


#: Returned by :func:`get_nested_value` when a path does not resolve.
ABSENT = _Absent.ABSENT


class Kind(Enum):
    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def kind_of(value: Any) -> Kind:
    """Classify ``value``; strings and bytes never count as sequences."""
    if isinstance(value, PRIMITIVE_TYPES):
        return Kind.PRIMITIVE
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, (list, tuple)):
        return Kind.SEQUENCE
    return Kind.OTHER


def deep_merge(target: Mapping[str, Any],
               source: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a new mapping with ``source`` recursively overlaid on ``target``.

    Keys present in both are merged when both values are mappings; in every
    other case, sequences included, the ``source`` value wins. Target keys
    keep their order and new source keys are appended. Neither input is
    mutated and the result shares no containers with them.

    Raises:
        TypeKindError: if either argument is not a mapping.
        CycleError: if both inputs recurse into the same pair of containers.
    """
    _require_mapping(target, "target")
    _require_mapping(source, "source")
    return _merge(target, source, set())


def _merge(target: Mapping[str, Any],
           source: Mapping[str, Any],
           active: Set[Tuple[int, int]]) -> Dict[str, Any]:
    marker = (id(target), id(source))
    if marker in active:
        raise CycleError("Cannot merge structures that refer back to themselves")
    active.add(marker)

    merged: Dict[str, Any] = {key: deepcopy(value) for key, value in target.items()}
    for key, value in source.items():
        if (key in target and kind_of(target[key]) is Kind.MAPPING
                and kind_of(value) is Kind.MAPPING):
            merged[key] = _merge(target[key], value, active)
        else:
            merged[key] = deepcopy(value)

    active.discard(marker)
    return merged


def deep_equal(a: Any, b: Any) -> bool:
    """
    Return True when ``a`` and ``b`` have the same structure and values.

    Mappings compare by key set and values regardless of order, sequences
    compare element by element, and a sequence never equals a mapping.
    ``bool`` only equals ``bool`` and NaN never equals NaN.
    """
    return _equal(a, b, set())


def _equal(a: Any, b: Any, active: Set[Tuple[int, int]]) -> bool:
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False

    if kind is Kind.PRIMITIVE:
        if isinstance(a, bool) or isinstance(b, bool):
            return isinstance(a, bool) and isinstance(b, bool) and a == b
        return bool(a == b)
    if kind is Kind.OTHER:
        return bool(a == b)

    if a is b:
        return True
    marker = (id(a), id(b))
    if marker in active:
        # pair is already on the stack
        return True
    active.add(marker)
    try:
        if len(a) != len(b):
            return False
        if kind is Kind.SEQUENCE:
            return all(_equal(left, right, active) for left, right in zip(a, b))
        return all(key in b and _equal(a[key], b[key], active) for key in a)
    finally:
        active.discard(marker)


def deep_clone(value: Any, *, strict: bool = True) -> Any:
    """
    Return an independent copy of a plain nested structure.

    Mappings become ``dict`` and sequences become ``list``. In strict mode
    values that have no plain representation (non-finite floats, non-string
    keys, objects of any other type) raise :class:`SerializationError`. With
    ``strict=False`` they follow JSON semantics instead: non-finite floats
    become ``None``, unsupported values are dropped from mappings and become
    ``None`` in sequences, and keys are coerced the way :func:`json.dumps`
    does (``True`` -> ``"true"``, ``None`` -> ``"null"``, others via ``str``).

    Cycles raise :class:`CycleError` in both modes.
    """
    cloned = _clone(value, strict, set())
    return None if cloned is ABSENT else cloned


def _clone(value: Any, strict: bool, active: Set[int]) -> Any:
    kind = kind_of(value)
    if kind is Kind.PRIMITIVE:
        if isinstance(value, float) and not math.isfinite(value):
            if strict:
                raise SerializationError(f"Cannot clone non-finite number {value!r}")
            return None
        return value
    if kind is Kind.OTHER:
        if strict:
            raise SerializationError(f"Cannot clone value of type {type(value).__name__}")
        return ABSENT

    marker = id(value)
    if marker in active:
        raise CycleError(f"Cannot clone cyclic {type(value).__name__}")
    active.add(marker)

    if kind is Kind.SEQUENCE:
        items = (_clone(item, strict, active) for item in value)
        cloned: Any = [None if item is ABSENT else item for item in items]
    else:
        cloned = {}
        for key, item in value.items():
            if not isinstance(key, str):
                if strict:
                    raise SerializationError(f"Cannot clone non-string key {key!r}")
                key = _json_key(key)
            copied = _clone(item, strict, active)
            if copied is not ABSENT:
                cloned[key] = copied

    active.discard(marker)
    return cloned


def get_nested_value(obj: Any, path: str, default: Any = ABSENT) -> Any:
    """
    Return the value at dotted ``path`` inside ``obj``, or ``default``.

    Mapping segments are looked up by key and sequence segments by decimal
    index, so ``"items.0.name"`` works. A missing key, an out-of-range index
    or a leaf in the way all end the walk with ``default``. An empty path
    names the key ``""``.
    """
    current: Any = obj
    for part in path.split("."):
        kind = kind_of(current)
        if kind is Kind.MAPPING and part in current:
            current = current[part]
        elif kind is Kind.SEQUENCE and _is_index(part) and int(part) < len(current):
            current = current[int(part)]
        else:
            return default
    return current


def set_nested_value(obj: MutableMapping[str, Any],
                     path: str,
                     value: Any,
                     *,
                     overwrite: bool = True) -> None:
    """
    Assign ``value`` at dotted ``path``, creating intermediate dicts in place.

    Lists are walked by decimal index when the index is in range, so
    ``"items.0.name"`` updates the first element and keeps its siblings.
    Any other intermediate that is not a mutable mapping is replaced by an
    empty dict, or raises :class:`TypeKindError` when ``overwrite`` is False.
    """
    if not isinstance(obj, MutableMapping):
        raise TypeKindError(f"obj must be a mutable mapping, got {type(obj).__name__}")

    parts = path.split(".")
    current: Any = obj
    for part, following in zip(parts, parts[1:]):
        child = _lookup(current, part)
        if isinstance(child, MutableMapping) or _indexes(child, following):
            current = child
            continue
        if child is not ABSENT and not overwrite:
            raise TypeKindError(
                f"Cannot descend into '{part}': {type(child).__name__} is not a mapping"
            )
        child = {}
        _store(current, part, child)
        current = child
    _store(current, parts[-1], value)


# ``current`` is only ever a list when the segment was checked by _indexes
def _lookup(container: Any, part: str) -> Any:
    if isinstance(container, list):
        return container[int(part)]
    return container.get(part, ABSENT)


def _store(container: Any, part: str, value: Any) -> None:
    if isinstance(container, list):
        container[int(part)] = value
    else:
        container[part] = value


def _indexes(container: Any, part: str) -> bool:
    return isinstance(container, list) and _is_index(part) and int(part) < len(container)


def _is_index(part: str) -> bool:
    return part.isascii() and part.isdigit()


def _require_mapping(value: Any, role: str) -> None:
    if kind_of(value) is not Kind.MAPPING:
        raise TypeKindError(f"{role} must be a mapping, got {type(value).__name__}")


def _json_key(key: Any) -> str:
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)
