"""Flat mapping helpers: shallow merges, key/value pairs and query strings."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import unquote


def merge_objects(*objects: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Shallow merge left to right; later mappings win and ``None`` is skipped."""
    merged: Dict[str, Any] = {}
    for obj in objects:
        if obj is not None:
            merged.update(obj)
    return merged


def object_to_pairs(obj: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    return list(obj.items())


def pairs_to_object(pairs: Iterable[Iterable[Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for index, pair in enumerate(pairs):
        items = tuple(pair)
        if len(items) != 2:
            raise ValueError(f"Pair at index {index} has {len(items)} items, expected 2")
        key, value = items
        result[key] = value
    return result


def query_string_to_object(query: str) -> Dict[str, str]:
    """
    Parse ``"?a=1&b=two"`` into ``{"a": "1", "b": "two"}``.

    Keys and values are percent-decoded but ``+`` is kept literally. Items
    without ``=`` map to an empty string and later duplicates win.
    """
    result: Dict[str, str] = {}
    text = query[1:] if query.startswith("?") else query
    for item in text.split("&"):
        if not item:
            continue
        key, _, value = item.partition("=")
        result[unquote(key)] = unquote(value)
    return result
