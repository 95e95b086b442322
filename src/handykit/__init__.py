"""
handykit public API.
"""
from __future__ import annotations

from .errors import (
    CycleError,
    HandyKitError,
    PolicyError,
    SerializationError,
    TypeKindError,
    UnsupportedFormatError,
)
from .identifiers import generate_uuid
from .pairs import merge_objects, object_to_pairs, pairs_to_object, query_string_to_object
from .passwords import PasswordPolicy, load_policy, validate_password
from .sources import read_mapping
from .strings import (
    split_into_words,
    to_camel_case,
    to_kebab_case,
    to_lowercase,
    to_sentence_case,
    to_snake_case,
    to_title_case,
    to_toggle_case,
    to_uppercase,
)
from .structures import (
    ABSENT,
    Kind,
    deep_clone,
    deep_equal,
    deep_merge,
    get_nested_value,
    kind_of,
    set_nested_value,
)
from .timing import Debounced, Throttled, debounce, throttle

__all__ = [
    "ABSENT",
    "CycleError",
    "Debounced",
    "HandyKitError",
    "Kind",
    "PasswordPolicy",
    "PolicyError",
    "SerializationError",
    "Throttled",
    "TypeKindError",
    "UnsupportedFormatError",
    "debounce",
    "deep_clone",
    "deep_equal",
    "deep_merge",
    "generate_uuid",
    "get_nested_value",
    "kind_of",
    "load_policy",
    "merge_objects",
    "object_to_pairs",
    "pairs_to_object",
    "query_string_to_object",
    "read_mapping",
    "set_nested_value",
    "split_into_words",
    "throttle",
    "to_camel_case",
    "to_kebab_case",
    "to_lowercase",
    "to_sentence_case",
    "to_snake_case",
    "to_title_case",
    "to_toggle_case",
    "to_uppercase",
    "validate_password",
]
