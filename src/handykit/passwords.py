"""Password strength checks driven by a configurable policy."""
from __future__ import annotations

import re
import string
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import PolicyError
from .sources import read_mapping
from .structures import ABSENT, get_nested_value

DEFAULT_SYMBOLS = "!@#$%^&*()-_+=<>?/[]"
LATIN_CHARACTERS = frozenset(string.ascii_letters + string.digits + " ")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class PasswordPolicy:
    min_length: int = 8
    max_length: int = 64
    require_lowercase: bool = True
    require_uppercase: bool = True
    require_numeric: bool = True
    require_symbol: bool = True
    symbols: str = DEFAULT_SYMBOLS
    only_latin: bool = True

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            expected = type(field.default)
            # bool is an int subclass
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise PolicyError(
                    f"'{field.name}' must be {expected.__name__}, got {type(value).__name__}"
                )
        if self.min_length < 0 or self.max_length < 0:
            raise PolicyError("Password lengths must not be negative")
        if self.min_length > self.max_length:
            raise PolicyError(
                f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PasswordPolicy":
        """Build a policy from snake_case or camelCase keys."""
        known = {field.name for field in fields(cls)}
        payload: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_BOUNDARY.sub("_", key).lower()
            if name not in known:
                raise PolicyError(f"Unknown password policy option '{key}'")
            payload[name] = value
        return cls(**payload)


PolicyLike = Union[PasswordPolicy, Mapping[str, Any], None]


def load_policy(path: Union[str, Path], section: Optional[str] = None) -> PasswordPolicy:
    """
    Read a policy from a YAML, JSON or TOML file.

    ``section`` is a dotted path to the policy inside the document, for
    example ``"security.password"``.
    """
    data: Any = read_mapping(path)
    if section:
        data = get_nested_value(data, section)
        if data is ABSENT:
            raise PolicyError(f"Section '{section}' not found in {path}")
        if not isinstance(data, Mapping):
            raise PolicyError(f"Section '{section}' in {path} is not a mapping")
    return PasswordPolicy.from_mapping(data)


def validate_password(password: str, config: PolicyLike = None) -> bool:
    policy = _coerce_policy(config)

    if not policy.min_length <= len(password) <= policy.max_length:
        return False
    if policy.require_lowercase and not any(char in string.ascii_lowercase for char in password):
        return False
    if policy.require_uppercase and not any(char in string.ascii_uppercase for char in password):
        return False
    if policy.require_numeric and not any(char in string.digits for char in password):
        return False
    if policy.require_symbol and not any(char in policy.symbols for char in password):
        return False
    if policy.only_latin:
        allowed = LATIN_CHARACTERS.union(policy.symbols)
        if any(char not in allowed for char in password):
            return False
    return True


def _coerce_policy(config: PolicyLike) -> PasswordPolicy:
    if config is None:
        return PasswordPolicy()
    if isinstance(config, PasswordPolicy):
        return config
    if isinstance(config, Mapping):
        return PasswordPolicy.from_mapping(config)
    raise PolicyError(f"Unsupported password policy type: {type(config).__name__}")
