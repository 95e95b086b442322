"""Exception types for the handykit API."""
from __future__ import annotations

from .exceptions import HandyKitError


class TypeKindError(HandyKitError, TypeError):
    """Raised when a value is not the kind of structure an operation needs."""


class SerializationError(HandyKitError, ValueError):
    """Raised when a value cannot be represented as a plain nested structure."""


class CycleError(SerializationError):
    """Raised when recursion re-enters a container already on the current path."""


class PolicyError(HandyKitError, ValueError):
    """Raised when a password policy is malformed."""


class UnsupportedFormatError(HandyKitError):
    """Raised when a configuration file format is not supported."""


__all__ = [
    "HandyKitError",
    "TypeKindError",
    "SerializationError",
    "CycleError",
    "PolicyError",
    "UnsupportedFormatError",
]
