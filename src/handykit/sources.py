"""Read nested mappings from YAML, JSON and TOML files."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

try:  # pragma: no cover - Python < 3.11
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from .errors import UnsupportedFormatError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".yml", ".yaml", ".json", ".toml"}


def read_mapping(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load ``path`` and return its top-level mapping.

    An empty YAML or JSON file yields ``{}``.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        UnsupportedFormatError: for unknown suffixes or non-mapping documents.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedFormatError(f"{path} is not a supported config file")

    text = path.read_text(encoding="utf-8")
    if suffix in {".yml", ".yaml"}:
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text or "{}")
    else:
        data = tomllib.loads(text)

    if not isinstance(data, dict):
        raise UnsupportedFormatError(
            f"{path} must contain a mapping at the top level, got {type(data).__name__}"
        )
    logger.debug("Loaded %d top-level keys from %s", len(data), path)
    return data
