"""
Extension tables: per-type mappings layered on top of the type definitions.

  • groups: name → ordered list of member references
  • urls:   name → literal URL string

Tables are edited by merge-by-key import: existing keys are overwritten,
keys starting with the comment prefix are skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

DEFAULT_COMMENT = "--"


class ExtensionTable(Generic[V]):
    """
    Mapping (type, name) → value with validating merge.

    The normalizer converts a raw config value into the stored value,
    or returns None to reject it (the entry is skipped with an error logged).
    """

    def __init__(self, field_name: str, normalize: Callable[[Any], Optional[V]]):
        self.field_name = field_name
        self._normalize = normalize
        self._data: Dict[str, Dict[str, V]] = {}

    def merge(self, type_name: str, data: Mapping[str, Any], comment: str = DEFAULT_COMMENT) -> int:
        """
        Merge entries into the table for one type.

        Returns:
            Number of entries stored
        """
        bucket = self._data.setdefault(type_name, {})
        stored = 0
        for key, raw in data.items():
            key = str(key)
            if comment and key.startswith(comment):
                continue
            value = self._normalize(raw)
            if value is None:
                logger.error("Invalid %s entry '%s' for type '%s': %r", self.field_name, key, type_name, raw)
                continue
            bucket[key] = value
            stored += 1
        return stored

    def get(self, type_name: str, name: str) -> Optional[V]:
        return self._data.get(type_name, {}).get(name)

    def entries(self, type_name: str) -> Dict[str, V]:
        """Copy of all entries of one type, in insertion order."""
        return dict(self._data.get(type_name, {}))


def normalize_group(raw: Any) -> Optional[List[str]]:
    """Group members: a list of reference strings (a single string is allowed)."""
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, (list, tuple)) and all(isinstance(m, str) for m in raw):
        return list(raw)
    return None


def normalize_url(raw: Any) -> Optional[str]:
    if isinstance(raw, str) and raw:
        return raw
    return None


__all__ = ["ExtensionTable", "normalize_group", "normalize_url", "DEFAULT_COMMENT"]
