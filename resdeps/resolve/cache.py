from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional


class EntryKind(str, Enum):
    BLOCKED = "blocked"
    FILE = "file"
    URL = "url"
    GROUP = "group"


@dataclass(frozen=True)
class CacheEntry:
    kind: EntryKind
    value: Optional[str] = None


BLOCKED = CacheEntry(EntryKind.BLOCKED)
GROUP_EXPANDED = CacheEntry(EntryKind.GROUP)


class LoadedCache:
    """
    Per-type record of processed resource names.

    Presence of a name means it was already handled in this render pass
    (added, blocked or expanded as a group) and must not be processed again.
    Failed lookups are never recorded.
    """

    def __init__(self) -> None:
        self._by_type: Dict[str, Dict[str, CacheEntry]] = {}

    def contains(self, type_name: str, name: str) -> bool:
        return name in self._by_type.get(type_name, {})

    def record(self, type_name: str, name: str, entry: CacheEntry) -> None:
        self._by_type.setdefault(type_name, {})[name] = entry

    def record_blocked(self, type_name: str, name: str) -> None:
        self.record(type_name, name, BLOCKED)

    def record_group(self, type_name: str, name: str) -> None:
        self.record(type_name, name, GROUP_EXPANDED)

    def record_file(self, type_name: str, name: str, path: str) -> None:
        self.record(type_name, name, CacheEntry(EntryKind.FILE, path))

    def record_url(self, type_name: str, name: str, url: str) -> None:
        self.record(type_name, name, CacheEntry(EntryKind.URL, url))

    def clear(self, type_name: str) -> None:
        self._by_type.pop(type_name, None)

    def view(self, type_name: str) -> Mapping[str, CacheEntry]:
        """Read-only view of one type's entries."""
        return MappingProxyType(self._by_type.get(type_name, {}))


__all__ = ["EntryKind", "CacheEntry", "LoadedCache", "BLOCKED", "GROUP_EXPANDED"]
