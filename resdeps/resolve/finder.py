from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Optional

from ..registry import TypeRegistry

FileProbe = Callable[[str], bool]


def path_exists(path: str) -> bool:
    return Path(path).exists()


def join_candidate(directory: str, name: str, ext: str) -> str:
    return f"{directory}/{name}{ext}"


class PathFinder:
    """
    Locates resource files: search paths (outer) × extensions (inner),
    first existing candidate wins.
    """

    def __init__(self, registry: TypeRegistry, probe: FileProbe = path_exists):
        self.registry = registry
        self.probe = probe

    def candidates(self, type_name: str, name: str) -> Iterator[str]:
        rtype = self.registry.get(type_name)
        if rtype is None:
            return
        for directory in rtype.search_paths:
            for ext in rtype.extensions:
                yield join_candidate(directory, name, ext)

    def find_resource(self, type_name: str, name: str) -> Optional[str]:
        """
        Find a resource file by bare name.

        Returns:
            Path of the first existing candidate, or None
        """
        for candidate in self.candidates(type_name, name):
            if self.probe(candidate):
                return candidate
        return None


__all__ = ["PathFinder", "FileProbe", "path_exists"]
