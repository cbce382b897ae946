from __future__ import annotations

from .cache import CacheEntry, EntryKind, LoadedCache
from .finder import PathFinder, path_exists
from .headers import HeaderEmitter, PrefixMode
from .resolver import Resolver, ResolverSettings
from .sinks import HeaderList, HeaderSink, RenderData

__all__ = [
    # Cache
    "CacheEntry",
    "EntryKind",
    "LoadedCache",
    # Lookup
    "PathFinder",
    "path_exists",
    # Headers
    "HeaderEmitter",
    "PrefixMode",
    "HeaderList",
    "HeaderSink",
    # Resolver
    "Resolver",
    "ResolverSettings",
    "RenderData",
]
