"""
resdeps — declarative resource-dependency resolution.

Resolves requested script/stylesheet/font names (and custom types) into an
ordered, de-duplicated list of files and URLs, expanding named groups.
"""

from __future__ import annotations

from .config import ConfigImporter, ConfigStore
from .errors import ConfigError, GroupCycleError, ResdepsUserError
from .registry import TypeRegistry, ResourceType
from .resolve import Resolver, ResolverSettings, PrefixMode, HeaderList

__all__ = [
    "ConfigImporter",
    "ConfigStore",
    "ConfigError",
    "GroupCycleError",
    "ResdepsUserError",
    "TypeRegistry",
    "ResourceType",
    "Resolver",
    "ResolverSettings",
    "PrefixMode",
    "HeaderList",
]
