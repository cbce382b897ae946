"""
Data model of the resource registry.

A resource type describes where files of one category live (search paths),
how their names end (extensions), which output collection receives them and
how they are announced in preload headers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Config key → ResourceType attribute.
PROP_ATTRS: Dict[str, str] = {
    "as": "as_keyword",
    "name": "collection_name",
    "exts": "extensions",
    "path": "search_paths",
    "warn": "warn",
    "link": "link",
}

# Ordered-list properties accept list operations (replace/splice/push).
LIST_PROPS = frozenset({"exts", "path"})

# Scalar properties and the kinds of values they accept.
SCALAR_KINDS: Dict[str, Tuple[type, ...]] = {
    "as": (str,),
    "name": (str,),
    "warn": (bool, type(None)),
    "link": (bool, type(None)),
}

# Fields of a type's config routed to the extension tables.
EXT_FIELDS = ("groups", "urls")

NEGATION_MARK = "!"
TYPE_SEPARATOR = ":"


@dataclass
class ResourceType:
    as_keyword: Optional[str] = None
    collection_name: Optional[str] = None
    extensions: List[str] = field(default_factory=list)
    search_paths: List[str] = field(default_factory=list)
    # None → inherit the resolver-wide default
    warn: Optional[bool] = None
    link: Optional[bool] = None
    # Unknown properties are kept verbatim
    extra: Dict[str, Any] = field(default_factory=dict)

    def collection(self, type_name: str) -> str:
        """Name of the output bucket; custom types without `name` use the type name."""
        return self.collection_name or type_name

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "as": self.as_keyword,
            "name": self.collection_name,
            "exts": list(self.extensions),
            "path": list(self.search_paths),
            "warn": self.warn,
            "link": self.link,
        }
        result.update(self.extra)
        return result


def default_types() -> Dict[str, ResourceType]:
    """Fresh copies of the built-in type definitions."""
    return {
        "js": ResourceType(
            as_keyword="script",
            collection_name="scripts",
            extensions=[".min.js", ".js"],
        ),
        "css": ResourceType(
            as_keyword="style",
            collection_name="stylesheets",
            extensions=[".min.css", ".css"],
        ),
        "font": ResourceType(
            as_keyword="font",
            collection_name="fonts",
            extensions=[".woff2", ".woff", ".otf", ".ttf"],
        ),
    }


def resolve_flag(override: Optional[bool], default: bool) -> bool:
    """Tri-state flag: a per-type override wins, None inherits the default."""
    return default if override is None else override


@dataclass(frozen=True)
class ResourceRef:
    """
    Parsed group member.

    Grammar:
      - "name"        → same type
      - "!name"       → same type, force-blocked
      - "type:name"   → cross-type reference
      - "!type:name"  → cross-type, force-blocked
    """
    type_name: str
    name: str
    negated: bool = False

    @classmethod
    def parse(cls, raw: str, current_type: str) -> "ResourceRef":
        negated = raw.startswith(NEGATION_MARK)
        if negated:
            raw = raw[len(NEGATION_MARK):]
        if TYPE_SEPARATOR in raw:
            type_name, name = raw.split(TYPE_SEPARATOR, 1)
            return cls(type_name=type_name, name=name, negated=negated)
        return cls(type_name=current_type, name=raw, negated=negated)


__all__ = [
    "PROP_ATTRS",
    "LIST_PROPS",
    "SCALAR_KINDS",
    "EXT_FIELDS",
    "ResourceType",
    "ResourceRef",
    "default_types",
    "resolve_flag",
]
