from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .model import (
    EXT_FIELDS,
    LIST_PROPS,
    PROP_ATTRS,
    SCALAR_KINDS,
    ResourceType,
    default_types,
)
from .ops import ListOp, Push, Replace, Splice, apply_list_op, decode_list_op
from .tables import DEFAULT_COMMENT, ExtensionTable, normalize_group, normalize_url

logger = logging.getLogger(__name__)


class TypeRegistry:
    """
    Registry of resource types and their extension tables.

    Holds:
    - One ResourceType per type name (built-in: js, css, font)
    - Group table: (type, group) → member references
    - URL table: (type, name) → URL

    Any edit that mentions an unknown type creates an empty definition for it.
    """

    def __init__(self, *, builtins: bool = True):
        """
        Initialize registry.

        Args:
            builtins: Start with the js/css/font definitions
        """
        self._types: Dict[str, ResourceType] = default_types() if builtins else {}
        self.groups: ExtensionTable[List[str]] = ExtensionTable("groups", normalize_group)
        self.urls: ExtensionTable[str] = ExtensionTable("urls", normalize_url)

    # ---- Lookup ----

    def get(self, type_name: str) -> Optional[ResourceType]:
        return self._types.get(type_name)

    def ensure(self, type_name: str) -> ResourceType:
        """Return the type definition, creating an empty one if needed."""
        rtype = self._types.get(type_name)
        if rtype is None:
            logger.debug("Creating resource type '%s'", type_name)
            rtype = ResourceType()
            self._types[type_name] = rtype
        return rtype

    def types(self) -> List[str]:
        return list(self._types.keys())

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeRegistry(types={self.types()!r})"

    # ---- Structural edits ----

    def set_type_property(self, type_name: str, key: str, value: Any) -> bool:
        """
        Update a type definition property.

        Args:
            type_name: The type name (created if unknown)
            key: Property key ("as", "name", "exts", "path", "warn", "link",
                 or any other key, which is stored in `extra`)
            value: For list properties a sequence (replacement), a single value,
                   a ListOp, or a raw `$splice`/`$push` mapping.
                   For scalar properties a value of the allowed kind.

        Returns:
            False if the value was rejected (the previous value is kept)
        """
        rtype = self.ensure(type_name)

        if key in LIST_PROPS:
            op = decode_list_op(value)
            apply_list_op(getattr(rtype, PROP_ATTRS[key]), op)
            return True

        kinds = SCALAR_KINDS.get(key)
        if kinds is None:
            rtype.extra[key] = value
            return True

        if type(value) not in kinds:
            logger.error("Invalid '%s' value for type '%s': %r", key, type_name, value)
            return False

        setattr(rtype, PROP_ATTRS[key], value)
        return True

    def add_resource_paths(
        self,
        type_name: str,
        paths: str | Sequence[str],
        offset: int = 0,
        remove: int = 0,
    ) -> None:
        """
        Add search paths to a type.

        Args:
            type_name: The resource type
            paths: One or more paths
            offset: Position to insert at; -1 (with remove=0) appends
            remove: Number of paths to remove at offset; -1 replaces all paths
        """
        values = [paths] if isinstance(paths, str) else list(paths)

        op: ListOp
        if remove == -1:
            op = Replace(values)
        elif offset == -1 and remove == 0:
            op = Push(values)
        else:
            op = Splice(offset, remove, values)

        self.set_type_property(type_name, "path", op)

    def update_extension(
        self,
        field: str,
        type_name: str,
        data: Mapping[str, Any],
        comment: str = DEFAULT_COMMENT,
    ) -> int:
        """
        Merge entries into the groups or urls table of a type.

        Returns:
            Number of entries stored
        """
        if field not in EXT_FIELDS:
            raise ValueError(f"Unknown extension field '{field}'")
        self.ensure(type_name)
        table = self.groups if field == "groups" else self.urls
        return table.merge(type_name, data, comment)

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """Plain-data view of all type definitions with their tables."""
        out: Dict[str, Dict[str, Any]] = {}
        for name, rtype in self._types.items():
            entry = rtype.to_dict()
            entry["groups"] = self.groups.entries(name)
            entry["urls"] = self.urls.entries(name)
            out[name] = entry
        return out


__all__ = ["TypeRegistry"]
