"""
Bulk import of resource configuration into a TypeRegistry.

Configuration shape (type name → fields):

    comment: "--"            # optional, overrides the comment prefix
    js:
      path: [public/js]
      exts: [.min.js, .js]
      warn: true
      groups:
        app: [jquery, "!legacy", "css:theme"]
      urls:
        cdn-lib: https://example.com/lib.js
    "--notes": anything      # skipped

Keys starting with the comment prefix are skipped at every level.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..errors import ConfigError
from ..registry import TypeRegistry
from ..registry.model import EXT_FIELDS
from ..registry.tables import DEFAULT_COMMENT
from .store import ConfigStore

logger = logging.getLogger(__name__)

COMMENT_KEY = "comment"
PATH_KEY = "path"
PATH_OFFSET_KEY = "pathOffset"
PATH_REPLACE_KEY = "pathReplace"


class ConfigImporter:
    """
    Loads configuration mappings (or names of them in a ConfigStore)
    into the registry.
    """

    def __init__(self, registry: TypeRegistry, store: Optional[ConfigStore] = None):
        """
        Args:
            registry: Registry receiving the definitions
            store: Configuration provider used to resolve config names
        """
        self.registry = registry
        self.store = store

    def load_resource_config(
        self,
        config: str | Mapping[str, Any],
        type_name: Optional[str] = None,
        comment: str = DEFAULT_COMMENT,
    ) -> None:
        """
        Load a resource configuration.

        Args:
            config: A config name resolved through the store, or the config data
            type_name: If given, the whole mapping (or its `type_name` sub-mapping,
                       when present) configures that one type. Otherwise every
                       non-comment top-level key is a type name.
            comment: Prefix of comment keys; a string `comment` field in the
                     config overrides it

        Raises:
            ConfigError: The config name does not resolve to a mapping
        """
        if isinstance(config, str):
            config = self._lookup(config)

        if isinstance(config.get(COMMENT_KEY), str):
            comment = config[COMMENT_KEY]

        if type_name is not None:
            sub = config.get(type_name, config)
            if not isinstance(sub, Mapping):
                logger.error("Invalid '%s' type definition: %r", type_name, sub)
                return
            self.update_resource_config(type_name, sub, comment)
            return

        for key, subconf in config.items():
            key = str(key)
            if key == COMMENT_KEY or (comment and key.startswith(comment)):
                continue
            if not isinstance(subconf, Mapping):
                logger.error("Invalid '%s' type definition: %r", key, subconf)
                continue
            self.update_resource_config(key, subconf, comment)

    def update_resource_config(self, type_name: str, fields: Mapping[str, Any], comment: str) -> None:
        """Route each field of one type to the extension tables or the type definition."""
        # `path` with an explicit offset/replace count goes through add_resource_paths()
        path_edit = PATH_OFFSET_KEY in fields or PATH_REPLACE_KEY in fields

        for key, val in fields.items():
            key = str(key)
            if key == COMMENT_KEY or (comment and key.startswith(comment)):
                continue
            if key in EXT_FIELDS and isinstance(val, Mapping):
                self.registry.update_extension(key, type_name, val, comment)
            elif key in (PATH_OFFSET_KEY, PATH_REPLACE_KEY):
                continue
            elif key == PATH_KEY and path_edit:
                self._apply_path_edit(type_name, val, fields)
            else:
                self.registry.set_type_property(type_name, key, val)

    def _apply_path_edit(self, type_name: str, paths: Any, fields: Mapping[str, Any]) -> None:
        try:
            offset = int(fields.get(PATH_OFFSET_KEY, 0))
            default_remove = -1 if offset == 0 else 0
            remove = int(fields.get(PATH_REPLACE_KEY, default_remove))
        except (TypeError, ValueError):
            logger.error(
                "Invalid '%s'/'%s' for type '%s', replacing paths",
                PATH_OFFSET_KEY, PATH_REPLACE_KEY, type_name,
            )
            offset, remove = 0, -1

        if isinstance(paths, str):
            values = [paths]
        elif isinstance(paths, (list, tuple)):
            values = [str(p) for p in paths]
        else:
            logger.error("Invalid '%s' value for type '%s': %r", PATH_KEY, type_name, paths)
            return
        self.registry.add_resource_paths(type_name, values, offset, remove)

    def _lookup(self, name: str) -> Mapping[str, Any]:
        if self.store is None:
            raise ConfigError(f"Invalid config '{name}': no configuration store")
        try:
            config = self.store.lookup(name)
        except KeyError:
            raise ConfigError(f"Invalid config '{name}'")
        if not isinstance(config, Mapping):
            raise ConfigError(f"Invalid config '{name}': expected a mapping, got {type(config).__name__}")
        return config


__all__ = ["ConfigImporter", "COMMENT_KEY"]
