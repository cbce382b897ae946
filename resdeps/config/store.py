from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError

_yaml = YAML(typ="safe")

# Single source of truth for configuration directory structure.
CFG_DIR = "res-cfg"
CFG_SUFFIX = ".yaml"
DEFAULT_CONFIG_NAME = "resources"


def cfg_root(root: Path) -> Path:
    """Absolute path to the res-cfg/ directory."""
    return (root / CFG_DIR).resolve()


def iter_config_files(root: Path) -> List[Path]:
    """All top-level res-cfg/*.yaml files, sorted."""
    base = cfg_root(root)
    if not base.is_dir():
        return []
    return sorted(p for p in base.glob(f"*{CFG_SUFFIX}") if p.is_file())


def load_yaml_map(path: Path) -> dict:
    """Read a YAML file that must contain a mapping (an empty file is an empty mapping)."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


class ConfigStore:
    """
    Nested key/value configuration store with dotted-name lookup.

    `store.lookup("resources.js")` walks `data["resources"]["js"]`.
    A top-level key that itself contains dots is matched before walking.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})

    @classmethod
    def from_dir(cls, root: Path) -> "ConfigStore":
        """
        Build a store from res-cfg/*.yaml; each file stem becomes a top-level key.

        Args:
            root: Project root (parent of res-cfg/)
        """
        data: Dict[str, Any] = {}
        for path in iter_config_files(root):
            data[path.stem] = load_yaml_map(path)
        return cls(data)

    def lookup(self, name: str) -> Any:
        """
        Resolve a dotted name.

        Raises:
            KeyError: If any segment is missing
        """
        if name in self._data:
            return self._data[name]
        node: Any = self._data
        for part in name.split("."):
            if not isinstance(node, Mapping) or part not in node:
                raise KeyError(name)
            node = node[part]
        return node

    def get(self, name: str, default: Any = None) -> Any:
        try:
            return self.lookup(name)
        except KeyError:
            return default

    def set(self, name: str, value: Any) -> None:
        """Assign a value by dotted name, creating intermediate mappings."""
        parts = name.split(".")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value

    def __contains__(self, name: str) -> bool:
        try:
            self.lookup(name)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"ConfigStore(keys={list(self._data)!r})"


__all__ = [
    "CFG_DIR",
    "DEFAULT_CONFIG_NAME",
    "ConfigStore",
    "cfg_root",
    "iter_config_files",
    "load_yaml_map",
]
