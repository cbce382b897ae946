"""
Builders for res-cfg/*.yaml configuration files in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from ruamel.yaml import YAML


def create_config_yaml(root: Path, name: str, data: Dict[str, Any]) -> Path:
    """
    Create res-cfg/<name>.yaml with the given mapping.

    Args:
        root: Project root
        name: File stem (top-level key in the config store)
        data: Mapping to dump

    Returns:
        Path to the created file
    """
    cfg_file = root / "res-cfg" / f"{name}.yaml"
    yaml = YAML()
    cfg_file.parent.mkdir(parents=True, exist_ok=True)
    with cfg_file.open("w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return cfg_file


def create_resources_yaml(root: Path, data: Dict[str, Any]) -> Path:
    """Create the default res-cfg/resources.yaml."""
    return create_config_yaml(root, "resources", data)
