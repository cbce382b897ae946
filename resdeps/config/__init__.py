from .importer import ConfigImporter
from .store import ConfigStore, cfg_root, load_yaml_map, CFG_DIR, DEFAULT_CONFIG_NAME

__all__ = [
    "ConfigImporter",
    "ConfigStore",
    "cfg_root",
    "load_yaml_map",
    "CFG_DIR",
    "DEFAULT_CONFIG_NAME",
]
