"""
Unified test infrastructure for resdeps.

Modules:
- file_utils: Utilities for creating files and directories
- fs_utils: In-memory filesystem probe
- config_builders: Builders for res-cfg/*.yaml
- cli_utils: Running the CLI in a subprocess
"""

from .file_utils import write, touch_assets
from .fs_utils import FakeFS
from .config_builders import create_resources_yaml, create_config_yaml
from .cli_utils import run_cli, jload

__all__ = [
    # File utilities
    "write", "touch_assets",

    # Filesystem stub
    "FakeFS",

    # Config builders
    "create_resources_yaml", "create_config_yaml",

    # CLI utilities
    "run_cli", "jload",
]
