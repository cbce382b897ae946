"""
Utilities for working with CLI in tests.
"""

import json
import os
import subprocess
import sys
from pathlib import Path


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Run resdeps.cli with the given arguments in the given directory.

    Args:
        root: Working directory for command execution
        *args: Command line arguments for resdeps.cli

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    # Make the package importable without installation
    repo_root = str(Path(__file__).resolve().parents[2])
    env["PYTHONPATH"] = os.pathsep.join(p for p in (repo_root, env.get("PYTHONPATH", "")) if p)
    return subprocess.run(
        [sys.executable, "-m", "resdeps.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    """
    Parse a JSON string, removing ANSI escape codes first.

    Some IDEs add ANSI escape sequences to subprocess output.
    """
    import re
    clean = re.sub(r'\x1b\[[0-9;]*m', '', s)
    return json.loads(clean)


__all__ = ["run_cli", "jload"]
