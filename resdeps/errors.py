"""
Base exceptions for resdeps.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from ResdepsUserError.

Programming errors and bugs should NOT inherit from ResdepsUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


class ResdepsUserError(Exception):
    """
    Base class for all user-facing errors in resdeps.

    These errors indicate problems that the user can fix:
    missing configuration, malformed configuration files, broken group graphs.
    """
    pass


class ConfigError(ResdepsUserError):
    """Configuration name does not resolve to a mapping, or cannot be read."""
    pass


@dataclass
class GroupCycleError(ResdepsUserError):
    """Circular reference between resource groups."""
    cycle: List[str]

    def __str__(self) -> str:
        return f"Cyclic group reference: {' -> '.join(self.cycle)}"


__all__ = ["ResdepsUserError", "ConfigError", "GroupCycleError"]
