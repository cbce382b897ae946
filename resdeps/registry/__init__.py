from __future__ import annotations

from .model import ResourceType, ResourceRef, default_types, resolve_flag
from .ops import Replace, Splice, Push, ListOp, decode_list_op, apply_list_op
from .registry import TypeRegistry
from .tables import ExtensionTable

__all__ = [
    # Model
    "ResourceType",
    "ResourceRef",
    "default_types",
    "resolve_flag",
    # List operations
    "Replace",
    "Splice",
    "Push",
    "ListOp",
    "decode_list_op",
    "apply_list_op",
    # Registry
    "TypeRegistry",
    "ExtensionTable",
]
