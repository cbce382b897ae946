"""
List edit operations for ordered type properties (`path`, `exts`).

In configuration files the operations are written as single-key mappings:

    path:
      $splice: [offset, remove, value1, ...]
    exts:
      $push: [value1, ...]

They are decoded once into ListOp values and applied by apply_list_op().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Union

logger = logging.getLogger(__name__)

SPLICE_KEY = "$splice"
PUSH_KEY = "$push"


@dataclass(frozen=True)
class Replace:
    values: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class Splice:
    offset: int
    count: int
    values: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class Push:
    values: List[Any] = field(default_factory=list)


ListOp = Union[Replace, Splice, Push]


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _decode_splice(payload: Any) -> Splice | None:
    if not isinstance(payload, (list, tuple)) or len(payload) < 2:
        return None
    try:
        offset = int(payload[0])
        count = int(payload[1])
    except (TypeError, ValueError):
        return None
    return Splice(offset=offset, count=count, values=list(payload[2:]))


def decode_list_op(value: Any) -> ListOp:
    """
    Decode a raw property value into a list operation.

    Malformed `$splice`/`$push` mappings are not an error: the value is
    forced into a one-element list, as any other non-list value.
    """
    if isinstance(value, (Replace, Splice, Push)):
        return value

    if isinstance(value, dict):
        if SPLICE_KEY in value:
            op = _decode_splice(value[SPLICE_KEY])
            if op is not None:
                return op
        elif PUSH_KEY in value:
            return Push(values=_as_list(value[PUSH_KEY]))
        logger.warning("Malformed list operation %r, using it as a plain value", value)
        return Replace(values=[value])

    return Replace(values=_as_list(value))


def splice(target: List[Any], offset: int, count: int, values: List[Any]) -> List[Any]:
    """
    In-place splice with clamped bounds.

    A negative offset counts from the end; an offset past the end appends.
    A negative count keeps that many elements at the end of the list.
    Returns the removed elements.
    """
    size = len(target)
    if offset < 0:
        start = max(size + offset, 0)
    else:
        start = min(offset, size)

    if count < 0:
        end = max(size + count, start)
    else:
        end = min(start + count, size)

    removed = target[start:end]
    target[start:end] = values
    return removed


def apply_list_op(target: List[Any], op: ListOp) -> None:
    """Apply a decoded operation to the list in place."""
    if isinstance(op, Replace):
        target[:] = op.values
    elif isinstance(op, Splice):
        splice(target, op.offset, op.count, op.values)
    elif isinstance(op, Push):
        target.extend(op.values)
    else:
        raise TypeError(f"Unsupported list operation: {op!r}")


__all__ = [
    "Replace",
    "Splice",
    "Push",
    "ListOp",
    "SPLICE_KEY",
    "PUSH_KEY",
    "decode_list_op",
    "splice",
    "apply_list_op",
]
