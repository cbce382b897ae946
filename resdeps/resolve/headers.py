"""
Preload `Link` headers for resolved resource files.

    Link: <{prefix}{file}>; rel=preload; as={as_keyword}

The prefix is computed according to PrefixMode:

  • STATIC   (0): `prefix` is used verbatim.
  • PER_TYPE (1): `prefix` names a registered callback; it is called once per
    type with the type name, the result is reused for that type.
  • PER_CALL (2): `prefix` names a registered callback; it is called for every
    header with (file, name, type).

An unknown callback name is logged and yields an empty prefix.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Callable, Dict, Mapping, Optional

from .sinks import HeaderSink

logger = logging.getLogger(__name__)

LINK_HEADER = "Link"

PrefixCallback = Callable[..., Optional[str]]


class PrefixMode(IntEnum):
    STATIC = 0
    PER_TYPE = 1
    PER_CALL = 2


def link_value(target: str, as_keyword: Optional[str]) -> str:
    value = f"<{target}>; rel=preload"
    if as_keyword:
        value += f"; as={as_keyword}"
    return value


class HeaderEmitter:
    def __init__(
        self,
        sink: HeaderSink,
        *,
        prefix: str = "",
        mode: PrefixMode | int = PrefixMode.STATIC,
        callbacks: Optional[Mapping[str, PrefixCallback]] = None,
    ):
        self.sink = sink
        self.prefix = prefix
        self.mode = PrefixMode(mode)
        self._callbacks: Dict[str, PrefixCallback] = dict(callbacks or {})
        self._type_prefixes: Dict[str, str] = {}

    def register_callback(self, name: str, callback: PrefixCallback) -> None:
        self._callbacks[name] = callback

    def prefix_for(self, file: str, name: str, type_name: str) -> str:
        prefix = self.prefix.strip()
        if not prefix or self.mode is PrefixMode.STATIC:
            return prefix

        callback = self._callbacks.get(prefix)
        if callback is None or not callable(callback):
            logger.error("Invalid link header prefix callback '%s'", prefix)
            return ""

        if self.mode is PrefixMode.PER_TYPE:
            if type_name not in self._type_prefixes:
                self._type_prefixes[type_name] = callback(type_name) or ""
            return self._type_prefixes[type_name]

        return callback(file, name, type_name) or ""

    def emit(self, file: str, name: str, type_name: str, as_keyword: Optional[str]) -> str:
        """Send the preload header for one file; returns the header value."""
        value = link_value(self.prefix_for(file, name, type_name) + file, as_keyword)
        self.sink.add_header(LINK_HEADER, value)
        return value


__all__ = ["HeaderEmitter", "PrefixMode", "PrefixCallback", "LINK_HEADER", "link_value"]
