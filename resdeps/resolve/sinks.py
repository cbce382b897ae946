"""
Output seams of a render pass.

  • RenderData: collection name → ordered entries (a file path string,
    or {"url": ...}); consumed by the templating layer.
  • HeaderSink: receives additive HTTP headers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, MutableMapping, Protocol, Tuple, Union

OutputEntry = Union[str, Dict[str, str]]
RenderData = MutableMapping[str, List[OutputEntry]]


class HeaderSink(Protocol):
    def add_header(self, name: str, value: str) -> None:
        """Send a header without replacing earlier headers of the same name."""
        ...


@dataclass
class HeaderList:
    """HeaderSink collecting headers in emission order."""
    headers: List[Tuple[str, str]] = field(default_factory=list)

    def add_header(self, name: str, value: str) -> None:
        self.headers.append((name, value))

    def values(self, name: str) -> List[str]:
        wanted = name.lower()
        return [v for n, v in self.headers if n.lower() == wanted]

    def lines(self) -> List[str]:
        return [f"{n}: {v}" for n, v in self.headers]


def url_entry(url: str) -> Dict[str, str]:
    return {"url": url}


__all__ = ["OutputEntry", "RenderData", "HeaderSink", "HeaderList", "url_entry"]
