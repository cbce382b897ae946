"""
Resource resolver for one render pass.

Resolves requested (type, name) pairs into entries of the render data:
- Group expansion (depth-first, in group-list order)
- Negated members (force-block) and cross-type members
- URL entries bypassing the filesystem
- De-duplication through LoadedCache
- Optional preload Link headers
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..errors import GroupCycleError
from ..registry import ResourceRef, TypeRegistry, resolve_flag
from .cache import CacheEntry, LoadedCache
from .finder import FileProbe, PathFinder, path_exists
from .headers import HeaderEmitter, PrefixCallback, PrefixMode
from .sinks import HeaderList, HeaderSink, OutputEntry, RenderData, url_entry

logger = logging.getLogger(__name__)


@dataclass
class ResolverSettings:
    # Defaults for types whose `warn`/`link` is None
    warn_on_missing: bool = True
    use_link_header: bool = False
    link_header_prefix: str = ""
    link_header_prefix_type: PrefixMode = PrefixMode.STATIC


class Resolver:
    """
    Resolves resource names into the render data of one render pass.

    Not shared between passes: the loaded cache and the render data
    are mutated in place.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        *,
        settings: Optional[ResolverSettings] = None,
        data: Optional[RenderData] = None,
        headers: Optional[HeaderSink] = None,
        probe: FileProbe = path_exists,
        callbacks: Optional[Mapping[str, PrefixCallback]] = None,
    ):
        """
        Initialize resolver.

        Args:
            registry: Type definitions with their group and URL tables
            settings: Resolver-wide defaults
            data: Render data receiving the resolved entries
            headers: Sink for preload headers
            probe: Filesystem existence check
            callbacks: Named header-prefix callbacks
        """
        self.registry = registry
        self.settings = settings or ResolverSettings()
        self.data: RenderData = data if data is not None else {}
        self.headers: HeaderSink = headers if headers is not None else HeaderList()
        self.finder = PathFinder(registry, probe)
        self.emitter = HeaderEmitter(
            self.headers,
            prefix=self.settings.link_header_prefix,
            mode=self.settings.link_header_prefix_type,
            callbacks=callbacks,
        )
        self.cache = LoadedCache()
        # Names that could not be found, as "type:name"
        self.missing: List[str] = []
        # Groups currently being expanded
        self._expanding: List[Tuple[str, str]] = []

    # ---- Public API ----

    def use_resource(self, type_name: str, name: str | Sequence[str], block: bool = False) -> bool:
        """
        Add a resource file, URL or group to the render data.

        Args:
            type_name: The resource type
            name: The resource or group name, or a list of them
            block: Don't add it, make it un-addable for the rest of the pass

        Returns:
            False if the type is unknown or the file could not be found

        Raises:
            GroupCycleError: If group expansion reaches a group being expanded
        """
        if isinstance(name, (list, tuple)):
            for item in name:
                self.use_resource(type_name, item, block)
            return True

        key = (type_name, name)
        if key in self._expanding:
            start = self._expanding.index(key)
            cycle = [f"{t}:{n}" for t, n in self._expanding[start:]] + [f"{type_name}:{name}"]
            raise GroupCycleError(cycle=cycle)

        if self.cache.contains(type_name, name):
            return True

        rtype = self.registry.get(type_name)
        if rtype is None:
            logger.debug("Unknown resource type '%s' requested for '%s'", type_name, name)
            return False

        members = self.registry.groups.get(type_name, name)
        if members is not None:
            self._expand_group(type_name, name, members, block)
            return True

        if block:
            self.cache.record_blocked(type_name, name)
            return True

        collection = rtype.collection(type_name)

        url = self.registry.urls.get(type_name, name)
        if url is not None:
            self._append(collection, url_entry(url))
            self.cache.record_url(type_name, name, url)
            return True

        file = self.finder.find_resource(type_name, name)
        if file is None:
            if resolve_flag(rtype.warn, self.settings.warn_on_missing):
                logger.warning("Could not find %s file for: '%s'.", type_name, name)
            ref = f"{type_name}:{name}"
            if ref not in self.missing:
                self.missing.append(ref)
            return False

        if resolve_flag(rtype.link, self.settings.use_link_header):
            self.emitter.emit(file, name, type_name, rtype.as_keyword)

        self._append(collection, file)
        self.cache.record_file(type_name, name, file)
        return True

    def reset_resource(self, type_name: str) -> None:
        """Forget everything resolved for one type; configuration is untouched."""
        rtype = self.registry.get(type_name)
        if rtype is None:
            return
        self.data.pop(rtype.collection(type_name), None)
        self.cache.clear(type_name)

    def find_resource(self, type_name: str, name: str) -> Optional[str]:
        return self.finder.find_resource(type_name, name)

    def collection(self, type_name: str) -> List[OutputEntry]:
        """Entries resolved so far for a type (empty if none)."""
        rtype = self.registry.get(type_name)
        if rtype is None:
            return []
        return list(self.data.get(rtype.collection(type_name), []))

    def loaded(self, type_name: str) -> Mapping[str, CacheEntry]:
        return self.cache.view(type_name)

    # ---- Shortcuts ----

    def add_js(self, name: Any) -> bool:
        return self.use_resource("js", name)

    def add_css(self, name: Any) -> bool:
        return self.use_resource("css", name)

    def block_js(self, name: Any) -> bool:
        """Block a script or group; must come before it is added."""
        return self.use_resource("js", name, True)

    def block_css(self, name: Any) -> bool:
        return self.use_resource("css", name, True)

    # ---- Internals ----

    def _expand_group(self, type_name: str, name: str, members: List[str], block: bool) -> None:
        self.cache.record_group(type_name, name)
        self._expanding.append((type_name, name))
        try:
            for raw in members:
                ref = ResourceRef.parse(raw, type_name)
                self.use_resource(ref.type_name, ref.name, block or ref.negated)
        finally:
            self._expanding.pop()

    def _append(self, collection: str, entry: OutputEntry) -> None:
        self.data.setdefault(collection, []).append(entry)


__all__ = ["Resolver", "ResolverSettings"]
