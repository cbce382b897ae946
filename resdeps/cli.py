from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigImporter, ConfigStore, DEFAULT_CONFIG_NAME
from .errors import ResdepsUserError
from .jsonic import dumps as jdumps
from .registry import TypeRegistry
from .report_schema import (
    FindResult,
    GroupInfo,
    GroupsList,
    ResolveReport,
    TypeInfo,
    TypesList,
)
from .resolve import HeaderList, PrefixMode, Resolver, ResolverSettings
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="resdeps",
        description="Resource dependency resolver (scripts, stylesheets, fonts, custom types)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    p.add_argument("--debug", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            default=None,
            metavar="NAME",
            help=f"dotted config name in res-cfg/ (default: {DEFAULT_CONFIG_NAME}, if present)",
        )

    sp_resolve = sub.add_parser("resolve", help="resolve resources into collections (JSON)")
    add_common(sp_resolve)
    sp_resolve.add_argument("type", help="resource type (js, css, font, ...)")
    sp_resolve.add_argument("names", nargs="+", help="resource or group names")
    sp_resolve.add_argument(
        "--block",
        action="append",
        metavar="[TYPE:]NAME",
        help="block a resource before resolving (repeatable)",
    )
    sp_resolve.add_argument("--link", action="store_true", help="emit preload Link headers")
    sp_resolve.add_argument("--prefix", default="", help="static prefix for Link header targets")
    sp_resolve.add_argument("--no-warn", action="store_true", help="do not warn about missing files")

    sp_find = sub.add_parser("find", help="locate a single resource file (JSON)")
    add_common(sp_find)
    sp_find.add_argument("type")
    sp_find.add_argument("name")

    sp_list = sub.add_parser("list", help="list configured entities (JSON)")
    add_common(sp_list)
    sp_list.add_argument("what", choices=["types", "groups"], help="what to list")
    sp_list.add_argument("--type", dest="only_type", default=None, help="restrict to one type")

    return p


def _setup_logging(ns: argparse.Namespace) -> None:
    level = logging.WARNING
    if getattr(ns, "debug", False):
        level = logging.DEBUG
    elif getattr(ns, "quiet", False):
        level = logging.ERROR
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s", stream=sys.stderr)


def _load_registry(root: Path, config_name: Optional[str]) -> TypeRegistry:
    """Registry with built-in types plus the named (or default) configuration."""
    registry = TypeRegistry()
    store = ConfigStore.from_dir(root)
    importer = ConfigImporter(registry, store)
    if config_name is not None:
        importer.load_resource_config(config_name)
    elif DEFAULT_CONFIG_NAME in store:
        importer.load_resource_config(DEFAULT_CONFIG_NAME)
    return registry


def _parse_block(ref: str, default_type: str) -> tuple[str, str]:
    if ":" in ref:
        type_name, name = ref.split(":", 1)
        return type_name, name
    return default_type, ref


def run_resolve(ns: argparse.Namespace, root: Path) -> ResolveReport:
    registry = _load_registry(root, ns.config)
    settings = ResolverSettings(
        warn_on_missing=not ns.no_warn,
        use_link_header=bool(ns.link),
        link_header_prefix=ns.prefix,
        link_header_prefix_type=PrefixMode.STATIC,
    )
    headers = HeaderList()
    resolver = Resolver(registry, settings=settings, headers=headers)

    for ref in ns.block or []:
        type_name, name = _parse_block(ref, ns.type)
        resolver.use_resource(type_name, name, block=True)

    resolver.use_resource(ns.type, list(ns.names))

    return ResolveReport(
        collections={k: list(v) for k, v in resolver.data.items()},
        headers=headers.lines(),
        missing=list(resolver.missing),
    )


def _list_types(registry: TypeRegistry, only: Optional[str]) -> TypesList:
    items: List[TypeInfo] = []
    for name in registry.types():
        if only is not None and name != only:
            continue
        rtype = registry.get(name)
        items.append(TypeInfo(
            id=name,
            as_keyword=rtype.as_keyword,
            collection=rtype.collection(name),
            exts=list(rtype.extensions),
            path=list(rtype.search_paths),
            warn=rtype.warn,
            link=rtype.link,
        ))
    return TypesList(types=items)


def _list_groups(registry: TypeRegistry, only: Optional[str]) -> GroupsList:
    items: List[GroupInfo] = []
    for type_name in registry.types():
        if only is not None and type_name != only:
            continue
        for name, members in registry.groups.entries(type_name).items():
            items.append(GroupInfo(type=type_name, name=name, members=list(members)))
    return GroupsList(groups=items)


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns)
    root = Path.cwd()

    try:
        if ns.cmd == "resolve":
            report = run_resolve(ns, root)
            sys.stdout.write(jdumps(report.model_dump(mode="json")))
            return 0

        if ns.cmd == "find":
            registry = _load_registry(root, ns.config)
            resolver = Resolver(registry)
            result = FindResult(type=ns.type, name=ns.name, path=resolver.find_resource(ns.type, ns.name))
            sys.stdout.write(jdumps(result.model_dump(mode="json")))
            return 0

        if ns.cmd == "list":
            registry = _load_registry(root, ns.config)
            if ns.what == "types":
                data = _list_types(registry, ns.only_type).model_dump(mode="json", by_alias=True)
            elif ns.what == "groups":
                data = _list_groups(registry, ns.only_type).model_dump(mode="json")
            else:
                raise ValueError(f"Unknown list target: {ns.what}")
            sys.stdout.write(jdumps(data))
            return 0

    except ResdepsUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
