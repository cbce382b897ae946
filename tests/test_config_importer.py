import logging
from pathlib import Path

import pytest

from resdeps.config import ConfigImporter, ConfigStore
from resdeps.errors import ConfigError, ResdepsUserError
from resdeps.registry import TypeRegistry
from resdeps.resolve import Resolver

from tests.infrastructure.fs_utils import FakeFS


@pytest.fixture
def importer(registry: TypeRegistry) -> ConfigImporter:
    return ConfigImporter(registry)


def test_css_group_scenario(registry, importer):
    importer.load_resource_config({
        "css": {"path": ["/assets"], "exts": [".css"], "groups": {"base": ["reset", "theme"]}},
    })
    fs = FakeFS(["/assets/reset.css", "/assets/theme.css"])
    r = Resolver(registry, probe=fs)
    assert r.use_resource("css", "base") is True
    assert r.data["stylesheets"] == ["/assets/reset.css", "/assets/theme.css"]


def test_url_scenario(registry, importer):
    importer.load_resource_config({"js": {"urls": {"cdn": "https://x/lib.js"}}})
    fs = FakeFS()
    r = Resolver(registry, probe=fs)
    assert r.use_resource("js", "cdn") is True
    assert r.data["scripts"] == [{"url": "https://x/lib.js"}]
    assert fs.probes == []


def test_all_fields_routed(registry, importer):
    importer.load_resource_config({
        "js": {
            "path": ["public/js"],
            "exts": [".js"],
            "as": "module",
            "name": "modules",
            "warn": False,
            "link": True,
            "groups": {"app": ["a"]},
            "urls": {"lib": "https://l/x.js"},
        },
    })
    js = registry.get("js")
    assert js.search_paths == ["public/js"]
    assert js.extensions == [".js"]
    assert (js.as_keyword, js.collection_name, js.warn, js.link) == ("module", "modules", False, True)
    assert registry.groups.get("js", "app") == ["a"]
    assert registry.urls.get("js", "lib") == "https://l/x.js"


def test_comment_keys_skipped(registry, importer):
    importer.load_resource_config({
        "--doc": {"path": ["nope"]},
        "js": {
            "--why": "explanation",
            "groups": {"--old": ["x"], "app": ["a"]},
        },
    })
    assert "--doc" not in registry
    assert "--why" not in registry.get("js").extra
    assert registry.groups.entries("js") == {"app": ["a"]}


def test_comment_prefix_override(registry, importer):
    importer.load_resource_config({
        "comment": "#",
        "#doc": {"path": ["nope"]},
        "--kept": {"exts": [".x"]},
        "css": {"urls": {"#skip": "https://s", "keep": "https://k"}},
    })
    assert "#doc" not in registry
    assert "--kept" in registry
    assert "comment" not in registry
    assert registry.urls.entries("css") == {"keep": "https://k"}


def test_comment_argument(registry, importer):
    importer.load_resource_config({"//x": {"exts": []}, "js": {"exts": [".js"]}}, comment="//")
    assert "//x" not in registry
    assert registry.get("js").extensions == [".js"]


def test_later_loads_merge(registry, importer):
    importer.load_resource_config({"js": {"path": ["a"], "groups": {"g1": ["x"], "g2": ["y"]}}})
    importer.load_resource_config({"js": {"groups": {"g1": ["z"]}, "urls": {"u": "https://u"}}})
    assert registry.get("js").search_paths == ["a"]
    assert registry.groups.entries("js") == {"g1": ["z"], "g2": ["y"]}
    assert registry.urls.get("js", "u") == "https://u"


def test_list_commands_in_config(registry, importer):
    importer.load_resource_config({"js": {"path": ["x", "y", "z"]}})
    importer.load_resource_config({"js": {"path": {"$splice": [1, 1, "w"]}}})
    importer.load_resource_config({"js": {"exts": {"$push": [".mjs"]}}})
    assert registry.get("js").search_paths == ["x", "w", "z"]
    assert registry.get("js").extensions == [".min.js", ".js", ".mjs"]


def test_path_offset_and_replace(registry, importer):
    registry.set_type_property("js", "path", ["base"])
    importer.load_resource_config({"js": {"path": ["extra"], "pathOffset": -1}})
    assert registry.get("js").search_paths == ["base", "extra"]

    importer.load_resource_config({"js": {"path": "first", "pathOffset": 0, "pathReplace": 0}})
    assert registry.get("js").search_paths == ["first", "base", "extra"]

    importer.load_resource_config({"js": {"path": ["mid"], "pathOffset": 1, "pathReplace": 1}})
    assert registry.get("js").search_paths == ["first", "mid", "extra"]

    importer.load_resource_config({"js": {"path": ["only"], "pathOffset": 0}})
    assert registry.get("js").search_paths == ["only"]
    assert "pathOffset" not in registry.get("js").extra


def test_single_type_with_subsection(registry, importer):
    importer.load_resource_config({"js": {"exts": [".mjs"]}, "css": {"exts": [".x"]}}, type_name="js")
    assert registry.get("js").extensions == [".mjs"]
    assert registry.get("css").extensions == [".min.css", ".css"]


def test_single_type_whole_mapping(registry, importer):
    importer.load_resource_config({"path": ["/svg"], "exts": [".svg"], "comment": "--"}, type_name="svg")
    svg = registry.get("svg")
    assert svg.search_paths == ["/svg"]
    assert svg.extensions == [".svg"]
    assert svg.extra == {}


def test_invalid_type_definition_is_skipped(registry, importer, caplog):
    with caplog.at_level(logging.ERROR):
        importer.load_resource_config({"js": ["not", "a", "mapping"], "css": {"exts": [".css"]}})
    assert "Invalid 'js' type definition" in caplog.text
    assert registry.get("css").extensions == [".css"]


def test_invalid_scalar_in_config_is_skipped(registry, importer, caplog):
    with caplog.at_level(logging.ERROR):
        importer.load_resource_config({"js": {"warn": "sometimes", "link": True}})
    assert registry.get("js").warn is None
    assert registry.get("js").link is True
    assert "Invalid 'warn' value" in caplog.text


def test_named_config_through_store(registry):
    store = ConfigStore({"site": {"resources": {"css": {"path": ["/c"]}}}})
    ConfigImporter(registry, store).load_resource_config("site.resources")
    assert registry.get("css").search_paths == ["/c"]


def test_named_config_missing(registry):
    importer = ConfigImporter(registry, ConfigStore({}))
    with pytest.raises(ConfigError) as ei:
        importer.load_resource_config("nope")
    assert "Invalid config 'nope'" in str(ei.value)
    assert isinstance(ei.value, ResdepsUserError)


def test_named_config_not_a_mapping(registry):
    importer = ConfigImporter(registry, ConfigStore({"res": ["a"]}))
    with pytest.raises(ConfigError):
        importer.load_resource_config("res")


def test_named_config_without_store(registry, importer):
    with pytest.raises(ConfigError):
        importer.load_resource_config("resources")


def test_project_config(tmpproj: Path):
    registry = TypeRegistry()
    ConfigImporter(registry, ConfigStore.from_dir(tmpproj)).load_resource_config("resources")
    assert registry.get("js").search_paths == ["public/js", "vendor/js"]
    assert registry.get("js").link is True
    assert registry.groups.get("js", "app") == ["jquery", "!legacy", "css:theme", "main"]
    assert registry.groups.get("css", "base") == ["reset", "theme"]
    assert registry.urls.get("js", "analytics") == "https://cdn.example.com/analytics.js"
    assert "--about" not in registry
