import textwrap
from pathlib import Path

import pytest

from resdeps.registry import TypeRegistry
from resdeps.resolve import HeaderList, Resolver, ResolverSettings

from tests.infrastructure.file_utils import write, touch_assets
from tests.infrastructure.fs_utils import FakeFS


@pytest.fixture
def registry() -> TypeRegistry:
    """Registry with the built-in js/css/font types."""
    return TypeRegistry()


@pytest.fixture
def fs() -> FakeFS:
    return FakeFS()


@pytest.fixture
def headers() -> HeaderList:
    return HeaderList()


@pytest.fixture
def make_resolver(registry: TypeRegistry, fs: FakeFS, headers: HeaderList):
    """Factory: resolver over the shared registry, fake filesystem and header list."""
    def _make(**settings) -> Resolver:
        return Resolver(
            registry,
            settings=ResolverSettings(**settings),
            headers=headers,
            probe=fs,
        )
    return _make


@pytest.fixture
def tmpproj(tmp_path: Path) -> Path:
    """Minimal project: res-cfg/resources.yaml + assets under public/."""
    root = tmp_path
    write(
        root / "res-cfg" / "resources.yaml",
        textwrap.dedent("""
        comment: "--"
        "--about": project resources
        js:
          path: [public/js, vendor/js]
          link: true
          groups:
            app: [jquery, "!legacy", "css:theme", main]
          urls:
            analytics: https://cdn.example.com/analytics.js
        css:
          path: [public/css]
          groups:
            base: [reset, theme]
        """).strip() + "\n",
    )
    touch_assets(root, [
        "public/js/main.js",
        "public/js/legacy.js",
        "vendor/js/jquery.min.js",
        "vendor/js/jquery.js",
        "public/css/reset.css",
        "public/css/theme.min.css",
    ])
    return root
