# tests/test_manifest.py
"""Tests for manifests, configuration and the manager."""

import tempfile
from pathlib import Path

import pytest

from themeasset.asset import AssetEntry, AssetGroup
from themeasset.config import AssetConfig
from themeasset.container import AssetContainer
from themeasset.errors import ManifestError
from themeasset.manager import AssetManager
from themeasset.manifest import Manifest, load_manifest

MANIFEST_YAML = """
styles:
  - name: base
    source: css/app.css
    dependencies: [reset]
  - name: reset
    source: css/reset.css
scripts:
  - name: app
    source: js/app.js
    dependencies: [jquery]
    attributes: [defer]
  - name: jquery
    source: https://cdn.example.com/jquery.js
inline_scripts:
  - name: boot
    content: "window.boot()"
    dependencies: [app]
files:
  - name: vendor
    source: [vendor/a.js, vendor/b.css]
"""

CONFIG_YAML = """
asset_url: https://cdn.example.com/static/index.php
request:
  scheme: https
  host: example.com
theme:
  name: default
  available: [default, dark]
  asset_path: themes/default/assets/
"""


@pytest.fixture
def work_dir():
    """Create temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestManifest:
    """Test manifest loading."""

    def test_from_yaml(self):
        container = Manifest.from_yaml(MANIFEST_YAML).apply(AssetContainer())
        styles = container.resolve("style")
        scripts = container.resolve("script")
        assert styles.index("reset") < styles.index("base")
        assert scripts.index("jquery") < scripts.index("app") < scripts.index("boot")
        assert len(container.entries("style")) == 3
        assert len(container.entries("script")) == 4

    def test_from_file(self, work_dir):
        path = work_dir / "assets.yaml"
        path.write_text(MANIFEST_YAML)
        manifest = Manifest.from_file(path)
        assert len(manifest.sections["styles"]) == 2

    def test_load_manifest(self):
        container = load_manifest(AssetContainer(), {"scripts": [{"name": "a", "source": "a.js"}]})
        assert container.get("script", "a").source == "a.js"

    def test_empty(self):
        container = Manifest.from_yaml("").apply(AssetContainer())
        assert len(container) == 0

    def test_missing_source(self):
        with pytest.raises(ManifestError):
            Manifest.from_dict({"scripts": [{"name": "a"}]})

    def test_inline_needs_content(self):
        with pytest.raises(ManifestError):
            Manifest.from_dict({"inline_styles": [{"name": "a", "source": "a.css"}]})

    def test_source_list_outside_files(self):
        """Only the files section accepts a list of sources."""
        with pytest.raises(ManifestError):
            Manifest.from_dict({"styles": [{"name": "x", "source": ["a.css", "b.css"]}]})

    def test_numeric_source(self):
        with pytest.raises(ManifestError):
            Manifest.from_dict({"scripts": [{"name": "x", "source": 123}]})

    def test_numeric_name(self):
        with pytest.raises(ManifestError):
            Manifest.from_dict({"scripts": [{"name": 1, "source": "a.js"}]})

    def test_inline_content_not_string(self):
        with pytest.raises(ManifestError):
            Manifest.from_dict({"inline_scripts": [{"name": "x", "content": ["a"]}]})

    def test_files_list_must_hold_strings(self):
        with pytest.raises(ManifestError):
            Manifest.from_dict({"files": [{"name": "x", "source": ["a.js", 2]}]})

    def test_files_list_accepted(self):
        container = Manifest.from_dict(
            {"files": [{"name": "x", "source": ["a.js", "b.css"]}]}
        ).apply(AssetContainer(config=AssetConfig(asset_url="https://x")))
        assert "https://x/a.js" in container.scripts()
        assert "https://x/b.css" in container.styles()

    def test_unknown_section(self):
        with pytest.raises(ManifestError):
            Manifest.from_dict({"images": []})

    def test_section_not_list(self):
        with pytest.raises(ManifestError):
            Manifest.from_dict({"scripts": {"name": "a"}})


class TestConfig:
    """Test AssetConfig."""

    def test_from_yaml(self):
        config = AssetConfig.from_yaml(CONFIG_YAML)
        assert config.asset_url == "https://cdn.example.com/static/index.php"
        assert config.request.scheme == "https"
        assert config.theme.available == ["default", "dark"]

    def test_from_file(self, work_dir):
        path = work_dir / "config.yaml"
        path.write_text(CONFIG_YAML)
        config = AssetConfig.from_file(path)
        container = AssetContainer(config=config)
        assert container.origin_url("a.js") == "https://cdn.example.com/static/a.js"

    def test_defaults(self):
        config = AssetConfig.from_dict(None)
        assert config.asset_url == ""
        assert config.request.root == "http://localhost"

    def test_round_trip_dict(self):
        config = AssetConfig.from_yaml(CONFIG_YAML)
        assert AssetConfig.from_dict(config.to_dict()) == config


class TestAssetEntry:
    """Test AssetEntry serialization."""

    def test_from_dict(self):
        entry = AssetEntry.from_dict({"name": "a", "group": "css", "source": "a.css",
                                      "dependencies": "b"})
        assert entry.group is AssetGroup.STYLE
        assert entry.dependencies == ("b",)
        assert entry.to_dict()["group"] == "style"

    def test_dependencies_deduplicated(self):
        entry = AssetEntry.from_dict({"name": "a", "group": "js", "source": "a.js",
                                      "dependencies": ["b", "c", "b"]})
        assert entry.dependencies == ("b", "c")

    def test_hashable(self):
        """Entries hash by identity fields; attributes do not take part."""
        a = AssetEntry(name="a", group=AssetGroup.SCRIPT, source="a.js", attributes={"id": "x"})
        b = AssetEntry(name="a", group=AssetGroup.SCRIPT, source="a.js", attributes={"id": "x"})
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_unknown_group(self):
        with pytest.raises(ValueError):
            AssetGroup.parse("image")


class TestAssetManager:
    """Test AssetManager."""

    def test_named_containers(self):
        manager = AssetManager(AssetConfig(asset_url="https://x"))
        manager.container().add("app", "js/app.js")
        manager.container("footer").add("late", "js/late.js")

        assert manager.container() is manager.container("default")
        assert manager.containers() == ["default", "footer"]
        assert "app.js" in manager.scripts()
        assert "late.js" not in manager.scripts()
        assert "late.js" in manager.scripts("footer")

    def test_shared_theme(self):
        manager = AssetManager(AssetConfig(asset_url="https://x"))
        assert manager.container("a").theme is manager.container("b").theme
        assert manager.styles() == ""
