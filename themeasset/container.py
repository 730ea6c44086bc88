# themeasset/container.py
"""
Asset container.

The container stores named style and script assets with their
dependencies and attributes, and renders each group in dependency order.

Example:
    container = AssetContainer("default", config)
    container.add("jquery", "js/jquery.js")
    container.add("app", "js/app.js", dependencies=["jquery"], attributes=["defer"])
    container.write_style("inline", "body { margin: 0 }")

    head = container.styles()
    footer = container.scripts()
"""

import hashlib
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from . import html
from .asset import (
    AssetEntry,
    AssetGroup,
    normalize_attributes,
    normalize_dependencies,
)
from .config import AssetConfig
from .resolver import resolve_group
from .theme import StaticTheme, Theme
from .urls import AssetUrlResolver, is_full_url

logger = logging.getLogger(__name__)

Dependencies = Optional[Union[str, Iterable[str]]]


class AssetContainer:
    """
    A named set of style and script assets.

    Containers are request-scoped: build one per rendered page.
    """

    def __init__(
        self,
        name: str = "default",
        config: Optional[AssetConfig] = None,
        theme: Optional[Theme] = None,
    ):
        """
        Initialize the container.

        Args:
            name: Container name
            config: Asset URL and request configuration
            theme: Theme collaborator (built from config.theme if omitted)
        """
        self.name = name
        self.config = config or AssetConfig()
        self.theme = theme or StaticTheme.from_config(self.config.theme)
        self.urls = AssetUrlResolver(self.config)
        self._use_path: Union[bool, str] = False
        self._assets: Dict[AssetGroup, Dict[str, AssetEntry]] = {
            AssetGroup.STYLE: {},
            AssetGroup.SCRIPT: {},
        }

    # URLs

    def origin_url(self, uri: str, secure: Optional[bool] = None) -> str:
        """Absolute URL for an asset path relative to the asset root."""
        return self.urls.resolve(uri, secure)

    def url(self, uri: str, secure: Optional[bool] = None) -> str:
        """Absolute URL for an asset path relative to the active theme."""
        if uri.startswith("http") or "//:" in uri:
            return uri
        return self.urls.resolve(self.current_path() + uri, secure)

    def current_path(self) -> str:
        """Asset path prefix of the active theme."""
        return self.theme.asset_path

    # Registration

    def register(
        self,
        group: AssetGroup | str,
        name: str,
        source: str,
        dependencies: Dependencies = None,
        attributes: Any = None,
    ) -> "AssetContainer":
        """Store an asset, replacing any asset of the same name in the group."""
        group = AssetGroup.parse(group)
        entry = AssetEntry(
            name=name,
            group=group,
            source=source,
            dependencies=normalize_dependencies(dependencies),
            attributes=normalize_attributes(attributes),
        )
        if name in self._assets[group]:
            logger.debug(f"Overwriting {group.value} asset [{name}] in container {self.name}")
        self._assets[group][name] = entry
        return self

    def add(
        self,
        name: str,
        source: Union[str, List[str]],
        dependencies: Dependencies = None,
        attributes: Any = None,
    ) -> "AssetContainer":
        """
        Add an asset, choosing the group from the source's extension.

        A list of sources registers one asset per path, named
        ``<name>-<md5 of path>``, all sharing dependencies and attributes.
        """
        if isinstance(source, (list, tuple)):
            for path in source:
                digest = hashlib.md5(path.encode()).hexdigest()
                self.add(f"{name}-{digest}", path, dependencies, attributes)
            return self

        # Protocol-relative URLs keep their leading slashes
        if not source.startswith("//"):
            source = source.lstrip("/")

        if AssetGroup.from_source(source) is AssetGroup.STYLE:
            return self.add_style(name, source, dependencies, attributes)
        return self.add_script(name, source, dependencies, attributes)

    def add_style(
        self,
        name: str,
        source: str,
        dependencies: Dependencies = None,
        attributes: Any = None,
    ) -> "AssetContainer":
        """Add a CSS asset. Defaults ``media`` to "all"."""
        attributes = normalize_attributes(attributes)
        attributes.setdefault("media", "all")
        source = self._consume_use_path(source)
        return self.register(AssetGroup.STYLE, name, source, dependencies, attributes)

    def add_script(
        self,
        name: str,
        source: str,
        dependencies: Dependencies = None,
        attributes: Any = None,
    ) -> "AssetContainer":
        """Add a JavaScript asset."""
        source = self._consume_use_path(source)
        return self.register(AssetGroup.SCRIPT, name, source, dependencies, attributes)

    def write_script(self, name: str, content: str, dependencies: Dependencies = None) -> "AssetContainer":
        """Add inline JavaScript, wrapped in a <script> block."""
        return self.register(AssetGroup.SCRIPT, name, f"<script>{content}</script>", dependencies)

    def write_style(self, name: str, content: str, dependencies: Dependencies = None) -> "AssetContainer":
        """Add inline CSS, wrapped in a <style> block."""
        return self.register(AssetGroup.STYLE, name, f"<style>{content}</style>", dependencies)

    def write_content(self, name: str, content: str, dependencies: Dependencies = None) -> "AssetContainer":
        """Add raw markup to the script group without wrapping it."""
        return self.register(AssetGroup.SCRIPT, name, content, dependencies)

    # Theme path prefixing

    def use_path(self, use: Union[bool, str] = True) -> "AssetContainer":
        """
        Prefix the next style or script source with the theme asset path.

        Pass a theme name to point the path at that theme instead of the
        active one. Only the next add_style/add_script is affected.
        """
        self._use_path = use
        return self

    def is_use_path(self) -> bool:
        return bool(self._use_path)

    def _consume_use_path(self, source: str) -> str:
        if not self.is_use_path():
            return source
        source = self._evaluate_path(self.current_path() + source)
        self._use_path = False
        return source

    def _evaluate_path(self, source: str) -> str:
        use = self._use_path
        if isinstance(use, str) and self.theme.exists(use):
            source = source.replace(self.theme.name, use)
        return source

    # Lookup

    def get(self, group: AssetGroup | str, name: str) -> Optional[AssetEntry]:
        """Get an asset by group and name."""
        return self._assets[AssetGroup.parse(group)].get(name)

    def entries(self, group: AssetGroup | str) -> List[AssetEntry]:
        """Registered assets of a group, in insertion order."""
        return list(self._assets[AssetGroup.parse(group)].values())

    def __contains__(self, name: str) -> bool:
        return any(name in assets for assets in self._assets.values())

    def __len__(self) -> int:
        return sum(len(assets) for assets in self._assets.values())

    # Resolution and rendering

    def resolve(self, group: AssetGroup | str) -> List[str]:
        """Asset names of a group in dependency order."""
        group = AssetGroup.parse(group)
        return resolve_group(self._assets[group])

    def source_url(self, group: AssetGroup | str, name: str, secure: Optional[bool] = None) -> str:
        """
        Resolved source of one asset: an absolute URL, or the markup
        itself for inline assets. Empty string for unknown assets.

        Args:
            secure: None keeps the request scheme, True forces https,
                False forces http
        """
        entry = self.get(group, name)
        if entry is None:
            return ""
        source = entry.source
        if entry.is_markup:
            return source
        if is_full_url(source):
            return source
        return self.urls.resolve(source, secure)

    def render_asset(self, group: AssetGroup | str, name: str, secure: Optional[bool] = None) -> str:
        """Render one asset as HTML."""
        group = AssetGroup.parse(group)
        entry = self.get(group, name)
        if entry is None:
            return ""
        source = self.source_url(group, name, secure)
        if "<" in source:
            return source
        return html.tag(group, source, entry.attributes)

    def render_group(self, group: AssetGroup | str, secure: Optional[bool] = None) -> str:
        """Render all assets of a group in dependency order."""
        group = AssetGroup.parse(group)
        if not self._assets[group]:
            return ""
        return "".join(self.render_asset(group, name, secure) for name in self.resolve(group))

    def get_assets(self, group: AssetGroup | str, secure: Optional[bool] = None) -> List[str]:
        """Resolved sources of a group in dependency order, without tags."""
        group = AssetGroup.parse(group)
        return [self.source_url(group, name, secure) for name in self.resolve(group)]

    def styles(self, secure: Optional[bool] = None) -> str:
        """Rendered <link> tags for all style assets."""
        return self.render_group(AssetGroup.STYLE, secure)

    def scripts(self, secure: Optional[bool] = None) -> str:
        """Rendered <script> tags for all script assets."""
        return self.render_group(AssetGroup.SCRIPT, secure)
