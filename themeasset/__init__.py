# themeasset - Theme asset registry with dependency ordering
#
# Registers named style and script assets for a page, orders each group
# so dependencies come first, and renders the group to HTML on demand.
#
# Core concepts:
# - AssetEntry: A named style or script (path, URL, or inline markup)
# - AssetContainer: Registry of assets for one page, grouped by type
# - Resolver: Orders a group by dependencies, rejecting cycles
# - AssetManager: Named containers sharing one configuration

from .asset import AssetEntry, AssetGroup
from .config import AssetConfig, RequestContext, ThemeConfig
from .container import AssetContainer
from .errors import (
    AssetDependencyError,
    AssetError,
    CircularDependencyError,
    ManifestError,
    SelfDependencyError,
)
from .manager import AssetManager
from .manifest import Manifest, load_manifest
from .resolver import resolve_group
from .theme import StaticTheme, Theme
from .urls import AssetUrlResolver

__all__ = [
    # Core
    "AssetEntry",
    "AssetGroup",
    "AssetContainer",
    "AssetManager",
    "resolve_group",
    # Configuration
    "AssetConfig",
    "RequestContext",
    "ThemeConfig",
    "Theme",
    "StaticTheme",
    "AssetUrlResolver",
    # Manifests
    "Manifest",
    "load_manifest",
    # Errors
    "AssetError",
    "AssetDependencyError",
    "SelfDependencyError",
    "CircularDependencyError",
    "ManifestError",
]

__version__ = "0.1.0"
