# themeasset/errors.py
"""
Exceptions raised by the asset container.

Resolution errors subclass ValueError so callers that treat an invalid
dependency graph as bad input can keep catching ValueError.
"""

from typing import List, Optional


class AssetError(Exception):
    """Base class for all asset container errors."""


class AssetDependencyError(AssetError, ValueError):
    """An asset group cannot be ordered."""


class SelfDependencyError(AssetDependencyError):
    """An asset lists itself as a dependency."""

    def __init__(self, asset: str):
        self.asset = asset
        super().__init__(f"Asset [{asset}] is dependent on itself.")


class CircularDependencyError(AssetDependencyError):
    """
    Two or more assets depend on each other.

    Attributes:
        asset: Asset that was being evaluated when the cycle was found
        dependency: The dependency closing the cycle
        cycle: Full cycle path, first name repeated at the end
    """

    def __init__(self, asset: str, dependency: str, cycle: Optional[List[str]] = None):
        self.asset = asset
        self.dependency = dependency
        self.cycle = cycle or [asset, dependency, asset]
        if len(self.cycle) <= 3:
            message = f"Assets [{asset}] and [{dependency}] have a circular dependency."
        else:
            message = "Assets have a circular dependency: " + " -> ".join(self.cycle)
        super().__init__(message)


class ManifestError(AssetError, ValueError):
    """A manifest entry is malformed."""
