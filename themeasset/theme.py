# themeasset/theme.py
"""
Theme collaborator.

The container consults the theme only for one-shot path prefixing:
it needs the active theme's name, its asset path, and whether another
theme exists.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from .config import ThemeConfig


class Theme(ABC):
    """Interface to the application's theme layer."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the active theme."""
        pass

    @property
    @abstractmethod
    def asset_path(self) -> str:
        """Asset path prefix of the active theme (e.g. "themes/default/assets/")."""
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Whether a theme with this name is installed."""
        pass


class StaticTheme(Theme):
    """Theme backed by configuration values."""

    def __init__(self, name: str = "default", available: Iterable[str] = (), asset_path: str = ""):
        self._name = name
        self._available = set(available) | {name}
        self._asset_path = asset_path

    @classmethod
    def from_config(cls, config: ThemeConfig) -> "StaticTheme":
        return cls(name=config.name, available=config.available, asset_path=config.asset_path)

    @property
    def name(self) -> str:
        return self._name

    @property
    def asset_path(self) -> str:
        return self._asset_path

    def exists(self, name: str) -> bool:
        return name in self._available
