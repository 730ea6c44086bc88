# themeasset/manager.py
"""Named asset containers sharing one configuration."""

import logging
from typing import Dict, List, Optional

from .config import AssetConfig
from .container import AssetContainer
from .theme import StaticTheme, Theme

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER = "default"


class AssetManager:
    """
    Entry point for page rendering.

    Holds any number of named containers (e.g. "default" for the page
    head, "footer" for late scripts). Build one manager per request.
    """

    def __init__(self, config: Optional[AssetConfig] = None, theme: Optional[Theme] = None):
        self.config = config or AssetConfig()
        self.theme = theme or StaticTheme.from_config(self.config.theme)
        self._containers: Dict[str, AssetContainer] = {}

    def container(self, name: str = DEFAULT_CONTAINER) -> AssetContainer:
        """Get a container by name, creating it on first use."""
        if name not in self._containers:
            logger.debug(f"Creating asset container {name}")
            self._containers[name] = AssetContainer(name, self.config, self.theme)
        return self._containers[name]

    def containers(self) -> List[str]:
        """Names of all containers created so far."""
        return list(self._containers)

    def styles(self, name: str = DEFAULT_CONTAINER, secure: Optional[bool] = None) -> str:
        return self.container(name).styles(secure)

    def scripts(self, name: str = DEFAULT_CONTAINER, secure: Optional[bool] = None) -> str:
        return self.container(name).scripts(secure)
