# themeasset/config.py
"""
Asset configuration.

Everything the container needs from its surroundings is passed in
explicitly: the configured asset base URL, the current request's
scheme and host, and the active theme.

Example config.yaml:

    asset_url: https://cdn.example.com/assets
    request:
      scheme: https
      host: example.com
    theme:
      name: default
      available: [default, dark]
      asset_path: themes/default/assets/
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


@dataclass
class RequestContext:
    """
    The request an asset URL is generated for.

    Attributes:
        scheme: "http" or "https"
        host: Host name, with port if any
        base_path: Application prefix below the host (e.g. "/app")
    """
    scheme: str = "http"
    host: str = "localhost"
    base_path: str = ""

    @property
    def root(self) -> str:
        """Root URL of the application, without trailing slash."""
        return f"{self.scheme}://{self.host}{self.base_path}".rstrip("/")

    def to_dict(self) -> Dict[str, Any]:
        return {"scheme": self.scheme, "host": self.host, "base_path": self.base_path}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RequestContext":
        return cls(
            scheme=data.get("scheme", "http"),
            host=data.get("host", "localhost"),
            base_path=data.get("base_path", ""),
        )


@dataclass
class ThemeConfig:
    """Active theme settings."""
    name: str = "default"
    available: List[str] = field(default_factory=list)
    asset_path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "available": self.available, "asset_path": self.asset_path}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ThemeConfig":
        return cls(
            name=data.get("name", "default"),
            available=list(data.get("available", [])),
            asset_path=data.get("asset_path", ""),
        )


@dataclass
class AssetConfig:
    """
    Configuration for asset containers.

    Attributes:
        asset_url: Base URL for assets; when empty the request root is used
        request: Scheme and host of the current request
        theme: Active theme settings
    """
    asset_url: str = ""
    request: RequestContext = field(default_factory=RequestContext)
    theme: ThemeConfig = field(default_factory=ThemeConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "asset_url": self.asset_url,
            "request": self.request.to_dict(),
            "theme": self.theme.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AssetConfig":
        data = data or {}
        return cls(
            asset_url=data.get("asset_url") or "",
            request=RequestContext.from_dict(data.get("request") or {}),
            theme=ThemeConfig.from_dict(data.get("theme") or {}),
        )

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "AssetConfig":
        """Parse config from YAML string."""
        return cls.from_dict(yaml.safe_load(yaml_content))

    @classmethod
    def from_file(cls, path: Path | str) -> "AssetConfig":
        """Load config from YAML file."""
        with open(path, "r") as f:
            return cls.from_yaml(f.read())
