# themeasset/urls.py
"""
Asset URL composition.

Pure string work: no filesystem access and no request globals. The base
URL comes from AssetConfig.
"""

from typing import Optional
from urllib.parse import urlparse

from .config import AssetConfig

# Default document stripped from base URLs
INDEX = "index.php"


def is_full_url(path: str) -> bool:
    """True for URLs with scheme and host, and for protocol-relative URLs."""
    if path.startswith("//"):
        return True
    try:
        parsed = urlparse(path)
    except ValueError:
        # Malformed netloc such as "http://[bad"; treated as a relative path
        return False
    return bool(parsed.scheme and parsed.netloc)


def _strip_index(base: str) -> str:
    return base.replace("/" + INDEX, "") if INDEX in base else base


class AssetUrlResolver:
    """Turns relative asset paths into absolute URLs."""

    def __init__(self, config: Optional[AssetConfig] = None):
        self.config = config or AssetConfig()

    def base_url(self, secure: Optional[bool] = None) -> str:
        """
        Base URL for assets, without trailing slash.

        Args:
            secure: None keeps the request scheme, True forces https,
                False forces http. Ignored when asset_url is configured.
        """
        if self.config.asset_url:
            return _strip_index(self.config.asset_url.rstrip("/"))

        request = self.config.request
        if secure is None:
            scheme = request.scheme
        else:
            scheme = "https" if secure else "http"

        root = request.root
        _, _, rest = root.partition("://")
        return _strip_index(f"{scheme}://{rest}")

    def resolve(self, path: str, secure: Optional[bool] = None) -> str:
        """Return ``path`` as an absolute asset URL."""
        if is_full_url(path):
            return path
        return self.base_url(secure) + "/" + path
