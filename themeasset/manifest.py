# themeasset/manifest.py
"""
Declarative asset registration from YAML.

Example manifest:

    styles:
      - name: base
        source: css/app.css
    scripts:
      - name: app
        source: js/app.js
        dependencies: [jquery]
        attributes: [defer]
    inline_scripts:
      - name: boot
        content: "window.boot()"
        dependencies: [app]
    files:
      - name: vendor
        source: [vendor/a.js, vendor/b.js, vendor/c.css]
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .container import AssetContainer
from .errors import ManifestError

logger = logging.getLogger(__name__)

SECTIONS = ("styles", "scripts", "inline_styles", "inline_scripts", "files")


@dataclass
class Manifest:
    """Parsed manifest: section name -> list of entry dicts."""
    sections: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Manifest":
        data = data or {}
        unknown = set(data) - set(SECTIONS)
        if unknown:
            raise ManifestError(f"Unknown manifest sections: {sorted(unknown)}")

        sections = {}
        for section in SECTIONS:
            items = data.get(section) or []
            if not isinstance(items, list):
                raise ManifestError(f"Section '{section}' must be a list")
            for item in items:
                _check_entry(section, item)
            sections[section] = items
        return cls(sections=sections)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "Manifest":
        """Parse manifest from YAML string."""
        return cls.from_dict(yaml.safe_load(yaml_content))

    @classmethod
    def from_file(cls, path: Path | str) -> "Manifest":
        """Load manifest from YAML file."""
        with open(path, "r") as f:
            return cls.from_yaml(f.read())

    def apply(self, container: AssetContainer) -> AssetContainer:
        """Register every manifest entry in the container."""
        for item in self.sections.get("styles", []):
            container.add_style(item["name"], item["source"],
                                item.get("dependencies"), item.get("attributes"))
        for item in self.sections.get("scripts", []):
            container.add_script(item["name"], item["source"],
                                 item.get("dependencies"), item.get("attributes"))
        for item in self.sections.get("files", []):
            container.add(item["name"], item["source"],
                          item.get("dependencies"), item.get("attributes"))
        for item in self.sections.get("inline_styles", []):
            container.write_style(item["name"], item["content"], item.get("dependencies"))
        for item in self.sections.get("inline_scripts", []):
            container.write_script(item["name"], item["content"], item.get("dependencies"))

        logger.info(f"Loaded {sum(len(v) for v in self.sections.values())} manifest entries "
                    f"into container {container.name}")
        return container


def _check_entry(section: str, item: Any) -> None:
    if not isinstance(item, dict):
        raise ManifestError(f"Entries in '{section}' must be mappings, got {item!r}")
    key = "content" if section.startswith("inline_") else "source"
    missing = [k for k in ("name", key) if k not in item]
    if missing:
        raise ManifestError(f"Entry in '{section}' is missing {', '.join(missing)}: {item!r}")

    if not isinstance(item["name"], str):
        raise ManifestError(f"Entry name in '{section}' must be a string: {item!r}")

    value = item[key]
    # Only extension-inferred files may list several sources
    if section == "files" and isinstance(value, list):
        if value and all(isinstance(v, str) for v in value):
            return
        raise ManifestError(f"Sources in '{section}' must be a list of strings: {item!r}")
    if not isinstance(value, str):
        raise ManifestError(f"Entry {key} in '{section}' must be a string: {item!r}")


def load_manifest(container: AssetContainer, data: Dict[str, Any]) -> AssetContainer:
    """Register the assets described by a manifest dict."""
    return Manifest.from_dict(data).apply(container)
