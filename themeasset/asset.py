# themeasset/asset.py
"""
Core asset data structures.

An asset is a named style or script: a file path, a URL, or a block of
inline markup. Assets live in one of two groups and may depend on other
assets of the same group.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import Any, Dict, Iterable, Optional, Tuple, Union

Attributes = Dict[Union[int, str], Any]


class AssetGroup(Enum):
    """Asset groups. The value is the group's name in manifests and on the CLI."""
    STYLE = "style"
    SCRIPT = "script"

    @classmethod
    def from_source(cls, source: str) -> "AssetGroup":
        """Infer the group from a source's file extension."""
        suffix = PurePosixPath(source.split("?")[0]).suffix.lower()
        return cls.STYLE if suffix == ".css" else cls.SCRIPT

    @classmethod
    def parse(cls, value: "AssetGroup | str") -> "AssetGroup":
        """Accept a group or its name ("style", "css", "script", "js")."""
        if isinstance(value, cls):
            return value
        aliases = {
            "style": cls.STYLE,
            "styles": cls.STYLE,
            "css": cls.STYLE,
            "script": cls.SCRIPT,
            "scripts": cls.SCRIPT,
            "js": cls.SCRIPT,
        }
        try:
            return aliases[str(value).lower()]
        except KeyError:
            raise ValueError(f"Unknown asset group: {value}") from None


def normalize_dependencies(dependencies: Optional[Union[str, Iterable[str]]]) -> Tuple[str, ...]:
    """Coerce dependencies to an ordered tuple without duplicates."""
    if dependencies is None:
        return ()
    if isinstance(dependencies, str):
        dependencies = [dependencies]
    return tuple(dict.fromkeys(str(d) for d in dependencies))


def normalize_attributes(attributes: Any) -> Attributes:
    """
    Coerce attributes to a dict.

    A bare string or a list becomes integer-keyed entries, which render as
    boolean-style attributes (``defer`` -> ``defer="defer"``).
    """
    if attributes is None:
        return {}
    if isinstance(attributes, dict):
        return dict(attributes)
    if isinstance(attributes, str):
        return {0: attributes}
    return dict(enumerate(attributes))


@dataclass(frozen=True)
class AssetEntry:
    """
    A registered asset.

    Attributes:
        name: Unique name within its group
        group: STYLE or SCRIPT
        source: File path, full URL, or literal markup
        dependencies: Names that must be emitted before this asset
        attributes: HTML attributes applied to the rendered tag
    """
    name: str
    group: AssetGroup
    source: str
    dependencies: Tuple[str, ...] = ()
    attributes: Attributes = field(default_factory=dict, hash=False)

    @property
    def is_markup(self) -> bool:
        """True when the source is already-rendered markup."""
        return "<" in self.source

    def to_dict(self) -> Dict[str, Any]:
        """Serialize entry to dictionary."""
        return {
            "name": self.name,
            "group": self.group.value,
            "source": self.source,
            "dependencies": list(self.dependencies),
            "attributes": dict(self.attributes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssetEntry":
        """Deserialize entry from dictionary."""
        return cls(
            name=data["name"],
            group=AssetGroup.parse(data["group"]),
            source=data["source"],
            dependencies=normalize_dependencies(data.get("dependencies")),
            attributes=normalize_attributes(data.get("attributes")),
        )
