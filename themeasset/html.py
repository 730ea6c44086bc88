# themeasset/html.py
"""HTML rendering for asset tags."""

from typing import Any, Mapping, Optional

from markupsafe import escape

from .asset import AssetGroup

STYLE_DEFAULTS = {"media": "all", "type": "text/css", "rel": "stylesheet"}


def _is_empty(value: Any) -> bool:
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return value is None or value is False or value == "" or value == 0 or value == "0"


def attribute_element(key: Any, value: Any) -> Optional[str]:
    """Build a single ``key="value"`` pair, or None for an empty value."""
    # Integer keys come from bare attribute lists: ["defer"] -> defer="defer"
    if isinstance(key, int):
        key = value
    if _is_empty(value):
        return None
    return f'{key}="{escape(str(value))}"'


def attributes(attrs: Optional[Mapping[Any, Any]]) -> str:
    """Build an attribute string with a leading space, or "" when empty."""
    html = []
    for key, value in (attrs or {}).items():
        element = attribute_element(key, value)
        if element:
            html.append(element)
    return " " + " ".join(html) if html else ""


def script_tag(source: str, attrs: Optional[Mapping[Any, Any]] = None) -> str:
    merged = dict(attrs or {})
    merged.pop("src", None)
    merged["src"] = source
    return f"<script{attributes(merged)}></script>\n"


def style_tag(source: str, attrs: Optional[Mapping[Any, Any]] = None) -> str:
    merged = dict(attrs or {})
    for key, value in STYLE_DEFAULTS.items():
        merged.setdefault(key, value)
    merged.pop("href", None)
    merged["href"] = source
    return f"<link{attributes(merged)}>\n"


def tag(group: AssetGroup, source: str, attrs: Optional[Mapping[Any, Any]] = None) -> str:
    """Wrap a resolved source URL in the group's tag."""
    if group is AssetGroup.SCRIPT:
        return script_tag(source, attrs)
    return style_tag(source, attrs)
