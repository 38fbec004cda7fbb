"""Shared constants for tabler_components.

Extracted from html.py and the icon renderer to keep modules focused.
"""

from __future__ import annotations

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Classes every icon carries; the per-icon class is ICON_CLASS_PREFIX + name
ICON_BASE_CLASSES: tuple[str, ...] = ("icon", "icon-tabler")
ICON_CLASS_PREFIX = "icon-tabler-"

ICON_FILE_EXTENSION = ".svg"

# Placeholder drawn when an icon asset is missing: a circle with a slash
PLACEHOLDER_VIEWBOX = "0 0 24 24"
PLACEHOLDER_PATHS: tuple[str, ...] = (
    "M12 12m-9 0a9 9 0 1 0 18 0a9 9 0 1 0 -18 0",
    "M9 9l6 6",
    "M15 9l-6 6",
)

# Environment variable naming an extra icon directory searched before the bundled set
ICONS_PATH_ENV = "TABLER_ICONS_PATH"

# Elements with no closing tag
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Attributes rendered bare when their value is True
BOOLEAN_ATTRS: frozenset[str] = frozenset(
    {
        "async",
        "autofocus",
        "checked",
        "defer",
        "disabled",
        "formnovalidate",
        "hidden",
        "inert",
        "multiple",
        "novalidate",
        "open",
        "readonly",
        "required",
        "selected",
    }
)

# Mapping-valued attributes expanded into "<prefix>-<key>" pairs
NESTED_ATTR_PREFIXES: frozenset[str] = frozenset({"data", "aria"})
