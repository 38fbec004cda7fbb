"""Icon rendering — load an SVG asset and rewrite its presentation attributes.

Pipeline:
IconRequest → loader.get_source(variant, name) → parse → rewrite root <svg> → Markup

Rewrite Rules (root element only):
1. ``width``/``height`` set to the requested size
2. Inline style gets ``width: {size}px; height: {size}px`` (appended to any
   existing style with ``; ``)
3. Outline icons also get a ``stroke-width`` attribute and style entry
4. Classes ``icon icon-tabler icon-tabler-<name> [custom]`` are appended
   after any class already on the element
5. Caller attributes are applied last, names converted with `dasherize`
   and ``data``/``aria`` mappings flattened. They replace any existing
   attribute of the same name in any letter case

Fallbacks:
- Missing asset → fixed 24×24 "no entry" placeholder titled
  ``Icon not found: <name>``
- Asset without an SVG root → raw source returned untouched

`IconRenderer.render()` never raises for a valid `IconRequest`.

Thread-Safety:
No caching or shared mutable state; every call re-reads and re-parses the
asset.

"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from bs4 import BeautifulSoup, Tag

from tabler_components._types import IconVariant
from tabler_components.components.base import BaseComponent
from tabler_components.config import get_settings
from tabler_components.exceptions import ComponentArgumentError, IconNotFoundError
from tabler_components.loaders import IconLoader
from tabler_components.utils.constants import (
    ICON_BASE_CLASSES,
    ICON_CLASS_PREFIX,
    PLACEHOLDER_PATHS,
    PLACEHOLDER_VIEWBOX,
    SVG_NAMESPACE,
)
from tabler_components.utils.html import Markup, class_names, content_tag, expand_attrs, is_present
from tabler_components.utils.numbers import format_number, is_positive_int, is_positive_number

logger = logging.getLogger(__name__)

# Keyword spellings accepted for the custom CSS class
_CLASS_KEYS = ("class", "class_", "css_class")


def _attribute_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Real):
        return format_number(value)
    return str(value)


@dataclass(frozen=True, slots=True)
class IconRequest:
    """Everything needed to render one icon.

    Attributes:
        name: Icon name; stored lower-cased
        variant: Outline (stroked) or filled
        size: Width and height in pixels
        stroke_width: Stroke width, used for outline icons only
        extra_attributes: Attributes applied verbatim to the root <svg>
        css_class: Custom class appended after the standard icon classes
    """

    name: str
    variant: IconVariant = IconVariant.OUTLINE
    size: int = 24
    stroke_width: float = 2
    extra_attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)
    css_class: str | None = None

    def __post_init__(self) -> None:
        name = str(self.name).strip().lower() if self.name is not None else ""
        if not name:
            raise ComponentArgumentError("Icon name must not be empty")
        object.__setattr__(self, "name", name)

        variant = self.variant
        if not isinstance(variant, IconVariant):
            variant = str(variant).strip().lower()
        try:
            object.__setattr__(self, "variant", IconVariant(variant))
        except ValueError:
            raise ComponentArgumentError(
                f"Unknown icon variant {self.variant!r}; "
                f"expected one of: {', '.join(v.value for v in IconVariant)}"
            ) from None

        if not is_positive_int(self.size):
            raise ComponentArgumentError(
                f"Icon size must be a positive integer, got {self.size!r}"
            )
        if not is_positive_number(self.stroke_width):
            raise ComponentArgumentError(
                f"Icon stroke width must be a positive number, got {self.stroke_width!r}"
            )

        object.__setattr__(self, "extra_attributes", MappingProxyType(dict(self.extra_attributes)))

    @property
    def css_classes(self) -> str:
        """``icon icon-tabler icon-tabler-<name>`` plus the custom class."""
        return class_names(*ICON_BASE_CLASSES, f"{ICON_CLASS_PREFIX}{self.name}", self.css_class)


class IconRenderer:
    """Render IconRequests against an icon loader.

    Args:
        loader: Asset source; defaults to the configured loader at render time

    Example:
        >>> renderer = IconRenderer()
        >>> html = renderer.render(IconRequest("home", size=32, stroke_width=1.5))
        >>> 'width="32"' in html
        True
    """

    __slots__ = ("_loader",)

    def __init__(self, loader: IconLoader | None = None):
        self._loader = loader

    @property
    def loader(self) -> IconLoader:
        return self._loader if self._loader is not None else get_settings().icon_loader

    def render(self, request: IconRequest) -> Markup:
        """Render the icon, falling back to the placeholder on a miss."""
        try:
            source, filename = self.loader.get_source(request.variant.value, request.name)
        except IconNotFoundError as exc:
            logger.debug("Rendering placeholder: %s", exc)
            return self.placeholder(request)
        return self.rewrite(source, request, filename=filename)

    def rewrite(self, source: str, request: IconRequest, *, filename: str | None = None) -> Markup:
        """Apply the request's attributes to the root <svg> of `source`."""
        soup = BeautifulSoup(source, "xml")
        svg = soup.find("svg")
        if not isinstance(svg, Tag) or svg.namespace != SVG_NAMESPACE:
            logger.warning(
                "Icon asset %s has no <svg> root element; passing source through",
                filename or request.name,
            )
            return Markup(source)

        size = format_number(request.size)
        svg["width"] = size
        svg["height"] = size

        styles = [f"width: {size}px", f"height: {size}px"]
        if request.variant is IconVariant.OUTLINE:
            stroke_width = format_number(request.stroke_width)
            svg["stroke-width"] = stroke_width
            styles.append(f"stroke-width: {stroke_width}")
        svg["style"] = _merge_style(svg.get("style"), "; ".join(styles))

        existing_class = svg.get("class")
        if isinstance(existing_class, list):
            existing_class = " ".join(existing_class)
        svg["class"] = class_names(existing_class, request.css_classes)

        for name, value in expand_attrs(request.extra_attributes):
            if value is None:
                continue
            _set_attribute(svg, name, _attribute_value(value))

        return Markup(str(svg))

    def placeholder(self, request: IconRequest) -> Markup:
        """The "no entry" glyph drawn in place of a missing icon."""
        return content_tag(
            "svg",
            content_tag("title", f"Icon not found: {request.name}"),
            [content_tag("path", d=d) for d in PLACEHOLDER_PATHS],
            xmlns=SVG_NAMESPACE,
            width=request.size,
            height=request.size,
            viewBox=PLACEHOLDER_VIEWBOX,
            fill="none",
            stroke="currentColor",
            stroke_width=format_number(request.stroke_width),
            stroke_linecap="round",
            stroke_linejoin="round",
            class_=request.css_classes,
        )


def _merge_style(existing: Any, addition: str) -> str:
    if is_present(existing):
        return f"{str(existing).strip().rstrip(';').rstrip()}; {addition}"
    return addition


def _set_attribute(svg: Tag, name: str, value: str) -> None:
    # Caller wins; drop a differently-cased duplicate so only one survives.
    for existing in list(svg.attrs):
        if existing != name and existing.lower() == name.lower():
            del svg[existing]
    svg[name] = value


class IconComponent(BaseComponent):
    """Inline SVG icon from the Tabler icon set.

    Example:
        >>> IconComponent("home").render()
        >>> IconComponent("star", variant="filled", size=16, class_="text-yellow")
        >>> IconComponent("settings", stroke_width=1.5, aria_hidden="true")

    Args:
        name: Icon name (case-insensitive)
        variant: ``"outline"`` or ``"filled"``; defaults from settings
        size: Pixel size; defaults from settings
        stroke_width: Outline stroke width; defaults from settings
        **html_attributes: Extra attributes for the <svg>; ``class_``
            (or ``css_class``) becomes the custom class
    """

    def __init__(
        self,
        name: str,
        variant: IconVariant | str | None = None,
        size: int | None = None,
        stroke_width: float | None = None,
        *,
        renderer: IconRenderer | None = None,
        **html_attributes: Any,
    ):
        super().__init__()
        settings = get_settings()
        css_class = None
        for key in _CLASS_KEYS:
            if key in html_attributes:
                css_class = class_names(css_class, html_attributes.pop(key)) or None
        self.request = IconRequest(
            name=name,
            variant=variant if variant is not None else settings.icon_variant,
            size=size if size is not None else settings.icon_size,
            stroke_width=stroke_width if stroke_width is not None else settings.icon_stroke_width,
            extra_attributes=html_attributes,
            css_class=css_class,
        )
        self.renderer = renderer or IconRenderer()

    @property
    def name(self) -> str:
        return self.request.name

    def call(self) -> Markup:
        return self.renderer.render(self.request)
