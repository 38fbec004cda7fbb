"""Button component — a link styled as a Tabler button."""

from __future__ import annotations

from typing import Any

from tabler_components._types import ButtonVariant
from tabler_components.components.base import BaseComponent
from tabler_components.components.icon import IconComponent
from tabler_components.exceptions import ComponentArgumentError
from tabler_components.utils.html import Markup, class_names, content_tag, is_present, pop_class


def _coerce_variant(variant: ButtonVariant | str | None) -> ButtonVariant | None:
    if variant is None or isinstance(variant, ButtonVariant):
        return variant
    try:
        return ButtonVariant(str(variant).lower())
    except ValueError:
        raise ComponentArgumentError(
            f"Unknown button variant {variant!r}; "
            f"expected one of: {', '.join(v.value for v in ButtonVariant)}"
        ) from None


class ButtonComponent(BaseComponent):
    """Render ``<a class="btn ...">`` with optional icon.

    Example:
        >>> ButtonComponent("Save", url="/save", color="success").render()
        Markup('<a href="/save" class="btn btn-success">Save</a>')
        >>> ButtonComponent("", url="/search", icon="search")   # icon-only
        >>> ButtonComponent("Submit", url="/submit", data={"turbo_method": "post"})

    Args:
        label: Button text; empty for an icon-only button
        url: Link target
        color: Tabler color suffix (``primary``, ``danger``, ...); empty for none
        size: ``sm`` or ``lg``
        icon: Icon name rendered before the label
        full_width: Stretch to the container width (``w-100``)
        variant: ``"ghost"`` for ``btn-ghost-<color>``
        **options: Extra attributes for the anchor; ``class_`` is prepended
            to the computed classes
    """

    def __init__(
        self,
        label: Any = "",
        url: str = "#",
        color: str | None = "primary",
        size: str | None = None,
        icon: str | None = None,
        full_width: bool = False,
        variant: ButtonVariant | str | None = None,
        **options: Any,
    ):
        super().__init__()
        self.label = label
        self.url = url
        self.color = color
        self.size = size
        self.icon = icon
        self.full_width = full_width
        self.variant = _coerce_variant(variant)
        self.css_class = pop_class(options) or None
        self.options = options

    @property
    def has_label(self) -> bool:
        return is_present(self.label)

    @property
    def variant_base_class(self) -> str:
        return "btn-ghost" if self.variant is ButtonVariant.GHOST else "btn"

    def classes(self) -> str:
        classes = ["btn"]
        if is_present(self.color):
            classes.append(f"{self.variant_base_class}-{self.color}")
        if self.size:
            classes.append(f"btn-{self.size}")
        if self.icon and not self.has_label:
            classes.append("btn-icon")
        if self.full_width:
            classes.append("w-100")
        return class_names(self.css_class, classes)

    def icon_tag(self) -> IconComponent | None:
        if not self.icon:
            return None
        return IconComponent(self.icon, size=20, class_="me-2" if self.has_label else None)

    def call(self) -> Markup:
        return content_tag(
            "a",
            self.icon_tag(),
            self.label,
            self.content,
            href=self.url,
            class_=self.classes(),
            **self.options,
        )
