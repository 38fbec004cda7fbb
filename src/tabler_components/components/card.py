"""Card component and its parts.

Markup order inside ``<div class="card">`` is fixed:

    status → header → table → bodies… → content → footer

Example:
    ```python
    card = CardComponent(class_="card-sm")
    card.with_status("danger")
    header = card.with_header("Card Title", subtitle="Card Subtitle")
    header.with_action("Back", url="/")
    card.with_body().with_content("Card content goes here")
    card.with_body().with_content("Card content 2 goes here")
    card.with_footer().with_content("Card footer content")
    html = card.render()
    ```

"""

from __future__ import annotations

from typing import Any

from tabler_components.components.base import BaseComponent, renders_many, renders_one
from tabler_components.components.button import ButtonComponent
from tabler_components.utils.html import Markup, class_names, content_tag, is_present, pop_class


def _card_title(title: Any) -> Markup | None:
    return content_tag("div", title, class_="card-title") if is_present(title) else None


class ActionButtonComponent(ButtonComponent):
    """Compact button for the card header's action area."""

    def __init__(
        self, label: Any = "", url: str = "#", icon: str | None = "arrow-left", **options: Any
    ):
        super().__init__(label, url=url, color="", icon=icon, **options)

    def classes(self) -> str:
        return "btn btn-action"


class StatusComponent(BaseComponent):
    """Colored status strip, e.g. ``<div class="card-status-top bg-blue"></div>``."""

    def __init__(self, status: str = "blue", position: str = "top"):
        super().__init__()
        self.status = status
        self.position = position

    def call(self) -> Markup:
        return content_tag("div", class_=f"card-status-{self.position} bg-{self.status}")


class HeaderComponent(BaseComponent):
    """Card header with optional title, subtitle, and action buttons."""

    actions = renders_many(ActionButtonComponent)

    def __init__(self, title: Any = None, subtitle: Any = None):
        super().__init__()
        self.title = title
        self.subtitle = subtitle

    def call(self) -> Markup:
        return content_tag(
            "div",
            _card_title(self.title),
            content_tag("div", self.subtitle, class_="card-subtitle")
            if is_present(self.subtitle)
            else None,
            content_tag("div", self.actions, class_="card-actions") if self.actions else None,
            class_="card-header",
        )


class BodyComponent(BaseComponent):
    """``card-body`` section with an optional title."""

    def __init__(self, title: Any = None, **options: Any):
        super().__init__()
        self.title = title
        self.css_class = pop_class(options)
        self.options = options

    def call(self) -> Markup:
        return content_tag(
            "div",
            _card_title(self.title),
            self.content,
            class_=class_names("card-body", self.css_class),
            **self.options,
        )


class ContentComponent(BaseComponent):
    """One body section of a card: optional header, optional body, then content.

    The trailing ``card-body`` wrapper is only emitted when there is a
    title or content to put in it.
    """

    header = renders_one(HeaderComponent)
    body = renders_one(BodyComponent)

    def __init__(self, title: Any = None):
        super().__init__()
        self.title = title

    def call(self) -> Markup:
        wrapper = None
        if self.has_content or is_present(self.title):
            wrapper = content_tag(
                "div",
                _card_title(self.title),
                self.content,
                class_="card-body",
            )
        return Markup("").join([self.header or "", self.body or "", wrapper or ""])


class FooterComponent(BaseComponent):
    """``card-footer`` wrapping its content."""

    def __init__(self, **options: Any):
        super().__init__()
        self.css_class = pop_class(options)
        self.options = options

    def call(self) -> Markup:
        return content_tag(
            "div",
            self.content,
            class_=class_names("card-footer", self.css_class),
            **self.options,
        )


class TableComponent(BaseComponent):
    """Table wrapper; ``table-responsive`` unless a class is given."""

    def __init__(self, **options: Any):
        super().__init__()
        self.css_class = pop_class(options) or "table-responsive"
        self.options = options

    def call(self) -> Markup:
        return content_tag("div", self.content, class_=self.css_class, **self.options)


class CardComponent(BaseComponent):
    """Tabler card container.

    Slots:
        status: StatusComponent strip at the top
        header: HeaderComponent
        table: TableComponent placed before the bodies
        bodies: ContentComponent sections, in insertion order (``with_body``)
        footer: FooterComponent

    Args:
        **options: ``class_`` adds classes next to ``card``
    """

    status = renders_one(StatusComponent)
    header = renders_one(HeaderComponent)
    table = renders_one(TableComponent)
    bodies = renders_many(ContentComponent, singular="body")
    footer = renders_one(FooterComponent)

    def __init__(self, **options: Any):
        super().__init__()
        self.css_class = pop_class(options)
        self.options = options

    def call(self) -> Markup:
        return content_tag(
            "div",
            self.status,
            self.header,
            self.table,
            self.bodies,
            self.content,
            self.footer,
            class_=class_names("card", self.css_class),
            **self.options,
        )
