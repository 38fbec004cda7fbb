"""Page layout: page shell, header, body, and header buttons.

Example:
    ```python
    page = PageComponent()
    page.with_navbar().with_item("Dashboard", "/", active=True)

    content = ContentComponent()
    header = content.with_header("Projects", subtitle="All projects")
    header.with_primary_action("New", url="/projects/new")
    content.with_body().with_content(projects_table)

    html = page.with_content(content).render()
    ```

"""

from __future__ import annotations

from typing import Any

from tabler_components.components.base import BaseComponent, renders_many, renders_one
from tabler_components.components.button import ButtonComponent
from tabler_components.components.navbar import NavbarComponent
from tabler_components.utils.html import Markup, content_tag, is_present


class PrimaryButtonComponent(ButtonComponent):
    """Main call-to-action in the page header."""

    def __init__(self, label: Any = "", url: str = "#", **options: Any):
        super().__init__(label, url=url, color="primary", **options)


class SecondaryButtonComponent(ButtonComponent):
    """Secondary page header action; plain ``btn`` styling."""

    def __init__(self, label: Any = "", url: str = "#", **options: Any):
        super().__init__(label, url=url, color="", **options)


class HeadlineButtonComponent(ButtonComponent):
    """Small ghost link shown above a page title, e.g. "back to list"."""

    def __init__(
        self, label: Any = "", url: str = "#", icon: str | None = "arrow-left", **options: Any
    ):
        super().__init__(label, url=url, color="", icon=icon, **options)

    def classes(self) -> str:
        return "btn btn-ghost-secondary btn-sm ms-0"


class HeaderComponent(BaseComponent):
    """Page header with pretitle, title, and action buttons.

    Args:
        title: Small pretitle line above the heading
        subtitle: Main ``<h2 class="page-title">`` heading
    """

    primary_action = renders_one(PrimaryButtonComponent)
    secondary_action = renders_one(SecondaryButtonComponent)

    def __init__(self, title: Any = None, subtitle: Any = None):
        super().__init__()
        self.title = title
        self.subtitle = subtitle

    def with_primary_button(self, *args: Any, **kwargs: Any) -> PrimaryButtonComponent:
        """Alias of ``with_primary_action``."""
        return self.fill_slot("primary_action", *args, **kwargs)

    def call(self) -> Markup:
        titles = content_tag(
            "div",
            content_tag("div", self.title, class_="page-pretitle")
            if is_present(self.title)
            else None,
            content_tag("h2", self.subtitle, class_="page-title")
            if is_present(self.subtitle)
            else None,
            self.content,
            class_="col",
        )
        actions = content_tag(
            "div",
            content_tag("div", self.secondary_action, self.primary_action, class_="btn-list"),
            class_="col-auto ms-auto d-print-none",
        )
        return content_tag(
            "div",
            content_tag(
                "div",
                content_tag("div", titles, actions, class_="row g-2 align-items-center"),
                class_="container-xl",
            ),
            class_="page-header d-print-none",
        )


class BodyComponent(BaseComponent):
    """``page-body`` wrapping content in a ``container-xl``."""

    def call(self) -> Markup:
        return content_tag(
            "div",
            content_tag("div", self.content, class_="container-xl"),
            class_="page-body",
        )


class ContentComponent(BaseComponent):
    """Page header followed by page body.

    Usable on its own inside a layout that already renders `PageComponent`.
    """

    header = renders_one(HeaderComponent)
    body = renders_one(BodyComponent)

    def call(self) -> Markup:
        return Markup("").join([self.header or "", self.body or "", self.content or ""])


class PageComponent(BaseComponent):
    """Outer page shell: navbars, then the page wrapper holding content."""

    navbars = renders_many(NavbarComponent)

    def call(self) -> Markup:
        return content_tag(
            "div",
            self.navbars,
            content_tag("div", self.content, class_="page-wrapper"),
            class_="page",
        )
