"""Navbar and navbar items.

Example:
    ```python
    navbar = NavbarComponent()
    navbar.with_item("Home", "/", active=True, icon="home")
    navbar.with_item("About", "/about")
    html = navbar.render()
    ```

"""

from __future__ import annotations

from typing import Any

from tabler_components.components.base import BaseComponent, renders_many, renders_one
from tabler_components.components.icon import IconComponent
from tabler_components.utils.html import Markup, class_names, content_tag, is_present


class NavbarItemComponent(BaseComponent):
    """A single navigation link.

    The icon comes from the ``icon`` name argument when given, otherwise
    from the ``icon`` slot (``item.with_icon("home", size=18)``).

    Args:
        title: Link text
        href: Link target
        active: Whether this item is the current page
        icon: Icon name shown before the title
    """

    icon = renders_one(IconComponent)

    def __init__(self, title: Any, href: str = "#", active: bool = False, icon: str | None = None):
        super().__init__()
        self.title = title
        self.href = href
        self.active = active
        self.icon_name = icon

    @property
    def to(self) -> str:
        return self.href

    def icon_tag(self) -> IconComponent | None:
        if is_present(self.icon_name):
            return IconComponent(self.icon_name)
        return self.icon

    def call(self) -> Markup:
        icon = self.icon_tag()
        link = content_tag(
            "a",
            content_tag("span", icon, class_="nav-link-icon d-md-none d-lg-inline-block")
            if icon is not None
            else None,
            content_tag("span", self.title, class_="nav-link-title"),
            self.content,
            class_="nav-link",
            href=self.href,
            aria_current="page" if self.active else None,
        )
        active = "active" if self.active else None
        return content_tag("li", link, class_=class_names("nav-item", active))


class NavbarComponent(BaseComponent):
    """Horizontal Tabler navbar holding navigation items.

    Content, when given, renders inside the container before the item list
    (brand logos, search forms).
    """

    items = renders_many(NavbarItemComponent)

    def call(self) -> Markup:
        return content_tag(
            "header",
            content_tag(
                "div",
                self.content,
                content_tag("ul", self.items, class_="navbar-nav") if self.items else None,
                class_="container-xl",
            ),
            class_="navbar navbar-expand-md d-print-none",
        )
