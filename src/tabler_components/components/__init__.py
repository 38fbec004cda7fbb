"""Tabler components.

Card and page parts live in their modules and are addressed through them:

    >>> from tabler_components.components import card, page
    >>> card.HeaderComponent("Title")
    >>> page.HeaderComponent("Overview", subtitle="Dashboard")

"""

from tabler_components.components import card, page
from tabler_components.components.base import BaseComponent, Slot, renders_many, renders_one
from tabler_components.components.button import ButtonComponent
from tabler_components.components.card import CardComponent
from tabler_components.components.icon import IconComponent, IconRenderer, IconRequest
from tabler_components.components.navbar import NavbarComponent, NavbarItemComponent
from tabler_components.components.page import PageComponent

__all__ = [
    "BaseComponent",
    "ButtonComponent",
    "CardComponent",
    "IconComponent",
    "IconRenderer",
    "IconRequest",
    "NavbarComponent",
    "NavbarItemComponent",
    "PageComponent",
    "Slot",
    "card",
    "page",
    "renders_many",
    "renders_one",
]
