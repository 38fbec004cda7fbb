"""tabler_components — HTML components for the Tabler design system.

Each component is a small class: constructor arguments pick the CSS classes,
slots take child components, and `render()` returns a `Markup` string that any
web framework or template engine can embed as trusted HTML.

Quickstart:
    >>> from tabler_components import ButtonComponent, IconComponent
    >>> ButtonComponent("Save", url="/save", color="success").render()
    Markup('<a href="/save" class="btn btn-success">Save</a>')
    >>> html = IconComponent("home", size=32, stroke_width=1.5).render()

Composition:
    >>> from tabler_components import CardComponent
    >>> card = CardComponent()
    >>> card.with_header("Card Title", subtitle="Card Subtitle")
    >>> card.with_body().with_content("Card content goes here")
    >>> card.with_footer().with_content("Card footer content")
    >>> html = card.render()

Components:
- **ButtonComponent**: Link styled as a button, with color/size/icon options
- **CardComponent**: Card with status, header, table, bodies, footer slots
- **NavbarComponent** / **NavbarItemComponent**: Horizontal navigation
- **PageComponent**: Page shell with navbars; parts in `components.page`
- **IconComponent**: Inline SVG from the bundled Tabler icon set

Icons:
Icons are read from ``icons/<variant>/<name>.svg`` through an icon loader,
rewritten (size, stroke width, classes, extra attributes) and returned
inline. A missing icon renders a visible "no entry" placeholder instead of
raising. Point the library at your own icon directory with `configure()`
or the ``TABLER_ICONS_PATH`` environment variable.

Thread-Safety:
Rendering keeps no shared mutable state. Settings overrides made with
`settings_context()` are scoped to the current thread or async task.

"""

from tabler_components._types import ButtonVariant, IconVariant
from tabler_components.components import (
    BaseComponent,
    ButtonComponent,
    CardComponent,
    IconComponent,
    IconRenderer,
    IconRequest,
    NavbarComponent,
    NavbarItemComponent,
    PageComponent,
    Slot,
    card,
    page,
    renders_many,
    renders_one,
)
from tabler_components.config import Settings, configure, get_settings, settings_context
from tabler_components.exceptions import (
    ComponentArgumentError,
    ComponentError,
    ErrorCode,
    IconNotFoundError,
    SlotError,
)
from tabler_components.loaders import (
    ChoiceIconLoader,
    DictIconLoader,
    FileSystemIconLoader,
    IconLoader,
    PackageIconLoader,
)
from tabler_components.utils.html import Markup, content_tag, dasherize, html_escape

__version__ = "0.1.0"

__all__ = [
    "BaseComponent",
    "ButtonComponent",
    "ButtonVariant",
    "CardComponent",
    "ChoiceIconLoader",
    "ComponentArgumentError",
    "ComponentError",
    "DictIconLoader",
    "ErrorCode",
    "FileSystemIconLoader",
    "IconComponent",
    "IconLoader",
    "IconNotFoundError",
    "IconRenderer",
    "IconRequest",
    "IconVariant",
    "Markup",
    "NavbarComponent",
    "NavbarItemComponent",
    "PackageIconLoader",
    "PageComponent",
    "Settings",
    "Slot",
    "SlotError",
    "__version__",
    "card",
    "configure",
    "content_tag",
    "dasherize",
    "get_settings",
    "html_escape",
    "page",
    "renders_many",
    "renders_one",
    "settings_context",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'tabler_components' has no attribute {name!r}")
