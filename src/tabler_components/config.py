"""Library configuration — icon loader and icon defaults.

Settings are immutable. The process-wide default is built on first use and
can be replaced with `configure()`; `settings_context()` scopes overrides to
the current thread or async task via a ContextVar.

Example:
    ```python
    from tabler_components import FileSystemIconLoader, configure, settings_context

    # At application startup
    configure(icon_loader=FileSystemIconLoader("static/icons"), icon_size=20)

    # In a test or a single request
    with settings_context(icon_stroke_width=1.5):
        html = IconComponent("home").render()
    ```

Environment:
    TABLER_ICONS_PATH: Directory searched before the bundled icons when the
    default loader is built.

"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from tabler_components._types import IconVariant
from tabler_components.exceptions import ComponentArgumentError
from tabler_components.loaders import (
    ChoiceIconLoader,
    FileSystemIconLoader,
    IconLoader,
    PackageIconLoader,
)
from tabler_components.utils.constants import ICONS_PATH_ENV
from tabler_components.utils.numbers import is_positive_int, is_positive_number

logger = logging.getLogger(__name__)


def default_icon_loader() -> IconLoader:
    """Build the loader for the bundled icon set.

    When ``TABLER_ICONS_PATH`` names a directory, it is searched first.
    """
    bundled = PackageIconLoader("tabler_components", "icons")
    extra = os.environ.get(ICONS_PATH_ENV)
    if not extra:
        return bundled
    if not Path(extra).is_dir():
        logger.warning("%s=%s is not a directory; using bundled icons only", ICONS_PATH_ENV, extra)
        return bundled
    return ChoiceIconLoader([FileSystemIconLoader(extra), bundled])


@dataclass(frozen=True, slots=True)
class Settings:
    """Rendering settings shared by all components.

    Attributes:
        icon_loader: Where icon assets come from
        icon_size: Default icon width/height in pixels
        icon_stroke_width: Default stroke width for outline icons
        icon_variant: Default icon variant
    """

    icon_loader: IconLoader = field(default_factory=default_icon_loader)
    icon_size: int = 24
    icon_stroke_width: float = 2
    icon_variant: IconVariant = IconVariant.OUTLINE

    def __post_init__(self) -> None:
        if not isinstance(self.icon_variant, IconVariant):
            try:
                variant = IconVariant(str(self.icon_variant).strip().lower())
                object.__setattr__(self, "icon_variant", variant)
            except ValueError:
                raise ComponentArgumentError(
                    f"Unknown icon variant {self.icon_variant!r}; "
                    f"expected one of: {', '.join(v.value for v in IconVariant)}"
                ) from None
        if not is_positive_int(self.icon_size):
            raise ComponentArgumentError(
                f"icon_size must be a positive integer, got {self.icon_size!r}"
            )
        if not is_positive_number(self.icon_stroke_width):
            raise ComponentArgumentError(
                f"icon_stroke_width must be a positive number, got {self.icon_stroke_width!r}"
            )


_default_settings: Settings | None = None

_settings_override: ContextVar[Settings | None] = ContextVar(
    "tabler_settings",
    default=None,
)


def get_settings() -> Settings:
    """Return the settings in effect for the current context."""
    global _default_settings
    scoped = _settings_override.get()
    if scoped is not None:
        return scoped
    if _default_settings is None:
        _default_settings = Settings()
    return _default_settings


def configure(**overrides: Any) -> Settings:
    """Replace the process-wide default settings.

    Unspecified fields keep their current values.

    Returns:
        The new default Settings
    """
    global _default_settings
    base = _default_settings if _default_settings is not None else Settings()
    _default_settings = replace(base, **overrides)
    return _default_settings


def reset_settings() -> None:
    """Drop the process-wide default so it is rebuilt on next use."""
    global _default_settings
    _default_settings = None


@contextmanager
def settings_context(**overrides: Any) -> Iterator[Settings]:
    """Scope setting overrides to the current thread or task.

    Yields:
        The Settings active inside the with block
    """
    settings = replace(get_settings(), **overrides)
    token: Token[Settings | None] = _settings_override.set(settings)
    try:
        yield settings
    finally:
        _settings_override.reset(token)
