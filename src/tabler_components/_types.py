"""Shared enums used across components and configuration."""

from __future__ import annotations

from enum import Enum


class IconVariant(str, Enum):
    """Icon rendering style; the value doubles as the asset directory name."""

    OUTLINE = "outline"
    FILLED = "filled"

    def __str__(self) -> str:
        return self.value


class ButtonVariant(str, Enum):
    """Button base style: solid ``btn-<color>`` or ghost ``btn-ghost-<color>``."""

    SOLID = "solid"
    GHOST = "ghost"

    def __str__(self) -> str:
        return self.value
