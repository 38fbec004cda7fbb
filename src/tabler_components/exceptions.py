"""Exceptions for tabler_components.

Exception Hierarchy:
ComponentError (base)
├── ComponentArgumentError    # Invalid constructor argument
├── SlotError                 # Unknown slot or required slot left empty
└── IconNotFoundError         # Icon asset missing (raised by loaders)

Icon rendering never lets these escape: `IconRenderer.render()` turns
`IconNotFoundError` into the placeholder glyph. The remaining errors signal
programming mistakes in the calling view and propagate normally.

Example:
    ```
    SlotError: CardComponent has no slot 'heder'. Did you mean 'header'?
    ```

"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes for component errors.

    Format: TC-{CATEGORY}-{NUMBER}
    Categories: ARG (arguments), SLT (slots), ICN (icons)
    """

    # Argument errors (TC-ARG-xxx)
    INVALID_ARGUMENT = "TC-ARG-001"

    # Slot errors (TC-SLT-xxx)
    UNKNOWN_SLOT = "TC-SLT-001"
    REQUIRED_SLOT = "TC-SLT-002"
    INVALID_SLOT_VALUE = "TC-SLT-003"

    # Icon errors (TC-ICN-xxx)
    ICON_NOT_FOUND = "TC-ICN-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'argument', 'slot', 'icon')."""
        prefix = self.value.split("-")[1]
        return {
            "ARG": "argument",
            "SLT": "slot",
            "ICN": "icon",
        }.get(prefix, "unknown")


class ComponentError(Exception):
    """Base exception for all component errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format as ``CODE: message`` for terminal display."""
        message = str(self)
        if self.code and self.code.value not in message:
            return f"{self.code.value}: {message}"
        return message


class ComponentArgumentError(ComponentError, ValueError):
    """A component or request was constructed with an invalid argument."""

    code: ErrorCode | None = ErrorCode.INVALID_ARGUMENT


class SlotError(ComponentError):
    """Slot misuse detected while building or rendering a component.

    Attributes:
        component: Name of the component class
        slot: Slot name involved
    """

    code: ErrorCode | None = ErrorCode.UNKNOWN_SLOT

    def __init__(
        self,
        message: str,
        *,
        component: str | None = None,
        slot: str | None = None,
        code: ErrorCode | None = None,
    ):
        self.component = component
        self.slot = slot
        if code is not None:
            self.code = code
        super().__init__(message)


class IconNotFoundError(ComponentError, LookupError):
    """No asset exists for the requested (variant, name) pair.

    Attributes:
        name: Lower-cased icon name
        variant: Variant directory searched
    """

    code: ErrorCode | None = ErrorCode.ICON_NOT_FOUND

    def __init__(self, message: str, *, name: str | None = None, variant: str | None = None):
        self.name = name
        self.variant = variant
        super().__init__(message)
