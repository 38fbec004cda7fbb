"""Numeric checks and formatting shared by icon requests and settings."""

from __future__ import annotations

import numbers
from typing import Any


def format_number(value: float) -> str:
    """Format a dimension without a trailing ``.0`` (``2.0`` → ``"2"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_positive_int(value: Any) -> bool:
    """True for an int greater than zero; bools are rejected."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_positive_number(value: Any) -> bool:
    """True for a real number greater than zero; bools are rejected."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and value > 0
