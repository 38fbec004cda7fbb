"""Pytest configuration and fixtures for tabler_components tests."""

import pytest

from tabler_components import DictIconLoader, settings_context
from tabler_components.config import reset_settings

from .helpers import ICON_SOURCES


@pytest.fixture
def icon_loader():
    """In-memory icon set used by rendering tests."""
    return DictIconLoader(dict(ICON_SOURCES))


@pytest.fixture
def icons(icon_loader):
    """Scope settings to the in-memory icon set for the duration of a test."""
    with settings_context(icon_loader=icon_loader) as settings:
        yield settings


@pytest.fixture
def fresh_settings():
    """Rebuild process-wide default settings before and after a test."""
    reset_settings()
    yield
    reset_settings()
