"""Shared pytest configuration for the tabler_components examples.

Each example directory holds an ``app.py`` that renders components at
import time and a ``test_*.py`` beside it. The ``example_app`` fixture
executes that app.py in a fresh module, under default settings, so the
examples never see overrides left behind by another test.
"""

import importlib.util
from pathlib import Path

import pytest

from tabler_components.config import reset_settings


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """Render the sibling app.py and return it as a module."""
    app_path = Path(request.path).parent / "app.py"
    spec = importlib.util.spec_from_file_location(f"example_{app_path.parent.name}", app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    reset_settings()
    try:
        spec.loader.exec_module(module)
    finally:
        reset_settings()
    return module
