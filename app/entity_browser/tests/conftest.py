"""
Test fixtures for entity browser app.

Provides fixtures for:
- Stored upload widget configurations
- Form states triggered by the main submit button
- Mock file storages
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from entity_browser.forms import FormState, SubmitButton
from entity_browser.models import WidgetConfiguration
from entity_browser.tests.factories import WidgetConfigurationFactory


@pytest.fixture
def upload_config(db) -> WidgetConfiguration:
    """Stored configuration of the generic upload widget."""
    return WidgetConfigurationFactory(plugin_id="upload", label="Upload")


@pytest.fixture
def main_submit_state() -> FormState:
    """Form state submitted by a main submit button."""
    return FormState(
        triggering_element=SubmitButton(value="Select files", main_submit=True)
    )


@pytest.fixture
def file_storage() -> MagicMock:
    """Mock file storage returning no files."""
    storage = MagicMock()
    storage.load_multiple.return_value = []
    return storage
