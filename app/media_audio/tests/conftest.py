"""
Test fixtures for media audio app.

Provides fixtures for:
- Unsaved bundle and file objects (no database needed)
- Mock bundle, media and file storages
- A builder for AudioUploadWidget with injected doubles
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from entity_browser.forms import FormState, SubmitButton
from entity_browser.widgets.upload import FileUploadWidget
from media.models import MediaBundle, MediaFile
from media_audio.widgets import AudioUploadWidget

BUNDLE_ADD_URL = "/api/v1/media/bundles/add/"


@pytest.fixture
def podcast_bundle() -> MediaBundle:
    """Unsaved audio bundle ``podcast``."""
    return MediaBundle(
        id="podcast",
        label="Podcast episode",
        source=MediaBundle.Source.AUDIO,
        type_configuration={"source_field": "field_media_audio_file"},
    )


@pytest.fixture
def photo_bundle() -> MediaBundle:
    """Unsaved image bundle ``photo``."""
    return MediaBundle(
        id="photo",
        label="Photo",
        source=MediaBundle.Source.IMAGE,
        type_configuration={"source_field": "field_media_image_file"},
    )


@pytest.fixture
def uploaded_files() -> list[MediaFile]:
    """Two unsaved uploaded file references."""
    return [
        MediaFile(original_filename="intro.mp3", file_size=2048),
        MediaFile(original_filename="outro.wav", file_size=4096),
    ]


@pytest.fixture
def bundle_storage(podcast_bundle: MediaBundle) -> MagicMock:
    """Bundle storage resolving ``podcast`` only."""
    storage = MagicMock()
    storage.load.side_effect = lambda bundle_id: (
        podcast_bundle if bundle_id == "podcast" else None
    )
    storage.load_by_properties.return_value = {"podcast": podcast_bundle}
    return storage


@pytest.fixture
def media_storage() -> MagicMock:
    """Media storage whose create() echoes the values it was given."""
    storage = MagicMock()
    storage.create.side_effect = lambda values: MagicMock(values=values)
    return storage


@pytest.fixture
def file_storage(uploaded_files: list[MediaFile]) -> MagicMock:
    """File storage returning the two uploaded files."""
    storage = MagicMock()
    storage.load_multiple.return_value = uploaded_files
    return storage


@pytest.fixture
def url_builder() -> MagicMock:
    return MagicMock(return_value=BUNDLE_ADD_URL)


@pytest.fixture
def make_widget(bundle_storage, media_storage, file_storage, url_builder):
    """
    Build an AudioUploadWidget with mock storages.

    Usage:
        widget = make_widget({"media bundle": "podcast"})
    """

    def _make(configuration=None, **overrides):
        upload = FileUploadWidget(
            "audio", configuration, file_storage=overrides.pop("file_storage", file_storage)
        )
        dependencies = {
            "upload": upload,
            "bundle_storage": bundle_storage,
            "media_storage": media_storage,
            "url_builder": url_builder,
            **overrides,
        }
        return AudioUploadWidget("audio", configuration, **dependencies)

    return _make


@pytest.fixture
def main_submit_state() -> FormState:
    """Form state with two uploaded ids, submitted by the main button."""
    return FormState(
        values={"upload": ["file-1", "file-2"]},
        triggering_element=SubmitButton(value="Select files", main_submit=True),
    )
