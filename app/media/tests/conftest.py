"""
Test fixtures for media app.

Provides fixtures for:
- Bundles using non-audio sources
- Raw uploads (SimpleUploadedFile)

Clients, users, the audio bundle and an uploaded audio file come from the
project conftest.
"""

from __future__ import annotations

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from media.models import MediaBundle
from media.tests.factories import MediaBundleFactory


@pytest.fixture
def image_bundle(db) -> MediaBundle:
    """Bundle using the image source plugin."""
    return MediaBundleFactory(
        id="photo",
        label="Photo",
        source=MediaBundle.Source.IMAGE,
    )


@pytest.fixture
def sample_mp3_uploaded() -> SimpleUploadedFile:
    """Return a small MP3 upload."""
    return SimpleUploadedFile(
        name="interview.mp3",
        content=b"ID3\x03\x00" + b"\x00" * 128,
        content_type="audio/mpeg",
    )
