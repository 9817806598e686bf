"""
Tests for entity browser serializers.

These tests verify:
- Plugin id validation on widget configurations
- serialize_entities tagging entities with their type
"""

from __future__ import annotations

import pytest

from entity_browser.serializers import (
    WidgetConfigurationSerializer,
    WidgetSubmitSerializer,
    serialize_entities,
)
from media.tests.factories import MediaFactory, MediaFileFactory


@pytest.mark.django_db
class TestWidgetConfigurationSerializer:
    """Tests for WidgetConfigurationSerializer."""

    def test_valid_plugin(self):
        serializer = WidgetConfigurationSerializer(
            data={
                "browser": "media_browser",
                "plugin_id": "media_entity_audio_upload",
                "label": "Audio",
            }
        )

        assert serializer.is_valid(), serializer.errors

    def test_unknown_plugin(self):
        """
        Unknown plugin ids should be rejected on input.

        Why it matters: Stored configurations must be buildable.
        """
        serializer = WidgetConfigurationSerializer(
            data={"browser": "media_browser", "plugin_id": "nope", "label": "Nope"}
        )

        assert not serializer.is_valid()
        assert "plugin_id" in serializer.errors


class TestWidgetSubmitSerializer:
    def test_defaults(self):
        serializer = WidgetSubmitSerializer(data={})

        assert serializer.is_valid()
        assert serializer.validated_data == {"values": {}, "trigger": "actions"}


@pytest.mark.django_db
class TestSerializeEntities:
    """Tests for serialize_entities."""

    def test_media_and_files(self):
        """
        Each entity should be serialized with its entity type.

        Why it matters: Widgets may select media or raw files.
        """
        media = MediaFactory()
        media_file = MediaFileFactory()

        data = serialize_entities([media, media_file])

        assert data[0]["entity_type"] == "media"
        assert data[0]["bundle"] == media.bundle_id
        assert data[0]["source_file"]["id"] == str(media.source_file_id)
        assert data[1]["entity_type"] == "file"
        assert data[1]["id"] == str(media_file.pk)

    def test_empty(self):
        assert serialize_entities([]) == []
