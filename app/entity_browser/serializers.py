"""
Serializers for the entity browser API.

Provides:
- WidgetConfigurationSerializer: Stored widget configurations
- WidgetSubmitSerializer: Values submitted through a widget form
- WidgetConfigurationUpdateSerializer: Submitted configuration values
- serialize_entities(): Render selected entities of any supported type
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from core.exceptions import NotFoundError
from entity_browser.models import WidgetConfiguration
from entity_browser.registry import get_widget_class
from entity_browser.services import MAIN_TRIGGER
from media.models import Media, MediaFile
from media.serializers import MediaFileSerializer, MediaSerializer

# Entity class -> (entity type name, serializer)
ENTITY_SERIALIZERS: dict[type, tuple[str, type[serializers.Serializer]]] = {
    Media: ("media", MediaSerializer),
    MediaFile: ("file", MediaFileSerializer),
}


class WidgetConfigurationSerializer(serializers.ModelSerializer):
    """Serializer for WidgetConfiguration; checks the plugin id exists."""

    class Meta:
        model = WidgetConfiguration
        fields = ["id", "browser", "plugin_id", "label", "weight", "settings"]
        read_only_fields = ["id"]

    def validate_plugin_id(self, value: str) -> str:
        try:
            get_widget_class(value)
        except NotFoundError as e:
            raise serializers.ValidationError(e.message) from e
        return value


class WidgetSubmitSerializer(serializers.Serializer):
    values = serializers.DictField(
        required=False,
        default=dict,
        help_text="Form values keyed by element name, e.g. {'upload': [file ids]}",
    )
    trigger = serializers.CharField(
        required=False,
        default=MAIN_TRIGGER,
        help_text="Name of the button that submitted the form",
    )


class WidgetConfigurationUpdateSerializer(serializers.Serializer):
    values = serializers.DictField(
        help_text="Configuration values keyed by element name",
    )


def serialize_entities(entities: list[Any]) -> list[dict[str, Any]]:
    """Serialize selected entities, tagging each with its entity type."""
    data = []
    for entity in entities:
        entity_type, serializer_class = ENTITY_SERIALIZERS[type(entity)]
        data.append({"entity_type": entity_type, **serializer_class(entity).data})
    return data
