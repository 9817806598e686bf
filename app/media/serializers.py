"""
Serializers for media files, bundles and media entities.

Provides:
- MediaFileSerializer: Read-only serializer for uploaded files
- MediaBundleSerializer: Bundle list/create with source field defaulting
- MediaSerializer: Read-only serializer for media entities
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from media.models import Media, MediaBundle, MediaFile


class MediaFileSerializer(serializers.ModelSerializer):
    """Read-only serializer for MediaFile responses."""

    class Meta:
        model = MediaFile
        fields = [
            "id",
            "original_filename",
            "mime_type",
            "file_size",
            "status",
            "created_at",
        ]
        read_only_fields = fields


class MediaBundleSerializer(serializers.ModelSerializer):
    """
    Serializer for MediaBundle.

    When ``type_configuration`` has no ``source_field``, one is derived from
    the source: ``field_media_<source>_file``.
    """

    class Meta:
        model = MediaBundle
        fields = [
            "id",
            "label",
            "description",
            "source",
            "type_configuration",
        ]

    def validate_type_configuration(self, value: Any) -> dict[str, Any]:
        if value in (None, ""):
            return {}
        if not isinstance(value, dict):
            raise serializers.ValidationError("Type configuration must be an object.")
        source_field = value.get("source_field")
        if source_field is not None and not isinstance(source_field, str):
            raise serializers.ValidationError("source_field must be a string.")
        return value

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        type_configuration = dict(attrs.get("type_configuration") or {})
        if not type_configuration.get("source_field"):
            type_configuration["source_field"] = f"field_media_{attrs['source']}_file"
        attrs["type_configuration"] = type_configuration
        return attrs


class MediaSerializer(serializers.ModelSerializer):
    """Read-only serializer for Media entities."""

    bundle = serializers.CharField(source="bundle_id", read_only=True)
    source_file = MediaFileSerializer(read_only=True)

    class Meta:
        model = Media
        fields = [
            "id",
            "bundle",
            "name",
            "source_file",
            "published",
            "created_at",
        ]
        read_only_fields = fields
