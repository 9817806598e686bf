"""
MediaBundle model describing a media type.

A bundle is a named schema for media entities. It declares which source
plugin handles its files (audio, image, ...) and carries source-specific
configuration, most importantly the name of the source field.
"""

from __future__ import annotations

from typing import Any

from django.db import models

from core.models import BaseModel


class MediaBundle(BaseModel):
    """
    Media type descriptor.

    Attributes:
        id: Machine name, used as the primary key (e.g. ``podcast``).
        label: Human-readable name shown in select lists.
        description: Optional administrative description.
        source: Source plugin kind.
        type_configuration: Source-specific settings. ``source_field`` names
            the media field that holds the file reference.

    Example:
        >>> bundle = MediaBundle.objects.create(
        ...     id="podcast",
        ...     label="Podcast episode",
        ...     source=MediaBundle.Source.AUDIO,
        ...     type_configuration={"source_field": "field_media_audio_file"},
        ... )
        >>> bundle.source_field
        'field_media_audio_file'
    """

    class Source(models.TextChoices):
        """Source plugins a bundle can use."""

        AUDIO = "audio", "Audio"
        IMAGE = "image", "Image"
        VIDEO = "video", "Video"
        DOCUMENT = "document", "Document"
        FILE = "file", "File"

    id = models.SlugField(
        primary_key=True,
        max_length=64,
        help_text="Machine name of the bundle",
    )

    label = models.CharField(
        max_length=255,
        help_text="Human-readable bundle name",
    )

    description = models.TextField(
        blank=True,
        default="",
        help_text="Administrative description",
    )

    source = models.CharField(
        max_length=20,
        choices=Source.choices,
        db_index=True,
        help_text="Source plugin handling files of this bundle",
    )

    type_configuration = models.JSONField(
        default=dict,
        blank=True,
        help_text="Source plugin settings, e.g. {'source_field': 'field_media_audio_file'}",
    )

    class Meta:
        """Model metadata."""

        verbose_name = "Media Bundle"
        verbose_name_plural = "Media Bundles"
        ordering = ["label"]

    def __str__(self) -> str:
        """Return the bundle label."""
        return self.label

    def get_source_plugin_id(self) -> str:
        """Return the id of the source plugin (e.g. ``audio``)."""
        return self.source

    def get_type_configuration(self) -> dict[str, Any]:
        """Return a copy of the source-specific configuration."""
        return dict(self.type_configuration or {})

    @property
    def source_field(self) -> str | None:
        """Name of the media field holding the file reference."""
        return self.get_type_configuration().get("source_field")
