"""
Media model: a typed media entity wrapping one uploaded file.

Each Media belongs to a MediaBundle. The bundle's ``source_field`` names the
field that carries the file (e.g. ``field_media_audio_file``); on this model
that field is stored in the ``source_file`` column and is reachable by name
through ``get_field()`` / ``set_field()``.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.db import models

from core.exceptions import ValidationError
from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

# Fields that can be set by name on any bundle
BASE_FIELDS = ("name", "owner", "published")


class Media(UUIDPrimaryKeyMixin, BaseModel):
    """
    Media entity of a given bundle.

    Attributes:
        bundle: The media type this entity belongs to.
        name: Display name; defaults to the source file's original name.
        source_file: The file referenced by the bundle's source field.
        owner: User the entity belongs to, if any.
        published: Whether the entity is published.

    Example:
        >>> media = Media(bundle=bundle)
        >>> media.set_field("field_media_audio_file", media_file)
        >>> media.save()
    """

    bundle = models.ForeignKey(
        "media.MediaBundle",
        on_delete=models.PROTECT,
        related_name="media",
        help_text="Media type of this entity",
    )

    name = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Display name",
    )

    source_file = models.ForeignKey(
        "media.MediaFile",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="media",
        help_text="File referenced by the bundle's source field",
    )

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="media",
        help_text="Owner of this media entity",
    )

    published = models.BooleanField(
        default=True,
        help_text="Whether the media entity is published",
    )

    class Meta:
        """Model metadata."""

        verbose_name = "Media"
        verbose_name_plural = "Media"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["bundle", "-created_at"], name="idx_media_by_bundle"),
        ]

    def __str__(self) -> str:
        """Return the display name, falling back to the id."""
        return self.name or str(self.pk)

    def save(self, *args: Any, **kwargs: Any) -> None:
        """
        Default the name from the source file and make the file permanent.
        """
        if not self.name and self.source_file is not None:
            self.name = self.source_file.original_filename

        super().save(*args, **kwargs)

        if self.source_file is not None and not self.source_file.is_permanent:
            self.source_file.mark_permanent()

    def _resolve_field(self, field_name: str) -> str:
        """Map a bundle-level field name to a model attribute."""
        if not isinstance(field_name, str) or not field_name:
            raise ValidationError(
                f"Media of bundle '{self.bundle_id}' has no usable field name "
                f"{field_name!r}",
                error_code="UNKNOWN_FIELD",
                details={"bundle": self.bundle_id, "field": field_name},
            )
        if field_name in BASE_FIELDS:
            return field_name
        if self.bundle_id is not None and field_name == self.bundle.source_field:
            return "source_file"
        raise ValidationError(
            f"Media of bundle '{self.bundle_id}' has no field '{field_name}'",
            error_code="UNKNOWN_FIELD",
            details={"bundle": self.bundle_id, "field": field_name},
        )

    def get_field(self, field_name: str) -> Any:
        """
        Return the value of a field by its bundle-level name.

        Raises:
            ValidationError: If the bundle has no such field.
        """
        return getattr(self, self._resolve_field(field_name))

    def set_field(self, field_name: str, value: Any) -> None:
        """
        Set a field by its bundle-level name.

        Raises:
            ValidationError: If the bundle has no such field.
        """
        setattr(self, self._resolve_field(field_name), value)
