"""
MediaFile model for storing uploaded files.

Provides:
- UUID primary key for security
- Temporary/permanent status tracking for uploads that have not yet been
  attached to a media entity
"""

from __future__ import annotations

import mimetypes
import os
from typing import TYPE_CHECKING, Any

from django.conf import settings
from django.db import models
from django.utils import timezone

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

if TYPE_CHECKING:
    from django.core.files.uploadedfile import UploadedFile


def media_upload_path(instance: "MediaFile", filename: str) -> str:
    """
    Generate upload path for uploaded files.

    Pattern: files/YYYY/MM/uuid/filename
    """
    now = timezone.now()
    return f"files/{now.year}/{now.month:02d}/{instance.pk}/{filename}"


class MediaFile(UUIDPrimaryKeyMixin, BaseModel):
    """
    A file already persisted by the upload pipeline.

    Files start out temporary. They become permanent once an entity
    references them, or once a widget submit selects them directly.

    Attributes:
        file: The stored file.
        original_filename: The original name of the uploaded file.
        mime_type: MIME type guessed from the filename.
        file_size: Size of the file in bytes.
        uploader: User who uploaded the file, if known.
        status: Temporary or permanent.
    """

    class Status(models.TextChoices):
        """Lifecycle status of an uploaded file."""

        TEMPORARY = "temporary", "Temporary"
        PERMANENT = "permanent", "Permanent"

    file = models.FileField(
        upload_to=media_upload_path,
        max_length=255,
        help_text="The uploaded file",
    )

    original_filename = models.CharField(
        max_length=255,
        help_text="Original filename from the upload",
    )

    mime_type = models.CharField(
        max_length=127,
        blank=True,
        default="",
        help_text="MIME type guessed from the filename (e.g., audio/mpeg)",
    )

    file_size = models.BigIntegerField(
        default=0,
        help_text="File size in bytes",
    )

    uploader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="media_files",
        help_text="User who uploaded the file",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.TEMPORARY,
        db_index=True,
        help_text="Temporary until attached to an entity or selected",
    )

    class Meta:
        """Model metadata."""

        verbose_name = "Media File"
        verbose_name_plural = "Media Files"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        """Return the original filename."""
        return self.original_filename

    @property
    def extension(self) -> str:
        """Lower-case extension of the original filename, without the dot."""
        return os.path.splitext(self.original_filename)[1].lstrip(".").lower()

    @property
    def is_permanent(self) -> bool:
        return self.status == self.Status.PERMANENT

    def mark_permanent(self, save: bool = True) -> None:
        """
        Flag the file as permanent.

        Args:
            save: Persist the status change immediately.
        """
        self.status = self.Status.PERMANENT
        if save:
            self.save(update_fields=["status", "updated_at"])

    @classmethod
    def create_from_upload(
        cls,
        file: "UploadedFile",
        uploader: Any = None,
        mime_type: str | None = None,
    ) -> "MediaFile":
        """
        Factory method to create a temporary MediaFile from an uploaded file.

        Args:
            file: The uploaded file object.
            uploader: User uploading the file.
            mime_type: MIME type; guessed from the filename when omitted.

        Returns:
            Created and saved MediaFile instance.
        """
        if mime_type is None:
            guessed, _ = mimetypes.guess_type(file.name)
            mime_type = guessed or "application/octet-stream"

        media_file = cls(
            file=file,
            original_filename=os.path.basename(file.name),
            mime_type=mime_type,
            file_size=file.size,
            uploader=uploader,
        )
        media_file.save()
        return media_file
