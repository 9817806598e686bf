import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import media.models.media_file


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="MediaBundle",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.SlugField(
                        help_text="Machine name of the bundle",
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "label",
                    models.CharField(
                        help_text="Human-readable bundle name", max_length=255
                    ),
                ),
                (
                    "description",
                    models.TextField(
                        blank=True, default="", help_text="Administrative description"
                    ),
                ),
                (
                    "source",
                    models.CharField(
                        choices=[
                            ("audio", "Audio"),
                            ("image", "Image"),
                            ("video", "Video"),
                            ("document", "Document"),
                            ("file", "File"),
                        ],
                        db_index=True,
                        help_text="Source plugin handling files of this bundle",
                        max_length=20,
                    ),
                ),
                (
                    "type_configuration",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Source plugin settings, e.g. {'source_field': 'field_media_audio_file'}",
                    ),
                ),
            ],
            options={
                "verbose_name": "Media Bundle",
                "verbose_name_plural": "Media Bundles",
                "ordering": ["label"],
            },
        ),
        migrations.CreateModel(
            name="MediaFile",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "file",
                    models.FileField(
                        help_text="The uploaded file",
                        max_length=255,
                        upload_to=media.models.media_file.media_upload_path,
                    ),
                ),
                (
                    "original_filename",
                    models.CharField(
                        help_text="Original filename from the upload", max_length=255
                    ),
                ),
                (
                    "mime_type",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="MIME type guessed from the filename (e.g., audio/mpeg)",
                        max_length=127,
                    ),
                ),
                (
                    "file_size",
                    models.BigIntegerField(default=0, help_text="File size in bytes"),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("temporary", "Temporary"), ("permanent", "Permanent")],
                        db_index=True,
                        default="temporary",
                        help_text="Temporary until attached to an entity or selected",
                        max_length=20,
                    ),
                ),
                (
                    "uploader",
                    models.ForeignKey(
                        blank=True,
                        help_text="User who uploaded the file",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="media_files",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Media File",
                "verbose_name_plural": "Media Files",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Media",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        blank=True, default="", help_text="Display name", max_length=255
                    ),
                ),
                (
                    "published",
                    models.BooleanField(
                        default=True, help_text="Whether the media entity is published"
                    ),
                ),
                (
                    "bundle",
                    models.ForeignKey(
                        help_text="Media type of this entity",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="media",
                        to="media.mediabundle",
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        help_text="Owner of this media entity",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="media",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "source_file",
                    models.ForeignKey(
                        blank=True,
                        help_text="File referenced by the bundle's source field",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="media",
                        to="media.mediafile",
                    ),
                ),
            ],
            options={
                "verbose_name": "Media",
                "verbose_name_plural": "Media",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["bundle", "-created_at"], name="idx_media_by_bundle"
                    )
                ],
            },
        ),
    ]
