import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WidgetConfiguration",
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
                    "browser",
                    models.SlugField(
                        help_text="Machine name of the entity browser",
                        max_length=64,
                    ),
                ),
                (
                    "plugin_id",
                    models.CharField(
                        help_text="Widget plugin id (e.g. media_entity_audio_upload)",
                        max_length=128,
                    ),
                ),
                (
                    "label",
                    models.CharField(
                        help_text="Label shown for this widget", max_length=255
                    ),
                ),
                (
                    "weight",
                    models.IntegerField(
                        default=0, help_text="Sort order within the browser"
                    ),
                ),
                (
                    "settings",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Widget plugin configuration",
                    ),
                ),
            ],
            options={
                "verbose_name": "Widget Configuration",
                "verbose_name_plural": "Widget Configurations",
                "ordering": ["browser", "weight", "label"],
            },
        ),
    ]
