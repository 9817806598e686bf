"""Django admin configuration for media app."""

from django.contrib import admin

from media.models import Media, MediaBundle, MediaFile


@admin.register(MediaFile)
class MediaFileAdmin(admin.ModelAdmin):
    """Admin configuration for MediaFile model."""

    list_display = [
        "id",
        "original_filename",
        "mime_type",
        "file_size",
        "uploader",
        "status",
        "created_at",
    ]
    list_filter = ["status", "mime_type"]
    search_fields = ["original_filename"]
    readonly_fields = ["id", "file_size", "mime_type", "created_at", "updated_at"]
    raw_id_fields = ["uploader"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]


@admin.register(MediaBundle)
class MediaBundleAdmin(admin.ModelAdmin):
    """Admin configuration for MediaBundle model."""

    list_display = ["id", "label", "source", "created_at"]
    list_filter = ["source"]
    search_fields = ["id", "label"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["label"]


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    """Admin configuration for Media model."""

    list_display = ["id", "name", "bundle", "source_file", "published", "created_at"]
    list_filter = ["bundle", "published"]
    search_fields = ["name", "source_file__original_filename"]
    readonly_fields = ["id", "created_at", "updated_at"]
    raw_id_fields = ["source_file", "owner"]
    ordering = ["-created_at"]
