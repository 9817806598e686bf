"""Django admin configuration for entity browser app."""

from django.contrib import admin

from entity_browser.models import WidgetConfiguration


@admin.register(WidgetConfiguration)
class WidgetConfigurationAdmin(admin.ModelAdmin):
    """Admin configuration for WidgetConfiguration model."""

    list_display = ["id", "browser", "label", "plugin_id", "weight", "created_at"]
    list_filter = ["browser", "plugin_id"]
    search_fields = ["browser", "label", "plugin_id"]
    readonly_fields = ["id", "created_at", "updated_at"]
    ordering = ["browser", "weight"]
