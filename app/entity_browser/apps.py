"""Django app configuration for entity browser app."""

from django.apps import AppConfig


class EntityBrowserConfig(AppConfig):
    """Configuration for the entity browser app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "entity_browser"
    verbose_name = "Entity Browser"

    def ready(self) -> None:
        """Connect signal handlers and register built-in widgets."""
        from entity_browser.signals import connect_signals
        from entity_browser.widgets import upload  # noqa: F401

        connect_signals()
