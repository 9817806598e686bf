"""Django app configuration for media audio app."""

from django.apps import AppConfig


class MediaAudioConfig(AppConfig):
    """Configuration for the media audio app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "media_audio"
    verbose_name = "Media Audio"

    def ready(self) -> None:
        """Register the audio upload widget."""
        from media_audio import widgets  # noqa: F401
