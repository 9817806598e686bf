"""
Stored widget configurations.

An entity browser (identified by its machine name) shows one or more
widgets. Each WidgetConfiguration row stores which plugin to use and the
plugin's settings.
"""

from __future__ import annotations

from typing import Any

from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel


class WidgetConfiguration(UUIDPrimaryKeyMixin, BaseModel):
    """
    One widget of an entity browser.

    Attributes:
        browser: Machine name of the entity browser.
        plugin_id: Registered widget plugin id.
        label: Tab label shown in the browser.
        weight: Sort order within the browser.
        settings: Plugin configuration, merged over the plugin defaults.
    """

    browser = models.SlugField(
        max_length=64,
        db_index=True,
        help_text="Machine name of the entity browser",
    )

    plugin_id = models.CharField(
        max_length=128,
        help_text="Widget plugin id (e.g. media_entity_audio_upload)",
    )

    label = models.CharField(
        max_length=255,
        help_text="Label shown for this widget",
    )

    weight = models.IntegerField(
        default=0,
        help_text="Sort order within the browser",
    )

    settings = models.JSONField(
        default=dict,
        blank=True,
        help_text="Widget plugin configuration",
    )

    class Meta:
        """Model metadata."""

        verbose_name = "Widget Configuration"
        verbose_name_plural = "Widget Configurations"
        ordering = ["browser", "weight", "label"]

    def __str__(self) -> str:
        """Return browser and label."""
        return f"{self.browser}: {self.label}"

    def get_widget(self, **dependencies: Any):
        """
        Instantiate the configured plugin.

        Raises:
            NotFoundError: If the plugin is not registered
        """
        from entity_browser.registry import create_widget

        return create_widget(
            self.plugin_id,
            widget_id=str(self.pk),
            configuration=self.settings,
            **dependencies,
        )
