"""
Django signals for the entity browser app.

Signals:
    entities_selected: Sent when a widget hands entities to the browser.
        Arguments: widget_id, entities.
"""

from __future__ import annotations

import logging

from django.dispatch import Signal

logger = logging.getLogger(__name__)

entities_selected = Signal()


def connect_signals():
    """
    Connect all signal handlers.

    Called from EntityBrowserConfig.ready().
    """
    entities_selected.connect(
        log_entity_selection,
        dispatch_uid="entity_browser_log_selection",
    )

    logger.debug("Entity browser signals connected")


def log_entity_selection(sender, widget_id, entities, **kwargs) -> None:
    """Log which entities a widget selected."""
    logger.info(
        f"Widget {widget_id} ({getattr(sender, 'plugin_id', sender)}) "
        f"selected {len(entities)} entities"
    )
