"""
Widget plugin registry.

Widgets register themselves under a plugin id with the ``register_widget``
decorator; configurations refer to them by that id.

Usage:
    from entity_browser.registry import create_widget, register_widget

    @register_widget("upload", label="Upload")
    class FileUploadWidget(WidgetBase):
        ...

    widget = create_widget("upload", configuration={"multiple": False})

Adding New Widgets:
    1. Subclass WidgetBase (or implement entity_browser.protocols.Widget)
    2. Decorate the class with register_widget()
    3. Import the module from the app's AppConfig.ready()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.exceptions import NotFoundError

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)

# Plugin id -> widget class
WIDGETS: dict[str, type] = {}


def register_widget(plugin_id: str, label: str, description: str = ""):
    """
    Class decorator registering a widget plugin.

    Args:
        plugin_id: Unique plugin id
        label: Human-readable name
        description: Short description for administrators
    """

    def decorator(widget_class: type) -> type:
        widget_class.plugin_id = plugin_id
        widget_class.label = label
        widget_class.description = description
        if WIDGETS.get(plugin_id, widget_class) is not widget_class:
            logger.warning(f"Widget plugin {plugin_id} re-registered")
        WIDGETS[plugin_id] = widget_class
        return widget_class

    return decorator


def get_widget_class(plugin_id: str) -> type:
    """
    Look up a widget class.

    Raises:
        NotFoundError: If the plugin id is not registered
    """
    widget_class = WIDGETS.get(plugin_id)
    if widget_class is None:
        raise NotFoundError(
            f"Unknown widget plugin '{plugin_id}'",
            error_code="WIDGET_NOT_FOUND",
            details={"plugin_id": plugin_id},
        )
    return widget_class


def create_widget(
    plugin_id: str,
    widget_id: str | None = None,
    configuration: dict[str, Any] | None = None,
    **dependencies: Any,
):
    """
    Instantiate a widget plugin.

    Args:
        plugin_id: Registered plugin id
        widget_id: Id of the stored widget configuration
        configuration: Stored settings, merged over the plugin defaults
        **dependencies: Services passed to the widget constructor

    Raises:
        NotFoundError: If the plugin id is not registered
    """
    widget_class = get_widget_class(plugin_id)
    return widget_class(
        widget_id=widget_id,
        configuration=configuration,
        **dependencies,
    )


def list_widgets() -> list[dict[str, str]]:
    """Describe every registered widget plugin."""
    return [
        {
            "id": plugin_id,
            "label": widget_class.label,
            "description": widget_class.description,
        }
        for plugin_id, widget_class in sorted(WIDGETS.items())
    ]
