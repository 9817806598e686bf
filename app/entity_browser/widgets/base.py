"""
Base class for entity browser widgets.

WidgetBase implements the parts of the widget contract every plugin shares:
- merging stored configuration over the plugin defaults
- handing entities to the browser (select_entities)
- the submit-button check and configuration form handling

Subclasses implement get_form(), prepare_entities() and submit().
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from django.utils.translation import gettext as _

from entity_browser.forms import Form, FormState, SubmitButton, TextField
from entity_browser.signals import entities_selected

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class WidgetBase:
    """
    Shared widget behaviour.

    Attributes:
        widget_id: Id of the stored widget configuration.
        configuration: Plugin defaults overridden by stored settings.

    Class attributes ``plugin_id``, ``label`` and ``description`` are set by
    entity_browser.registry.register_widget().
    """

    plugin_id: str = ""
    label: str = ""
    description: str = ""

    def __init__(
        self,
        widget_id: str | None = None,
        configuration: dict[str, Any] | None = None,
    ) -> None:
        self.widget_id = widget_id or str(uuid.uuid4())
        self.configuration = {
            **self.default_configuration(),
            **(configuration or {}),
        }

    def default_configuration(self) -> dict[str, Any]:
        return {"submit_text": _("Select entities")}

    # =========================================================================
    # Widget form
    # =========================================================================

    def get_form(
        self,
        original_form: Form,
        form_state: FormState,
        additional_parameters: dict[str, Any] | None = None,
    ) -> Form:
        form = Form()
        form["actions"] = SubmitButton(
            value=self.configuration["submit_text"],
            main_submit=True,
        )
        return form

    def validate(self, form: Form, form_state: FormState) -> None:
        """Widgets without input to check accept every submission."""

    def prepare_entities(self, form: Form, form_state: FormState) -> list[Any]:
        raise NotImplementedError

    def submit(self, element: Form, form: Form, form_state: FormState) -> None:
        raise NotImplementedError

    @staticmethod
    def is_main_submit(form_state: FormState) -> bool:
        """True when the form was submitted by the widget's main button."""
        trigger = form_state.triggering_element
        return bool(getattr(trigger, "main_submit", False))

    def select_entities(self, entities: Sequence[Any], form_state: FormState) -> None:
        """
        Hand entities to the browser.

        Appends them to ``form_state.selected_entities`` and sends the
        ``entities_selected`` signal.
        """
        form_state.selected_entities.extend(entities)
        entities_selected.send(
            sender=self.__class__,
            widget_id=self.widget_id,
            entities=list(entities),
        )

    def clear_form_values(self, element: Form, form_state: FormState) -> None:
        """Reset submitted values after a successful submit."""

    # =========================================================================
    # Configuration form
    # =========================================================================

    def build_configuration_form(self, form: Form, form_state: FormState) -> Form:
        form["submit_text"] = TextField(
            title=_("Submit button text"),
            default_value=self.configuration["submit_text"],
            required=True,
        )
        return form

    def validate_configuration_form(self, form: Form, form_state: FormState) -> None:
        """Flag required text fields that were submitted empty."""
        for name, element in form.items():
            if not getattr(element, "required", False):
                continue
            value = form_state.get_value(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                form_state.set_error(
                    name,
                    _("%(title)s field is required.") % {"title": element.title},
                )

    def submit_configuration_form(self, form: Form, form_state: FormState) -> None:
        """Copy submitted values for known configuration keys."""
        for key in self.configuration:
            if key in form_state.values:
                self.configuration[key] = form_state.values[key]
        logger.debug(f"Widget {self.widget_id} configuration updated")
