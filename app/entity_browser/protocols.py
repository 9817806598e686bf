"""
Protocol definition for entity browser widget plugins.

Any class implementing these methods can be registered as a widget;
entity_browser.widgets.base.WidgetBase provides the shared helpers.

Note:
    - For generic storage protocols (EntityStorage), see core.protocols
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any

    from entity_browser.forms import Form, FormState


@runtime_checkable
class Widget(Protocol):
    """
    Contract the entity browser host calls on a widget.

    Lifecycle:
        1. get_form() builds the form shown to the editor
        2. validate() checks the submitted values
        3. submit() creates/selects entities when the main button was used
    """

    configuration: dict[str, Any]

    def default_configuration(self) -> dict[str, Any]:
        """Return default configuration values."""
        ...

    def get_form(
        self,
        original_form: Form,
        form_state: FormState,
        additional_parameters: dict[str, Any],
    ) -> Form:
        """Build the widget form."""
        ...

    def validate(self, form: Form, form_state: FormState) -> None:
        """Record validation errors on the form state."""
        ...

    def submit(self, element: Form, form: Form, form_state: FormState) -> None:
        """Handle a submission of the widget form."""
        ...

    def build_configuration_form(self, form: Form, form_state: FormState) -> Form:
        """Build the administrative configuration form."""
        ...

    def submit_configuration_form(self, form: Form, form_state: FormState) -> None:
        """Store submitted configuration values."""
        ...
