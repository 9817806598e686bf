"""
Service layer driving widget forms for the entity browser API.

WidgetService runs the widget lifecycle the way the browser UI expects:
build the form, validate, then submit, and reports the outcome as a
ServiceResult.

Usage:
    from entity_browser.services import WidgetService

    result = WidgetService.submit(config, values={"upload": [file_id]})
    if result.success:
        entities = result.data
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.exceptions import ValidationError
from core.services import BaseService, ServiceResult
from entity_browser.forms import Form, FormState, SubmitButton

if TYPE_CHECKING:
    from entity_browser.models import WidgetConfiguration

# Name of the element holding the widget's main submit button
MAIN_TRIGGER = "actions"


class WidgetService(BaseService):
    """Runs widget form and configuration lifecycles."""

    @classmethod
    def build_form(
        cls,
        config: WidgetConfiguration,
        values: dict[str, Any] | None = None,
    ) -> Form:
        """
        Build the widget form for display.

        Raises:
            NotFoundError: If the widget plugin is not registered
        """
        widget = config.get_widget()
        form_state = FormState(values=dict(values or {}))
        return widget.get_form(Form(), form_state, {"browser": config.browser})

    @classmethod
    def submit(
        cls,
        config: WidgetConfiguration,
        values: dict[str, Any],
        trigger: str = MAIN_TRIGGER,
    ) -> ServiceResult[list[Any]]:
        """
        Validate and submit a widget form.

        Args:
            config: Stored widget configuration
            values: Submitted form values
            trigger: Name of the button that submitted the form

        Returns:
            ServiceResult with the selected entities, or the validation errors.
            Entities the widget cannot build fail the whole submission and
            nothing it wrote is kept.

        Raises:
            NotFoundError: If the widget plugin is not registered
        """
        logger = cls.get_logger()
        widget = config.get_widget()
        form_state = FormState(values=dict(values))
        form = widget.get_form(Form(), form_state, {"browser": config.browser})

        triggering_element = form.get(trigger)
        if not isinstance(triggering_element, SubmitButton):
            logger.info(f"Widget {config.pk} submitted with unusable trigger {trigger!r}")
            return ServiceResult.failure(
                "The widget form cannot be submitted",
                error_code="INVALID_TRIGGER",
                errors={trigger: ["Unknown or missing submit element."]},
            )
        form_state.triggering_element = triggering_element

        widget.validate(form, form_state)
        if form_state.has_errors():
            return ServiceResult.failure(
                "Widget validation failed",
                error_code="VALIDATION_ERROR",
                errors=form_state.errors,
            )

        try:
            with cls.atomic():
                widget.submit(form, form, form_state)
        except ValidationError as e:
            logger.warning(f"Widget {config.pk} ({config.plugin_id}) submit rejected: {e}")
            return ServiceResult.failure(e.message, error_code=e.error_code)

        logger.info(
            f"Widget {config.pk} ({config.plugin_id}) selected "
            f"{len(form_state.selected_entities)} entities"
        )
        return ServiceResult.ok(form_state.selected_entities)

    @classmethod
    def build_configuration_form(cls, config: WidgetConfiguration) -> Form:
        widget = config.get_widget()
        return widget.build_configuration_form(Form(), FormState())

    @classmethod
    def save_configuration(
        cls,
        config: WidgetConfiguration,
        values: dict[str, Any],
    ) -> ServiceResult[WidgetConfiguration]:
        """
        Validate submitted configuration values and store them.

        Returns:
            ServiceResult with the updated configuration, or field errors
        """
        widget = config.get_widget()
        form_state = FormState(values=dict(values))
        form = widget.build_configuration_form(Form(), form_state)

        widget.validate_configuration_form(form, form_state)
        if form_state.has_errors():
            return ServiceResult.failure(
                "Configuration validation failed",
                error_code="VALIDATION_ERROR",
                errors=form_state.errors,
            )

        widget.submit_configuration_form(form, form_state)
        config.settings = widget.configuration
        config.save(update_fields=["settings", "updated_at"])
        cls.get_logger().info(f"Widget {config.pk} configuration saved")
        return ServiceResult.ok(config)
