"""
Generic file upload widget.

Shows an upload field; on submit the uploaded files themselves are handed
to the browser. Other widgets (e.g. media_audio's AudioUploadWidget) hold an
instance of this widget and reuse its form, validation and file loading.

Form values:
    upload: list of MediaFile ids uploaded through the field

Configuration:
    upload_location: Directory the client uploads into. The widget only
        passes it on in the form; MediaFile storage paths are not affected.
    multiple: Whether more than one file may be uploaded
    max_filesize: Maximum size per file in bytes, 0 for no limit
    submit_text: Label of the main submit button
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from django.conf import settings
from django.utils.translation import gettext as _

from entity_browser.forms import CheckboxField, Form, FormState, TextField, UploadField
from entity_browser.registry import register_widget
from entity_browser.widgets.base import WidgetBase
from media.storage import get_storage
from media.validators import validate_file

if TYPE_CHECKING:
    from core.protocols import EntityStorage
    from media.models import MediaFile

logger = logging.getLogger(__name__)


@register_widget(
    "upload",
    label="Upload",
    description="Adds an upload field browser's widget.",
)
class FileUploadWidget(WidgetBase):
    """
    Upload widget selecting the uploaded files.

    Args:
        widget_id: Id of the stored widget configuration.
        configuration: Stored settings.
        file_storage: Storage used to load uploaded files.
    """

    def __init__(
        self,
        widget_id: str | None = None,
        configuration: dict[str, Any] | None = None,
        *,
        file_storage: EntityStorage | None = None,
    ) -> None:
        self.file_storage = file_storage or get_storage("file")
        super().__init__(widget_id, configuration)

    def default_configuration(self) -> dict[str, Any]:
        return {
            **super().default_configuration(),
            "upload_location": getattr(
                settings, "ENTITY_BROWSER_UPLOAD_LOCATION", "entity_browser/uploads/"
            ),
            "multiple": True,
            "max_filesize": getattr(settings, "ENTITY_BROWSER_MAX_FILESIZE", 0),
            "submit_text": _("Select files"),
        }

    def get_form(
        self,
        original_form: Form,
        form_state: FormState,
        additional_parameters: dict[str, Any] | None = None,
    ) -> Form:
        validators: dict[str, list[Any]] = {}
        max_filesize = self._max_filesize()
        if max_filesize:
            validators["file_validate_size"] = [max_filesize]

        form = Form()
        form["upload"] = UploadField(
            title=_("File upload"),
            multiple=bool(self.configuration["multiple"]),
            upload_location=self.configuration["upload_location"],
            validators=validators,
            value=[str(file_id) for file_id in self._submitted_ids(form_state)],
        )
        form.update(super().get_form(original_form, form_state, additional_parameters))
        return form

    def _max_filesize(self) -> int:
        return int(self.configuration.get("max_filesize") or 0)

    def _submitted_ids(self, form_state: FormState) -> list[Any]:
        ids = form_state.get_value("upload") or []
        # A single scalar id counts as a one-file upload.
        if not isinstance(ids, (list, tuple)):
            ids = [ids]
        return list(ids)

    def prepare_entities(self, form: Form, form_state: FormState) -> list[MediaFile]:
        """Load the uploaded files, in upload order."""
        return self.file_storage.load_multiple(self._submitted_ids(form_state))

    def validate(self, form: Form, form_state: FormState) -> None:
        """
        Run the upload field's validators against every uploaded file.

        On the main submit at least one file is required.
        """
        upload_field = form.get("upload")
        if not isinstance(upload_field, UploadField):
            return

        files = self.prepare_entities(form, form_state)
        if not files and self.is_main_submit(form_state):
            form_state.set_error("upload", _("At least one file should be uploaded."))
            return

        if not upload_field.multiple and len(files) > 1:
            form_state.set_error("upload", _("Only one file can be uploaded."))

        for media_file in files:
            result = validate_file(media_file, upload_field.validators)
            for error in result.errors:
                form_state.set_error("upload", f"{media_file.original_filename}: {error}")

        if form_state.has_errors():
            logger.info(
                f"Upload validation failed for widget {self.widget_id}: "
                f"{form_state.errors.get('upload')}"
            )

    def submit(self, element: Form, form: Form, form_state: FormState) -> None:
        if not self.is_main_submit(form_state):
            return

        files = self.prepare_entities(form, form_state)
        for media_file in files:
            media_file.mark_permanent(save=False)
            self.file_storage.save(media_file)

        self.select_entities(files, form_state)
        self.clear_form_values(element, form_state)

    def clear_form_values(self, element: Form, form_state: FormState) -> None:
        form_state.set_value("upload", [])
        upload_field = element.get("upload")
        if isinstance(upload_field, UploadField):
            upload_field.value = []

    def build_configuration_form(self, form: Form, form_state: FormState) -> Form:
        form = super().build_configuration_form(form, form_state)
        form["upload_location"] = TextField(
            title=_("Upload location"),
            default_value=self.configuration["upload_location"],
            required=True,
        )
        form["multiple"] = CheckboxField(
            title=_("Accept multiple files"),
            default_value=bool(self.configuration["multiple"]),
        )
        form["max_filesize"] = TextField(
            title=_("Maximum file size"),
            default_value=str(self._max_filesize()),
            description=_("In bytes. 0 means no limit."),
        )
        return form

    def validate_configuration_form(self, form: Form, form_state: FormState) -> None:
        super().validate_configuration_form(form, form_state)
        value = form_state.get_value("max_filesize")
        if value in (None, ""):
            return
        try:
            valid = int(value) >= 0
        except (TypeError, ValueError):
            valid = False
        if not valid:
            form_state.set_error(
                "max_filesize", _("Maximum file size must be a whole number of bytes.")
            )
