"""
Entity browser widget that turns uploaded audio files into media entities.

AudioUploadWidget wraps the generic FileUploadWidget: it reuses the upload
form, narrows the allowed extensions, and on submit creates one Media of the
configured audio bundle per uploaded file.

Configuration:
    extensions: Space-separated allowed extensions (default "mp3 wav ogg")
    media bundle: Id of the target MediaBundle; its source must be "audio"
    upload_location, multiple, submit_text: passed to the upload widget
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from django.conf import settings
from django.db import transaction
from django.urls import reverse
from django.utils.html import format_html
from django.utils.translation import gettext as _

from entity_browser.forms import Form, FormState, Markup, SelectField, TextField
from entity_browser.registry import register_widget
from entity_browser.widgets.base import WidgetBase
from entity_browser.widgets.upload import FileUploadWidget
from media.storage import MediaStorage, get_storage

if TYPE_CHECKING:
    from collections.abc import Callable

    from core.protocols import EntityStorage
    from media.models import Media, MediaBundle

logger = logging.getLogger(__name__)

AUDIO_SOURCE = "audio"
DEFAULT_EXTENSIONS = "mp3 wav ogg"

# Configuration keys
EXTENSIONS = "extensions"
MEDIA_BUNDLE = "media bundle"


@register_widget(
    "media_entity_audio_upload",
    label="Upload audio files",
    description="Upload widget that creates media entity audios.",
)
class AudioUploadWidget(WidgetBase):
    """
    Upload widget creating audio Media entities.

    Args:
        widget_id: Id of the stored widget configuration.
        configuration: Stored settings.
        upload: Upload widget providing the form and file loading.
        bundle_storage: Storage for MediaBundle lookups.
        media_storage: Storage creating and saving Media entities.
        url_builder: Resolves route names to URLs (django.urls.reverse).
    """

    def __init__(
        self,
        widget_id: str | None = None,
        configuration: dict[str, Any] | None = None,
        *,
        upload: FileUploadWidget | None = None,
        bundle_storage: EntityStorage | None = None,
        media_storage: EntityStorage | None = None,
        url_builder: Callable[[str], str] | None = None,
    ) -> None:
        # The upload widget logs under the same id as this widget.
        widget_id = widget_id or str(uuid.uuid4())
        self.upload = upload or FileUploadWidget(widget_id, configuration)
        self.bundle_storage = bundle_storage or get_storage("media_bundle")
        self.media_storage = media_storage or MediaStorage(self.bundle_storage)
        self.url_builder = url_builder or reverse
        super().__init__(widget_id, configuration)

    def default_configuration(self) -> dict[str, Any]:
        return {
            **self.upload.default_configuration(),
            EXTENSIONS: getattr(
                settings, "MEDIA_AUDIO_DEFAULT_EXTENSIONS", DEFAULT_EXTENSIONS
            ),
            MEDIA_BUNDLE: None,
        }

    def _load_bundle(self) -> MediaBundle | None:
        bundle_id = self.configuration.get(MEDIA_BUNDLE)
        if not bundle_id:
            return None
        return self.bundle_storage.load(bundle_id)

    # =========================================================================
    # Widget form
    # =========================================================================

    def get_form(
        self,
        original_form: Form,
        form_state: FormState,
        additional_parameters: dict[str, Any] | None = None,
    ) -> Form:
        """
        Build the upload form, or a message when the bundle is unusable.

        Returns a form holding only a ``message`` Markup element when the
        configured bundle is missing or does not use the audio source.
        """
        bundle = self._load_bundle()
        if bundle is None:
            logger.warning(
                f"Audio upload widget {self.widget_id} has no valid media bundle "
                f"({self.configuration.get(MEDIA_BUNDLE)!r})"
            )
            return Form(
                message=Markup(markup=_("The media bundle is not configured correctly."))
            )

        if bundle.get_source_plugin_id() != AUDIO_SOURCE:
            logger.warning(
                f"Audio upload widget {self.widget_id} points at bundle {bundle.id} "
                f"with source {bundle.get_source_plugin_id()!r}"
            )
            return Form(
                message=Markup(
                    markup=_("The configured bundle is not using audio plugin.")
                )
            )

        form = self.upload.get_form(original_form, form_state, additional_parameters)
        form["upload"].validators["file_validate_extensions"] = [
            self.configuration[EXTENSIONS]
        ]
        return form

    def validate(self, form: Form, form_state: FormState) -> None:
        self.upload.validate(form, form_state)

    def prepare_entities(self, form: Form, form_state: FormState) -> list[Media]:
        """
        Build one unsaved Media per uploaded file.

        Returns an empty list when the bundle is missing or not an audio
        bundle, so no entity is ever built against an unusable bundle.
        """
        files = self.upload.prepare_entities(form, form_state)

        bundle = self._load_bundle()
        if bundle is None or bundle.get_source_plugin_id() != AUDIO_SOURCE:
            return []

        source_field = bundle.get_type_configuration().get("source_field")
        return [
            self.media_storage.create({"bundle": bundle.id, source_field: media_file})
            for media_file in files
        ]

    def submit(self, element: Form, form: Form, form_state: FormState) -> None:
        """
        Save the audio entities and select them.

        Only acts on the main submit button. The batch is saved in a single
        transaction.
        """
        if not self.is_main_submit(form_state):
            return

        audios = self.prepare_entities(form, form_state)
        with transaction.atomic():
            for media in audios:
                self.media_storage.save(media)

        logger.info(
            f"Audio upload widget {self.widget_id} created {len(audios)} media "
            f"entities in bundle {self.configuration.get(MEDIA_BUNDLE)}"
        )
        self.select_entities(audios, form_state)
        self.clear_form_values(element, form_state)

    def clear_form_values(self, element: Form, form_state: FormState) -> None:
        self.upload.clear_form_values(element, form_state)

    # =========================================================================
    # Configuration form
    # =========================================================================

    def build_configuration_form(self, form: Form, form_state: FormState) -> Form:
        form = self.upload.build_configuration_form(form, form_state)

        form[EXTENSIONS] = TextField(
            title=_("Allowed extensions"),
            default_value=self.configuration[EXTENSIONS],
            required=True,
        )

        bundles = self.bundle_storage.load_by_properties(source=AUDIO_SOURCE)
        bundle_options = {bundle.id: bundle.label for bundle in bundles.values()}

        if not bundle_options:
            url = self.url_builder("media:bundle-add")
            form[MEDIA_BUNDLE] = Markup(
                markup=format_html(
                    _(
                        "You don't have media bundle of the Audio type. "
                        "You should <a href='{}'>create one</a>"
                    ),
                    url,
                )
            )
        else:
            form[MEDIA_BUNDLE] = SelectField(
                title=_("Media bundle"),
                default_value=self.configuration[MEDIA_BUNDLE],
                options=bundle_options,
            )

        return form

    def validate_configuration_form(self, form: Form, form_state: FormState) -> None:
        self.upload.validate_configuration_form(form, form_state)

    def submit_configuration_form(self, form: Form, form_state: FormState) -> None:
        super().submit_configuration_form(form, form_state)
        self.upload.configuration.update(
            {key: self.configuration[key] for key in self.upload.configuration}
        )
