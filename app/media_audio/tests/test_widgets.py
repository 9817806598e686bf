"""
Tests for AudioUploadWidget.

These tests verify:
- Form messages for missing and non-audio bundles, with no storage writes
- The upload form with narrowed extension validators
- prepare_entities building one unsaved audio Media per file
- submit persisting only on the main submit, inside one transaction
- The configuration form (bundle select or "create one" link)
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from django.db import DatabaseError

from entity_browser.forms import (
    Form,
    FormState,
    Markup,
    SelectField,
    SubmitButton,
    TextField,
    UploadField,
)
from entity_browser.widgets.upload import FileUploadWidget
from media.models import Media
from media.storage import MediaBundleStorage, MediaStorage
from media.tests.factories import MediaFileFactory
from media_audio.widgets import AudioUploadWidget

NOT_CONFIGURED = "The media bundle is not configured correctly."
NOT_AUDIO = "The configured bundle is not using audio plugin."
BUNDLE_ADD_URL = "/api/v1/media/bundles/add/"


def assert_no_writes(*storages: MagicMock) -> None:
    for storage in storages:
        storage.create.assert_not_called()
        storage.save.assert_not_called()


class TestDefaults:
    """Tests for construction and default configuration."""

    def test_default_configuration(self, make_widget):
        """
        Defaults should add extensions and an empty bundle to upload defaults.

        Why it matters: A fresh widget must show the "not configured" message.
        """
        widget = make_widget()

        assert widget.configuration["extensions"] == "mp3 wav ogg"
        assert widget.configuration["media bundle"] is None
        assert widget.configuration["upload_location"] == "entity_browser/uploads/"
        assert widget.configuration["submit_text"] == "Select files"

    def test_default_extensions_from_settings(self, settings, make_widget):
        settings.MEDIA_AUDIO_DEFAULT_EXTENSIONS = "flac"

        assert make_widget().configuration["extensions"] == "flac"

    def test_holds_upload_widget(self):
        """
        The upload capability should be composed, not inherited.

        Why it matters: The audio widget calls the upload widget explicitly.
        """
        widget = AudioUploadWidget("audio", {"media bundle": "podcast"})

        assert not isinstance(widget, FileUploadWidget)
        assert isinstance(widget.upload, FileUploadWidget)
        assert widget.upload.configuration["media bundle"] == "podcast"
        assert isinstance(widget.bundle_storage, MediaBundleStorage)
        assert isinstance(widget.media_storage, MediaStorage)
        assert widget.media_storage.bundle_storage is widget.bundle_storage

    def test_generated_id_shared_with_upload_widget(self):
        """
        Without an id, both widgets should use one generated id.

        Why it matters: Log lines from either widget refer to the same widget.
        """
        widget = AudioUploadWidget()

        assert widget.widget_id
        assert widget.upload.widget_id == widget.widget_id


class TestGetForm:
    """Tests for get_form."""

    @pytest.mark.parametrize("bundle_id", [None, ""])
    def test_empty_bundle_shows_message(
        self, make_widget, bundle_storage, media_storage, file_storage, bundle_id
    ):
        """
        An empty bundle setting should yield only the "not configured" message.

        Why it matters: Editors must not upload into nowhere.
        """
        widget = make_widget({"media bundle": bundle_id})

        form = widget.get_form(Form(), FormState(), {})

        assert form == {"message": Markup(markup=NOT_CONFIGURED)}
        bundle_storage.load.assert_not_called()
        assert_no_writes(bundle_storage, media_storage, file_storage)

    def test_unresolvable_bundle_shows_message(
        self, make_widget, bundle_storage, media_storage, file_storage
    ):
        widget = make_widget({"media bundle": "deleted"})

        form = widget.get_form(Form(), FormState(), {})

        assert form == {"message": Markup(markup=NOT_CONFIGURED)}
        bundle_storage.load.assert_called_once_with("deleted")
        assert_no_writes(bundle_storage, media_storage, file_storage)

    def test_non_audio_bundle_shows_message(
        self, make_widget, bundle_storage, media_storage, photo_bundle
    ):
        """
        A bundle using another source plugin should yield the audio message.

        Why it matters: Audio files must not become image media.
        """
        bundle_storage.load.side_effect = None
        bundle_storage.load.return_value = photo_bundle
        widget = make_widget({"media bundle": "photo"})

        form = widget.get_form(Form(), FormState(), {})

        assert form == {"message": Markup(markup=NOT_AUDIO)}
        assert_no_writes(bundle_storage, media_storage)

    def test_valid_bundle_narrows_extensions(self, make_widget):
        """
        The upload field should carry exactly the configured extensions.

        Why it matters: Only audio files may be uploaded.
        """
        widget = make_widget({"media bundle": "podcast", "extensions": "mp3 wav"})

        form = widget.get_form(Form(), FormState(), {})

        assert isinstance(form["upload"], UploadField)
        assert form["upload"].validators == {"file_validate_extensions": ["mp3 wav"]}
        assert isinstance(form["actions"], SubmitButton)
        assert form["actions"].main_submit is True

    def test_narrowing_does_not_leak_between_forms(self, make_widget):
        widget = make_widget({"media bundle": "podcast", "extensions": "mp3"})

        widget.get_form(Form(), FormState(), {})
        plain_form = widget.upload.get_form(Form(), FormState(), {})

        assert plain_form["upload"].validators == {}


class TestValidate:
    """Tests for validate."""

    def test_rejects_other_extensions(self, make_widget, file_storage):
        """
        Files outside the extension list should fail validation.

        Why it matters: The host refuses to submit a form with errors.
        """
        file_storage.load_multiple.return_value = [
            MagicMock(original_filename="intro.mp3", file_size=10),
            MagicMock(original_filename="cover.png", file_size=10),
        ]
        widget = make_widget({"media bundle": "podcast", "extensions": "mp3"})
        form_state = FormState(
            values={"upload": ["1", "2"]},
            triggering_element=SubmitButton(main_submit=True),
        )
        form = widget.get_form(Form(), form_state, {})

        widget.validate(form, form_state)

        assert form_state.errors == {
            "upload": [
                "cover.png: Only files with the following extensions are allowed: mp3."
            ]
        }


class TestPrepareEntities:
    """Tests for prepare_entities."""

    def test_one_entity_per_file(
        self, make_widget, media_storage, uploaded_files, main_submit_state
    ):
        """
        Each file should be passed to create() under the source field.

        Why it matters: The bundle decides which field carries the file.
        """
        widget = make_widget({"media bundle": "podcast"})

        entities = widget.prepare_entities(Form(), main_submit_state)

        assert [e.values for e in entities] == [
            {"bundle": "podcast", "field_media_audio_file": uploaded_files[0]},
            {"bundle": "podcast", "field_media_audio_file": uploaded_files[1]},
        ]
        media_storage.save.assert_not_called()

    def test_with_media_storage_builds_unsaved_media(
        self, make_widget, bundle_storage, podcast_bundle, uploaded_files,
        main_submit_state,
    ):
        """
        With the real MediaStorage the entities are unsaved audio Media.

        Why it matters: Nothing is written before submit.
        """
        widget = make_widget(
            {"media bundle": "podcast"},
            media_storage=MediaStorage(bundle_storage),
        )

        entities = widget.prepare_entities(Form(), main_submit_state)

        assert len(entities) == 2
        for media, media_file in zip(entities, uploaded_files):
            assert isinstance(media, Media)
            assert media._state.adding is True
            assert media.bundle_id == podcast_bundle.id
            assert media.get_field("field_media_audio_file") is media_file

    def test_unusable_bundle_returns_nothing(
        self, make_widget, media_storage, main_submit_state
    ):
        widget = make_widget({"media bundle": "deleted"})

        assert widget.prepare_entities(Form(), main_submit_state) == []
        media_storage.create.assert_not_called()


class TestSubmit:
    """Tests for submit."""

    def test_non_main_trigger_is_noop(
        self, make_widget, bundle_storage, media_storage, file_storage
    ):
        """
        Buttons without the main-submit marker should change nothing.

        Why it matters: Secondary buttons (e.g. "remove") must not save media.
        """
        widget = make_widget({"media bundle": "podcast"})
        form_state = FormState(
            values={"upload": ["file-1"]},
            triggering_element=SubmitButton(value="Remove", main_submit=False),
        )

        widget.submit(Form(), Form(), form_state)

        assert_no_writes(bundle_storage, media_storage, file_storage)
        assert form_state.selected_entities == []
        assert form_state.values == {"upload": ["file-1"]}

    def test_no_trigger_is_noop(self, make_widget, media_storage):
        widget = make_widget({"media bundle": "podcast"})

        widget.submit(Form(), Form(), FormState(values={"upload": ["file-1"]}))

        assert_no_writes(media_storage)

    @pytest.mark.django_db
    def test_main_submit_saves_selects_and_clears(
        self, make_widget, media_storage, main_submit_state
    ):
        """
        Main submit should save each entity, select them and clear the form.

        Why it matters: This is the widget's whole purpose.
        """
        widget = make_widget({"media bundle": "podcast"})
        form = widget.get_form(Form(), main_submit_state, {})

        widget.submit(form, form, main_submit_state)

        assert media_storage.save.call_count == 2
        saved = [c.args[0] for c in media_storage.save.call_args_list]
        assert main_submit_state.selected_entities == saved
        assert main_submit_state.values["upload"] == []
        assert form["upload"].value == []

    @pytest.mark.django_db
    def test_main_submit_persists_audio_media(self, audio_bundle, user):
        """
        With default storages one Media per uploaded file is persisted.

        Why it matters: Exercises the real ORM path.
        """
        files = [
            MediaFileFactory(original_filename="one.mp3", uploader=user),
            MediaFileFactory(original_filename="two.ogg", uploader=user),
        ]
        widget = AudioUploadWidget("audio", {"media bundle": audio_bundle.id})
        form_state = FormState(
            values={"upload": [str(f.pk) for f in files]},
            triggering_element=SubmitButton(main_submit=True),
        )

        widget.submit(Form(), Form(), form_state)

        media = list(Media.objects.order_by("name"))
        assert [m.name for m in media] == ["one.mp3", "two.ogg"]
        assert all(m.bundle_id == audio_bundle.id for m in media)
        assert [m.source_file for m in media] == files
        for media_file in files:
            media_file.refresh_from_db()
            assert media_file.is_permanent

    @pytest.mark.django_db
    def test_failed_save_rolls_back_batch(self, audio_bundle, user):
        """
        A failure mid-batch should leave no media behind.

        Why it matters: Partial uploads would leave orphaned entities.
        """
        files = [MediaFileFactory(uploader=user), MediaFileFactory(uploader=user)]
        real_storage = MediaStorage()
        media_storage = MagicMock(wraps=real_storage)
        saved = []

        def save(media):
            if saved:
                raise DatabaseError("disk full")
            saved.append(media)
            return real_storage.save(media)

        media_storage.save.side_effect = save
        widget = AudioUploadWidget(
            "audio", {"media bundle": audio_bundle.id}, media_storage=media_storage
        )
        form_state = FormState(
            values={"upload": [str(f.pk) for f in files]},
            triggering_element=SubmitButton(main_submit=True),
        )

        with pytest.raises(DatabaseError):
            widget.submit(Form(), Form(), form_state)

        assert len(saved) == 1
        assert not Media.objects.exists()
        assert form_state.selected_entities == []


class TestConfigurationForm:
    """Tests for build_configuration_form and submit_configuration_form."""

    def test_no_audio_bundles_shows_create_link(
        self, make_widget, bundle_storage, url_builder
    ):
        """
        Without audio bundles the form should link to the bundle-add page.

        Why it matters: Admins need a way out of an empty select.
        """
        bundle_storage.load_by_properties.return_value = {}
        widget = make_widget()

        form = widget.build_configuration_form(Form(), FormState())

        bundle_storage.load_by_properties.assert_called_once_with(source="audio")
        url_builder.assert_called_once_with("media:bundle-add")
        assert isinstance(form["media bundle"], Markup)
        assert form["media bundle"].markup == (
            "You don't have media bundle of the Audio type. "
            f"You should <a href='{BUNDLE_ADD_URL}'>create one</a>"
        )

    def test_audio_bundles_offered_in_select(
        self, make_widget, bundle_storage, podcast_bundle, url_builder
    ):
        """
        Audio bundles should be offered as id -> label options.

        Why it matters: Admins pick the bundle by its label.
        """
        music = MagicMock(id="music", label="Music")
        bundle_storage.load_by_properties.return_value = {
            "podcast": podcast_bundle,
            "music": music,
        }
        widget = make_widget({"media bundle": "music"})

        form = widget.build_configuration_form(Form(), FormState())

        select = form["media bundle"]
        assert isinstance(select, SelectField)
        assert select.options == {"podcast": "Podcast episode", "music": "Music"}
        assert select.default_value == "music"
        url_builder.assert_not_called()

    def test_extends_upload_configuration_form(self, make_widget):
        form = make_widget({"extensions": "mp3"}).build_configuration_form(
            Form(), FormState()
        )

        assert list(form) == [
            "submit_text",
            "upload_location",
            "multiple",
            "max_filesize",
            "extensions",
            "media bundle",
        ]
        assert form["extensions"] == TextField(
            title="Allowed extensions", default_value="mp3", required=True
        )

    def test_bundle_add_route_resolves(self):
        bundle_storage = MagicMock()
        bundle_storage.load_by_properties.return_value = {}
        widget = AudioUploadWidget(bundle_storage=bundle_storage)

        form = widget.build_configuration_form(Form(), FormState())

        assert "/api/v1/media/bundles/add/" in form["media bundle"].markup

    def test_configuration_validation_covers_upload_settings(self, make_widget):
        widget = make_widget()
        form_state = FormState(
            values={
                "submit_text": "Add audio",
                "upload_location": "audio/",
                "max_filesize": "lots",
                "extensions": "",
            }
        )
        form = widget.build_configuration_form(Form(), form_state)

        widget.validate_configuration_form(form, form_state)

        assert set(form_state.errors) == {"max_filesize", "extensions"}

    def test_submit_configuration_updates_upload(self, make_widget):
        """
        Submitted values should reach both the widget and its upload widget.

        Why it matters: The upload form reads its own configuration.
        """
        widget = make_widget()
        form_state = FormState(
            values={
                "extensions": "flac",
                "media bundle": "podcast",
                "multiple": False,
                "upload_location": "audio/",
                "submit_text": "Add audio",
            }
        )

        widget.submit_configuration_form(Form(), form_state)

        assert widget.configuration["extensions"] == "flac"
        assert widget.configuration["media bundle"] == "podcast"
        assert widget.upload.configuration["multiple"] is False
        assert widget.upload.configuration["upload_location"] == "audio/"
