"""
Entity storage services for media models.

Each storage wraps one Django model and implements core.protocols.EntityStorage:
- load / load_multiple / load_by_properties for reads (missing ids yield None
  or are skipped, never raise)
- create for building unsaved entities from a field-value map
- save for persisting

Widgets receive storages through their constructors instead of reaching for
model managers directly, which keeps them testable with simple doubles.

Usage:
    from media.storage import get_storage

    bundles = get_storage("media_bundle")
    bundle = bundles.load("podcast")

    media_storage = get_storage("media")
    media = media_storage.create({
        "bundle": bundle.id,
        bundle.source_field: media_file,
    })
    media_storage.save(media)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from django.core.exceptions import ValidationError as DjangoValidationError

from core.exceptions import NotFoundError, ValidationError
from media.models import Media, MediaBundle, MediaFile

if TYPE_CHECKING:
    from collections.abc import Iterable

    from django.db import models

logger = logging.getLogger(__name__)


class ModelStorage:
    """Entity storage backed by a Django model's default manager."""

    model: type[models.Model]

    def __init__(self, model: type[models.Model] | None = None) -> None:
        if model is not None:
            self.model = model

    @property
    def entity_type(self) -> str:
        return self.model._meta.label_lower

    def _clean_id(self, entity_id: Any) -> Any | None:
        """Convert an id to the pk type, or None if it cannot be one."""
        if entity_id is None or entity_id == "":
            return None
        try:
            return self.model._meta.pk.to_python(entity_id)
        except (DjangoValidationError, TypeError, ValueError):
            return None

    def load(self, entity_id: Any) -> Any | None:
        """Load one entity by primary key, or None if it does not exist."""
        pk = self._clean_id(entity_id)
        if pk is None:
            return None
        return self.model._default_manager.filter(pk=pk).first()

    def load_multiple(self, entity_ids: Iterable[Any]) -> list[Any]:
        """
        Load several entities in the order given.

        Ids that are malformed or no longer exist are skipped.
        """
        pks = [pk for pk in (self._clean_id(i) for i in entity_ids) if pk is not None]
        if not pks:
            return []
        found = self.model._default_manager.in_bulk(pks)
        return [found[pk] for pk in pks if pk in found]

    def load_by_properties(self, **properties: Any) -> dict[Any, Any]:
        """Return {pk: entity} for entities matching every property."""
        queryset = self.model._default_manager.filter(**properties)
        return {entity.pk: entity for entity in queryset}

    def create(self, values: dict[str, Any]) -> Any:
        """Build an unsaved entity."""
        return self.model(**values)

    def save(self, entity: Any) -> Any:
        """Persist an entity."""
        entity.save()
        logger.debug(f"Saved {self.entity_type} {entity.pk}")
        return entity


class MediaBundleStorage(ModelStorage):
    model = MediaBundle


class MediaFileStorage(ModelStorage):
    model = MediaFile


class MediaStorage(ModelStorage):
    """
    Storage for Media entities.

    ``create`` accepts bundle-level field names, so the file reference can be
    passed under the bundle's source field name (e.g. ``field_media_audio_file``).
    """

    model = Media

    def __init__(self, bundle_storage: ModelStorage | None = None) -> None:
        super().__init__()
        self.bundle_storage = bundle_storage or MediaBundleStorage()

    def create(self, values: dict[str, Any]) -> Media:
        """
        Build an unsaved Media.

        Args:
            values: Must contain ``bundle`` (id or MediaBundle). All other
                keys are bundle-level field names.

        Raises:
            ValidationError: If the bundle is missing or a field is unknown.
        """
        values = dict(values)
        bundle = values.pop("bundle", None)
        if not isinstance(bundle, MediaBundle):
            bundle_id = bundle
            bundle = self.bundle_storage.load(bundle_id)
            if bundle is None:
                raise ValidationError(
                    f"Media bundle '{bundle_id}' does not exist",
                    error_code="INVALID_BUNDLE",
                    details={"bundle": bundle_id},
                )

        media = Media(bundle=bundle)
        for field_name, value in values.items():
            media.set_field(field_name, value)
        return media


# Entity type string -> storage class
STORAGES: dict[str, type[ModelStorage]] = {
    "media_bundle": MediaBundleStorage,
    "media": MediaStorage,
    "file": MediaFileStorage,
}


def get_storage(entity_type: str) -> ModelStorage:
    """
    Get a storage instance for an entity type.

    Args:
        entity_type: One of ``media_bundle``, ``media``, ``file``

    Raises:
        NotFoundError: If the entity type has no storage
    """
    storage_class = STORAGES.get(entity_type)
    if storage_class is None:
        raise NotFoundError(
            f"No storage for entity type '{entity_type}'",
            error_code="STORAGE_NOT_FOUND",
            details={"entity_type": entity_type},
        )
    return storage_class()
