"""
Protocol definitions for generic infrastructure services.

Protocols define contracts that services must fulfill, enabling:
- Duck typing with static type checking
- Dependency inversion (depend on abstractions, not concretions)
- Easy mocking in tests

Available Protocols:
    EntityStorage: Load/create/save operations for one entity type

Usage:
    from core.protocols import EntityStorage

    def load_bundle(storage: EntityStorage, bundle_id: str):
        return storage.load(bundle_id)

    # media.storage.ModelStorage is a valid EntityStorage, and so is
    # any test double that implements the same methods.

Note:
    - Protocols are primarily for type checking
    - @runtime_checkable allows isinstance() checks
    - Widget plugin protocol lives in entity_browser.protocols
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any


@runtime_checkable
class EntityStorage(Protocol):
    """
    Protocol for entity storage services.

    One storage instance handles one entity type (bundles, media, files).
    Loads return None for missing records instead of raising.
    """

    def load(self, entity_id: Any) -> Any | None:
        """
        Load a single entity.

        Args:
            entity_id: Primary key of the entity

        Returns:
            The entity, or None if it does not exist
        """
        ...

    def load_multiple(self, entity_ids: Iterable[Any]) -> list[Any]:
        """Load several entities, preserving the order of ``entity_ids``."""
        ...

    def load_by_properties(self, **properties: Any) -> dict[Any, Any]:
        """
        Load entities whose fields match all given properties.

        Returns:
            Mapping of entity id to entity
        """
        ...

    def create(self, values: dict[str, Any]) -> Any:
        """
        Build a new, unsaved entity from a map of field values.

        Args:
            values: Field name to value mapping

        Returns:
            The unsaved entity
        """
        ...

    def save(self, entity: Any) -> Any:
        """Persist an entity and return it."""
        ...
