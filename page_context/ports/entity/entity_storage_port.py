"""
Entity storage port interfaces defining the contract for loading entities.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from page_context.ports.entity.entity_interface import EntityInterface


class EntityStoragePort(ABC):
    """Port interface for the storage backend of one entity type."""

    @abstractmethod
    def load(self, entity_id: Any) -> Optional[EntityInterface]:
        """
        Load an entity by its internal id.

        Args:
            entity_id: Internal identifier of the entity

        Returns:
            The entity, or None if it does not exist

        Raises:
            EntityStorageError: If the underlying data access fails
        """
        pass


@runtime_checkable
class RevisionableStorage(Protocol):
    """Capability of storages that can load a specific entity revision."""

    def load_revision(self, revision_id: int) -> Optional[EntityInterface]: ...
