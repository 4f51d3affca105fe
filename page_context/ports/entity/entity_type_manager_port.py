"""
Entity type manager port interface: locates the storage of an entity type.
"""

from abc import ABC, abstractmethod

from page_context.ports.entity.entity_storage_port import EntityStoragePort


class EntityTypeManagerPort(ABC):
    """Port interface for the entity type registry."""

    @abstractmethod
    def get_storage(self, entity_type_id: str) -> EntityStoragePort:
        """
        Get the storage backend for an entity type.

        Args:
            entity_type_id: Entity type identifier (e.g. "node")

        Returns:
            The storage handling entities of that type

        Raises:
            PluginNotFoundError: If the entity type is not registered
            InvalidPluginDefinitionError: If its definition cannot provide a storage
        """
        pass
