"""
In-memory entity storage adapters.
"""

import logging
from typing import Any, Optional

from typing_extensions import override

from page_context.entities.entity import Entity
from page_context.entities.entity_type_definition import EntityTypeDefinition
from page_context.exceptions import EntityStorageError
from page_context.ports.entity.entity_storage_port import EntityStoragePort


class InMemoryEntityStorage(EntityStoragePort):
    """Dict-backed storage for one entity type."""

    def __init__(
        self,
        definition: EntityTypeDefinition,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the storage for an entity type.

        Args:
            definition: Definition of the entity type this storage handles
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._definition = definition
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._entities: dict[Any, Entity] = {}

    @property
    def entity_type_id(self) -> str:
        return self._definition.id

    def save(self, entity: Entity) -> Entity:
        """
        Store an entity, replacing any previous one with the same id.

        Args:
            entity: Entity to store

        Returns:
            The stored entity

        Raises:
            EntityStorageError: If the entity belongs to another entity type
        """
        if entity.entity_type_id != self._definition.id:
            raise EntityStorageError(
                f"Cannot save a {entity.entity_type_id} entity in {self._definition.id} storage"
            )
        self._entities[entity.id] = entity
        self._logger.debug(f"Saved {entity!r}")
        return entity

    @override
    def load(self, entity_id: Any) -> Optional[Entity]:
        return self._entities.get(entity_id)

    def load_by_uuid(self, uuid: str) -> Optional[Entity]:
        for entity in self._entities.values():
            if entity.uuid == uuid:
                return entity
        return None


class InMemoryRevisionableStorage(InMemoryEntityStorage):
    """Storage that also keeps every saved revision of its entities."""

    def __init__(
        self,
        definition: EntityTypeDefinition,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(definition, logger)
        self._revisions: dict[int, Entity] = {}

    @override
    def save(self, entity: Entity) -> Entity:
        entity = super().save(entity)
        if entity.revision_id is not None:
            self._revisions[entity.revision_id] = entity
        return entity

    def load_revision(self, revision_id: int) -> Optional[Entity]:
        """
        Load a specific revision.

        Args:
            revision_id: Revision identifier

        Returns:
            The entity as it was at that revision, or None if unknown
        """
        return self._revisions.get(revision_id)
