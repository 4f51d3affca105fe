import logging
from typing import Optional

from typing_extensions import override

from page_context.adapters.entity.in_memory_entity_type_manager import (
    InMemoryEntityTypeManager,
)
from page_context.entities.entity import Entity
from page_context.exceptions import EntityStorageError
from page_context.ports.entity.entity_repository_port import EntityRepositoryPort


class InMemoryEntityRepository(EntityRepositoryPort):
    def __init__(
        self,
        entity_type_manager: InMemoryEntityTypeManager,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._entity_type_manager = entity_type_manager
        self._logger = logger or logging.getLogger(__name__)

    @override
    def load_entity_by_uuid(self, entity_type_id: str, uuid: str) -> Optional[Entity]:
        definition = self._entity_type_manager.get_definition(entity_type_id)
        if not definition.has_uuid:
            raise EntityStorageError(
                f"Entity type {entity_type_id} does not support UUIDs."
            )

        storage = self._entity_type_manager.get_storage(entity_type_id)
        load_by_uuid = getattr(storage, "load_by_uuid", None)
        if load_by_uuid is None:
            raise EntityStorageError(
                f"Storage of entity type {entity_type_id} cannot load by UUID."
            )
        entity = load_by_uuid(uuid)
        self._logger.debug(
            f"UUID lookup {entity_type_id}:{uuid} -> {'hit' if entity else 'miss'}"
        )
        return entity
