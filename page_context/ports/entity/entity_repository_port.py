from abc import ABC, abstractmethod
from typing import Optional

from page_context.ports.entity.entity_interface import EntityInterface


class EntityRepositoryPort(ABC):
    @abstractmethod
    def load_entity_by_uuid(
        self, entity_type_id: str, uuid: str
    ) -> Optional[EntityInterface]:
        """
        Load an entity of the given type by UUID.

        Raises:
            EntityStorageError: If the lookup cannot be performed
        """
        raise NotImplementedError
