"""
In-memory entity type manager: a registry of entity type definitions and their storages.
"""

import logging
from typing import Optional

from typing_extensions import override

from page_context.entities.entity_type_definition import EntityTypeDefinition
from page_context.exceptions import InvalidPluginDefinitionError, PluginNotFoundError
from page_context.ports.entity.entity_storage_port import (
    EntityStoragePort,
    RevisionableStorage,
)
from page_context.ports.entity.entity_type_manager_port import EntityTypeManagerPort


class InMemoryEntityTypeManager(EntityTypeManagerPort):
    """Entity type registry creating one storage per type on first use."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._definitions: dict[str, EntityTypeDefinition] = {}
        self._storages: dict[str, EntityStoragePort] = {}

    def register(self, definition: EntityTypeDefinition) -> None:
        """
        Register (or replace) an entity type definition.

        Args:
            definition: The entity type definition
        """
        self._definitions[definition.id] = definition
        self._storages.pop(definition.id, None)
        self._logger.debug(f"Registered entity type: {definition.id}")

    def get_definition(self, entity_type_id: str) -> EntityTypeDefinition:
        """
        Get a registered entity type definition.

        Raises:
            PluginNotFoundError: If the entity type is not registered
        """
        definition = self._definitions.get(entity_type_id)
        if definition is None:
            raise PluginNotFoundError(
                f'The "{entity_type_id}" entity type does not exist.'
            )
        return definition

    def has_definition(self, entity_type_id: str) -> bool:
        return entity_type_id in self._definitions

    @override
    def get_storage(self, entity_type_id: str) -> EntityStoragePort:
        if entity_type_id in self._storages:
            return self._storages[entity_type_id]

        definition = self.get_definition(entity_type_id)
        if definition.storage_class is None:
            raise InvalidPluginDefinitionError(
                f'The "{entity_type_id}" entity type did not specify a storage handler.'
            )
        try:
            storage = definition.storage_class(definition, self._logger)
        except Exception as e:
            raise InvalidPluginDefinitionError(
                f'The storage handler of the "{entity_type_id}" entity type could not be created: {e}'
            ) from e

        supports_revisions = isinstance(storage, RevisionableStorage)
        if supports_revisions != definition.revisionable:
            expected = "revisionable" if definition.revisionable else "not revisionable"
            actual = "supports" if supports_revisions else "does not support"
            raise InvalidPluginDefinitionError(
                f'The "{entity_type_id}" entity type is {expected} but its storage '
                f"handler {type(storage).__name__} {actual} revisions."
            )

        self._storages[entity_type_id] = storage
        return storage
