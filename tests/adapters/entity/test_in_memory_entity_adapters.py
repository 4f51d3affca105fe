"""
Tests for the in-memory entity storage, entity type manager and repository.
"""

import pytest

from page_context.adapters.entity.in_memory_entity_repository import (
    InMemoryEntityRepository,
)
from page_context.adapters.entity.in_memory_entity_type_manager import (
    InMemoryEntityTypeManager,
)
from page_context.adapters.entity.in_memory_storage import (
    InMemoryEntityStorage,
    InMemoryRevisionableStorage,
)
from page_context.entities.entity import Entity
from page_context.entities.entity_type_definition import EntityTypeDefinition
from page_context.exceptions import (
    EntityStorageError,
    InvalidPluginDefinitionError,
    PluginNotFoundError,
)
from page_context.ports.entity.entity_storage_port import RevisionableStorage

NODE = EntityTypeDefinition(
    id="node", revisionable=True, storage_class=InMemoryRevisionableStorage
)
CONFIG = EntityTypeDefinition(
    id="config_entity", has_uuid=False, storage_class=InMemoryEntityStorage
)


@pytest.fixture
def manager(mock_logger):
    manager = InMemoryEntityTypeManager(mock_logger)
    manager.register(NODE)
    manager.register(CONFIG)
    return manager


class TestInMemoryStorage:
    def test_save_and_load(self, mock_logger):
        storage = InMemoryEntityStorage(CONFIG, mock_logger)
        entity = Entity("config_entity", "site")

        storage.save(entity)

        assert storage.load("site") is entity
        assert storage.load("missing") is None

    def test_save_wrong_type_raises(self, mock_logger):
        storage = InMemoryEntityStorage(CONFIG, mock_logger)

        with pytest.raises(EntityStorageError, match="Cannot save a node entity"):
            storage.save(Entity("node", 1))

    def test_load_by_uuid(self, mock_logger):
        storage = InMemoryRevisionableStorage(NODE, mock_logger)
        entity = storage.save(Entity("node", 1, uuid="u-1"))

        assert storage.load_by_uuid("u-1") is entity
        assert storage.load_by_uuid("u-2") is None

    def test_revisions_are_kept(self, mock_logger):
        storage = InMemoryRevisionableStorage(NODE, mock_logger)
        first = storage.save(Entity("node", 1, revision_id=1, label="v1"))
        second = storage.save(Entity("node", 1, revision_id=2, label="v2"))

        assert storage.load(1) is second
        assert storage.load_revision(1) is first
        assert storage.load_revision(2) is second
        assert storage.load_revision(3) is None

    def test_revision_capability(self, mock_logger):
        assert isinstance(InMemoryRevisionableStorage(NODE, mock_logger), RevisionableStorage)
        assert not isinstance(InMemoryEntityStorage(CONFIG, mock_logger), RevisionableStorage)


class TestInMemoryEntityTypeManager:
    def test_get_storage(self, manager):
        storage = manager.get_storage("node")

        assert isinstance(storage, InMemoryRevisionableStorage)
        assert storage.entity_type_id == "node"
        assert manager.get_storage("node") is storage

    def test_unknown_type_raises_plugin_not_found(self, manager):
        with pytest.raises(
            PluginNotFoundError, match='The "widget" entity type does not exist.'
        ):
            manager.get_storage("widget")

    def test_missing_storage_class_raises_invalid_definition(self, manager):
        manager.register(EntityTypeDefinition(id="broken"))

        with pytest.raises(
            InvalidPluginDefinitionError, match="did not specify a storage handler"
        ):
            manager.get_storage("broken")

    def test_failing_storage_class_raises_invalid_definition(self, manager):
        def explode(definition, logger):
            raise RuntimeError("boom")

        manager.register(EntityTypeDefinition(id="broken", storage_class=explode))

        with pytest.raises(InvalidPluginDefinitionError, match="boom") as exc_info:
            manager.get_storage("broken")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_revisionable_type_with_plain_storage_is_invalid(self, manager):
        manager.register(
            EntityTypeDefinition(
                id="node", revisionable=True, storage_class=InMemoryEntityStorage
            )
        )

        with pytest.raises(
            InvalidPluginDefinitionError,
            match="is revisionable but its storage handler InMemoryEntityStorage does not support revisions",
        ):
            manager.get_storage("node")

    def test_plain_type_with_revisionable_storage_is_invalid(self, manager):
        manager.register(
            EntityTypeDefinition(
                id="config_entity", storage_class=InMemoryRevisionableStorage
            )
        )

        with pytest.raises(
            InvalidPluginDefinitionError, match="is not revisionable but its storage"
        ):
            manager.get_storage("config_entity")

    def test_register_replaces_storage(self, manager):
        old_storage = manager.get_storage("config_entity")
        manager.register(CONFIG)

        assert manager.get_storage("config_entity") is not old_storage
        assert manager.has_definition("config_entity")
        assert not manager.has_definition("widget")


class TestInMemoryEntityRepository:
    def test_load_entity_by_uuid(self, manager, mock_logger):
        node = manager.get_storage("node").save(Entity("node", 1, uuid="u-1"))
        repository = InMemoryEntityRepository(manager, mock_logger)

        assert repository.load_entity_by_uuid("node", "u-1") is node
        assert repository.load_entity_by_uuid("node", "u-2") is None

    def test_type_without_uuid_raises_storage_error(self, manager, mock_logger):
        repository = InMemoryEntityRepository(manager, mock_logger)

        with pytest.raises(
            EntityStorageError, match="Entity type config_entity does not support UUIDs."
        ):
            repository.load_entity_by_uuid("config_entity", "u-1")

    def test_unknown_type_raises_plugin_not_found(self, manager, mock_logger):
        repository = InMemoryEntityRepository(manager, mock_logger)

        with pytest.raises(PluginNotFoundError):
            repository.load_entity_by_uuid("widget", "u-1")
