"""
Pytest configuration and shared fixtures.
"""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from page_context.container import DependencyContainer
from page_context.entities.entity import Entity
from page_context.entities.route_match import RouteMatch
from page_context.ports.entity.entity_repository_port import EntityRepositoryPort
from page_context.ports.entity.entity_storage_port import EntityStoragePort
from page_context.ports.entity.entity_type_manager_port import EntityTypeManagerPort
from page_context.ports.routing.current_route_match_port import CurrentRouteMatchPort
from page_context.use_cases.page.page_service import PageService


class FakeStorage(EntityStoragePort):
    """Storage without revision support."""

    def load(self, entity_id):
        return None


class FakeRevisionableStorage(EntityStoragePort):
    """Storage answering revision loads from a dict and recording the requests."""

    def __init__(self, revisions: Optional[dict] = None):
        self.revisions = revisions or {}
        self.requested_revisions = []

    def load(self, entity_id):
        return None

    def load_revision(self, revision_id):
        self.requested_revisions.append(revision_id)
        return self.revisions.get(revision_id)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def node():
    return Entity("node", 1, uuid="node-uuid-1", revision_id=10, label="Home")


@pytest.fixture
def node_preview():
    return Entity("node", 1, uuid="node-uuid-1", label="Home (preview)")


@pytest.fixture
def term():
    return Entity("taxonomy_term", 7, uuid="term-uuid-7", label="News")


@pytest.fixture
def plain_storage():
    return FakeStorage()


@pytest.fixture
def revisionable_storage_factory():
    """Build a revisionable storage serving the given {revision_id: entity} map."""
    return FakeRevisionableStorage


@pytest.fixture
def current_route_match():
    """Current route provider returning an empty route match."""
    provider = MagicMock(spec=CurrentRouteMatchPort)
    provider.get_route_match.return_value = RouteMatch()
    return provider


@pytest.fixture
def entity_type_manager():
    """Entity type manager whose storage is revisionable and empty by default."""
    manager = MagicMock(spec=EntityTypeManagerPort)
    manager.get_storage.return_value = FakeRevisionableStorage()
    return manager


@pytest.fixture
def entity_repository():
    repository = MagicMock(spec=EntityRepositoryPort)
    repository.load_entity_by_uuid.return_value = None
    return repository


@pytest.fixture
def page_service(current_route_match, entity_type_manager, entity_repository, mock_logger):
    return PageService(
        current_route_match, entity_type_manager, entity_repository, mock_logger
    )


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with a mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    container._logger = mock_logger
    return container
