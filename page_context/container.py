"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

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
from page_context.adapters.routing.static_route_match_provider import (
    StaticRouteMatchProvider,
)
from page_context.entities.entity_type_definition import EntityTypeDefinition
from page_context.ports.entity.entity_repository_port import EntityRepositoryPort
from page_context.ports.routing.current_route_match_port import CurrentRouteMatchPort
from page_context.use_cases.page.page_service import PageService

DEFAULT_ENTITY_TYPES = (
    EntityTypeDefinition(
        id="node",
        label="Content",
        revisionable=True,
        has_uuid=True,
        storage_class=InMemoryRevisionableStorage,
    ),
    EntityTypeDefinition(
        id="config_entity",
        label="Configuration",
        revisionable=False,
        has_uuid=False,
        storage_class=InMemoryEntityStorage,
    ),
)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_entity_type_manager(self) -> InMemoryEntityTypeManager:
        """
        Get the entity type manager, with the default entity types registered.

        Returns:
            EntityTypeManagerPort implementation
        """
        if "entity_type_manager" not in self._instances:
            manager = InMemoryEntityTypeManager(self._logger)
            for definition in DEFAULT_ENTITY_TYPES:
                manager.register(definition)
            self._instances["entity_type_manager"] = manager
        return self._instances["entity_type_manager"]

    def get_entity_repository(self) -> EntityRepositoryPort:
        """
        Get entity repository adapter instance.

        Returns:
            EntityRepositoryPort implementation
        """
        if "entity_repository" not in self._instances:
            self._instances["entity_repository"] = InMemoryEntityRepository(
                self.get_entity_type_manager(), self._logger
            )
        return self._instances["entity_repository"]

    def get_page_service(
        self, route_match_provider: Optional[CurrentRouteMatchPort] = None
    ) -> PageService:
        """
        Get the page service with injected dependencies.

        Args:
            route_match_provider: Provider of the current route match. When
                given, a service bound to it is built (one per request);
                otherwise a shared service with an empty route match is used.

        Returns:
            Configured PageService
        """
        if route_match_provider is not None:
            return PageService(
                route_match_provider,
                self.get_entity_type_manager(),
                self.get_entity_repository(),
                self._logger,
            )
        if "page_service" not in self._instances:
            self._instances["page_service"] = PageService(
                StaticRouteMatchProvider(),
                self.get_entity_type_manager(),
                self.get_entity_repository(),
                self._logger,
            )
        return self._instances["page_service"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
