"""
Use case resolving the entity displayed by the current page.
"""

import logging
from typing import Any, Optional

from page_context.entities.route_match import RouteMatch
from page_context.exceptions import (
    EntityStorageError,
    InvalidContextError,
    InvalidPluginDefinitionError,
    PluginNotFoundError,
)
from page_context.ports.entity.entity_interface import EntityInterface
from page_context.ports.entity.entity_repository_port import EntityRepositoryPort
from page_context.ports.entity.entity_storage_port import RevisionableStorage
from page_context.ports.entity.entity_type_manager_port import EntityTypeManagerPort
from page_context.ports.routing.current_route_match_port import CurrentRouteMatchPort
from page_context.use_cases.page.entity_parameters import (
    REVISION_SUFFIX,
    UUID_PARAMETER,
    ParameterFinder,
    find_entity_parameter,
    parse_revision_id,
)

NODE_ENTITY_TYPE = "node"


class PageService:
    """Service to deal with the current page."""

    def __init__(
        self,
        current_route_match: CurrentRouteMatchPort,
        entity_type_manager: EntityTypeManagerPort,
        entity_repository: EntityRepositoryPort,
        logger: Optional[logging.Logger] = None,
        parameter_finder: ParameterFinder = find_entity_parameter,
    ):
        """
        Initialize the service.

        Args:
            current_route_match: Provider of the route match used when none is passed
            entity_type_manager: Locator of entity storages
            entity_repository: Repository used for UUID lookups
            logger: Logger instance to use for logging
            parameter_finder: Strategy picking the route parameter holding the entity
        """
        self._current_route_match = current_route_match
        self._entity_type_manager = entity_type_manager
        self._entity_repository = entity_repository
        self._logger = logger or logging.getLogger(__name__)
        self._parameter_finder = parameter_finder

    def resolve_current_page_entity(
        self, route_match: Optional[RouteMatch] = None
    ) -> Optional[EntityInterface]:
        """
        Get the node of the current route.

        Supports node, node preview and node revision routes, and any other
        route whose node parameter was loaded upstream.

        Args:
            route_match: Route match to use, defaults to the current one

        Returns:
            The node, or None if the route has none

        Raises:
            InvalidContextError: If the route context cannot be resolved
        """
        entity = self.resolve_entity(NODE_ENTITY_TYPE, route_match)
        if getattr(entity, "entity_type_id", None) == NODE_ENTITY_TYPE:
            return entity
        return None

    def resolve_entity(
        self, entity_type_id: str, route_match: Optional[RouteMatch] = None
    ) -> Optional[EntityInterface]:
        """
        Get an entity of the given type from the route.

        Tries, in order: the entity (or preview) already loaded in the route
        parameters, the ``<type>_revision`` parameter, then the ``uuid``
        parameter. Revision and UUID lookups only run for revisionable types.

        Args:
            entity_type_id: Entity type identifier
            route_match: Route match to use, defaults to the current one

        Returns:
            The entity, or None when the route does not identify one

        Raises:
            InvalidContextError: If the entity type is unknown or invalid, or
                the UUID lookup fails in storage
        """
        if route_match is None:
            route_match = self._current_route_match.get_route_match()

        candidate = self._parameter_finder(route_match, entity_type_id)
        if isinstance(candidate, EntityInterface):
            self._logger.debug(f"Resolved {entity_type_id} from route parameters")
            return candidate

        try:
            storage = self._entity_type_manager.get_storage(entity_type_id)
        except (PluginNotFoundError, InvalidPluginDefinitionError) as e:
            self._logger.error(f"Cannot get storage for {entity_type_id}: {e}")
            raise InvalidContextError.from_error(e) from e

        if not isinstance(storage, RevisionableStorage):
            return None

        entity = self._upcast_revision(
            storage, route_match.get_parameter(entity_type_id + REVISION_SUFFIX)
        )
        if isinstance(entity, EntityInterface):
            return entity

        uuid = route_match.get_parameter(UUID_PARAMETER)
        if not uuid:
            return None

        try:
            return self._entity_repository.load_entity_by_uuid(entity_type_id, uuid)
        except EntityStorageError as e:
            self._logger.error(f"UUID lookup failed for {entity_type_id}: {e}")
            raise InvalidContextError.from_error(e) from e

    def _upcast_revision(
        self, storage: RevisionableStorage, revision_parameter: Any
    ) -> Optional[EntityInterface]:
        # Revision routes carry the revision id, not a loaded entity.
        revision_id = parse_revision_id(revision_parameter)
        if revision_id is None:
            return None
        self._logger.debug(f"Loading revision {revision_id}")
        return storage.load_revision(revision_id)
