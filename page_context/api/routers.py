"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from page_context.api.dependencies import get_page_service
from page_context.api.schemas import EntityInfo, ErrorResponse
from page_context.config.settings import settings
from page_context.exceptions import InvalidContextError

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


def _entity_response(entity, entity_type_id: str) -> EntityInfo:
    if entity is None:
        raise HTTPException(
            status_code=404, detail=f"No {entity_type_id} found for this route"
        )
    return EntityInfo.from_entity(entity)


@router.get(
    "/node/current",
    response_model=EntityInfo,
    responses=_ERROR_RESPONSES,
    name="node.current",
)
def current_node(request: Request):
    """
    Resolve the node of the current route.

    Query parameters (``node_revision``, ``uuid``...) form the route context.

    Raises:
        HTTPException: 400 if the context is invalid, 404 if no node matches
    """
    try:
        node = get_page_service(request).resolve_current_page_entity()
    except InvalidContextError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return _entity_response(node, "node")


@router.get(
    "/node/{node}/revisions/{node_revision}/view",
    response_model=EntityInfo,
    responses=_ERROR_RESPONSES,
    name="entity.node.revision",
)
def node_revision(request: Request, node: str, node_revision: str):
    """Resolve the node revision shown by a revision route."""
    try:
        revision = get_page_service(request).resolve_current_page_entity()
    except InvalidContextError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return _entity_response(revision, "node")


@router.get(
    "/entities/current",
    response_model=EntityInfo,
    responses=_ERROR_RESPONSES,
    name="entity.current",
)
def current_entity(
    request: Request,
    entity_type: Optional[str] = Query(
        None, description="Entity type to resolve (defaults to the configured type)"
    ),
):
    """Resolve the entity of the configured default type from the current route."""
    entity_type_id = entity_type or settings.default_entity_type
    return _resolve(request, entity_type_id)


@router.get(
    "/entities/{entity_type_id}/current",
    response_model=EntityInfo,
    responses=_ERROR_RESPONSES,
    name="entity.type.current",
)
def current_entity_of_type(request: Request, entity_type_id: str):
    """
    Resolve an entity of the given type from the current route.

    Args:
        entity_type_id: Entity type identifier

    Raises:
        HTTPException: 400 if the context is invalid, 404 if nothing matches
    """
    return _resolve(request, entity_type_id)


def _resolve(request: Request, entity_type_id: str) -> EntityInfo:
    try:
        entity = get_page_service(request).resolve_entity(entity_type_id)
    except InvalidContextError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return _entity_response(entity, entity_type_id)
