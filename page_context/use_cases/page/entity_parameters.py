"""
Detection of entities that the router already loaded into the route parameters.
"""

import re
from typing import Any, Callable, Optional

from page_context.entities.route_match import RouteMatch

CURRENT_ENTITY_PARAMETER = "current_entity"
PREVIEW_SUFFIX = "_preview"
REVISION_SUFFIX = "_revision"
UUID_PARAMETER = "uuid"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# (route_match, entity_type_id) -> candidate value, possibly not an entity
ParameterFinder = Callable[[RouteMatch, str], Any]


def find_entity_parameter(route_match: RouteMatch, entity_type_id: str) -> Any:
    """
    Pick the route parameter that should hold the entity for a type.

    The parameter named after the entity type is used, or ``current_entity``
    when the route has none. A truthy ``<type>_preview`` parameter replaces
    either of them.

    Args:
        route_match: Route match to inspect
        entity_type_id: Entity type identifier

    Returns:
        The candidate value; callers still have to check it is an entity
    """
    candidate = route_match.get_parameter(entity_type_id)
    if candidate is None:
        candidate = route_match.get_parameter(CURRENT_ENTITY_PARAMETER)

    preview = route_match.get_parameter(entity_type_id + PREVIEW_SUFFIX)
    if preview:
        candidate = preview
    return candidate


def parse_revision_id(value: Any) -> Optional[int]:
    """
    Read a revision route parameter.

    Returns:
        The revision id when the value is a positive integer (or a string
        of ASCII digits), None otherwise
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, str):
        value = value.strip()
        if not _INTEGER_PATTERN.fullmatch(value):
            return None
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        return None
    return value
