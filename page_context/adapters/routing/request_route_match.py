"""
Route match adapter for FastAPI/Starlette requests.
"""

from typing import Any, Optional

from starlette.requests import Request
from typing_extensions import override

from page_context.entities.route_match import RouteMatch
from page_context.ports.routing.current_route_match_port import CurrentRouteMatchPort


def route_match_from_request(request: Request) -> RouteMatch:
    """
    Build a RouteMatch from the parameters of an incoming request.

    Query parameters are merged first so that path parameters win on clashes.

    Args:
        request: The incoming request

    Returns:
        RouteMatch holding the request's path and query parameters
    """
    parameters: dict[str, Any] = dict(request.query_params)
    parameters.update(request.path_params)

    route = request.scope.get("route")
    route_name: Optional[str] = getattr(route, "name", None)
    return RouteMatch.from_mapping(parameters, route_name)


class RequestRouteMatchProvider(CurrentRouteMatchPort):
    """Current route match of one request."""

    def __init__(self, request: Request) -> None:
        self._request = request
        self._route_match: Optional[RouteMatch] = None

    @override
    def get_route_match(self) -> RouteMatch:
        if self._route_match is None:
            self._route_match = route_match_from_request(self._request)
        return self._route_match
