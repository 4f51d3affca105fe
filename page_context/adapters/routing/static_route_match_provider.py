from typing import Any, Mapping, Optional

from typing_extensions import override

from page_context.entities.route_match import RouteMatch
from page_context.ports.routing.current_route_match_port import CurrentRouteMatchPort


class StaticRouteMatchProvider(CurrentRouteMatchPort):
    """Always returns the same route match (CLI runs, background jobs, tests)."""

    def __init__(self, route_match: Optional[RouteMatch] = None) -> None:
        self._route_match = route_match or RouteMatch()

    @classmethod
    def from_parameters(
        cls, parameters: Mapping[str, Any], route_name: Optional[str] = None
    ) -> "StaticRouteMatchProvider":
        return cls(RouteMatch.from_mapping(parameters, route_name))

    @override
    def get_route_match(self) -> RouteMatch:
        return self._route_match
