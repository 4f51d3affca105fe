from abc import ABC, abstractmethod

from page_context.entities.route_match import RouteMatch


class CurrentRouteMatchPort(ABC):
    @abstractmethod
    def get_route_match(self) -> RouteMatch:
        """Return the route match of the request being handled."""
        raise NotImplementedError
