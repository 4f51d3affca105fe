"""
RouteMatch domain entity.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional


class RouteMatch:
    """
    Read-only view of the route matched for a request: its name and parameters.

    Parameter values are either entities already loaded upstream or scalar
    identifiers (revision number, UUID string...).
    """

    def __init__(
        self,
        parameters: Optional[Mapping[str, Any]] = None,
        route_name: Optional[str] = None,
    ):
        self._parameters = MappingProxyType(dict(parameters or {}))
        self.route_name = route_name or None

    @classmethod
    def from_mapping(
        cls, parameters: Mapping[str, Any], route_name: Optional[str] = None
    ) -> "RouteMatch":
        """Build a RouteMatch from a plain mapping of parameter name to value."""
        return cls(parameters, route_name)

    @property
    def parameters(self) -> Mapping[str, Any]:
        return self._parameters

    def get_parameter(self, name: str) -> Any:
        """
        Get a route parameter value.

        Args:
            name: Parameter name

        Returns:
            The parameter value, or None if the route has no such parameter
        """
        return self._parameters.get(name)

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def __repr__(self) -> str:
        return (
            f"RouteMatch(route_name={self.route_name!r}, "
            f"parameters={sorted(self._parameters)})"
        )
