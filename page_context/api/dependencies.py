"""
Functions for retrieving request-bound services from the container.
"""

from starlette.requests import Request

from page_context.adapters.routing.request_route_match import RequestRouteMatchProvider
from page_context.container import container
from page_context.use_cases.page.page_service import PageService


def get_page_service(request: Request) -> PageService:
    """
    Get a page service whose current route match is the given request's.

    Args:
        request: The incoming request

    Returns:
        PageService: The page service bound to the request
    """
    return container.get_page_service(RequestRouteMatchProvider(request))
