"""API layer package for FastAPI application and route composition."""

from .application import api_build_route_table, create_api_application
from .routes import RouteEntry

__all__ = ["RouteEntry", "api_build_route_table", "create_api_application"]
