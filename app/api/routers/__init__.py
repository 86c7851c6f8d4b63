"""API router package for route table composition."""

from .health import api_create_health_routes
from .info import api_create_info_routes
from .pages import api_create_page_routes

__all__ = ["api_create_health_routes", "api_create_info_routes", "api_create_page_routes"]
