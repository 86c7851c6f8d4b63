"""FastAPI application factory for the web service.

This module assembles the ordered route table, the not-found and failure
normalization, and the presentation middleware.
"""

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import AppSettings
from app.lifecycle import LifecyclePort
from app.web import LandingPageRenderer, PageRendererPort

from .middleware import DispatchFailureMiddleware, RequestLoggingMiddleware, SecurityHeadersMiddleware
from .responses import api_build_error_response, api_build_not_found_payload, api_describe_request_target
from .routers import api_create_health_routes, api_create_info_routes, api_create_page_routes
from .routes import RouteEntry, api_register_route_table

UNMATCHED_ROUTE_STATUS_CODES = frozenset({404, 405})


def api_build_route_table(
    settings: AppSettings,
    lifecycle: LifecyclePort,
    page_renderer: PageRendererPort,
) -> tuple[RouteEntry, ...]:
    """Build the ordered route table.

    Returns:
        tuple[RouteEntry, ...]: Entries in match priority order.
    """

    return (
        *api_create_health_routes(lifecycle=lifecycle),
        *api_create_page_routes(settings=settings, lifecycle=lifecycle, page_renderer=page_renderer),
        *api_create_info_routes(settings=settings, lifecycle=lifecycle),
    )


def create_api_application(
    settings: AppSettings,
    lifecycle: LifecyclePort,
    page_renderer: PageRendererPort | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings snapshot.
        lifecycle: Lifecycle state owner used by status endpoints.
        page_renderer: Optional HTML renderer; defaults to the packaged landing page.

    Returns:
        FastAPI: Application with the fixed route table registered.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if lifecycle is None:
        raise ValueError("lifecycle must not be None")
    resolved_page_renderer = page_renderer or LandingPageRenderer()

    application = FastAPI(
        title="K8s Web App",
        version=settings.application_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.state.settings = settings
    application.state.lifecycle = lifecycle
    application.state.route_table = api_register_route_table(
        application,
        api_build_route_table(settings=settings, lifecycle=lifecycle, page_renderer=resolved_page_renderer),
    )

    static_directory = Path(settings.static_directory)
    if static_directory.is_dir():
        application.mount("/static", StaticFiles(directory=static_directory), name="static")

    @application.exception_handler(StarletteHTTPException)
    async def api_http_exception(request: Request, error: StarletteHTTPException) -> Response:
        """Normalize unmatched paths and unmatched methods into the not-found payload."""

        if error.status_code in UNMATCHED_ROUTE_STATUS_CODES:
            return api_build_error_response(api_build_not_found_payload(api_describe_request_target(request)))
        return await http_exception_handler(request, error)

    # Last added runs outermost.
    application.add_middleware(DispatchFailureMiddleware, settings=settings)
    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(SecurityHeadersMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return application
