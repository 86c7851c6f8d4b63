"""HTML page route entries."""

from fastapi.responses import HTMLResponse

from app.config import AppSettings
from app.domain import LandingPageContext
from app.lifecycle import LifecyclePort
from app.web import PageRendererPort

from ..responses import api_build_page_response
from ..routes import RouteEntry


def api_create_page_routes(
    settings: AppSettings,
    lifecycle: LifecyclePort,
    page_renderer: PageRendererPort,
) -> tuple[RouteEntry, ...]:
    """Create landing page route entry.

    Args:
        settings: Validated settings snapshot.
        lifecycle: Lifecycle state owner providing uptime.
        page_renderer: HTML renderer collaborator.

    Returns:
        tuple[RouteEntry, ...]: Entry for `/`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if lifecycle is None:
        raise ValueError("lifecycle must not be None")
    if page_renderer is None:
        raise ValueError("page_renderer must not be None")

    def api_landing_page() -> HTMLResponse:
        """Return the rendered landing page.

        Returns:
            HTMLResponse: Page showing environment, version, port and uptime.
        """

        context = LandingPageContext(
            environment=settings.environment_name,
            version=settings.application_version,
            port=settings.application_port,
            uptime_seconds=int(lifecycle.lifecycle_uptime_seconds()),
        )
        return api_build_page_response(page_renderer.web_render_landing_page(context))

    return (RouteEntry(method="GET", path="/", handler=api_landing_page, name="landing_page"),)
