"""Health and readiness route entries backed by the process lifecycle."""

from fastapi.responses import JSONResponse

from app.lifecycle import LifecyclePort

from ..responses import api_build_health_response, api_build_readiness_response
from ..routes import RouteEntry


def api_create_health_routes(lifecycle: LifecyclePort) -> tuple[RouteEntry, ...]:
    """Create liveness and readiness route entries.

    Args:
        lifecycle: Lifecycle state owner queried per request.

    Returns:
        tuple[RouteEntry, ...]: Entries for `/health` and `/ready`.

    Raises:
        ValueError: Raised when lifecycle is invalid.
    """

    if lifecycle is None:
        raise ValueError("lifecycle must not be None")

    def api_health_status() -> JSONResponse:
        """Return liveness report with uptime and runtime metadata.

        Returns:
            JSONResponse: Health payload computed at request time.
        """

        return api_build_health_response(lifecycle.lifecycle_get_health())

    def api_readiness_status() -> JSONResponse:
        """Return readiness report.

        Returns:
            JSONResponse: 200 while running, 503 once draining has begun.
        """

        return api_build_readiness_response(lifecycle.lifecycle_get_readiness())

    return (
        RouteEntry(method="GET", path="/health", handler=api_health_status, name="health"),
        RouteEntry(method="GET", path="/ready", handler=api_readiness_status, name="ready"),
    )
