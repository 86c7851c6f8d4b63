"""Service information route entry."""

from fastapi.responses import JSONResponse

from app.config import AppSettings
from app.domain import PodIdentity, ServiceInfo, domain_format_timestamp
from app.lifecycle import LifecyclePort

from ..responses import api_build_info_response
from ..routes import RouteEntry

SERVICE_INFO_MESSAGE = "Welcome to K8s Web App API"


def api_create_info_routes(settings: AppSettings, lifecycle: LifecyclePort) -> tuple[RouteEntry, ...]:
    """Create route entry exposing version, environment and pod identity.

    Args:
        settings: Validated settings snapshot.
        lifecycle: Lifecycle clock used for the response timestamp.

    Returns:
        tuple[RouteEntry, ...]: Entry for `/api/info`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if lifecycle is None:
        raise ValueError("lifecycle must not be None")

    def api_service_info() -> JSONResponse:
        """Return service metadata payload.

        Returns:
            JSONResponse: Info payload with pod identity.
        """

        service_info = ServiceInfo(
            message=SERVICE_INFO_MESSAGE,
            version=settings.application_version,
            environment=settings.environment_name,
            timestamp=domain_format_timestamp(lifecycle.lifecycle_now()),
            pod=PodIdentity(name=settings.pod_name, namespace=settings.pod_namespace),
        )
        return api_build_info_response(service_info)

    return (RouteEntry(method="GET", path="/api/info", handler=api_service_info, name="service_info"),)
