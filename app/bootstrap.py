"""Application bootstrap wiring for lifecycle, application and server assembly."""

import uvicorn
from fastapi import FastAPI

from app.api import create_api_application
from app.config import AppSettings
from app.lifecycle import LifecycleServer, ProcessLifecycle
from app.web import LandingPageRenderer


def bootstrap_create_lifecycle(settings: AppSettings) -> ProcessLifecycle:
    """Create the single lifecycle state owner for this process.

    Args:
        settings: Validated startup settings.

    Returns:
        ProcessLifecycle: Lifecycle in RUNNING state with its uptime clock started.
    """

    return ProcessLifecycle(settings=settings)


def bootstrap_create_application(settings: AppSettings, lifecycle: ProcessLifecycle) -> FastAPI:
    """Assemble the runtime application from validated settings.

    Args:
        settings: Validated startup settings.
        lifecycle: Lifecycle state owner shared with the server.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.
    """

    return create_api_application(
        settings=settings,
        lifecycle=lifecycle,
        page_renderer=LandingPageRenderer(),
    )


def bootstrap_create_server(
    settings: AppSettings,
    lifecycle: ProcessLifecycle,
    application: FastAPI,
) -> LifecycleServer:
    """Build the uvicorn server bound to the configured address.

    Uvicorn's own logging config and access log are disabled; records flow
    through the structured logging setup and the request logging middleware.

    Args:
        settings: Validated startup settings.
        lifecycle: Lifecycle state owner receiving shutdown signals.
        application: ASGI application to serve.

    Returns:
        LifecycleServer: Server ready to `run()`.
    """

    server_config = uvicorn.Config(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
        access_log=False,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
    )
    return LifecycleServer(config=server_config, lifecycle=lifecycle)
