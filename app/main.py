"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import json

import structlog

from app.bootstrap import bootstrap_create_application, bootstrap_create_lifecycle, bootstrap_create_server
from app.config import SettingsLoadError, config_load_settings
from app.observability import observability_configure_logging

logger = structlog.get_logger(__name__)


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 on startup failure, 0 after graceful shutdown.
    """

    argument_parser = argparse.ArgumentParser(description="K8s Web App runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "print-config"),
        help="Runtime command: `api` starts server, `print-config` prints the resolved configuration",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        observability_configure_logging()
        logger.error("startup_configuration_failed", detail=str(error))
        raise SystemExit(1) from error

    if parsed_arguments.command == "print-config":
        print(json.dumps(settings.model_dump(), indent=2, sort_keys=True))
        return

    observability_configure_logging(settings.log_level)
    lifecycle = bootstrap_create_lifecycle(settings)
    application = bootstrap_create_application(settings, lifecycle)
    server = bootstrap_create_server(settings, lifecycle, application)
    server.run()

    if not server.started:
        logger.error("server_startup_failed", host=settings.application_host, port=settings.application_port)
        raise SystemExit(1)

    lifecycle.lifecycle_begin_draining(reason="server_stopped")
    lifecycle.lifecycle_mark_terminated()
    logger.info("server_terminated", uptime=lifecycle.lifecycle_uptime_seconds())
    raise SystemExit(0)


if __name__ == "__main__":
    main()
