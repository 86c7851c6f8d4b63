"""Uvicorn server wired to the process lifecycle."""

from __future__ import annotations

import socket
from types import FrameType

import structlog
import uvicorn

from .interfaces import LifecyclePort
from .signals import ShutdownSignalHandler, lifecycle_signal_name

logger = structlog.get_logger(__name__)


class LifecycleServer(uvicorn.Server):
    """Uvicorn server whose signal hook goes through `ShutdownSignalHandler`.

    Uvicorn stops accepting connections once `should_exit` is set and waits
    up to `timeout_graceful_shutdown` for in-flight requests. Signals are not
    re-raised after shutdown, so a drained process exits with status 0.
    """

    def __init__(self, config: uvicorn.Config, lifecycle: LifecyclePort):
        """Initialize server and its shutdown signal handler.

        Args:
            config: Uvicorn server configuration.
            lifecycle: Lifecycle state owner receiving bind and shutdown events.
        """

        super().__init__(config)
        self.lifecycle = lifecycle
        self.signal_handler = ShutdownSignalHandler(
            lifecycle=lifecycle,
            on_drain=self._server_request_drain,
            on_failure=self._server_force_exit,
        )

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        """Forward a uvicorn-captured signal to the shutdown handler.

        Args:
            sig: Received signal number.
            frame: Interrupted stack frame, unused.
        """

        self.signal_handler.signal_receive(lifecycle_signal_name(sig))

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        """Bind the listen socket, then start the uptime clock and log the banner.

        Args:
            sockets: Optional pre-bound sockets passed through to uvicorn.
        """

        await super().startup(sockets=sockets)
        if not self.started:
            return
        self.lifecycle.lifecycle_mark_bound()
        base_url = f"http://{self.config.host}:{self.config.port}"
        logger.info("server_started", url=base_url)
        logger.info("health_check_available", url=f"{base_url}/health")
        logger.info("readiness_probe_available", url=f"{base_url}/ready")

    def _server_request_drain(self) -> None:
        self.should_exit = True

    def _server_force_exit(self) -> None:
        self.should_exit = True
        self.force_exit = True
