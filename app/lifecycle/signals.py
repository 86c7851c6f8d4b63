"""Termination signal handling for graceful shutdown."""

from __future__ import annotations

import signal
from typing import Callable

import structlog

from .interfaces import LifecyclePort

logger = structlog.get_logger(__name__)


def lifecycle_signal_name(signal_number: int) -> str:
    """Return a readable name such as `SIGTERM` for a signal number."""

    try:
        return signal.Signals(signal_number).name
    except ValueError:
        return f"signal-{signal_number}"


class ShutdownSignalHandler:
    """Deliver termination events to exactly one lifecycle transition.

    Termination and interrupt events are treated identically. Only the event
    that moves the lifecycle from RUNNING to DRAINING is logged and triggers
    the drain callback; later events are ignored.
    """

    def __init__(
        self,
        lifecycle: LifecyclePort,
        on_drain: Callable[[], None],
        on_failure: Callable[[], None] | None = None,
    ):
        """Initialize signal handler.

        Args:
            lifecycle: Lifecycle state owner.
            on_drain: Callback that stops accepting new connections.
            on_failure: Callback that forces exit when draining cannot start.

        Raises:
            ValueError: Raised when lifecycle or on_drain is None.
        """

        if lifecycle is None:
            raise ValueError("lifecycle must not be None")
        if on_drain is None:
            raise ValueError("on_drain must not be None")
        self._lifecycle = lifecycle
        self._on_drain = on_drain
        self._on_failure = on_failure

    def signal_receive(self, signal_name: str) -> bool:
        """Handle one termination event.

        Args:
            signal_name: Event label, e.g. `SIGTERM` or `SIGINT`.

        Returns:
            bool: True when this event started the shutdown.
        """

        if not self._lifecycle.lifecycle_begin_draining(reason=signal_name):
            return False

        logger.info(
            "shutdown_signal_received",
            signal=signal_name,
            detail=f"{signal_name} received, shutting down gracefully",
        )
        try:
            self._on_drain()
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("shutdown_drain_failed", signal=signal_name)
            if self._on_failure is not None:
                self._on_failure()
        return True
