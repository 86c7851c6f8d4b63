"""Typed interfaces for lifecycle-layer responsibilities."""

from datetime import datetime
from typing import Protocol

from app.domain import HealthReport, LifecycleState, ReadinessReport


class LifecycleTransitionError(RuntimeError):
    """Raised when a lifecycle transition is requested from an illegal state."""


class LifecyclePort(Protocol):
    """Port definition for process health, readiness and shutdown state."""

    def lifecycle_mark_bound(self) -> None:
        """Anchor the uptime clock at the instant the listen socket is bound."""

    def lifecycle_state(self) -> LifecycleState:
        """Return the current lifecycle state.

        Returns:
            LifecycleState: Current state snapshot.
        """

    def lifecycle_uptime_seconds(self) -> float:
        """Return seconds elapsed since process start.

        Returns:
            float: Non-negative, non-decreasing uptime.
        """

    def lifecycle_now(self) -> datetime:
        """Return the current instant on the lifecycle clock.

        Returns:
            datetime: Timezone-aware UTC instant that never moves backwards.
        """

    def lifecycle_get_health(self) -> HealthReport:
        """Build a fresh liveness report.

        Returns:
            HealthReport: Report computed at call time.
        """

    def lifecycle_get_readiness(self) -> ReadinessReport:
        """Build a fresh readiness report.

        Returns:
            ReadinessReport: Report computed at call time.
        """

    def lifecycle_begin_draining(self, reason: str) -> bool:
        """Move from RUNNING to DRAINING.

        Args:
            reason: Trigger label, usually the signal name.

        Returns:
            bool: True only for the call that performed the transition.
        """

    def lifecycle_mark_terminated(self) -> bool:
        """Move from DRAINING to TERMINATED.

        Returns:
            bool: True only for the call that performed the transition.

        Raises:
            LifecycleTransitionError: Raised when the lifecycle was never drained.
        """
