"""Process lifecycle state owner for uptime, health, readiness and shutdown."""

from __future__ import annotations

import threading
import time
from datetime import datetime, timedelta, timezone
from typing import Callable

from app.config import AppSettings
from app.domain import HealthReport, LifecycleState, ReadinessReport, domain_format_timestamp

from .interfaces import LifecyclePort, LifecycleTransitionError


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProcessLifecycle(LifecyclePort):
    """Single owner of mutable process state.

    Reads are lock-free. Transitions take `_transition_lock`; draining uses a
    non-blocking acquire because it is entered from signal handlers, which
    run on the main thread and must never wait on a lock that thread holds.
    """

    def __init__(
        self,
        settings: AppSettings,
        monotonic_clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize lifecycle in RUNNING state with the start instant captured.

        Args:
            settings: Validated settings snapshot used for report metadata.
            monotonic_clock: Monotonic seconds source.
            wall_clock: Timezone-aware UTC wall clock read when the uptime clock is anchored.

        Raises:
            ValueError: Raised when settings is None.
        """

        if settings is None:
            raise ValueError("settings must not be None")
        self._settings = settings
        self._monotonic_clock = monotonic_clock
        self._wall_clock = wall_clock
        self._clock_anchor = (monotonic_clock(), wall_clock())
        self._state = LifecycleState.RUNNING
        self._draining_reason: str | None = None
        self._transition_lock = threading.Lock()

    @property
    def started_at_utc(self) -> datetime:
        """Return the wall-clock instant the uptime clock was anchored."""

        return self._clock_anchor[1]

    @property
    def draining_reason(self) -> str | None:
        """Return the trigger label of the drain transition, if any."""

        return self._draining_reason

    def lifecycle_mark_bound(self) -> None:
        """Re-anchor the uptime clock at the instant the listen socket is bound.

        Both anchor readings are swapped in as one tuple so concurrent readers
        never combine an old monotonic start with a new wall-clock start. The
        transition lock is not taken, so a signal arriving meanwhile is never
        dropped. No-op once draining has begun.
        """

        if self._state is not LifecycleState.RUNNING:
            return
        self._clock_anchor = (self._monotonic_clock(), self._wall_clock())

    def lifecycle_state(self) -> LifecycleState:
        """Return the current lifecycle state.

        Returns:
            LifecycleState: Lock-free state snapshot.
        """

        return self._state

    def lifecycle_uptime_seconds(self) -> float:
        """Return seconds elapsed since the uptime clock was anchored.

        Returns:
            float: Non-negative uptime read from the monotonic clock.
        """

        return self._lifecycle_read_clock()[0]

    def lifecycle_now(self) -> datetime:
        """Return the anchored wall-clock start plus the monotonic elapsed time.

        Returns:
            datetime: UTC instant that never moves backwards between calls.
        """

        return self._lifecycle_read_clock()[1]

    def lifecycle_get_health(self) -> HealthReport:
        """Build a liveness report from one clock reading.

        Returns:
            HealthReport: Always `healthy` while the process can answer.
        """

        uptime_seconds, current_instant = self._lifecycle_read_clock()
        return HealthReport(
            status="healthy",
            timestamp=domain_format_timestamp(current_instant),
            uptime=uptime_seconds,
            environment=self._settings.environment_name,
            version=self._settings.application_version,
        )

    def lifecycle_get_readiness(self) -> ReadinessReport:
        """Build a readiness report.

        Returns:
            ReadinessReport: `ready` in RUNNING, `not_ready` afterwards.
        """

        status = "ready" if self._state is LifecycleState.RUNNING else "not_ready"
        return ReadinessReport(status=status, timestamp=domain_format_timestamp(self.lifecycle_now()))

    def lifecycle_begin_draining(self, reason: str) -> bool:
        """Move from RUNNING to DRAINING exactly once.

        Args:
            reason: Trigger label, usually the signal name.

        Returns:
            bool: True only for the call that performed the transition; False
            when already drained or when another transition holds the lock.
        """

        if not self._transition_lock.acquire(blocking=False):
            return False
        try:
            if self._state is not LifecycleState.RUNNING:
                return False
            self._draining_reason = reason
            self._state = LifecycleState.DRAINING
            return True
        finally:
            self._transition_lock.release()

    def lifecycle_mark_terminated(self) -> bool:
        """Move from DRAINING to TERMINATED.

        Returns:
            bool: True for the call that performed the transition, False if already terminated.

        Raises:
            LifecycleTransitionError: Raised when the lifecycle never drained.
        """

        with self._transition_lock:
            if self._state is LifecycleState.TERMINATED:
                return False
            if self._state is LifecycleState.RUNNING:
                raise LifecycleTransitionError("lifecycle must drain before it can terminate")
            self._state = LifecycleState.TERMINATED
            return True

    def _lifecycle_read_clock(self) -> tuple[float, datetime]:
        started_monotonic, started_at_utc = self._clock_anchor
        uptime_seconds = max(0.0, self._monotonic_clock() - started_monotonic)
        return uptime_seconds, started_at_utc + timedelta(seconds=uptime_seconds)
