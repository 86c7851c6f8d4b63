"""Typed domain models shared across runtime layers.

This module provides the value objects exchanged between the lifecycle
layer and the API layer. Reports are built fresh per request and never
cached.
"""

from dataclasses import dataclass
from enum import Enum


class LifecycleState(str, Enum):
    """Process lifecycle states in transition order."""

    RUNNING = "running"
    DRAINING = "draining"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class HealthReport:
    """Liveness report contract used by the health endpoint.

    Attributes:
        status: Liveness marker, `healthy` while the process can respond.
        timestamp: ISO-8601 UTC timestamp computed at query time.
        uptime: Seconds elapsed since process start.
        environment: Runtime environment label.
        version: Application version string.
    """

    status: str
    timestamp: str
    uptime: float
    environment: str
    version: str


@dataclass(frozen=True)
class ReadinessReport:
    """Readiness report contract used by the readiness endpoint.

    Attributes:
        status: `ready` while accepting traffic, `not_ready` once draining.
        timestamp: ISO-8601 UTC timestamp computed at query time.
    """

    status: str
    timestamp: str

    @property
    def is_ready(self) -> bool:
        """Return whether the report signals readiness."""

        return self.status == "ready"


@dataclass(frozen=True)
class PodIdentity:
    """Orchestrator-assigned identity of the running process."""

    name: str
    namespace: str


@dataclass(frozen=True)
class ServiceInfo:
    """Service metadata contract used by the info endpoint.

    Attributes:
        message: Human-readable welcome message.
        version: Application version string.
        environment: Runtime environment label.
        timestamp: ISO-8601 UTC timestamp computed at query time.
        pod: Pod identity values.
    """

    message: str
    version: str
    environment: str
    timestamp: str
    pod: PodIdentity


@dataclass(frozen=True)
class LandingPageContext:
    """Values rendered into the HTML landing page."""

    environment: str
    version: str
    port: int
    uptime_seconds: int


@dataclass(frozen=True)
class ErrorPayload:
    """Normalized client-facing error contract.

    Attributes:
        kind: Error category, `not_found` or `internal_error`.
        error: Short error title placed in the response body.
        message: Client-safe error message.
    """

    kind: str
    error: str
    message: str
