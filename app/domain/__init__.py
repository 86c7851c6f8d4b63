"""Domain models used across application layer boundaries."""

from .models import (
    ErrorPayload,
    HealthReport,
    LandingPageContext,
    LifecycleState,
    PodIdentity,
    ReadinessReport,
    ServiceInfo,
)
from .timestamps import domain_format_timestamp

__all__ = [
    "ErrorPayload",
    "HealthReport",
    "LandingPageContext",
    "LifecycleState",
    "PodIdentity",
    "ReadinessReport",
    "ServiceInfo",
    "domain_format_timestamp",
]
