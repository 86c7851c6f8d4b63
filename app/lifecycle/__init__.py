"""Lifecycle layer package for process state and shutdown signaling."""

from .interfaces import LifecyclePort, LifecycleTransitionError
from .server import LifecycleServer
from .signals import ShutdownSignalHandler, lifecycle_signal_name
from .state import ProcessLifecycle

__all__ = [
    "LifecyclePort",
    "LifecycleServer",
    "LifecycleTransitionError",
    "ProcessLifecycle",
    "ShutdownSignalHandler",
    "lifecycle_signal_name",
]
