"""Observability package for logging configuration."""

from .logging import observability_configure_logging

__all__ = ["observability_configure_logging"]
