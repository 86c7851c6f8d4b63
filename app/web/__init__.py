"""Web presentation package for HTML rendering."""

from .interfaces import PageRendererPort
from .page import LandingPageRenderer

__all__ = ["LandingPageRenderer", "PageRendererPort"]
