"""Typed interfaces for HTML presentation collaborators."""

from typing import Protocol

from app.domain import LandingPageContext


class PageRendererPort(Protocol):
    """Port definition for rendering the HTML landing page."""

    def web_render_landing_page(self, context: LandingPageContext) -> str:
        """Render the landing page document.

        Args:
            context: Runtime values shown on the page.

        Returns:
            str: Complete HTML document.

        Raises:
            RuntimeError: Raised when the template cannot be rendered.
        """
