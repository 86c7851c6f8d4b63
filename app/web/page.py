"""Landing page rendering from the packaged HTML template."""

from __future__ import annotations

import html
from importlib import resources
from string import Template

from app.domain import LandingPageContext

from .interfaces import PageRendererPort

LANDING_TEMPLATE_NAME = "landing.html"


class LandingPageRenderer(PageRendererPort):
    """Render the landing page with `string.Template` placeholders."""

    def __init__(self, template_text: str | None = None):
        """Initialize renderer.

        Args:
            template_text: Optional template override; defaults to the packaged template.
        """

        if template_text is None:
            template_text = resources.files("app.web").joinpath("templates", LANDING_TEMPLATE_NAME).read_text(
                encoding="utf-8"
            )
        self._template = Template(template_text)

    def web_render_landing_page(self, context: LandingPageContext) -> str:
        """Substitute escaped runtime values into the template.

        Args:
            context: Runtime values shown on the page.

        Returns:
            str: Complete HTML document.

        Raises:
            KeyError: Raised when the template names an unknown placeholder.
        """

        return self._template.substitute(
            environment=html.escape(context.environment),
            version=html.escape(context.version),
            port=context.port,
            uptime_seconds=context.uptime_seconds,
        )
