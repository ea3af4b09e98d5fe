"""Optional template stage for generated HTML.

Uses Jinja2 to wrap converted Markdown in a user-supplied template. The only
variable made available to the template is ``html``.

Key class:
- TemplateRenderer: Renders HTML through a template, or passes it through.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    Template,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from .errors import TemplateLoadError


class TemplateRenderer:
    """Wraps rendered HTML in a template.

    The template is loaded again for every render, so edits to it are picked
    up by the next conversion.

    Attributes:
        template_path: Template file, or None to write HTML verbatim.
    """

    def __init__(self, template_path: Path | None = None):
        self.template_path = Path(template_path) if template_path else None

    @property
    def enabled(self) -> bool:
        return self.template_path is not None

    def _environment(self) -> Environment:
        # Autoescape is off so ``{{ html }}`` inserts the markup as is.
        return Environment(
            loader=FileSystemLoader(str(self.template_path.parent)),
            autoescape=False,
            cache_size=0,
            auto_reload=True,
            keep_trailing_newline=True,
        )

    def load(self) -> Template:
        """Load and parse the configured template.

        Returns:
            Compiled Jinja2 template.

        Raises:
            TemplateLoadError: The template is missing, unreadable or invalid.
        """
        path = self.template_path
        if path is None:
            raise TemplateLoadError(Path(), "No template configured")
        if not path.is_file():
            raise TemplateLoadError(path, f"Template not found: {path}")
        try:
            return self._environment().get_template(path.name)
        except TemplateSyntaxError as exc:
            raise TemplateLoadError(
                path, f"Template syntax error in {path} line {exc.lineno}: {exc.message}"
            ) from exc
        except TemplateNotFound as exc:
            raise TemplateLoadError(path, f"Template not found: {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateLoadError(path, f"Cannot read template {path}: {exc}") from exc

    def validate(self) -> None:
        """Check that the template loads; no-op without a template."""
        if self.enabled:
            self.load()

    def render(self, html: str) -> str:
        """Render HTML through the template.

        Args:
            html: Converted Markdown.

        Returns:
            The HTML unchanged when no template is configured, otherwise the
            rendered template.

        Raises:
            TemplateLoadError: The template cannot be loaded or rendered.
        """
        if not self.enabled:
            return html
        template = self.load()
        try:
            return template.render(html=html)
        except TemplateError as exc:
            raise TemplateLoadError(
                self.template_path, f"Cannot render template {self.template_path}: {exc}"
            ) from exc
