"""
Jinja2 Template Engine for CSS Generation

Provides centralized template loading and rendering for the CSS snippets
produced by this package.

Usage:
    from responsive_controls.template_engine import render_template

    css = render_template("media_rule.css.j2", query="(min-width: 1025px)",
                          selector=".header", declarations=[("position", "sticky")])
"""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


class TemplateEngine:
    """
    Centralized template engine.
    """

    def __init__(self, template_dir: Path | str | None = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing templates (default: responsive_controls/templates)
        """
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.template_dir = Path(template_dir)

        # CSS templates are not escaped; HTML/XML ones would be
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template with given context.

        Args:
            template_name: Name of template file (relative to templates dir)
            **context: Template variables

        Returns:
            Rendered string
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


_engine: TemplateEngine | None = None


def get_template_engine() -> TemplateEngine:
    """
    Get the global template engine instance (singleton pattern).

    Returns:
        TemplateEngine: The template engine
    """
    global _engine
    if _engine is None:
        _engine = TemplateEngine()
    return _engine


def render_template(template_name: str, **context: Any) -> str:
    """Convenience function to render a template with the global engine."""
    return get_template_engine().render(template_name, **context)
