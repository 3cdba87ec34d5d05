"""
CSS Media Rules

Wraps a synthesized media query and a block of declarations into an
``@media`` rule. An empty query means the option is enabled nowhere, so no
rule is produced.
"""

from collections.abc import Iterable, Mapping

from ..core.logging_config import get_logger
from ..template_engine import render_template
from .responsive import ResponsiveOptions

logger = get_logger(__name__)

MEDIA_RULE_TEMPLATE = "media_rule.css.j2"


def _declaration_pairs(declarations: Mapping[str, str] | Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    if isinstance(declarations, Mapping):
        return [(str(prop), str(value)) for prop, value in declarations.items()]
    return [(str(prop), str(value)) for prop, value in declarations]


def render_media_rule(
    query: str,
    selector: str,
    declarations: Mapping[str, str] | Iterable[tuple[str, str]],
) -> str:
    """
    Render an ``@media`` rule for one selector.

    Args:
        query: Media query from get_media_query_string()
        selector: CSS selector the declarations apply to
        declarations: Property/value pairs, as a mapping or a list of tuples

    Returns:
        CSS text, or "" when the query is empty

    Raises:
        ValueError: If selector is empty

    Example:
        render_media_rule("(min-width: 1025px)", ".header", {"position": "sticky"})
        # @media (min-width: 1025px) {
        #   .header {
        #     position: sticky;
        #   }
        # }
    """
    if not selector or not selector.strip():
        raise ValueError("selector cannot be empty")
    if not query:
        logger.debug("Empty media query, skipping rule", extra={"extra_fields": {"selector": selector}})
        return ""

    return render_template(
        MEDIA_RULE_TEMPLATE,
        query=query,
        selector=selector.strip(),
        declarations=_declaration_pairs(declarations),
    )


def render_responsive_rule(
    options: ResponsiveOptions,
    option_name: str,
    selector: str,
    declarations: Mapping[str, str] | Iterable[tuple[str, str]],
    suffix: str = "",
) -> str:
    """Resolve a responsive option and render its ``@media`` rule."""
    return render_media_rule(options.get_media_query_string(option_name, suffix), selector, declarations)
