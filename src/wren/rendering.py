"""Kida rendering seam.

The hierarchy only names candidates; this module is the consumer that
tries them against a kida Environment and renders the first one the
loader can find::

    env = Environment(loader=FileSystemLoader("views"))
    html = render_hierarchy(env, hierarchy, ctx, {"post": post})

Repeated candidates are tried once.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from kida import Environment
from kida.environment.exceptions import TemplateNotFoundError

from wren.context import RequestContext
from wren.errors import TemplateNotResolvedError
from wren.hierarchy import Hierarchy

logger = logging.getLogger("wren.rendering")


def select_template(env: Environment, candidates: Iterable[str]) -> Any:
    """Return the first template in *candidates* that *env* can load.

    Raises:
        TemplateNotResolvedError: If none of the candidates exist.
    """
    tried: list[str] = []
    for name in candidates:
        if not name or name in tried:
            continue
        tried.append(name)
        try:
            template = env.get_template(name)
        except TemplateNotFoundError:
            logger.debug("Template %r not found, trying next candidate", name)
            continue
        logger.debug("Selected template %r", name)
        return template
    raise TemplateNotResolvedError(tuple(tried))


def render_hierarchy(
    env: Environment,
    hierarchy: Hierarchy,
    ctx: RequestContext,
    data: Mapping[str, Any] | None = None,
) -> str:
    """Resolve *ctx* and render the first existing candidate with *data*."""
    template = select_template(env, hierarchy.resolve(ctx))
    return template.render(dict(data or {}))
