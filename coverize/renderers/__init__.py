"""Cover renderer registry: pluggable output formats.

WHY: The CLI and the HTTP API need a single lookup to find the right
renderer by name. A central dict makes it trivial to add new formats:
create the renderer class, import it here, add one line.

HOW: RENDERERS maps string keys to renderer *classes* (not instances).
Callers instantiate as needed: ``renderer = RENDERERS["html"]()``, or use
get_renderer() which also validates the key.

RULES:
- Keys are short lowercase identifiers (used in CLI flags and API requests)
- Values are BaseRenderer subclasses (not instances)
- Every renderer listed here must be importable without side effects
"""

from __future__ import annotations

from coverize.renderers.base import BaseRenderer
from coverize.renderers.html import HTMLRenderer
from coverize.renderers.json_cover import JSONRenderer
from coverize.renderers.plain_text import PlainTextRenderer

RENDERERS: dict[str, type[BaseRenderer]] = {
    "html": HTMLRenderer,
    "json": JSONRenderer,
    "text": PlainTextRenderer,
}


def get_renderer(key: str) -> BaseRenderer:
    """Instantiate the renderer registered under `key`.

    Raises:
        ValueError: If no renderer is registered under that key.
    """
    if key not in RENDERERS:
        raise ValueError("Unknown renderer '{}'. Available: {}".format(
            key, ", ".join(sorted(RENDERERS))))
    return RENDERERS[key]()
