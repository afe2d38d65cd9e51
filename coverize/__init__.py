"""Coverize: generated book covers from a title and an author.

WHY: Catalogues, reading apps and placeholder listings need a decent-looking
cover for books that have none. Coverize builds one from nothing but the title
and author: the typesetting engine (cover_typeset) lays out the text, and this
package wraps it with colours, effects and output renderers.

HOW: Three-stage pipeline: build (Cover builder with options and presets),
typeset (cover_typeset.typeset), render (pluggable renderers: HTML, JSON,
plain text). The CLI and the HTTP API are thin layers over the same builder.

RULES:
- All renderers consume the same RenderedCover handle
- Adding a new output format = one new renderer module, no core changes
- Typesetting decisions live only in cover_typeset
"""

__version__ = "0.1.0"
