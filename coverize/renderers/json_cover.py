"""JSON cover renderer.

WHY: Native apps and canvas-based renderers want the layout decisions as data
rather than HTML. The JSON form carries everything needed to paint the cover:
lines with emphasis and size, the background, options and base font size.

HOW: Serializes the RenderedCover into a dict and dumps it with indentation.
The structure is described by schemas/cover.schema.json.

RULES:
- Output is validated against coverize/schemas/cover.schema.json before
  it is returned
- Lines keep engine order: title lines first, author last
- "role" is null for title lines
- Output suffix: "-cover.json"; media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

from coverize.core.cover import RenderedCover
from coverize.renderers.base import BaseRenderer, RendererOutput

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "cover.schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the cover layout JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def cover_to_dict(cover: RenderedCover) -> Dict[str, Any]:
    """Convert a RenderedCover into a JSON-serializable dict."""
    return {
        "title": cover.title,
        "author": cover.author,
        "background": cover.background,
        "colors": list(cover.colors),
        "image": cover.image,
        "effects": dict(cover.effects),
        "options": dict(cover.options),
        "width": cover.width,
        "font_size_rem": cover.font_size_rem,
        "lines": [line.to_dict() for line in cover.lines],
    }


class JSONRenderer(BaseRenderer):
    """Renderer that produces the cover layout as JSON."""

    suffix = "-cover.json"

    @property
    def name(self) -> str:
        return "JSON"

    def render(self, cover: RenderedCover) -> RendererOutput:
        """Serialize the cover and validate it against the layout schema.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not match
                schemas/cover.schema.json.
            ValueError: If a number in the cover is NaN or infinite.
        """
        data = cover_to_dict(cover)
        jsonschema.validate(instance=data, schema=_get_schema())

        content = json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
        return RendererOutput(
            suffix=self.suffix,
            content=content + "\n",
            media_type="application/json",
        )
