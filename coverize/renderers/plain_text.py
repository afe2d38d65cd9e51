"""Plain text cover renderer.

WHY: Terminals, logs and quick previews need to show how a title will break
without a browser. This is the simplest renderer and the baseline proof that
the pluggable renderer pattern works.

HOW: Writes one title line per output line, upper-casing emphasized lines
when the emphasis mode includes case. The author follows after a blank line.

RULES:
- Emphasized lines upper-cased for emphasis modes "case" and "both"
- One blank line between the title and the author
- No trailing whitespace; content ends with a single newline
- Output suffix: "-cover.txt"; media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from coverize.core.cover import RenderedCover
from coverize.renderers.base import BaseRenderer, RendererOutput


class PlainTextRenderer(BaseRenderer):
    """Renderer that previews the cover lines as plain text."""

    suffix = "-cover.txt"

    @property
    def name(self) -> str:
        return "Plain Text"

    def render(self, cover: RenderedCover) -> RendererOutput:
        upper = cover.options.get("emphasis") in ("case", "both")
        out = []  # type: List[str]

        for line in cover.title_lines:
            out.append(line.text.upper() if (line.emphasis and upper) else line.text)

        author_lines = cover.author_lines
        if author_lines and out:
            out.append("")
        out.extend(line.text for line in author_lines)

        content = "\n".join(out)
        if content:
            content += "\n"

        return RendererOutput(
            suffix=self.suffix,
            content=content,
            media_type="text/plain",
        )
