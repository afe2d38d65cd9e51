"""HTML cover renderer with the coverize CSS class vocabulary.

WHY: The most common consumer of a generated cover is a web page. This
renderer produces a self-contained HTML fragment whose class names match the
coverize stylesheet, so the page's CSS controls colours of text, fonts and
effects while the typesetting decisions come from the engine.

HOW: Builds the markup as nested divs: the cover root (aspect ratio, size
class, effect data attributes, base font size), a background layer, the
typeset layer with a title block and an author block, and an effects layer.
Emphasis is mapped to classes according to the cover's emphasis mode, and
each line's size factor becomes a calc() against the title or secondary size
CSS variable.

RULES:
- All text and attribute values are HTML-escaped
- Emphasized lines: --bold for "bold"/"both", --uppercase for "case"/"both"
- Lines with size 1 get no inline font-size, except secondary lines which
  always reference --coverize-secondary-size
- The title block gets "has-author" when an author block is present
- Output suffix: "-cover.html"; media type: "text/html"
"""

from __future__ import annotations

from html import escape
from typing import List

from cover_typeset import Line
from coverize.core.cover import RenderedCover
from coverize.renderers.base import BaseRenderer, RendererOutput

_INDENT = "  "


def _line_classes(line: Line, emphasis_mode: str, font: str) -> List[str]:
    """CSS classes for one title line."""
    classes = ["coverize-typeset-line", "coverize-title"]
    if line.emphasis:
        if emphasis_mode in ("bold", "both"):
            classes.append("coverize-line--bold")
        if emphasis_mode in ("case", "both"):
            classes.append("coverize-line--uppercase")
    else:
        classes.append("coverize-line--secondary")
    if font == "serif":
        classes.append("coverize-title-serif")
    return classes


def _line_style(line: Line) -> str:
    """Inline font-size for one title line, or "" when none is needed."""
    if line.emphasis:
        if line.size != 1:
            return "font-size: calc(var(--coverize-title-size) * {});".format(line.size)
        return ""
    if line.size != 1:
        return "font-size: calc(var(--coverize-secondary-size) * {});".format(line.size)
    return "font-size: var(--coverize-secondary-size);"


def _div(classes: List[str], text: str = "", style: str = "", depth: int = 0) -> str:
    attrs = ' class="{}"'.format(escape(" ".join(classes)))
    if style:
        attrs += ' style="{}"'.format(escape(style))
    return "{}<div{}>{}</div>".format(_INDENT * depth, attrs, escape(text))


class HTMLRenderer(BaseRenderer):
    """Renderer that produces an HTML fragment for the cover."""

    suffix = "-cover.html"

    @property
    def name(self) -> str:
        return "HTML"

    def render(self, cover: RenderedCover) -> RendererOutput:
        options = cover.options
        emphasis_mode = options.get("emphasis", "both")
        font = options.get("font", "sans")

        root_attrs = ' class="coverize-cover coverize coverize-size-{}"'.format(
            escape(options.get("size", "regular")))
        root_attrs += ' style="aspect-ratio: {}; font-size: {:.2f}rem;"'.format(
            options.get("ratio", 0.67), cover.font_size_rem)
        for effect in ("realism", "texture", "depth"):
            if cover.effects.get(effect):
                root_attrs += ' data-{}="true"'.format(effect)

        out = ["<div{}>".format(root_attrs)]
        out.extend(self._background(cover))
        out.extend(self._typeset(cover, emphasis_mode, font))
        out.extend(self._effects(cover))
        out.append("</div>")

        return RendererOutput(
            suffix=self.suffix,
            content="\n".join(out) + "\n",
            media_type="text/html",
        )

    def _background(self, cover: RenderedCover) -> List[str]:
        style = escape("background: {};".format(cover.background))
        if not cover.image:
            return ['{}<div class="coverize-background" style="{}"></div>'.format(_INDENT, style)]
        return [
            '{}<div class="coverize-background" style="{}">'.format(_INDENT, style),
            '{}<img class="coverize-image" src="{}">'.format(_INDENT * 2, escape(cover.image)),
            "{}</div>".format(_INDENT),
        ]

    def _typeset(self, cover: RenderedCover, emphasis_mode: str, font: str) -> List[str]:
        title_lines = cover.title_lines
        author_lines = cover.author_lines
        if not title_lines and not author_lines:
            return ['{}<div class="coverize-typeset"></div>'.format(_INDENT)]

        out = ['{}<div class="coverize-typeset">'.format(_INDENT)]

        if title_lines:
            block = ["coverize-title-block", "coverize-text-debossed"]
            if author_lines:
                block.append("has-author")
            out.append('{}<div class="{}">'.format(_INDENT * 2, " ".join(block)))
            for line in title_lines:
                out.append(_div(_line_classes(line, emphasis_mode, font), line.text,
                                _line_style(line), depth=3))
            out.append("{}</div>".format(_INDENT * 2))

        if author_lines:
            out.append('{}<div class="coverize-author-block coverize-text-debossed">'.format(
                _INDENT * 2))
            classes = ["coverize-typeset-line", "coverize-author"]
            if font == "serif":
                classes.append("coverize-author-serif")
            for line in author_lines:
                out.append(_div(classes, line.text, depth=3))
            out.append("{}</div>".format(_INDENT * 2))

        out.append("{}</div>".format(_INDENT))
        return out

    def _effects(self, cover: RenderedCover) -> List[str]:
        layers = []  # type: List[str]
        if cover.effects.get("realism"):
            layers.extend(["coverize-realism", "coverize-spine", "coverize-sheen"])
        if cover.effects.get("texture"):
            layers.append("coverize-texture")
        if cover.effects.get("depth"):
            layers.append("coverize-depth")

        if not layers:
            return ['{}<div class="coverize-effects"></div>'.format(_INDENT)]
        out = ['{}<div class="coverize-effects">'.format(_INDENT)]
        out.extend(_div([layer], depth=2) for layer in layers)
        out.append("{}</div>".format(_INDENT))
        return out
