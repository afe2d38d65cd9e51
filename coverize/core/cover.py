"""Fluent cover builder and the rendered-cover handle.

WHY: Callers describe a cover incrementally (title, author, colours, effects,
options) and then want a finished, renderable result. The builder collects
that state with validation; render() freezes it into a RenderedCover that
renderers and the API can consume without touching the builder again.

HOW: Cover stores its state in private attributes and returns self from every
setter, so calls chain. render() runs the typesetting engine once and computes
the base font size for the requested width. The RenderedCover handle keeps the
width-dependent font size and exposes resize() to recompute it, replacing the
per-element resize callbacks of a browser implementation.

RULES:
- Option values are validated on every options() call; ValueError on bad input
- An out-of-range colour preset index logs a warning and clears the colours
- Font size = clamp(width / BASE_WIDTH, FONT_SCALE_MIN, FONT_SCALE_MAX)
  * SIZE_MULTIPLIERS[size], rounded to 2 decimals (rem)
- resize() with a non-positive or non-finite width leaves the font size unchanged
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from cover_typeset import Line, typeset
from coverize.config import DEFAULT_WIDTH, load_default_options
from coverize.presets import (
    BASE_WIDTH,
    COLOR_PRESETS,
    DEFAULT_GRADIENT,
    EFFECTS,
    EMPHASIS_MODES,
    FONT_SCALE_MAX,
    FONT_SCALE_MIN,
    FONTS,
    SIZE_MULTIPLIERS,
)

logger = logging.getLogger(__name__)


def compute_font_size(width: float, size: str) -> float:
    """Compute the cover's base font size in rem for a given pixel width.

    RULES:
    - Scales linearly with width relative to BASE_WIDTH
    - Clamped to [FONT_SCALE_MIN, FONT_SCALE_MAX] before the size multiplier
    - Unknown size names use the "regular" multiplier (1.0)
    """
    base = width / BASE_WIDTH
    base = max(FONT_SCALE_MIN, min(FONT_SCALE_MAX, base))
    multiplier = SIZE_MULTIPLIERS.get(size, 1.0)
    return round(base * multiplier, 2)


def background_css(colors: Tuple[str, ...]) -> str:
    """CSS background for a colour list: gradient, flat colour, or default."""
    if len(colors) >= 2:
        return "linear-gradient(165deg, {} -25%, {} 125%)".format(colors[0], colors[1])
    if len(colors) == 1:
        return colors[0]
    return DEFAULT_GRADIENT


def _validate_option(key: str, value: Any) -> None:
    """Raise ValueError if a cover option has an unsupported value."""
    if key == "ratio":
        if (isinstance(value, bool) or not isinstance(value, (int, float))
                or not math.isfinite(value) or value <= 0):
            raise ValueError("Option 'ratio' must be a positive finite number, got {!r}".format(value))
    elif key == "font":
        if value not in FONTS:
            raise ValueError("Unknown font '{}'. Available: {}".format(value, ", ".join(FONTS)))
    elif key == "emphasis":
        if value not in EMPHASIS_MODES:
            raise ValueError("Unknown emphasis mode '{}'. Available: {}".format(
                value, ", ".join(EMPHASIS_MODES)))
    elif key == "size":
        if value not in SIZE_MULTIPLIERS:
            raise ValueError("Unknown size '{}'. Available: {}".format(
                value, ", ".join(SIZE_MULTIPLIERS)))
    else:
        raise ValueError("Unknown cover option '{}'".format(key))


@dataclass
class RenderedCover:
    """A snapshot of a cover, ready for any renderer.

    Attributes:
        title: Raw title as given to the builder.
        author: Raw author as given to the builder.
        lines: Typeset lines from cover_typeset.typeset().
        colors: Zero, one or two CSS colours.
        image: Optional background image URL or path.
        effects: Effect flags (realism, texture, depth).
        options: Cover options (ratio, font, emphasis, size).
        width: Width the font size was last computed for.
        font_size_rem: Base font size in rem for the current width.
    """

    title: str
    author: str
    lines: List[Line]
    colors: Tuple[str, ...] = ()
    image: Optional[str] = None
    effects: Dict[str, bool] = field(default_factory=dict)
    options: Dict[str, Any] = field(default_factory=dict)
    width: float = DEFAULT_WIDTH
    font_size_rem: float = 1.0

    @property
    def background(self) -> str:
        return background_css(self.colors)

    @property
    def title_lines(self) -> List[Line]:
        return [line for line in self.lines if line.role != "author"]

    @property
    def author_lines(self) -> List[Line]:
        return [line for line in self.lines if line.role == "author"]

    def resize(self, width: float) -> float:
        """Recompute the font size for a new width and return it.

        A non-positive width (e.g. a hidden container) or a non-finite one is
        ignored and the previous font size is kept.
        """
        if not width or not math.isfinite(width) or width <= 0:
            return self.font_size_rem
        self.width = width
        self.font_size_rem = compute_font_size(width, self.options.get("size", "regular"))
        return self.font_size_rem


class Cover:
    """Fluent builder for a generated book cover.

    Example:
        handle = (Cover().title("The Great Gatsby").author("F. Scott Fitzgerald")
                  .color(3).effects(realism=True).render(width=300))
    """

    def __init__(self) -> None:
        self._title = ""
        self._author = ""
        self._colors: List[str] = []
        self._image: Optional[str] = None
        self._effects: Dict[str, bool] = {name: False for name in EFFECTS}
        self._options: Dict[str, Any] = {}
        self.options(**load_default_options())

    def title(self, text: str) -> "Cover":
        self._title = text
        return self

    def author(self, text: str) -> "Cover":
        self._author = text
        return self

    def image(self, src: Optional[str]) -> "Cover":
        self._image = src
        return self

    def effects(self, **flags: bool) -> "Cover":
        for name, enabled in flags.items():
            if name not in EFFECTS:
                raise ValueError("Unknown effect '{}'. Available: {}".format(
                    name, ", ".join(EFFECTS)))
            self._effects[name] = bool(enabled)
        return self

    def options(self, **opts: Any) -> "Cover":
        for key, value in opts.items():
            _validate_option(key, value)
        self._options.update(opts)
        return self

    def size(self, name: str) -> "Cover":
        return self.options(size=name)

    def color(
        self,
        first: Union[int, str, None] = None,
        second: Optional[str] = None,
    ) -> "Cover":
        """Set the background colours.

        RULES:
        - An int alone selects a COLOR_PRESETS entry
        - An out-of-range preset logs a warning and clears the colours
        - Two colours make a gradient, one a flat colour, none the default
        """
        if isinstance(first, int) and not isinstance(first, bool) and second is None:
            if 0 <= first < len(COLOR_PRESETS):
                self._colors = list(COLOR_PRESETS[first])
            else:
                logger.warning(
                    "Color preset %s not found. Valid presets are 0-%d.",
                    first, len(COLOR_PRESETS) - 1,
                )
                self._colors = []
        elif second:
            self._colors = [str(first), second]
        elif first:
            self._colors = [str(first)]
        else:
            self._colors = []
        return self

    def background_css(self) -> str:
        return background_css(tuple(self._colors))

    def render(self, width: float = DEFAULT_WIDTH) -> RenderedCover:
        """Typeset the cover and return a RenderedCover handle.

        Raises:
            ValueError: If width is not a positive finite number.
        """
        if not math.isfinite(width) or width <= 0:
            raise ValueError("Cover width must be positive and finite, got {}".format(width))

        lines = typeset(self._title, self._author)
        handle = RenderedCover(
            title=self._title,
            author=self._author,
            lines=lines,
            colors=tuple(self._colors),
            image=self._image,
            effects=dict(self._effects),
            options=dict(self._options),
        )
        handle.resize(width)
        logger.debug("Rendered cover %r with %d lines", self._title, len(lines))
        return handle
