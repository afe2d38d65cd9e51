"""Title typesetting engine for generated book covers.

WHY: A cover needs its title broken into a few balanced, emphasized lines and
its author set apart below. This package turns a raw (title, author) pair into
an ordered list of display lines that any renderer (HTML, JSON, plain text)
can paint, without knowing anything about the rendering surface.

HOW: The single public entry point is typeset(title, author). It validates the
arguments, resolves the config dict, runs the title pipeline from core.py,
title-cases each finished line and appends the author line.

RULES:
- typeset() is the ONLY public API for producing cover lines.
- Both arguments must be str; anything else raises TypeError.
- Output order: title lines top to bottom, then the author line.
- Never mutate the preset constants; copies are made internally.
- Pure and deterministic: same input, same output, no shared state.
"""

import copy
from typing import Dict, List, Optional

from .models import Line, Token
from .presets import (
    COMMON_PHRASELETS,
    KNOWN_PATTERNS,
    SECONDARY_WORDS,
    TYPESET_DEFAULTS,
)
from .core import (
    analyze_word_importance,
    apply_title_case,
    determine_line_breaks,
    group_phraselets,
    scale_for_length,
    strict_split,
    typeset_title,
)

__all__ = [
    "typeset",
    "resolve_config",
    "scale_for_length",
    "apply_title_case",
    "group_phraselets",
    "analyze_word_importance",
    "determine_line_breaks",
    "strict_split",
    "Line",
    "Token",
    "SECONDARY_WORDS",
    "COMMON_PHRASELETS",
    "KNOWN_PATTERNS",
    "TYPESET_DEFAULTS",
]

AUTHOR_ROLE = "author"


def resolve_config(config: Optional[Dict] = None) -> Dict:
    """Return a private copy of TYPESET_DEFAULTS overlaid with `config`.

    Top-level keys replace the defaults; the nested "weights" dict is merged
    key by key so a caller can tune a single weight. Unknown keys are kept
    but ignored by the engine.
    """
    cfg = copy.deepcopy(TYPESET_DEFAULTS)
    if not config:
        return cfg

    overrides = copy.deepcopy(config)
    weights = overrides.pop("weights", None)
    cfg.update(overrides)
    if weights:
        cfg["weights"].update(weights)
    return cfg


def typeset(title: str, author: str, config: Optional[Dict] = None) -> List[Line]:
    """Typeset a book title and author into display lines.

    WHY: This is the single public entry point of the engine. Renderers, the
    CLI and the HTTP API call it instead of reaching into core.py.

    HOW: Handles the empty-input edge cases, runs typeset_title() on the
    title, title-cases each line (first line keeps a leading minor word
    capitalized) and appends the author line untouched.

    RULES:
    - Both empty → [].
    - Empty title → only the author line.
    - Author line: emphasis False, role "author", size 1.0, text unchanged.

    Args:
        title: Raw book title; words are separated by single spaces.
        author: Raw author string; may be empty.
        config: Optional overrides for TYPESET_DEFAULTS.

    Returns:
        Ordered list of Line objects.

    Raises:
        TypeError: If title or author is not a string.
    """
    if not isinstance(title, str):
        raise TypeError("title must be a string, got {}".format(type(title).__name__))
    if not isinstance(author, str):
        raise TypeError("author must be a string, got {}".format(type(author).__name__))

    if not title and not author:
        return []

    lines = []  # type: List[Line]
    if title:
        cfg = resolve_config(config)
        for index, line in enumerate(typeset_title(title, cfg)):
            lines.append(Line(
                text=apply_title_case(line.text, index == 0),
                emphasis=line.emphasis,
                role=line.role,
                size=line.size,
            ))

    if author:
        lines.append(Line(text=author, emphasis=False, role=AUTHOR_ROLE, size=1.0))

    return lines
