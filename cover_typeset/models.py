"""Data models for the cover typesetting engine.

WHY: The typesetting pipeline passes words through several stages (grouping,
importance analysis, line planning, splitting), and every stage needs to agree
on what a token and a finished line look like. Two small dataclasses are the
shared vocabulary between the engine and its rendering callers.

HOW: Token is the analyzer's view of one layout unit (a word or a merged
phraselet). Line is what the engine hands to a renderer: the text, whether it
is emphasized, an optional role ("author") and a relative size factor.

RULES:
- Token.text is never modified after grouping; joining all token texts with
  single spaces reproduces the grouped word sequence exactly.
- Token.weight is non-negative.
- Line.size is a multiplicative factor in [0.2, 1.0].
- Line.role is None for title lines and "author" for the author line.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Token:
    """One layout unit produced by the word importance analyzer.

    Attributes:
        text: The word or phraselet text ("of the" counts as one token).
        is_secondary: True for minor words (articles, short prepositions...).
            Always False for the last token of a title.
        index: Position of the token in the grouped sequence.
        weight: Visual weight used by the fallback balancer.
    """
    text: str
    is_secondary: bool
    index: int
    weight: float


@dataclass
class Line:
    """A single display line on the cover.

    Attributes:
        text: Final line text (title-cased for title lines).
        emphasis: True if the line comes from a primary group.
        role: "author" for the author line, None for title lines.
        size: Font scale factor relative to the base size.
    """
    text: str
    emphasis: bool
    role: Optional[str] = None
    size: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form, used by the JSON renderer and the HTTP API."""
        return {
            "text": self.text,
            "emphasis": self.emphasis,
            "role": self.role,
            "size": self.size,
        }
