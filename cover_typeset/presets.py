"""Lexicons, layout patterns and default settings for title typesetting.

WHY: Line breaking decisions depend on a handful of linguistic tables: which
words are "secondary", which word pairs behave as a unit, and how known
primary/secondary sequences should be laid out. Keeping them as plain data
here means they can be reviewed and tuned without touching the algorithm.

HOW: SECONDARY_WORDS is a frozenset of lowercase words. COMMON_PHRASELETS is an
ordered tuple of two-word pairs (order matters: the grouper takes the first
match). KNOWN_PATTERNS maps a P/S pattern key to a tuple of groups; each group
lists one letter per token merged into that line. TYPESET_DEFAULTS is the
config dict passed through the pipeline, following the same shape as a preset:
hard limits at the top level, scoring weights nested under "weights".

RULES:
- Presets are frozen constants; never mutate them at runtime.
- typeset() deep-copies TYPESET_DEFAULTS (or a custom config) before use.
- Only English minor words are listed; other languages are out of scope.
"""

from typing import Dict, FrozenSet, Tuple

SECONDARY_WORDS: FrozenSet[str] = frozenset({
    "a", "an", "the", "and", "but", "or", "for", "nor", "on", "at", "to",
    "from", "by", "in", "of", "with", "as", "is", "are", "was", "were", "be",
    "been", "has", "have", "had", "&", "vs", "vs.", "etc", "etc.", "i.e.",
    "e.g.", "et", "al", "et al", "et al.",
})

# Checked in order; the first matching pair wins.
COMMON_PHRASELETS: Tuple[Tuple[str, ...], ...] = (
    ("of", "the"), ("in", "the"), ("on", "the"), ("to", "the"), ("at", "the"),
    ("by", "the"), ("for", "the"), ("with", "the"), ("from", "the"),
    ("is", "the"), ("was", "the"), ("and", "the"),
    ("of", "a"), ("in", "a"), ("on", "a"), ("to", "a"), ("at", "a"),
    ("by", "a"), ("for", "a"), ("with", "a"),
)

# Pattern key -> line groups. "PP" is overridden for exactly two tokens
# (one word per line), see core.determine_line_breaks().
KNOWN_PATTERNS: Dict[str, Tuple[Tuple[str, ...], ...]] = {
    "PP": (("P", "P"),),
    "SP": (("S",), ("P",)),
    "PS": (("P",), ("S",)),
    "SS": (("S", "S"),),
    "PSP": (("P",), ("S",), ("P",)),
    "PPS": (("P", "P"), ("S",)),
    "SPP": (("S",), ("P",), ("P",)),
    "PPP": (("P",), ("P",), ("P",)),
    "SSP": (("S", "S"), ("P",)),
    "PSS": (("P",), ("S", "S")),
    "SPS": (("S",), ("P",), ("S",)),
    "SSS": (("S", "S"), ("S",)),
    "PSSP": (("P",), ("S", "S"), ("P",)),
    "SPSP": (("S",), ("P",), ("S",), ("P",)),
    "PPPP": (("P",), ("P", "P"), ("P",)),
    "SSPP": (("S", "S"), ("P",), ("P",)),
    "PPSS": (("P",), ("P",), ("S", "S")),
    "SSSS": (("S", "S"), ("S", "S")),
    "PSPSP": (("P",), ("S",), ("P",), ("S",), ("P",)),
    "SSPSP": (("S", "S"), ("P",), ("S",), ("P",)),
    "SPSPP": (("S",), ("P",), ("S",), ("P",), ("P",)),
}

# Words longer than this that contain a hyphen are broken at the hyphens.
HYPHEN_SPLIT_MIN_LENGTH = 12

TYPESET_DEFAULTS: Dict = {
    "max_line_length": 12,
    "weights": {
        "overflow": 2.0,
        "edge_split": 4.0,
        "balance": 1.0,
    },
}
