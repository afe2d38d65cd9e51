"""Core typesetting logic: grouping, importance, line breaking and scaling.

WHY: A book title has to be broken into a few short, visually balanced lines
before it can be painted onto a cover. Minor words ("of the", "and") read best
on their own small lines between the emphasized words, and long emphasized
runs need to be split and scaled down so they fit the cover width.

HOW: The title pipeline has five stages:
  1. group_phraselets() merges fixed word pairs ("of the") into one token and
     breaks long hyphenated compounds apart.
  2. analyze_word_importance() classifies each token as primary/secondary
     and assigns a visual weight.
  3. determine_line_breaks() maps the P/S pattern to line groups using the
     KNOWN_PATTERNS table, falling back to same-class runs.
  4. strict_split() recursively splits emphasized lines that exceed the
     character budget, choosing the lowest-cost word boundary.
  5. scale_for_length() gives every line a font scale factor from its length.
typeset_title() runs stages 1-4; the public typeset() in the package root adds
title casing and the author line.

RULES:
- ALL functions that depend on limits or weights take an explicit `config`
  dict, with no global state, so concurrent calls with different configs are safe.
- Words are split on single spaces only; no hyphenation dictionary.
- Word text is never dropped or duplicated, only regrouped and re-cased.
- Author lines never pass through this module's splitting or casing.
"""

import re
from typing import Dict, List, Sequence

from .models import Line, Token
from .presets import (
    COMMON_PHRASELETS,
    HYPHEN_SPLIT_MIN_LENGTH,
    KNOWN_PATTERNS,
    SECONDARY_WORDS,
)

UPPER_RE = re.compile(r"[A-Z]")


# =============================================================================
# Scaling and Casing
# =============================================================================

def scale_for_length(length: int) -> float:
    """Map a line's character length to a font scale factor in [0.2, 1.0].

    Piecewise linear and continuous at the breakpoints 8, 12, 20 and 30.
    Short lines keep full size; anything past 30 characters decays slowly
    towards the 0.2 floor.
    """
    if length <= 8:
        return 1.0
    if length <= 12:
        return 1.0 - ((length - 8) / 4) * 0.15
    if length <= 20:
        return 0.85 - ((length - 12) / 8) * 0.35
    if length <= 30:
        return 0.5 - ((length - 20) / 10) * 0.2
    return max(0.2, 0.3 - ((length - 30) / 20) * 0.1)


def is_secondary_word(word: str) -> bool:
    """True if the word is in the minor-word lexicon (case-insensitive)."""
    return word.lower() in SECONDARY_WORDS


def apply_title_case(text: str, is_first_line: bool) -> str:
    """Title-case one finished line.

    WHY: Casing is decided per line after breaking, so a minor word that ends
    up starting a lower line stays lowercase, while the very first word of the
    title is always capitalized.

    RULES:
    - Secondary words are lowercased, except word 0 of the first line.
    - Every other word: first character upper, rest lower.
    - Splits and rejoins on single spaces, so spacing is preserved.
    """
    words = text.split(" ")
    cased = []
    for i, word in enumerate(words):
        if is_secondary_word(word) and not (i == 0 and is_first_line):
            cased.append(word.lower())
        else:
            cased.append(word[:1].upper() + word[1:].lower())
    return " ".join(cased)


# =============================================================================
# Grouping and Importance
# =============================================================================

def _split_long_hyphenated(words: Sequence[str]) -> List[str]:
    """Break long hyphenated words into parts with "-" tokens between them."""
    result = []  # type: List[str]
    for word in words:
        if "-" in word and len(word) > HYPHEN_SPLIT_MIN_LENGTH:
            parts = word.split("-")
            for i, part in enumerate(parts):
                result.append(part)
                if i < len(parts) - 1:
                    result.append("-")
        else:
            result.append(word)
    return result


def group_phraselets(words: Sequence[str]) -> List[str]:
    """Merge common word pairs into single tokens.

    WHY: "of the" or "in a" should never be broken across two lines, and as a
    unit they read as one secondary line between the emphasized words.

    HOW: After splitting long hyphenated compounds, a single greedy pass walks
    the words left to right. "&" is always emitted alone. At every other
    position the first pair in COMMON_PHRASELETS that matches
    (case-insensitively) is consumed as one space-joined token; otherwise the
    word is emitted unchanged.

    RULES:
    - First match in declaration order wins, not the longest match.
    - No backtracking; merged tokens are never regrouped.
    - Original word casing is kept in the merged token.

    Args:
        words: Title words, already split on single spaces.

    Returns:
        Grouped tokens in order.
    """
    processed = _split_long_hyphenated(words)
    result = []  # type: List[str]
    i = 0

    while i < len(processed):
        if processed[i] == "&":
            result.append(processed[i])
            i += 1
            continue

        match = None
        for phraselet in COMMON_PHRASELETS:
            end = i + len(phraselet)
            if end <= len(processed) and all(
                part == processed[i + j].lower() for j, part in enumerate(phraselet)
            ):
                match = phraselet
                break

        if match:
            result.append(" ".join(processed[i:i + len(match)]))
            i += len(match)
        else:
            result.append(processed[i])
            i += 1

    return result


def analyze_word_importance(words: Sequence[str]) -> List[Token]:
    """Classify grouped tokens as primary or secondary and weigh them.

    RULES:
    - A multi-word token is secondary only if every part is secondary.
    - The last token is always primary, so a title never ends on a small line.
    - weight = len * (0.6 if secondary) * (1.2 if it has an uppercase letter).
    """
    tokens = []  # type: List[Token]
    last_index = len(words) - 1

    for index, word in enumerate(words):
        naturally_secondary = all(is_secondary_word(part) for part in word.split(" "))
        is_secondary = naturally_secondary and index != last_index

        weight = float(len(word))
        if is_secondary:
            weight *= 0.6
        if UPPER_RE.search(word):
            weight *= 1.2

        tokens.append(Token(text=word, is_secondary=is_secondary, index=index, weight=weight))

    return tokens


# =============================================================================
# Line Breaking
# =============================================================================

def pattern_key(tokens: Sequence[Token]) -> str:
    """Build the P/S pattern key for a token sequence, e.g. "SPP"."""
    return "".join("S" if t.is_secondary else "P" for t in tokens)


def apply_pattern(template: Sequence[Sequence[str]], words: Sequence[str]) -> List[Line]:
    """Lay out words according to a KNOWN_PATTERNS template.

    Each group consumes len(group) words; a group is emphasized when its
    first letter is "P".
    """
    lines = []  # type: List[Line]
    word_index = 0

    for group in template:
        group_words = words[word_index:word_index + len(group)]
        word_index += len(group)
        lines.append(Line(text=" ".join(group_words), emphasis=group[0] == "P"))

    return lines


def balance_lines_by_weight(tokens: Sequence[Token]) -> List[Line]:
    """Fallback layout: one line per maximal run of same-class tokens.

    Used for patterns the table does not know (longer titles or unusual
    sequences). No length budget is applied here; strict_split() handles
    overlong emphasized runs afterwards.
    """
    if not tokens:
        return []

    groups = []  # type: List[List[Token]]
    current = [tokens[0]]

    for token in tokens[1:]:
        if token.is_secondary == current[0].is_secondary:
            current.append(token)
        else:
            groups.append(current)
            current = [token]
    groups.append(current)

    return [
        Line(text=" ".join(t.text for t in group), emphasis=not group[0].is_secondary)
        for group in groups
    ]


def determine_line_breaks(tokens: Sequence[Token]) -> List[Line]:
    """Plan title lines from analyzed tokens.

    HOW:
      1. Two primary tokens ("PP") always go on separate lines. This overrides
         the table's "PP" entry, which would keep them together.
      2. A pattern key found in KNOWN_PATTERNS uses its template.
      3. Anything else falls back to balance_lines_by_weight().

    Returns:
        Lines with text and emphasis set; size is filled in by strict_split().
    """
    key = pattern_key(tokens)
    words = [t.text for t in tokens]

    if len(words) == 2 and key == "PP":
        return [Line(text=word, emphasis=True) for word in words]

    template = KNOWN_PATTERNS.get(key)
    if template is not None:
        return apply_pattern(template, words)

    return balance_lines_by_weight(tokens)


# =============================================================================
# Strict Splitting
# =============================================================================

def _score_split(left: str, right: str, index: int, word_count: int, config: Dict) -> float:
    """Score one candidate split point; lower is better."""
    w = config["weights"]
    max_len = config["max_line_length"]
    score = 0.0

    # Overflow beyond the line budget
    if len(left) > max_len:
        score += w["overflow"] * (len(left) - max_len)
    if len(right) > max_len:
        score += w["overflow"] * (len(right) - max_len)

    # Avoid stranding a single word at either edge
    if word_count > 2 and index == 1:
        score += w["edge_split"]
    if word_count > 2 and index == word_count - 1:
        score += w["edge_split"]

    # Balance
    score += w["balance"] * abs(len(left) - len(right))

    return score


def strict_split(line: Line, config: Dict) -> List[Line]:
    """Recursively split an overlong emphasized line and size the results.

    WHY: Emphasized lines are set large, so anything past the character budget
    would overflow the cover. Splitting at the best word boundary and then
    scaling each piece keeps lines readable without shrinking them all.

    HOW: Secondary lines pass through at size 1.0. An emphasized line within
    config["max_line_length"], or consisting of one word, is sized with
    scale_for_length(). Otherwise every interior word boundary is scored
    (overflow, edge penalty, balance) and the first lowest-scoring split is
    taken; both halves are split again recursively.

    RULES:
    - Single long words are never broken, only scaled down.
    - Ties go to the leftmost split point.
    - Each recursive call has strictly fewer words, so recursion terminates.

    Args:
        line: A planned line (text and emphasis).
        config: Configuration dict with max_line_length and weights.

    Returns:
        One or more lines in reading order, each with its size set.
    """
    if not line.emphasis:
        return [Line(text=line.text, emphasis=False, role=line.role, size=1.0)]

    if len(line.text) <= config["max_line_length"]:
        return [Line(text=line.text, emphasis=True, role=line.role,
                     size=scale_for_length(len(line.text)))]

    words = line.text.split(" ")
    if len(words) == 1:
        return [Line(text=line.text, emphasis=True, role=line.role,
                     size=scale_for_length(len(line.text)))]

    best_split = 1
    best_score = float("inf")

    for i in range(1, len(words)):
        left = " ".join(words[:i])
        right = " ".join(words[i:])
        score = _score_split(left, right, i, len(words), config)
        if score < best_score:
            best_score = score
            best_split = i

    left_line = Line(text=" ".join(words[:best_split]), emphasis=True, role=line.role)
    right_line = Line(text=" ".join(words[best_split:]), emphasis=True, role=line.role)

    return strict_split(left_line, config) + strict_split(right_line, config)


# =============================================================================
# Title Pipeline
# =============================================================================

def typeset_title(title: str, config: Dict) -> List[Line]:
    """Turn a non-empty title into sized, uncased title lines.

    A single-word title skips grouping and planning: it becomes one emphasized
    line scaled by its length. Longer titles run the full pipeline.
    """
    words = title.split(" ")
    if len(words) == 1:
        return [Line(text=words[0], emphasis=True, size=scale_for_length(len(words[0])))]

    grouped = group_phraselets(words)
    tokens = analyze_word_importance(grouped)
    planned = determine_line_breaks(tokens)

    lines = []  # type: List[Line]
    for line in planned:
        lines.extend(strict_split(line, config))
    return lines
