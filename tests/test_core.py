"""Unit tests for the typesetting pipeline stages in cover_typeset.core.

WHY: Each stage (scaling, casing, grouping, importance, planning, splitting)
has precise rules that the final layout depends on. Testing them in isolation
pins down the exact constants and tie-breaking behaviour.

HOW: Each test class exercises one stage with hand-computed expectations.

RULES:
- Stage functions are called directly, not through typeset().
- Splitting tests pass an explicit config dict.
"""

import pytest

from cover_typeset import KNOWN_PATTERNS, resolve_config
from cover_typeset.core import (
    analyze_word_importance,
    apply_pattern,
    apply_title_case,
    balance_lines_by_weight,
    determine_line_breaks,
    group_phraselets,
    pattern_key,
    scale_for_length,
    strict_split,
)
from cover_typeset.models import Line


class TestScaleForLength:
    """scale_for_length() piecewise-linear mapping."""

    @pytest.mark.parametrize("length,expected", [
        (0, 1.0),
        (8, 1.0),
        (10, 0.925),
        (12, 0.85),
        (16, 0.675),
        (20, 0.5),
        (25, 0.4),
        (30, 0.3),
        (40, 0.25),
        (50, 0.2),
        (200, 0.2),
    ])
    def test_breakpoints(self, length, expected):
        assert scale_for_length(length) == pytest.approx(expected)

    def test_monotonic_and_bounded(self):
        previous = scale_for_length(0)
        for length in range(0, 120):
            value = scale_for_length(length)
            assert 0.2 <= value <= 1.0
            assert value <= previous + 1e-12
            previous = value


class TestApplyTitleCase:
    """apply_title_case() per-line casing."""

    def test_first_line_capitalizes_leading_minor_word(self):
        assert apply_title_case("the lord", True) == "The Lord"

    def test_minor_words_lowercased_elsewhere(self):
        assert apply_title_case("OF THE", False) == "of the"

    def test_leading_minor_word_on_later_line_stays_lower(self):
        assert apply_title_case("and Unwieldy", False) == "and Unwieldy"

    def test_rest_of_word_lowercased(self):
        assert apply_title_case("mcDONALD", False) == "Mcdonald"

    def test_abbreviations_are_minor(self):
        assert apply_title_case("Apples Vs. Oranges", True) == "Apples vs. Oranges"

    def test_ampersand_untouched(self):
        assert apply_title_case("&", False) == "&"


class TestGroupPhraselets:
    """group_phraselets() merging and hyphen handling."""

    def test_merges_of_the(self):
        assert group_phraselets(["Lord", "of", "the", "Rings"]) == ["Lord", "of the", "Rings"]

    def test_match_is_case_insensitive_and_keeps_casing(self):
        assert group_phraselets(["Of", "The", "Rings"]) == ["Of The", "Rings"]

    def test_ampersand_emitted_alone(self):
        assert group_phraselets(["Tom", "&", "Jerry"]) == ["Tom", "&", "Jerry"]

    def test_single_pass_no_regrouping(self):
        assert group_phraselets(["of", "the", "the", "End"]) == ["of the", "the", "End"]

    def test_pair_at_end(self):
        assert group_phraselets(["Portrait", "of", "a"]) == ["Portrait", "of a"]

    def test_long_hyphenated_word_split(self):
        result = group_phraselets(["Twenty-Thousand-Leagues", "Under"])
        assert result == ["Twenty", "-", "Thousand", "-", "Leagues", "Under"]

    def test_short_hyphenated_word_kept(self):
        assert group_phraselets(["Well-Known", "Tales"]) == ["Well-Known", "Tales"]

    def test_hyphenated_word_of_exactly_twelve_kept(self):
        assert group_phraselets(["Night-Timers", "Go"]) == ["Night-Timers", "Go"]


class TestAnalyzeWordImportance:
    """analyze_word_importance() classification and weights."""

    def test_gatsby_pattern_and_weights(self):
        tokens = analyze_word_importance(["The", "Great", "Gatsby"])
        assert [t.is_secondary for t in tokens] == [True, False, False]
        assert [t.index for t in tokens] == [0, 1, 2]
        assert tokens[0].weight == pytest.approx(3 * 0.6 * 1.2)
        assert tokens[1].weight == pytest.approx(5 * 1.2)
        assert tokens[2].weight == pytest.approx(6 * 1.2)

    def test_last_token_forced_primary(self):
        tokens = analyze_word_importance(["Gone", "with the"])
        assert tokens[1].is_secondary is False
        assert tokens[1].weight == pytest.approx(8.0)

    def test_phraselet_secondary_only_if_all_parts_are(self):
        tokens = analyze_word_importance(["of the", "of Mice", "End"])
        assert tokens[0].is_secondary is True
        assert tokens[1].is_secondary is False

    def test_text_preserved(self):
        words = ["Harry", "Potter", "and the", "Chamber", "of", "Secrets"]
        tokens = analyze_word_importance(words)
        assert " ".join(t.text for t in tokens) == " ".join(words)
        assert all(t.weight >= 0 for t in tokens)


class TestDetermineLineBreaks:
    """determine_line_breaks() pattern table, override and fallback."""

    def test_pattern_key(self):
        tokens = analyze_word_importance(["The", "Great", "Gatsby"])
        assert pattern_key(tokens) == "SPP"

    def test_two_primary_words_get_one_line_each(self):
        lines = determine_line_breaks(analyze_word_importance(["Moby", "Dick"]))
        assert [(l.text, l.emphasis) for l in lines] == [("Moby", True), ("Dick", True)]

    def test_pp_override_diverges_from_table_entry(self):
        """The table's "PP" entry keeps both words together; the two-token
        override takes precedence over it in determine_line_breaks()."""
        table_lines = apply_pattern(KNOWN_PATTERNS["PP"], ["Moby", "Dick"])
        assert [l.text for l in table_lines] == ["Moby Dick"]

    def test_known_pattern_pssp(self):
        lines = determine_line_breaks(analyze_word_importance(["War", "and", "or", "Peace"]))
        assert [(l.text, l.emphasis) for l in lines] == [
            ("War", True), ("and or", False), ("Peace", True),
        ]

    def test_known_pattern_pppp_groups_middle(self):
        words = ["Brave", "Dangerous", "Wonderful", "World"]
        lines = determine_line_breaks(analyze_word_importance(words))
        assert [l.text for l in lines] == ["Brave", "Dangerous Wonderful", "World"]
        assert all(l.emphasis for l in lines)

    def test_unknown_short_pattern_uses_fallback(self):
        tokens = analyze_word_importance(["Tale", "of", "Two", "Cities"])
        assert pattern_key(tokens) == "PSPP"
        assert "PSPP" not in KNOWN_PATTERNS
        lines = determine_line_breaks(tokens)
        assert [(l.text, l.emphasis) for l in lines] == [
            ("Tale", True), ("of", False), ("Two Cities", True),
        ]

    def test_long_pattern_fallback_runs(self):
        words = ["Harry", "Potter", "and the", "Chamber", "of", "Secrets"]
        lines = determine_line_breaks(analyze_word_importance(words))
        assert [(l.text, l.emphasis) for l in lines] == [
            ("Harry Potter", True),
            ("and the", False),
            ("Chamber", True),
            ("of", False),
            ("Secrets", True),
        ]

    def test_balance_empty(self):
        assert balance_lines_by_weight([]) == []


class TestStrictSplit:
    """strict_split() recursive splitting and sizing."""

    def test_secondary_line_passes_through(self, config):
        lines = strict_split(Line("and the whole wide world of", False), config)
        assert lines == [Line("and the whole wide world of", False, None, 1.0)]

    def test_short_emphasized_line_scaled(self, config):
        lines = strict_split(Line("Harry Potter", True), config)
        assert len(lines) == 1
        assert lines[0].size == pytest.approx(0.85)

    def test_single_long_word_not_split(self, config):
        lines = strict_split(Line("Supercalifragilistic", True), config)
        assert [l.text for l in lines] == ["Supercalifragilistic"]
        assert lines[0].size == pytest.approx(0.5)

    def test_long_group_split_recursively(self, config):
        lines = strict_split(Line("Extraordinarily Long And Unwieldy Title", True), config)
        assert [l.text for l in lines] == ["Extraordinarily", "Long", "And Unwieldy", "Title"]
        assert [l.size for l in lines] == pytest.approx([0.71875, 1.0, 0.85, 1.0])
        assert all(l.emphasis for l in lines)

    def test_edge_penalty_avoids_single_word_fragment(self, config):
        lines = strict_split(Line("And Unwieldy Title", True), config)
        assert [l.text for l in lines] == ["And Unwieldy", "Title"]

    def test_tie_goes_to_leftmost_split(self):
        config = resolve_config({"max_line_length": 5})
        lines = strict_split(Line("Ab Cd Ef", True), config)
        assert [l.text for l in lines] == ["Ab", "Cd Ef"]

    def test_edge_weight_changes_split(self, config):
        # Scores: split after word 1 = 4 + edge, after word 2 = 6.
        line = Line("Abcdef Ghij Kl Mn", True)
        assert [l.text for l in strict_split(line, config)] == ["Abcdef Ghij", "Kl Mn"]

        no_edge = resolve_config({"weights": {"edge_split": 0.0}})
        assert [l.text for l in strict_split(line, no_edge)] == ["Abcdef", "Ghij Kl Mn"]

    def test_balance_weight_changes_split(self, config):
        # Scores: after word 1 = 4 + 4 * balance, after word 2 = 6 * balance.
        line = Line("Abcdef Ghij Kl Mn", True)
        assert [l.text for l in strict_split(line, config)] == ["Abcdef Ghij", "Kl Mn"]

        heavy_balance = resolve_config({"weights": {"balance": 3.0}})
        assert [l.text for l in strict_split(line, heavy_balance)] == ["Abcdef", "Ghij Kl Mn"]

    def test_overflow_weight_changes_split(self):
        # max 10: after word 1 = 4 + 4 (no overflow), after word 2 = overflow + 6.
        line = Line("Abcdef Ghij Kl Mn", True)
        strict_overflow = resolve_config({"max_line_length": 10, "weights": {"overflow": 3.0}})
        assert [l.text for l in strict_split(line, strict_overflow)] == ["Abcdef", "Ghij Kl Mn"]

        no_overflow = resolve_config({"max_line_length": 10, "weights": {"overflow": 0.0}})
        assert [l.text for l in strict_split(line, no_overflow)] == ["Abcdef", "Ghij", "Kl Mn"]
