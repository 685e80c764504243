"""
Unit Tests for Single-Answer Matching

Tests for matches() and within_word_limit().
"""

import pytest

from ielts_grading.matching.matcher import matches, within_word_limit


class TestMatches:
    """Tests for matches()."""

    # ─────────────────────────────────────────────────────────────────────────
    # Case policy
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("text", ["Carbon Dioxide", "carbon dioxide", "CARBON DIOXIDE", "cArBoN dIoXiDe"])
    def test_matches_when_case_insensitive_then_ignores_case(self, text):
        assert matches(text, "carbon dioxide", [], False)
        assert matches(text, text.swapcase(), [], False)

    def test_matches_when_case_sensitive_then_case_matters(self):
        assert not matches("AB", "ab", [], True)

    def test_matches_when_case_sensitive_then_whitespace_still_collapsed(self):
        assert matches("  New   York ", "New York", [], True)

    # ─────────────────────────────────────────────────────────────────────────
    # Variants
    # ─────────────────────────────────────────────────────────────────────────

    def test_matches_when_variant_matches_then_true(self):
        assert matches("19", "nineteen", ["19", "Nineteen"], False)

    def test_matches_when_variant_differs_in_case_then_true(self):
        assert matches("NINETEEN", "nineteen", ["19"], False)

    def test_matches_when_no_candidate_matches_then_false(self):
        assert not matches("twenty", "nineteen", ["19"], False)

    def test_matches_when_variants_is_tuple_then_accepted(self):
        assert matches("XIX", "nineteen", ("19", "xix"), False)

    # ─────────────────────────────────────────────────────────────────────────
    # Word order
    # ─────────────────────────────────────────────────────────────────────────

    def test_matches_when_reordered_and_not_strict_then_true(self):
        assert matches("dioxide carbon", "carbon dioxide", [], False, strict_word_order=False)

    def test_matches_when_reordered_and_strict_then_false(self):
        assert not matches("dioxide carbon", "carbon dioxide", [], False, strict_word_order=True)

    def test_matches_when_reordered_and_default_then_strict(self):
        assert not matches("dioxide carbon", "carbon dioxide", [], False)

    def test_matches_when_duplicate_word_extra_then_false(self):
        """Word multisets must be the same size."""
        assert not matches("the the cat", "the cat", [], False, False)

    def test_matches_when_duplicate_words_equal_then_true(self):
        assert matches("the the", "the the", [], False, False)

    def test_matches_when_reordered_variant_then_true(self):
        assert matches("levels co2", "carbon dioxide levels", ["CO2 levels"], False, strict_word_order=False)

    # ─────────────────────────────────────────────────────────────────────────
    # Empty input
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("strict", [True, False])
    def test_matches_when_both_empty_then_true(self, strict):
        assert matches("", "", [], False, strict_word_order=strict)

    @pytest.mark.parametrize("strict", [True, False])
    def test_matches_when_student_empty_then_false(self, strict):
        assert not matches("   ", "nineteen", [], False, strict_word_order=strict)


class TestWithinWordLimit:
    """Tests for within_word_limit()."""

    def test_limit_when_under_then_true(self):
        assert within_word_limit("the industrial revolution", 3)

    def test_limit_when_over_then_false(self):
        assert not within_word_limit("the first industrial revolution", 3)

    def test_limit_when_extra_whitespace_then_not_counted(self):
        assert within_word_limit("  the\t\tindustrial \n revolution  ", 3)

    def test_limit_when_empty_then_passes(self):
        assert within_word_limit("", 0)
        assert within_word_limit("   ", 1)

    def test_limit_when_negative_then_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            within_word_limit("word", -1)
