"""
Unit Tests for Save-Time Normalization

Tests for detect_answer_shape() and normalize_correct_answer_for_save().
"""

import copy

import pytest

from ielts_grading.migration.save import (
    AnswerShape,
    detect_answer_shape,
    normalize_correct_answer_for_save,
)


class TestDetectAnswerShape:
    """Tests for detect_answer_shape()."""

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ({"blanks": {}}, AnswerShape.BLANKS),
            ({"matches": {}}, AnswerShape.MATCHES),
            ({"labels": {}}, AnswerShape.LABELS),
            ({"answers": []}, AnswerShape.ANSWERS),
            ({"answer": "A"}, AnswerShape.ANSWER),
            ({"other": 1}, AnswerShape.UNKNOWN),
            ("TRUE", AnswerShape.UNKNOWN),
            (None, AnswerShape.UNKNOWN),
        ],
    )
    def test_detect_when_payload_then_shape(self, payload, expected):
        assert detect_answer_shape(payload) is expected

    def test_detect_when_several_keys_then_priority_order(self):
        """blanks outranks matches, labels, answers and answer."""
        payload = {"answer": "x", "answers": [], "labels": {}, "matches": {}, "blanks": {}}
        assert detect_answer_shape(payload) is AnswerShape.BLANKS
        del payload["blanks"]
        assert detect_answer_shape(payload) is AnswerShape.MATCHES
        del payload["matches"]
        assert detect_answer_shape(payload) is AnswerShape.LABELS
        del payload["labels"]
        assert detect_answer_shape(payload) is AnswerShape.ANSWERS


class TestNormalizeCorrectAnswerForSave:
    """Tests for normalize_correct_answer_for_save()."""

    def test_normalize_when_none_then_none(self):
        assert normalize_correct_answer_for_save(None) is None

    def test_normalize_when_text_answer_then_collapses_and_keeps_case(self):
        payload = {
            "answer": "  Carbon   Dioxide ",
            "acceptedVariants": [" CO2 ", "carbon dioxide"],
            "strictWordOrder": False,
        }
        assert normalize_correct_answer_for_save(payload) == {
            "answer": "Carbon Dioxide",
            "acceptedVariants": ["CO2", "carbon dioxide"],
            "strictWordOrder": False,
        }

    def test_normalize_when_single_answer_then_trimmed(self):
        assert normalize_correct_answer_for_save({"answer": " TRUE\n"}) == {"answer": "TRUE"}

    def test_normalize_when_multi_answers_then_each_trimmed(self):
        payload = {"answers": [" A ", "C\t"], "maxSelections": 2}
        assert normalize_correct_answer_for_save(payload) == {"answers": ["A", "C"], "maxSelections": 2}

    def test_normalize_when_matches_then_values_trimmed(self):
        payload = {"matches": {"1": " iv ", "2": "ii"}}
        assert normalize_correct_answer_for_save(payload) == {"matches": {"1": "iv", "2": "ii"}}

    def test_normalize_when_structured_blanks_then_recurses(self, note_table_correct):
        note_table_correct["blanks"]["1"]["answer"] = "  carbon   dioxide "
        note_table_correct["blanks"]["3"] = " Tuesday "
        result = normalize_correct_answer_for_save(note_table_correct)
        assert result["blanks"]["1"] == {
            "answer": "carbon dioxide",
            "acceptedVariants": ["CO2"],
            "strictWordOrder": False,
        }
        assert result["blanks"]["3"] == "Tuesday"

    def test_normalize_when_diagram_labels_mixed_then_both_forms(self):
        payload = {"labels": {"A": " valve ", "B": {"answer": " water  tank ", "acceptedVariants": [" tank"]}}}
        result = normalize_correct_answer_for_save(payload)
        assert result == {"labels": {"A": "valve", "B": {"answer": "water tank", "acceptedVariants": ["tank"]}}}

    def test_normalize_when_non_string_values_then_copied(self):
        payload = {"blanks": {"1": None, "2": 3}}
        assert normalize_correct_answer_for_save(payload) == payload

    def test_normalize_when_unknown_shape_then_unchanged(self):
        payload = {"text": "  essay  "}
        assert normalize_correct_answer_for_save(payload) is payload

    def test_normalize_when_not_mapping_then_unchanged(self):
        assert normalize_correct_answer_for_save("  TRUE ") == "  TRUE "

    def test_normalize_when_called_then_input_not_mutated(self, note_table_correct):
        before = copy.deepcopy(note_table_correct)
        normalize_correct_answer_for_save(note_table_correct)
        assert note_table_correct == before

    def test_normalize_when_applied_twice_then_stable(self, diagram_correct):
        once = normalize_correct_answer_for_save(diagram_correct)
        assert normalize_correct_answer_for_save(once) == once
