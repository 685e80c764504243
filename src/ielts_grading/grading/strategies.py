"""
Module: grading.strategies

Purpose:
    The six automatic grading strategies. Each takes the student payload,
    the correct payload and the case policy, and returns a GradeResult, or
    None when the correct answer has nothing to grade against.

Key Functions:
    - grade_single_choice(): MCQ single, TFNG, YNNG
    - grade_multi_choice(): MCQ multi-select, order-insensitive
    - grade_text_with_variants(): Free text with accepted variants
    - grade_exact_mapping(): Word-bank blanks and matching, partial credit
    - grade_structured_blanks(): Note/table/flowchart blanks with variants
    - grade_diagram_labels(): Labels that are bare strings or structured

Dependencies:
    - matching: normalization, matches(), mapping tallies
    - migration.legacy: legacy blank upgrade
    - core.models: StructuredBlank, GradeResult

Used By:
    - grading.dispatcher
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional

from ielts_grading.core.models.answers import StructuredBlank, parse_text_value
from ielts_grading.core.models.results import GradeResult
from ielts_grading.matching.mapping import score_mapping, tally_keys
from ielts_grading.matching.matcher import matches
from ielts_grading.matching.normalize import normalize_for_policy
from ielts_grading.migration.legacy import migrate_legacy_text_map


class UngradableAnswerError(ValueError):
    """Raised when a payload cannot be graded automatically."""


# ─────────────────────────────────────────────────────────────────────────────
# Payload accessors
# ─────────────────────────────────────────────────────────────────────────────

def _optional_text(payload: Mapping[str, Any], key: str) -> str:
    """Student text field; absent means unanswered."""
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise UngradableAnswerError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _required_text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise UngradableAnswerError(f"Correct answer has no {key!r} text")
    return value


def _text_list(payload: Mapping[str, Any], key: str) -> list[str]:
    values = payload.get(key)
    if values is None:
        return []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise UngradableAnswerError(f"{key!r} must be a list of strings")
    return values


def _student_map(payload: Mapping[str, Any], field: str) -> Dict[str, str]:
    """Student key -> text map; unanswered keys are simply absent."""
    values = payload.get(field)
    if values is None:
        return {}
    if not isinstance(values, Mapping):
        raise UngradableAnswerError(f"Student {field!r} must be an object")
    result: Dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        if not isinstance(value, str):
            raise UngradableAnswerError(f"Student {field}.{key} must be a string")
        result[key] = value
    return result


def _correct_map(payload: Mapping[str, Any], field: str) -> Optional[Mapping[str, Any]]:
    """Correct key map, or None when there is nothing to grade against."""
    values = payload.get(field)
    if values is None:
        return None
    if not isinstance(values, Mapping):
        raise UngradableAnswerError(f"Correct {field!r} must be an object")
    return values or None


def _blank_matches(student_text: Optional[str], blank: StructuredBlank, case_sensitive: bool) -> bool:
    if student_text is None:
        return False
    return matches(
        student_text,
        blank.answer,
        blank.accepted_variants,
        case_sensitive,
        strict_word_order=blank.strict_word_order,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Strategies
# ─────────────────────────────────────────────────────────────────────────────

def grade_single_choice(
    student: Mapping[str, Any],
    correct: Mapping[str, Any],
    case_sensitive: bool,
) -> GradeResult:
    """`{answer}` against `{answer}`, word order strict, no variants."""
    matched = matches(
        _optional_text(student, "answer"),
        _required_text(correct, "answer"),
        (),
        case_sensitive,
        strict_word_order=True,
    )
    return GradeResult.from_match(matched)


def grade_multi_choice(
    student: Mapping[str, Any],
    correct: Mapping[str, Any],
    case_sensitive: bool,
) -> GradeResult:
    """
    `{answers[]}` against `{answers[]}`, selection order ignored.

    Both lists are normalized and sorted, then compared element by element,
    so a missing or extra selection is wrong. `maxSelections` is ignored.
    """
    if not isinstance(correct.get("answers"), list):
        raise UngradableAnswerError("Correct answer has no 'answers' list")
    expected = sorted(normalize_for_policy(a, case_sensitive) for a in _text_list(correct, "answers"))
    given = sorted(normalize_for_policy(a, case_sensitive) for a in _text_list(student, "answers"))
    return GradeResult.from_match(given == expected)


def grade_text_with_variants(
    student: Mapping[str, Any],
    correct: Mapping[str, Any],
    case_sensitive: bool,
    *,
    default_strict_word_order: bool = True,
) -> GradeResult:
    """
    `{answer}` against `{answer, acceptedVariants[], strictWordOrder?}`.

    The payload's `strictWordOrder` wins when present; otherwise
    `default_strict_word_order` applies.
    """
    strict = correct.get("strictWordOrder")
    matched = matches(
        _optional_text(student, "answer"),
        _required_text(correct, "answer"),
        _text_list(correct, "acceptedVariants"),
        case_sensitive,
        strict_word_order=default_strict_word_order if strict is None else bool(strict),
    )
    return GradeResult.from_match(matched)


def grade_exact_mapping(
    student: Mapping[str, Any],
    correct: Mapping[str, Any],
    case_sensitive: bool,
    *,
    field: str,
) -> Optional[GradeResult]:
    """Flat `{field: {key: text}}` maps, one point per correct key."""
    expected = _correct_map(correct, field)
    if expected is None:
        return None
    for key, value in expected.items():
        if not isinstance(value, str):
            raise UngradableAnswerError(f"Correct {field}.{key} must be a string")
    tally = score_mapping(_student_map(student, field), expected, case_sensitive=case_sensitive)
    return GradeResult.from_mapping(tally)


def grade_structured_blanks(
    student: Mapping[str, Any],
    correct: Mapping[str, Any],
    case_sensitive: bool,
    *,
    field: str = "blanks",
) -> Optional[GradeResult]:
    """
    Student text blanks against structured blanks with variants.

    Legacy bare-string blanks are upgraded first, so old and new rows grade
    the same way. Each blank uses its own stored `strictWordOrder`.
    """
    expected = _correct_map(correct, field)
    if expected is None:
        return None
    blanks = migrate_legacy_text_map(expected)
    if len(blanks) != len(expected):
        raise UngradableAnswerError(f"Correct {field!r} contains unreadable blanks")

    given = _student_map(student, field)
    tally = tally_keys(
        blanks,
        lambda key, raw: _blank_matches(given.get(key), StructuredBlank.from_dict(raw), case_sensitive),
    )
    return GradeResult.from_mapping(tally)


def grade_diagram_labels(
    student: Mapping[str, Any],
    correct: Mapping[str, Any],
    case_sensitive: bool,
    *,
    field: str = "labels",
) -> Optional[GradeResult]:
    """
    Student text labels against labels that are each a bare string
    (word-bank mode, plain equality) or a structured blank (free-text mode,
    variants and word-order policy).
    """
    expected = _correct_map(correct, field)
    if expected is None:
        return None
    try:
        labels = {key: parse_text_value(value) for key, value in expected.items()}
    except ValueError as exc:
        raise UngradableAnswerError(str(exc)) from exc

    given = _student_map(student, field)

    def _label_matches(key: str, label: Any) -> bool:
        student_text = given.get(key)
        if isinstance(label, StructuredBlank):
            return _blank_matches(student_text, label, case_sensitive)
        if student_text is None:
            return False
        return normalize_for_policy(student_text, case_sensitive) == normalize_for_policy(label, case_sensitive)

    return GradeResult.from_mapping(tally_keys(labels, _label_matches))
