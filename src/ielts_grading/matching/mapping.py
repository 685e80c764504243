"""
Module: matching.mapping

Purpose:
    Partial-credit scoring for answers made of keyed parts: word-bank blanks,
    heading/information/feature/ending matches, and (after variant
    resolution) structured blanks and diagram labels.

Key Functions:
    - score_mapping(): Compare flat key -> text maps
    - tally_keys(): Count keys accepted by an arbitrary per-key predicate

Dependencies:
    - core.models.results.MappingScore
    - matching.normalize

Used By:
    - grading.strategies
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ielts_grading.core.models.results import MappingScore

from .normalize import normalize_for_policy


def tally_keys(
    correct_map: Mapping[str, Any],
    is_key_correct: Callable[[str, Any], bool],
) -> MappingScore:
    """
    Count the keys of `correct_map` for which `is_key_correct(key, value)`.

    The correct map's keys are the authoritative key set: `total` is always
    its size, whatever the student submitted.
    """
    correct = sum(1 for key, value in correct_map.items() if is_key_correct(key, value))
    return MappingScore(correct=correct, total=len(correct_map))


def score_mapping(
    student_map: Optional[Mapping[str, str]],
    correct_map: Mapping[str, str],
    *,
    case_sensitive: bool = False,
) -> MappingScore:
    """
    Score a flat key -> text answer against the correct map.

    Extra student keys are ignored; a key the student left out counts as
    wrong. Values are compared after whitespace normalization and, unless
    `case_sensitive`, lowercasing.

    Args:
        student_map: Student's answers by key (None treated as empty)
        correct_map: Correct answers by key
        case_sensitive: Exercise-level case policy

    Returns:
        MappingScore with correct, total and score

    Example:
        >>> score_mapping({"1": "A"}, {"1": "A", "2": "B", "3": "C"}).to_dict()
        {'correct': 1, 'total': 3, 'score': 0.3333333333333333}
    """
    student_map = student_map or {}

    def _key_matches(key: str, expected: str) -> bool:
        given = student_map.get(key)
        if given is None:
            return False
        return (
            normalize_for_policy(given, case_sensitive)
            == normalize_for_policy(expected, case_sensitive)
        )

    return tally_keys(correct_map, _key_matches)
