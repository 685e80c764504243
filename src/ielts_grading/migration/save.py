"""
Module: migration.save

Purpose:
    The single save-time normalization gate for instructor-authored correct
    answers. Called before a correct answer is persisted, so stored answers
    are always whitespace-canonical while keeping the author's casing.

Key Functions:
    - detect_answer_shape(): Classify a payload by its keys
    - normalize_correct_answer_for_save(): Normalized copy of a payload

Key Classes:
    - AnswerShape: The structural payload families

Dependencies:
    - matching.normalize.normalize_for_store

Used By:
    - question authoring (before persisting a correct answer)

Note:
    Dispatch is on payload shape, not on the question type, because the
    authoring flow does not always have the type at hand when saving.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict

from ielts_grading.matching.normalize import normalize_for_store


class AnswerShape(str, Enum):
    """Top-level shape of a correct answer payload."""
    BLANKS = "blanks"      # word bank, note/table/flowchart
    MATCHES = "matches"    # heading/information/feature/ending matching
    LABELS = "labels"      # diagram / map labelling
    ANSWERS = "answers"    # multi-select MCQ
    ANSWER = "answer"      # single choice, TFNG/YNNG, free text
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


# Priority order when a payload carries more than one of these keys.
_SHAPE_PRIORITY = (
    AnswerShape.BLANKS,
    AnswerShape.MATCHES,
    AnswerShape.LABELS,
    AnswerShape.ANSWERS,
    AnswerShape.ANSWER,
)

_MAP_SHAPES = frozenset({AnswerShape.BLANKS, AnswerShape.MATCHES, AnswerShape.LABELS})


def detect_answer_shape(payload: Any) -> AnswerShape:
    """
    Classify a payload by the first of blanks/matches/labels/answers/answer
    it contains.

    Example:
        >>> detect_answer_shape({"answers": ["A", "C"], "maxSelections": 2})
        <AnswerShape.ANSWERS: 'answers'>
    """
    if not isinstance(payload, Mapping):
        return AnswerShape.UNKNOWN
    for shape in _SHAPE_PRIORITY:
        if shape.value in payload:
            return shape
    return AnswerShape.UNKNOWN


def _normalize_text_list(values: Any) -> Any:
    if not isinstance(values, list):
        return values
    return [normalize_for_store(v) if isinstance(v, str) else v for v in values]


def _normalize_answer_record(payload: Mapping[str, Any]) -> Dict[str, Any]:
    result = dict(payload)
    if isinstance(result.get("answer"), str):
        result["answer"] = normalize_for_store(result["answer"])
    if "acceptedVariants" in result:
        result["acceptedVariants"] = _normalize_text_list(result["acceptedVariants"])
    return result


def _normalize_text_map(values: Any) -> Any:
    if not isinstance(values, Mapping):
        return values
    normalized: Dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, str):
            normalized[key] = normalize_for_store(value)
        elif isinstance(value, Mapping):
            normalized[key] = _normalize_answer_record(value)
        else:
            normalized[key] = value
    return normalized


def normalize_correct_answer_for_save(payload: Any) -> Any:
    """
    Return a save-ready copy of a correct answer payload.

    Every answer text (primary answers, accepted variants, map values) is
    trimmed and whitespace-collapsed; casing is left alone. Fields outside
    the detected shape (`strictWordOrder`, `maxSelections`, ...) are copied
    unchanged.

    Args:
        payload: Correct answer JSON, or None

    Returns:
        Normalized copy; None and non-mapping values are returned as given

    Example:
        >>> normalize_correct_answer_for_save({"answer": "  Carbon   Dioxide "})
        {'answer': 'Carbon Dioxide'}
    """
    if payload is None:
        return None
    shape = detect_answer_shape(payload)
    if shape is AnswerShape.UNKNOWN:
        return payload

    result = dict(payload)
    if shape in _MAP_SHAPES:
        result[shape.value] = _normalize_text_map(result[shape.value])
    elif shape is AnswerShape.ANSWERS:
        result["answers"] = _normalize_text_list(result["answers"])
    else:
        result = _normalize_answer_record(result)
    return result
