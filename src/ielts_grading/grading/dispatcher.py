"""
Module: grading.dispatcher

Purpose:
    Entry point for grading one answer: resolves the question type to a
    strategy and folds every failure into an "ungradable" (None) result.

Key Functions:
    - grade(): Grade one student answer against a correct answer

Dependencies:
    - core.models: QuestionType, strategy tables, GradeResult
    - core.schemas: optional payload validation
    - grading.strategies: the six strategies

Used By:
    - grading.batch
    - submission finalization (one call per answer)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from ielts_grading.core.models.question_types import (
    MAPPING_FIELD_BY_TYPE,
    GradingStrategy,
    QuestionType,
    resolve_strategy,
)
from ielts_grading.core.models.results import GradeResult
from ielts_grading.core.schemas.validator import (
    PayloadValidationError,
    validate_correct_answer,
    validate_student_answer,
)

from .config import DEFAULT_CONFIG, GradingConfig
from .strategies import (
    grade_diagram_labels,
    grade_exact_mapping,
    grade_multi_choice,
    grade_single_choice,
    grade_structured_blanks,
    grade_text_with_variants,
)

logger = logging.getLogger(__name__)


_STRATEGIES: Dict[GradingStrategy, Callable[..., Optional[GradeResult]]] = {
    GradingStrategy.SINGLE_CHOICE: grade_single_choice,
    GradingStrategy.MULTI_CHOICE: grade_multi_choice,
    GradingStrategy.TEXT_WITH_VARIANTS: grade_text_with_variants,
    GradingStrategy.EXACT_MAPPING: grade_exact_mapping,
    GradingStrategy.STRUCTURED_BLANKS: grade_structured_blanks,
    GradingStrategy.DIAGRAM_LABELS: grade_diagram_labels,
}


def _strategy_options(
    strategy: GradingStrategy,
    question_type: QuestionType,
    config: GradingConfig,
) -> Dict[str, Any]:
    if strategy is GradingStrategy.TEXT_WITH_VARIANTS:
        return {"default_strict_word_order": config.default_strict_word_order}
    if question_type in MAPPING_FIELD_BY_TYPE:
        return {"field": MAPPING_FIELD_BY_TYPE[question_type]}
    return {}


def grade(
    question_type: QuestionType | str,
    student_answer: Any,
    correct_answer: Any,
    case_sensitive: bool,
    *,
    config: Optional[GradingConfig] = None,
) -> Optional[GradeResult]:
    """
    Grade one student answer.

    Returns None ("not graded, leave for manual or AI review") when either
    payload is None, the type is unknown or not auto-gradable (writing
    and speaking), or the payloads cannot be graded. Never raises for bad
    payloads: one malformed answer must not stop the rest of a submission
    from being graded.

    Args:
        question_type: Question tag, as a QuestionType or string
        student_answer: Student payload, e.g. {"answers": ["C", "A"]}
        correct_answer: Stored correct payload, e.g. {"answers": ["A", "C"]}
        case_sensitive: Exercise-level case policy
        config: Optional grading options (payload validation, text defaults)

    Returns:
        GradeResult, or None if ungradable

    Example:
        >>> grade("R2_MCQ_MULTI", {"answers": ["C", "A"]}, {"answers": ["A", "C"]}, False)
        GradeResult(is_correct=True, score=1.0)
    """
    # An empty object is an unanswered question and grades as wrong.
    if student_answer is None or correct_answer is None:
        return None

    qtype = QuestionType.parse(question_type)
    if qtype is None or not qtype.is_auto_gradable:
        logger.debug(f"Question type {question_type!r} is not auto-gradable")
        return None

    config = config or DEFAULT_CONFIG
    try:
        if not isinstance(student_answer, Mapping) or not isinstance(correct_answer, Mapping):
            logger.debug(f"Non-object payload for {qtype}")
            return None

        if config.validate_payloads:
            validate_correct_answer(qtype, correct_answer)
            validate_student_answer(qtype, student_answer, correct_answer)

        strategy = resolve_strategy(qtype, correct_answer)
        if strategy is None:
            return None
        options = _strategy_options(strategy, qtype, config)
        return _STRATEGIES[strategy](student_answer, correct_answer, case_sensitive, **options)
    except (ValueError, PayloadValidationError) as e:
        logger.debug(f"Ungradable {qtype} answer: {e}")
        return None
    except Exception as e:
        logger.warning(f"Unexpected error grading {qtype} answer: {e}")
        return None
