"""
Grading Package

Grades student answers for the auto-gradable IELTS question types.

Usage:
    from ielts_grading.grading import grade, grade_submission, GradingConfig

    result = grade("R3_TFNG", {"answer": "true"}, {"answer": "TRUE"}, case_sensitive=False)
"""

from .config import GradingConfig, DEFAULT_CONFIG
from .strategies import (
    UngradableAnswerError,
    grade_single_choice,
    grade_multi_choice,
    grade_text_with_variants,
    grade_exact_mapping,
    grade_structured_blanks,
    grade_diagram_labels,
)
from .dispatcher import grade
from .batch import (
    AnswerRecord,
    GradedAnswer,
    QuestionRecord,
    SubmissionGrading,
    grade_submission,
)

__all__ = [
    "GradingConfig",
    "DEFAULT_CONFIG",
    "UngradableAnswerError",
    "grade_single_choice",
    "grade_multi_choice",
    "grade_text_with_variants",
    "grade_exact_mapping",
    "grade_structured_blanks",
    "grade_diagram_labels",
    "grade",
    "AnswerRecord",
    "GradedAnswer",
    "QuestionRecord",
    "SubmissionGrading",
    "grade_submission",
]
