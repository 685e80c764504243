"""
Core Models Package

Immutable data models shared by every layer of the grading engine.

All models in this package are frozen dataclasses or enums. This ensures:
1. Grading never mutates a caller's payload
2. Safe to share between threads when a caller grades answers in parallel
3. Easier to reason about data flow

| Wire shape | Model |
|------------|-------|
| question `questionType` tag | `QuestionType` |
| `{answer, acceptedVariants, strictWordOrder}` | `StructuredBlank` |
| `str` or structured blank | `TextValue` |
| `{isCorrect, score}` | `GradeResult` |
| `{correct, total, score}` | `MappingScore` |
"""

from .question_types import (
    AUTO_GRADABLE_TYPES,
    MAPPING_FIELD_BY_TYPE,
    STRATEGY_BY_TYPE,
    GradingStrategy,
    QuestionType,
    Skill,
    resolve_strategy,
)
from .answers import StructuredBlank, TextValue, parse_text_value
from .results import GradeResult, MappingScore

__all__ = [
    "AUTO_GRADABLE_TYPES",
    "MAPPING_FIELD_BY_TYPE",
    "STRATEGY_BY_TYPE",
    "GradingStrategy",
    "QuestionType",
    "Skill",
    "resolve_strategy",
    "StructuredBlank",
    "TextValue",
    "parse_text_value",
    "GradeResult",
    "MappingScore",
]
