"""
IELTS Grading Core Package

Shared data models and payload schemas used by the matching, migration and
grading layers.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Every model is a frozen dataclass; grading never mutates its inputs
   - Wire payloads stay plain dicts, models are built from them on demand

2. **Closed Question Types**
   - `QuestionType` enumerates every IELTS tag the platform knows
   - `AUTO_GRADABLE_TYPES` is a separate allow-list, so a new essay-like tag
     is ungradable until someone opts it in

3. **Legacy / Structured Coexistence**
   - A blank's correct answer is `TextValue = str | StructuredBlank`
   - Upgrading a bare string is an explicit step (`migration` package)
"""

from .models import (
    AUTO_GRADABLE_TYPES,
    GradeResult,
    GradingStrategy,
    MappingScore,
    QuestionType,
    Skill,
    StructuredBlank,
    TextValue,
)

__all__ = [
    "AUTO_GRADABLE_TYPES",
    "GradeResult",
    "GradingStrategy",
    "MappingScore",
    "QuestionType",
    "Skill",
    "StructuredBlank",
    "TextValue",
]
