"""
Schemas Package

JSON schema definitions for answer payloads and validation utilities.
"""

from .validator import (
    validate_correct_answer,
    validate_student_answer,
    PayloadValidationError,
    CORRECT_ANSWER_SCHEMA,
    STUDENT_ANSWER_SCHEMA,
)

__all__ = [
    "validate_correct_answer",
    "validate_student_answer",
    "PayloadValidationError",
    "CORRECT_ANSWER_SCHEMA",
    "STUDENT_ANSWER_SCHEMA",
]
