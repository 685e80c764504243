"""
Payload Schema Validation

Validates correct-answer and student-answer JSON against the per-strategy
JSON Schema definitions shipped beside this module.

**WHY SCHEMAS:**

The grading strategies default missing optional sub-fields and turn
unreadable payloads into "ungradable". Callers that want to reject bad
payloads up front (question authoring, or grading with
`GradingConfig.validate_payloads`) validate here first and get a precise
path to the offending field.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import jsonschema

from ..models.question_types import GradingStrategy, QuestionType, resolve_strategy


CORRECT_ANSWER_SCHEMA = "correct_answer"
STUDENT_ANSWER_SCHEMA = "student_answer"


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}
_VALIDATORS: dict[tuple[str, GradingStrategy], jsonschema.Draft7Validator] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def _get_validator(name: str, strategy: GradingStrategy) -> jsonschema.Draft7Validator:
    """Build (once) a validator for one strategy's definition."""
    key = (name, strategy)
    if key not in _VALIDATORS:
        schema = _load_schema(name)
        subschema = {
            "$ref": f"#/definitions/{strategy.value}",
            "definitions": schema["definitions"],
        }
        _VALIDATORS[key] = jsonschema.Draft7Validator(subschema)
    return _VALIDATORS[key]


class PayloadValidationError(Exception):
    """Raised when an answer payload fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _validate(
    name: str,
    question_type: QuestionType | str,
    payload: Any,
    shape_hint: Optional[dict[str, Any]],
) -> None:
    qtype = QuestionType.parse(question_type)
    if qtype is None:
        raise PayloadValidationError(f"Unknown question type: {question_type!r}")

    hint = shape_hint if isinstance(shape_hint, dict) else {}
    strategy = resolve_strategy(qtype, hint)
    if strategy is None:
        raise PayloadValidationError(f"Question type {qtype} is not auto-gradable")

    validator = _get_validator(name, strategy)
    errors = sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        first = errors[0]
        raise PayloadValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )


def validate_correct_answer(question_type: QuestionType | str, payload: Any) -> None:
    """
    Validate an instructor-authored correct answer for a question type.

    Args:
        question_type: The question's tag
        payload: Correct answer JSON

    Raises:
        PayloadValidationError: If the type is unknown / not auto-gradable,
            or the payload does not match the type's shape
    """
    _validate(CORRECT_ANSWER_SCHEMA, question_type, payload, payload)


def validate_student_answer(
    question_type: QuestionType | str,
    payload: Any,
    correct_answer: Optional[dict[str, Any]] = None,
) -> None:
    """
    Validate a student's answer payload for a question type.

    Student shapes carry no variants or word-order flags, and every field is
    optional (an unanswered question is an empty object).

    Args:
        question_type: The question's tag
        payload: Student answer JSON
        correct_answer: The question's correct answer, used to tell single
            from multi-select for L2_MCQ; the student payload is used otherwise

    Raises:
        PayloadValidationError: If the payload does not match the type's shape
    """
    hint = correct_answer if correct_answer is not None else payload
    _validate(STUDENT_ANSWER_SCHEMA, question_type, payload, hint)
