"""
Module: grading.config

Purpose:
    Configuration dataclass for grading. Immutable configuration with
    validation on construction.

Key Classes:
    - GradingConfig: Exercise-level grading options

Dependencies:
    - dataclasses (std)

Used By:
    - grading.dispatcher: Payload validation and text defaults
    - grading.batch: Case policy for a whole submission
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

# Exercise settings arrive camelCase from the persistence layer.
_CAMEL_ALIASES = {
    "caseSensitive": "case_sensitive",
    "validatePayloads": "validate_payloads",
    "defaultStrictWordOrder": "default_strict_word_order",
}


@dataclass(frozen=True)
class GradingConfig:
    """
    Configuration for grading one exercise's answers (immutable).

    Attributes:
        case_sensitive: Compare answers case-sensitively. Owned by the
            exercise and applied to every question in it.
        validate_payloads: Check both payloads against the JSON schemas before
            grading; a payload that fails is left ungraded.
        default_strict_word_order: Word-order policy for free-text correct
            answers that do not declare `strictWordOrder`. Structured blanks
            always use their own stored value.

    Example:
        >>> config = GradingConfig.from_mapping({"caseSensitive": True})
        >>> config.case_sensitive
        True
    """

    case_sensitive: bool = False
    validate_payloads: bool = False
    default_strict_word_order: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ValueError(f"{f.name} must be a bool: {value!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GradingConfig:
        """
        Build a config from exercise settings.

        Accepts snake_case field names or their camelCase aliases.

        Raises:
            ValueError: On unknown keys or non-boolean values
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown grading option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


DEFAULT_CONFIG = GradingConfig()
