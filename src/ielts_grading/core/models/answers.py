"""
Module: answers

Purpose:
    Provides the StructuredBlank dataclass - the canonical per-blank correct
    answer record for note/table/flowchart blanks and diagram labels - and
    the TextValue sum type covering legacy bare-string blanks.

Key Functions:
    - StructuredBlank.from_dict(data): Parse the wire shape, defaulting sub-fields
    - StructuredBlank.to_dict(): Emit the wire shape (camelCase keys)
    - StructuredBlank.candidates: Primary answer followed by variants
    - parse_text_value(raw): Wire value -> str | StructuredBlank

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - migration.legacy
    - grading.strategies

Wire Shape:
    {"answer": "carbon dioxide", "acceptedVariants": ["CO2"], "strictWordOrder": true}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True, slots=True)
class StructuredBlank:
    """
    Correct answer for one blank, with accepted variants.

    Attributes:
        answer: Primary correct text
        accepted_variants: Alternative texts also marked correct, in order
        strict_word_order: If False, words may appear in any order

    Invariants:
        - answer is a string
        - every accepted variant is a string

    Example:
        >>> blank = StructuredBlank.from_dict({"answer": "nineteen"})
        >>> blank.accepted_variants
        ()
        >>> blank.strict_word_order
        True
    """

    answer: str
    accepted_variants: Tuple[str, ...] = ()
    strict_word_order: bool = True

    def __post_init__(self) -> None:
        """Validate blank on construction."""
        if not isinstance(self.answer, str):
            raise ValueError(f"Blank answer must be a string: {self.answer!r}")
        for variant in self.accepted_variants:
            if not isinstance(variant, str):
                raise ValueError(f"Accepted variant must be a string: {variant!r}")

    @property
    def candidates(self) -> Tuple[str, ...]:
        """Primary answer first, then variants in authored order."""
        return (self.answer, *self.accepted_variants)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StructuredBlank:
        """
        Parse the stored shape.

        Missing `acceptedVariants` defaults to no variants and missing
        `strictWordOrder` defaults to True. A stored `strictWordOrder` is
        always authoritative.

        Raises:
            ValueError: If `answer` is absent or not a string, or
                `acceptedVariants` is not a list of strings
        """
        if "answer" not in data:
            raise ValueError("Structured blank is missing 'answer'")
        variants = data.get("acceptedVariants")
        if isinstance(variants, str):
            raise ValueError("acceptedVariants must be a list, not a string")
        if variants is not None and not isinstance(variants, (list, tuple)):
            raise ValueError(f"acceptedVariants must be a list, got {type(variants).__name__}")
        strict = data.get("strictWordOrder")
        return cls(
            answer=data["answer"],
            accepted_variants=tuple(variants) if variants is not None else (),
            strict_word_order=bool(strict) if strict is not None else True,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stored shape."""
        return {
            "answer": self.answer,
            "acceptedVariants": list(self.accepted_variants),
            "strictWordOrder": self.strict_word_order,
        }


# Legacy rows store a bare string where new rows store a StructuredBlank.
TextValue = Union[str, StructuredBlank]


def parse_text_value(raw: Any) -> TextValue:
    """
    Parse a stored blank/label value.

    Args:
        raw: A bare string or a mapping with an `answer` key

    Returns:
        The string unchanged, or a StructuredBlank

    Raises:
        ValueError: If raw is neither shape
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, Mapping) and "answer" in raw:
        return StructuredBlank.from_dict(raw)
    raise ValueError(f"Unrecognised answer value: {raw!r}")
