"""
Module: results

Purpose:
    Provides the value objects returned by grading: GradeResult (verdict +
    fractional score for one answer) and MappingScore (correct/total tally
    for multi-part answers).

Key Functions:
    - GradeResult.from_match(bool): All-or-nothing verdict
    - GradeResult.from_mapping(MappingScore): Partial-credit verdict
    - MappingScore.score: correct / total (0 when total is 0)

Dependencies:
    - dataclasses (std)

Used By:
    - matching.mapping
    - grading.strategies
    - grading.dispatcher
    - grading.batch
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class MappingScore:
    """
    Tally of correctly answered keys in a blanks/matches/labels answer.

    Attributes:
        correct: Keys the student got right
        total: Keys in the correct answer (the authoritative key set)

    Invariants:
        - 0 <= correct <= total

    Example:
        >>> MappingScore(correct=1, total=3).score
        0.3333333333333333
        >>> MappingScore(correct=0, total=0).score
        0.0
    """

    correct: int
    total: int

    def __post_init__(self) -> None:
        """Validate tally on construction."""
        if self.total < 0:
            raise ValueError(f"total cannot be negative: {self.total}")
        if not 0 <= self.correct <= self.total:
            raise ValueError(
                f"correct must be between 0 and total ({self.total}): {self.correct}"
            )

    @property
    def score(self) -> float:
        """Fraction of keys correct."""
        if self.total == 0:
            return 0.0
        return self.correct / self.total

    def to_dict(self) -> dict[str, Any]:
        return {"correct": self.correct, "total": self.total, "score": self.score}


@dataclass(frozen=True, slots=True)
class GradeResult:
    """
    Outcome of grading one answer.

    Attributes:
        is_correct: Whole answer correct (score == 1 for partial-credit types)
        score: Fractional score in [0, 1]

    Invariants:
        - 0 <= score <= 1

    Example:
        >>> GradeResult.from_match(True)
        GradeResult(is_correct=True, score=1.0)
    """

    is_correct: bool
    score: float

    def __post_init__(self) -> None:
        """Validate score on construction."""
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"score must be within [0, 1]: {self.score}")

    @classmethod
    def from_match(cls, matched: bool) -> GradeResult:
        """All-or-nothing result for choice and free-text questions."""
        return cls(is_correct=matched, score=1.0 if matched else 0.0)

    @classmethod
    def from_mapping(cls, tally: MappingScore) -> GradeResult:
        """Partial-credit result; correct only when every key is right."""
        score = tally.score
        return cls(is_correct=score == 1.0, score=score)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the shape persisted on a student answer."""
        return {"isCorrect": self.is_correct, "score": self.score}
