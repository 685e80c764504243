"""
Module: grading.batch

Purpose:
    Grade every answer of a submitted attempt in one pass. The submission
    workflow loads the exercise's questions and the student's answers, calls
    grade_submission(), and writes each GradeResult back itself.

Key Functions:
    - grade_submission(): Grade all auto-gradable answers of a submission

Key Classes:
    - QuestionRecord: The parts of a stored question grading needs
    - AnswerRecord: One stored student answer
    - GradedAnswer: Result for one answer
    - SubmissionGrading: Results plus answers left for manual review

Dependencies:
    - grading.dispatcher.grade
    - matching.matcher.within_word_limit

Used By:
    - submission finalization
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ielts_grading.core.models.question_types import QuestionType
from ielts_grading.core.models.results import GradeResult
from ielts_grading.matching.matcher import within_word_limit

from .config import DEFAULT_CONFIG, GradingConfig
from .dispatcher import grade

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionRecord:
    """
    A question as loaded by the submission workflow.

    Attributes:
        id: Question ID
        question_type: Tag of the question's section
        correct_answer: Stored correct answer JSON (None if not authored yet)
        word_limit: Maximum words for free-text answers, if the question sets one
    """

    id: str
    question_type: str
    correct_answer: Any = None
    word_limit: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QuestionRecord:
        """Build from a stored row (`questionType`, `correctAnswer`, `wordLimit`)."""
        return cls(
            id=data["id"],
            question_type=data["questionType"],
            correct_answer=data.get("correctAnswer"),
            word_limit=data.get("wordLimit"),
        )


@dataclass(frozen=True)
class AnswerRecord:
    """One student answer row (`answer` is the student payload JSON)."""

    id: str
    question_id: str
    answer: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnswerRecord:
        return cls(
            id=data["id"],
            question_id=data["questionId"],
            answer=data.get("answer"),
        )


@dataclass(frozen=True)
class GradedAnswer:
    """
    Grading outcome for one answer.

    Attributes:
        answer_id: The graded answer
        question_id: The question it answers
        result: Verdict and score
        within_word_limit: For `{answer: str}` payloads on questions with a
            word limit, whether the text respects it; None otherwise
    """

    answer_id: str
    question_id: str
    result: GradeResult
    within_word_limit: Optional[bool] = None


@dataclass(frozen=True)
class SubmissionGrading:
    """
    Results for a whole submission.

    Attributes:
        results: Graded answers by answer ID
        pending: Answer IDs left ungraded (manual or AI review)
    """

    results: Dict[str, GradedAnswer] = field(default_factory=dict)
    pending: Tuple[str, ...] = ()

    @property
    def graded_count(self) -> int:
        return len(self.results)

    @property
    def total_score(self) -> float:
        """Sum of scores over graded answers."""
        return sum(graded.result.score for graded in self.results.values())


def _word_limit_flag(question: QuestionRecord, payload: Any) -> Optional[bool]:
    """Word-limit flag for a text answer; None when there is nothing to check."""
    limit = question.word_limit
    if limit is None or not isinstance(payload, Mapping):
        return None
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        logger.debug(f"Ignoring invalid word limit {limit!r} on question {question.id}")
        return None
    text = payload.get("answer")
    if not isinstance(text, str):
        return None
    return within_word_limit(text, limit)


def grade_submission(
    questions: Iterable[QuestionRecord],
    answers: Iterable[AnswerRecord],
    config: Optional[GradingConfig] = None,
) -> SubmissionGrading:
    """
    Grade every auto-gradable answer of a submission.

    Answers are skipped (left pending) when their question is unknown, has
    no correct answer, is a writing/speaking type, or grade() returns None.

    Args:
        questions: All questions of the exercise
        answers: The submission's answers
        config: Exercise grading options (case policy etc.)

    Returns:
        SubmissionGrading with per-answer results and pending answer IDs

    Example:
        >>> q = QuestionRecord("q1", "R3_TFNG", {"answer": "TRUE"})
        >>> a = AnswerRecord("a1", "q1", {"answer": "true"})
        >>> grade_submission([q], [a]).results["a1"].result.is_correct
        True
    """
    config = config or DEFAULT_CONFIG
    by_id = {question.id: question for question in questions}

    results: Dict[str, GradedAnswer] = {}
    pending: list[str] = []

    for answer in answers:
        question = by_id.get(answer.question_id)
        if question is None or question.correct_answer is None:
            pending.append(answer.id)
            continue
        qtype = QuestionType.parse(question.question_type)
        if qtype is None or not qtype.is_auto_gradable:
            pending.append(answer.id)
            continue

        result = grade(
            qtype,
            answer.answer,
            question.correct_answer,
            config.case_sensitive,
            config=config,
        )
        if result is None:
            pending.append(answer.id)
            continue

        results[answer.id] = GradedAnswer(
            answer_id=answer.id,
            question_id=question.id,
            result=result,
            within_word_limit=_word_limit_flag(question, answer.answer),
        )

    grading = SubmissionGrading(results=results, pending=tuple(pending))
    logger.info(
        f"Graded {grading.graded_count} answers "
        f"(score {grading.total_score:.2f}), {len(grading.pending)} pending review"
    )
    return grading
