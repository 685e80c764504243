"""
Unit Tests for Submission Batch Grading

Tests for grade_submission() and its record types.
"""

import logging

import pytest

from ielts_grading.grading.batch import (
    AnswerRecord,
    QuestionRecord,
    grade_submission,
)
from ielts_grading.grading.config import GradingConfig


class TestGradeSubmission:
    """Tests for grade_submission()."""

    @pytest.fixture
    def questions(self, note_table_correct):
        return [
            QuestionRecord("q1", "R3_TFNG", {"answer": "TRUE"}),
            QuestionRecord("q2", "R2_MCQ_MULTI", {"answers": ["A", "C"]}),
            QuestionRecord("q3", "R13_NOTE_TABLE_FLOWCHART", note_table_correct),
            QuestionRecord("q4", "W3_TASK2_ESSAY", None),
            QuestionRecord("q5", "R6_SHORT_ANSWER", {"answer": "industrial revolution"}, word_limit=2),
            QuestionRecord("q6", "R1_MCQ_SINGLE", None),
        ]

    @pytest.fixture
    def answers(self):
        return [
            AnswerRecord("a1", "q1", {"answer": "true"}),
            AnswerRecord("a2", "q2", {"answers": ["A", "B"]}),
            AnswerRecord("a3", "q3", {"blanks": {"1": "CO2", "2": "15%"}}),
            AnswerRecord("a4", "q4", {"text": "An essay."}),
            AnswerRecord("a5", "q5", {"answer": "the industrial revolution"}),
            AnswerRecord("a6", "q6", {"answer": "A"}),
            AnswerRecord("a7", "missing", {"answer": "A"}),
        ]

    def test_grade_when_mixed_submission_then_grades_gradable(self, questions, answers):
        grading = grade_submission(questions, answers)

        assert set(grading.results) == {"a1", "a2", "a3", "a5"}
        assert grading.results["a1"].result.is_correct
        assert not grading.results["a2"].result.is_correct
        assert grading.results["a3"].result.score == pytest.approx(2 / 3)

    def test_grade_when_not_gradable_then_pending(self, questions, answers):
        grading = grade_submission(questions, answers)
        assert grading.pending == ("a4", "a6", "a7")

    def test_grade_when_word_limit_set_then_flagged(self, questions, answers):
        grading = grade_submission(questions, answers)
        assert grading.results["a5"].within_word_limit is False
        assert grading.results["a1"].within_word_limit is None

    def test_grade_when_summarised_then_totals(self, questions, answers):
        grading = grade_submission(questions, answers)
        assert grading.graded_count == 4
        assert grading.total_score == pytest.approx(1 + 0 + 2 / 3 + 0)

    def test_grade_when_case_sensitive_config_then_applied(self):
        questions = [QuestionRecord("q1", "R3_TFNG", {"answer": "TRUE"})]
        answers = [AnswerRecord("a1", "q1", {"answer": "true"})]
        grading = grade_submission(questions, answers, GradingConfig(case_sensitive=True))
        assert not grading.results["a1"].result.is_correct

    def test_grade_when_malformed_answer_then_rest_still_graded(self):
        questions = [
            QuestionRecord("q1", "R6_SHORT_ANSWER", {"answer": "19"}),
            QuestionRecord("q2", "R3_TFNG", {"answer": "FALSE"}),
        ]
        answers = [
            AnswerRecord("a1", "q1", {"answer": ["19"]}),
            AnswerRecord("a2", "q2", {"answer": "false"}),
        ]
        grading = grade_submission(questions, answers)
        assert grading.pending == ("a1",)
        assert grading.results["a2"].result.is_correct

    @pytest.mark.parametrize("word_limit", ["3", -1, 2.5, True])
    def test_grade_when_word_limit_invalid_then_flag_skipped_and_rest_graded(self, word_limit):
        questions = [
            QuestionRecord("q1", "R6_SHORT_ANSWER", {"answer": "nineteen"}, word_limit=word_limit),
            QuestionRecord("q2", "R3_TFNG", {"answer": "TRUE"}),
        ]
        answers = [
            AnswerRecord("a1", "q1", {"answer": "nineteen"}),
            AnswerRecord("a2", "q2", {"answer": "true"}),
        ]
        grading = grade_submission(questions, answers)

        assert grading.results["a1"].result.is_correct
        assert grading.results["a1"].within_word_limit is None
        assert grading.results["a2"].result.is_correct
        assert grading.pending == ()

    def test_grade_when_answer_empty_object_then_graded_wrong(self):
        questions = [QuestionRecord("q1", "R3_TFNG", {"answer": "TRUE"})]
        answers = [AnswerRecord("a1", "q1", {})]
        grading = grade_submission(questions, answers)
        assert grading.results["a1"].result.score == 0
        assert not grading.results["a1"].result.is_correct

    def test_grade_when_done_then_logs_summary(self, questions, answers, caplog):
        with caplog.at_level(logging.INFO, logger="ielts_grading.grading.batch"):
            grade_submission(questions, answers)
        assert "Graded 4 answers" in caplog.text


class TestRecords:
    """Tests for record construction from stored rows."""

    def test_question_from_dict_when_row_then_fields(self):
        row = {"id": "q1", "questionType": "R6_SHORT_ANSWER", "correctAnswer": {"answer": "x"}, "wordLimit": 3}
        question = QuestionRecord.from_dict(row)
        assert question.question_type == "R6_SHORT_ANSWER"
        assert question.word_limit == 3

    def test_question_from_dict_when_optional_missing_then_none(self):
        question = QuestionRecord.from_dict({"id": "q1", "questionType": "W3_TASK2_ESSAY"})
        assert question.correct_answer is None
        assert question.word_limit is None

    def test_answer_from_dict_when_row_then_fields(self):
        answer = AnswerRecord.from_dict({"id": "a1", "questionId": "q1", "answer": {"answer": "B"}})
        assert answer.question_id == "q1"
        assert answer.answer == {"answer": "B"}
