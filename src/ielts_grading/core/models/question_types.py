"""
Module: question_types

Purpose:
    Provides the closed set of IELTS question type tags, the skill each tag
    belongs to, and the mapping from auto-gradable tags to the grading
    strategy that scores them.

Key Classes:
    - QuestionType: Every question tag the platform stores
    - Skill: Reading / Listening / Writing / Speaking
    - GradingStrategy: The six automatic grading strategies

Key Constants:
    - AUTO_GRADABLE_TYPES: Explicit allow-list of tags graded by this engine
    - STRATEGY_BY_TYPE: Tag -> strategy (L2_MCQ resolved by payload shape)
    - MAPPING_FIELD_BY_TYPE: Tag -> payload field read by mapping strategies

Dependencies:
    - enum (std)

Used By:
    - core.schemas.validator
    - grading.dispatcher
    - grading.batch
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Skill(str, Enum):
    """IELTS skill a question type belongs to."""
    READING = "READING"
    LISTENING = "LISTENING"
    WRITING = "WRITING"
    SPEAKING = "SPEAKING"

    def __str__(self) -> str:
        return self.value


_SKILL_BY_PREFIX = {
    "R": Skill.READING,
    "L": Skill.LISTENING,
    "W": Skill.WRITING,
    "S": Skill.SPEAKING,
}


class QuestionType(str, Enum):
    """
    Question type tag, as stored on a question section.

    The prefix letter identifies the skill and the number the IELTS task
    variant. Members compare equal to their string tag, so payloads loaded
    from JSON can be used directly.

    Example:
        >>> QuestionType("R3_TFNG") is QuestionType.R3_TFNG
        True
        >>> QuestionType.R3_TFNG.skill
        <Skill.READING: 'READING'>
    """
    # Reading
    R1_MCQ_SINGLE = "R1_MCQ_SINGLE"
    R2_MCQ_MULTI = "R2_MCQ_MULTI"
    R3_TFNG = "R3_TFNG"
    R4_YNNG = "R4_YNNG"
    R5_SENTENCE_COMPLETION = "R5_SENTENCE_COMPLETION"
    R6_SHORT_ANSWER = "R6_SHORT_ANSWER"
    R7_SUMMARY_WORD_BANK = "R7_SUMMARY_WORD_BANK"
    R8_SUMMARY_PASSAGE = "R8_SUMMARY_PASSAGE"
    R9_MATCHING_HEADINGS = "R9_MATCHING_HEADINGS"
    R10_MATCHING_INFORMATION = "R10_MATCHING_INFORMATION"
    R11_MATCHING_FEATURES = "R11_MATCHING_FEATURES"
    R12_MATCHING_SENTENCE_ENDINGS = "R12_MATCHING_SENTENCE_ENDINGS"
    R13_NOTE_TABLE_FLOWCHART = "R13_NOTE_TABLE_FLOWCHART"
    R14_DIAGRAM_LABELLING = "R14_DIAGRAM_LABELLING"
    # Listening
    L1_FORM_NOTE_TABLE = "L1_FORM_NOTE_TABLE"
    L2_MCQ = "L2_MCQ"
    L3_MATCHING = "L3_MATCHING"
    L4_MAP_PLAN_LABELLING = "L4_MAP_PLAN_LABELLING"
    L5_SENTENCE_COMPLETION = "L5_SENTENCE_COMPLETION"
    L6_SHORT_ANSWER = "L6_SHORT_ANSWER"
    # Writing
    W1_TASK1_ACADEMIC = "W1_TASK1_ACADEMIC"
    W2_TASK1_GENERAL = "W2_TASK1_GENERAL"
    W3_TASK2_ESSAY = "W3_TASK2_ESSAY"
    # Speaking
    S1_PART1_QA = "S1_PART1_QA"
    S2_PART2_CUE_CARD = "S2_PART2_CUE_CARD"
    S3_PART3_DISCUSSION = "S3_PART3_DISCUSSION"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: object) -> Optional[QuestionType]:
        """
        Resolve a tag to a member, or None if it is not a known tag.

        Args:
            value: A QuestionType or its string tag

        Returns:
            The matching QuestionType, None for unknown or non-string input
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def skill(self) -> Skill:
        """Skill derived from the tag prefix."""
        return _SKILL_BY_PREFIX[self.value[0]]

    @property
    def is_auto_gradable(self) -> bool:
        """True when this engine grades the type (see AUTO_GRADABLE_TYPES)."""
        return self in AUTO_GRADABLE_TYPES


class GradingStrategy(str, Enum):
    """The six automatic grading strategies."""
    SINGLE_CHOICE = "single_choice"            # {answer} == {answer}
    MULTI_CHOICE = "multi_choice"              # {answers[]} as sorted sequences
    TEXT_WITH_VARIANTS = "text_with_variants"  # {answer} vs {answer, acceptedVariants}
    EXACT_MAPPING = "exact_mapping"            # flat blanks/matches, partial credit
    STRUCTURED_BLANKS = "structured_blanks"    # blanks -> StructuredBlank
    DIAGRAM_LABELS = "diagram_labels"          # labels -> str | StructuredBlank

    def __str__(self) -> str:
        return self.value


# Kept apart from QuestionType on purpose: tags default to ungradable.
AUTO_GRADABLE_TYPES: frozenset[QuestionType] = frozenset({
    QuestionType.R1_MCQ_SINGLE,
    QuestionType.R2_MCQ_MULTI,
    QuestionType.R3_TFNG,
    QuestionType.R4_YNNG,
    QuestionType.R5_SENTENCE_COMPLETION,
    QuestionType.R6_SHORT_ANSWER,
    QuestionType.R7_SUMMARY_WORD_BANK,
    QuestionType.R8_SUMMARY_PASSAGE,
    QuestionType.R9_MATCHING_HEADINGS,
    QuestionType.R10_MATCHING_INFORMATION,
    QuestionType.R11_MATCHING_FEATURES,
    QuestionType.R12_MATCHING_SENTENCE_ENDINGS,
    QuestionType.R13_NOTE_TABLE_FLOWCHART,
    QuestionType.R14_DIAGRAM_LABELLING,
    QuestionType.L1_FORM_NOTE_TABLE,
    QuestionType.L2_MCQ,
    QuestionType.L3_MATCHING,
    QuestionType.L4_MAP_PLAN_LABELLING,
    QuestionType.L5_SENTENCE_COMPLETION,
    QuestionType.L6_SHORT_ANSWER,
})

# L2_MCQ is absent: it is single or multi depending on the correct answer shape.
STRATEGY_BY_TYPE: dict[QuestionType, GradingStrategy] = {
    QuestionType.R1_MCQ_SINGLE: GradingStrategy.SINGLE_CHOICE,
    QuestionType.R3_TFNG: GradingStrategy.SINGLE_CHOICE,
    QuestionType.R4_YNNG: GradingStrategy.SINGLE_CHOICE,
    QuestionType.R2_MCQ_MULTI: GradingStrategy.MULTI_CHOICE,
    QuestionType.R5_SENTENCE_COMPLETION: GradingStrategy.TEXT_WITH_VARIANTS,
    QuestionType.R6_SHORT_ANSWER: GradingStrategy.TEXT_WITH_VARIANTS,
    QuestionType.R8_SUMMARY_PASSAGE: GradingStrategy.TEXT_WITH_VARIANTS,
    QuestionType.L5_SENTENCE_COMPLETION: GradingStrategy.TEXT_WITH_VARIANTS,
    QuestionType.L6_SHORT_ANSWER: GradingStrategy.TEXT_WITH_VARIANTS,
    QuestionType.R7_SUMMARY_WORD_BANK: GradingStrategy.EXACT_MAPPING,
    QuestionType.R9_MATCHING_HEADINGS: GradingStrategy.EXACT_MAPPING,
    QuestionType.R10_MATCHING_INFORMATION: GradingStrategy.EXACT_MAPPING,
    QuestionType.R11_MATCHING_FEATURES: GradingStrategy.EXACT_MAPPING,
    QuestionType.R12_MATCHING_SENTENCE_ENDINGS: GradingStrategy.EXACT_MAPPING,
    QuestionType.L3_MATCHING: GradingStrategy.EXACT_MAPPING,
    QuestionType.R13_NOTE_TABLE_FLOWCHART: GradingStrategy.STRUCTURED_BLANKS,
    QuestionType.L1_FORM_NOTE_TABLE: GradingStrategy.STRUCTURED_BLANKS,
    QuestionType.R14_DIAGRAM_LABELLING: GradingStrategy.DIAGRAM_LABELS,
    QuestionType.L4_MAP_PLAN_LABELLING: GradingStrategy.DIAGRAM_LABELS,
}

MAPPING_FIELD_BY_TYPE: dict[QuestionType, str] = {
    QuestionType.R7_SUMMARY_WORD_BANK: "blanks",
    QuestionType.R9_MATCHING_HEADINGS: "matches",
    QuestionType.R10_MATCHING_INFORMATION: "matches",
    QuestionType.R11_MATCHING_FEATURES: "matches",
    QuestionType.R12_MATCHING_SENTENCE_ENDINGS: "matches",
    QuestionType.L3_MATCHING: "matches",
    QuestionType.R13_NOTE_TABLE_FLOWCHART: "blanks",
    QuestionType.L1_FORM_NOTE_TABLE: "blanks",
    QuestionType.R14_DIAGRAM_LABELLING: "labels",
    QuestionType.L4_MAP_PLAN_LABELLING: "labels",
}


def resolve_strategy(
    question_type: QuestionType,
    correct_answer: dict,
) -> Optional[GradingStrategy]:
    """
    Pick the grading strategy for a question.

    Args:
        question_type: The question's tag
        correct_answer: Correct answer payload (only inspected for L2_MCQ)

    Returns:
        The strategy, or None if the type is not auto-gradable
    """
    if question_type not in AUTO_GRADABLE_TYPES:
        return None
    if question_type is QuestionType.L2_MCQ:
        if correct_answer.get("answers") is not None:
            return GradingStrategy.MULTI_CHOICE
        return GradingStrategy.SINGLE_CHOICE
    return STRATEGY_BY_TYPE.get(question_type)
