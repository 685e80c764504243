"""
Migration Package

Legacy answer upgrades and the save-time normalization gate for
instructor-authored correct answers.
"""

from .legacy import migrate_legacy_text_map
from .save import AnswerShape, detect_answer_shape, normalize_correct_answer_for_save

__all__ = [
    "migrate_legacy_text_map",
    "AnswerShape",
    "detect_answer_shape",
    "normalize_correct_answer_for_save",
]
