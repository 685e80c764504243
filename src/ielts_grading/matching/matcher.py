"""
Module: matching.matcher

Purpose:
    Single-answer matching against a correct text and its accepted variants,
    and the word-limit check applied to free-text answers.

Key Functions:
    - matches(): Compare a student's text with correct text + variants
    - within_word_limit(): Check a text's word count against a limit

Dependencies:
    - matching.normalize

Used By:
    - grading.strategies
    - grading.batch
"""

from __future__ import annotations

from typing import Iterable, List

from .normalize import normalize_for_policy, normalize_for_store


def _sorted_words(text: str) -> List[str]:
    return sorted(word for word in text.split(" ") if word)


def matches(
    student_text: str,
    correct_text: str,
    accepted_variants: Iterable[str],
    case_sensitive: bool,
    strict_word_order: bool = True,
) -> bool:
    """
    Check a student's answer against the correct text and its variants.

    Both sides are trimmed and whitespace-collapsed; they are also lowercased
    unless `case_sensitive` is set. Candidates are tried in order: the
    correct text first, then each variant.

    With `strict_word_order` the normalized strings must be equal. Without
    it, the words are compared as sorted lists, so order is ignored but
    repeated words still count ("the the cat" != "the cat").

    Args:
        student_text: The student's answer
        correct_text: Primary correct answer
        accepted_variants: Alternative answers, tried after the primary
        case_sensitive: Exercise-level case policy
        strict_word_order: Require the same word sequence (default True)

    Returns:
        True on the first matching candidate, False if none match

    Example:
        >>> matches("dioxide carbon", "carbon dioxide", [], False, strict_word_order=False)
        True
        >>> matches("dioxide carbon", "carbon dioxide", [], False)
        False
    """
    student = normalize_for_policy(student_text, case_sensitive)
    student_words = None if strict_word_order else _sorted_words(student)

    for candidate in (correct_text, *accepted_variants):
        expected = normalize_for_policy(candidate, case_sensitive)
        if strict_word_order:
            if expected == student:
                return True
        elif _sorted_words(expected) == student_words:
            return True
    return False


def within_word_limit(text: str, limit: int) -> bool:
    """
    Check that a text has at most `limit` words.

    Args:
        text: Answer text; empty text has zero words
        limit: Maximum number of words (e.g. 3 for "NO MORE THAN THREE WORDS")

    Returns:
        True if the word count is within the limit

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"Word limit cannot be negative: {limit}")
    words = [word for word in normalize_for_store(text).split(" ") if word]
    return len(words) <= limit
