"""
Module: matching.normalize

Purpose:
    Text normalization for answer comparison and storage.

Key Functions:
    - normalize_for_match(): Trim, collapse whitespace, lowercase
    - normalize_for_store(): Trim and collapse whitespace, keep case
    - normalize_for_policy(): Pick one of the above from a case-sensitivity flag

Dependencies:
    - re (std)

Used By:
    - matching.matcher
    - matching.mapping
    - migration.save
    - grading.strategies
"""

from __future__ import annotations

import re

# str patterns are Unicode-aware: covers tabs, newlines, NBSP, ideographic space.
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_for_store(text: str) -> str:
    """
    Trim and collapse whitespace runs to a single ASCII space.

    Case is preserved so stored answers stay readable and still compare
    correctly for case-sensitive exercises.

    Example:
        >>> normalize_for_store("  Carbon\\u00a0\\tDioxide ")
        'Carbon Dioxide'
    """
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_for_match(text: str) -> str:
    """
    Comparison form of an answer: collapsed whitespace, lowercased.

    Idempotent. Never used for storage.

    Example:
        >>> normalize_for_match("  The   Industrial\\nRevolution ")
        'the industrial revolution'
    """
    return normalize_for_store(text).lower()


def normalize_for_policy(text: str, case_sensitive: bool) -> str:
    """Comparison form honouring the exercise's case policy."""
    if case_sensitive:
        return normalize_for_store(text)
    return normalize_for_match(text)
