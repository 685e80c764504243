"""
Matching Package

Leaf-layer primitives: text normalization, single-answer matching,
word-limit checks and partial-credit mapping scores. Every function is pure.
"""

from .normalize import normalize_for_match, normalize_for_store, normalize_for_policy
from .matcher import matches, within_word_limit
from .mapping import score_mapping, tally_keys

__all__ = [
    "normalize_for_match",
    "normalize_for_store",
    "normalize_for_policy",
    "matches",
    "within_word_limit",
    "score_mapping",
    "tally_keys",
]
