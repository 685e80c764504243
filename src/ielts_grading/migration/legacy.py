"""
Module: migration.legacy

Purpose:
    Upgrade note/table/flowchart answer maps written before blanks carried
    accepted variants. Old rows store each blank as a bare string; new rows
    store a structured blank record.

Key Functions:
    - migrate_legacy_text_map(): Upgrade every blank to the structured shape

Dependencies:
    - core.models.answers.StructuredBlank

Used By:
    - grading.strategies (structured blanks)
    - data migration jobs reading legacy rows

Shapes:
    Old: {"1": "fifteen percent"}
    New: {"1": {"answer": "fifteen percent", "acceptedVariants": [], "strictWordOrder": true}}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from ielts_grading.core.models.answers import StructuredBlank

logger = logging.getLogger(__name__)


def migrate_legacy_text_map(
    raw: Optional[Mapping[str, Any]],
) -> Dict[str, Dict[str, Any]]:
    """
    Upgrade a blanks map to structured blank records.

    Bare strings become `{answer, acceptedVariants: [], strictWordOrder: True}`.
    Structured values are kept, with a missing `acceptedVariants` or
    `strictWordOrder` filled in; a stored `strictWordOrder` is never
    overridden. Values of any other type cannot be graded and are dropped.

    Args:
        raw: Key -> bare string or structured record (None treated as empty)

    Returns:
        New dict of key -> structured record; `raw` is not modified

    Example:
        >>> migrate_legacy_text_map({"1": "fifteen percent"})
        {'1': {'answer': 'fifteen percent', 'acceptedVariants': [], 'strictWordOrder': True}}
    """
    result: Dict[str, Dict[str, Any]] = {}
    if not raw:
        return result

    for key, value in raw.items():
        if isinstance(value, str):
            result[key] = StructuredBlank(answer=value).to_dict()
        elif isinstance(value, Mapping) and "answer" in value:
            upgraded = dict(value)
            if upgraded.get("acceptedVariants") is None:
                upgraded["acceptedVariants"] = []
            if upgraded.get("strictWordOrder") is None:
                upgraded["strictWordOrder"] = True
            result[key] = upgraded
        else:
            logger.debug(f"Dropping unrecognised blank {key!r}: {value!r}")
    return result
