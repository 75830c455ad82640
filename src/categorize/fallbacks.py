"""Fallback rules used when no keyword appears in the note.

Named fallback: the catch-all category (by default "其他").
First category: the first entry of the caller's list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from src.models import OTHER_CATEGORY_NAME, Category


@dataclass
class FallbackMatch:
    """Result of a fallback rule."""
    category_id: int
    method: str  # "named_fallback" or "first_category"


def match_named_fallback(
    categories: Sequence[Category],
    fallback_name: str = OTHER_CATEGORY_NAME,
) -> FallbackMatch | None:
    """Return the first category (input order) named exactly fallback_name."""
    for cat in categories:
        if cat.name == fallback_name:
            return FallbackMatch(category_id=cat.id, method="named_fallback")
    return None


def match_first_category(categories: Sequence[Category]) -> FallbackMatch | None:
    """Return the first category in the list, or None if it is empty."""
    if not categories:
        return None
    return FallbackMatch(category_id=categories[0].id, method="first_category")
