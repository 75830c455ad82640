"""Keyword matching: maps a free-text note to a category by name.

A category's name is its keyword. The note matches when the name occurs
anywhere in it as a contiguous substring (case-sensitive, no tokenizing).
An empty name is a substring of every note, so it always matches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from src.models import Category

logger = logging.getLogger(__name__)

# "sorted": scan names in code-point order, so when a note contains several
#   names the one that sorts first wins.
# "input": scan names in the order the categories were given.
MATCH_ORDERS = ("sorted", "input")


@dataclass
class KeywordMatch:
    """Result of a keyword match."""
    category_id: int
    keyword: str


def check_match_order(match_order: str) -> None:
    """Raise ValueError unless match_order is one of MATCH_ORDERS."""
    if match_order not in MATCH_ORDERS:
        raise ValueError(
            f"Unknown match order '{match_order}', expected one of {MATCH_ORDERS}"
        )


def build_keyword_map(categories: Sequence[Category]) -> dict[str, int]:
    """Map category name → id. A repeated name keeps the last id."""
    keyword_map: dict[str, int] = {}
    for cat in categories:
        keyword_map[cat.name] = cat.id
    return keyword_map


def match_keyword(
    note: str,
    categories: Sequence[Category],
    match_order: str = "sorted",
) -> KeywordMatch | None:
    """Return the first category whose name appears in the note.

    Names are scanned in match_order.
    """
    check_match_order(match_order)

    keyword_map = build_keyword_map(categories)
    keywords = sorted(keyword_map) if match_order == "sorted" else list(keyword_map)

    for keyword in keywords:
        if keyword in note:
            return KeywordMatch(category_id=keyword_map[keyword], keyword=keyword)
    return None
