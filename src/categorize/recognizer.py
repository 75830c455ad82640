"""Category recognition: ordered fallback chain.

Steps (in priority order):
1. Keyword match — a category name appears in the note
2. Named fallback — the catch-all category ("其他" by default)
3. First category — the first entry in the caller's list
4. Sentinel — NO_CATEGORY_ID (0) when there are no categories

Every note and category list resolves to an id; nothing here raises for
data inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from src.categorize.fallbacks import match_first_category, match_named_fallback
from src.categorize.keyword_match import check_match_order, match_keyword
from src.models import NO_CATEGORY_ID, OTHER_CATEGORY_NAME, Category

logger = logging.getLogger(__name__)


@dataclass
class RecognizeResult:
    """Outcome of recognizing a single note."""
    category_id: int
    method: str  # "keyword", "named_fallback", "first_category" or "sentinel"
    keyword: str | None = None


Step = Callable[[str], "RecognizeResult | None"]


class CategoryRecognizer:
    """Resolves notes to category ids against a fixed category list.

    The list is copied at construction; later changes to the caller's
    sequence do not affect recognition.
    """

    def __init__(
        self,
        categories: Sequence[Category],
        match_order: str = "sorted",
        fallback_name: str = OTHER_CATEGORY_NAME,
    ):
        check_match_order(match_order)
        self.categories: tuple[Category, ...] = tuple(categories)
        self.match_order = match_order
        self.fallback_name = fallback_name
        self.steps: list[tuple[str, Step]] = [
            ("keyword", self._keyword_step),
            ("named_fallback", self._named_fallback_step),
            ("first_category", self._first_category_step),
        ]

    def _keyword_step(self, note: str) -> RecognizeResult | None:
        match = match_keyword(note, self.categories, self.match_order)
        if match is None:
            return None
        return RecognizeResult(
            category_id=match.category_id, method="keyword", keyword=match.keyword,
        )

    def _named_fallback_step(self, note: str) -> RecognizeResult | None:
        match = match_named_fallback(self.categories, self.fallback_name)
        if match is None:
            return None
        return RecognizeResult(category_id=match.category_id, method=match.method)

    def _first_category_step(self, note: str) -> RecognizeResult | None:
        match = match_first_category(self.categories)
        if match is None:
            return None
        return RecognizeResult(category_id=match.category_id, method=match.method)

    def explain(self, note: str) -> RecognizeResult:
        """Run the chain and report which step produced the id."""
        for name, step in self.steps:
            result = step(note)
            if result is not None:
                logger.debug(
                    "Note %r → category %s via %s", note, result.category_id, name,
                )
                return result

        logger.debug("No categories available for note %r", note)
        return RecognizeResult(category_id=NO_CATEGORY_ID, method="sentinel")

    def recognize(self, note: str) -> int:
        return self.explain(note).category_id


def recognize_category(
    note: str,
    categories: Sequence[Category],
    match_order: str = "sorted",
    fallback_name: str = OTHER_CATEGORY_NAME,
) -> int:
    """Return the category id for a note. See CategoryRecognizer."""
    recognizer = CategoryRecognizer(
        categories, match_order=match_order, fallback_name=fallback_name,
    )
    return recognizer.recognize(note)
