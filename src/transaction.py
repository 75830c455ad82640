"""Transaction assembly: date + recognized category + original note."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from src.categorize.recognizer import CategoryRecognizer
from src.clock import Clock, current_date
from src.models import OTHER_CATEGORY_NAME, Category, ProcessedTransaction

logger = logging.getLogger(__name__)


def _assemble(
    note: str,
    date_input: str,
    recognizer: CategoryRecognizer,
    clock: Clock | None,
) -> ProcessedTransaction:
    # A caller-supplied date is kept verbatim, without format checks
    date = date_input if date_input else current_date(clock)
    return ProcessedTransaction(
        date=date,
        category_id=recognizer.recognize(note),
        note=note,
    )


def process_transaction(
    note: str,
    date_input: str,
    categories: Sequence[Category],
    clock: Clock | None = None,
    match_order: str = "sorted",
    fallback_name: str = OTHER_CATEGORY_NAME,
) -> ProcessedTransaction:
    """Build a ProcessedTransaction for one note.

    Args:
        note: Free-text description; the only input to classification.
        date_input: Date string to keep as-is. Empty means "today" from clock.
        categories: Categories to recognize against.
        clock: Optional time source; the system clock when None.
        match_order: Keyword scan order, "sorted" or "input".
        fallback_name: Name of the catch-all category.
    """
    recognizer = CategoryRecognizer(
        categories, match_order=match_order, fallback_name=fallback_name,
    )
    return _assemble(note, date_input, recognizer, clock)


def process_transactions(
    entries: Iterable[tuple[str, str]],
    categories: Sequence[Category],
    clock: Clock | None = None,
    match_order: str = "sorted",
    fallback_name: str = OTHER_CATEGORY_NAME,
) -> list[ProcessedTransaction]:
    """Assemble a batch of (note, date_input) pairs with one recognizer."""
    recognizer = CategoryRecognizer(
        categories, match_order=match_order, fallback_name=fallback_name,
    )
    processed = [
        _assemble(note, date_input, recognizer, clock)
        for note, date_input in entries
    ]
    logger.info("Processed %d transactions", len(processed))
    return processed
