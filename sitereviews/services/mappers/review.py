# sitereviews/services/mappers/review.py
from __future__ import annotations

from typing import Any, Optional

from sitereviews.common.dates import format_review_date, to_iso
from sitereviews.common.logging import get_logger
from sitereviews.common.strings.names import format_name, review_count_label
from sitereviews.domain.dataclasses.records import StoredRecord
from sitereviews.domain.entities.review import MAX_RATING, Review
from sitereviews.services.schemas.reviews import ReviewCard, ReviewRead, ReviewSummary

logger = get_logger(__name__)


def _stars(filled: int) -> list[bool]:
    return [i < filled for i in range(MAX_RATING)]


def record_to_review(record: StoredRecord) -> Optional[Review]:
    """Raw store record -> Review. Malformed records are logged and skipped (None)."""
    try:
        return Review.from_record(record.body, key=record.key)
    except (ValueError, TypeError) as e:
        logger.warning("Skipping malformed review record %s: %s", record.key, e)
        return None


def row_to_record(row: Any) -> StoredRecord:
    """sitereviews.database.models.review.Review row -> StoredRecord."""
    return StoredRecord(
        key=row.key,
        body={"name": row.name, "text": row.text, "rating": row.rating, "date": to_iso(row.date)},
    )


def to_review_read(review: Review) -> ReviewRead:
    return ReviewRead(key=review.key, **review.to_record())


def to_review_card(review: Review, show_date: bool) -> ReviewCard:
    date_label = None
    if show_date and review.date:
        date_label = format_review_date(review.date)
    return ReviewCard(
        key=review.key,
        display_name=format_name(review.name),
        text=review.text,
        rating=review.rating,
        stars=_stars(review.rating),
        aria_label=f"{review.rating} out of {MAX_RATING} stars",
        date_label=date_label,
    )


def to_summary(count: int, formatted_mean: str, rounded_mean: int) -> ReviewSummary:
    return ReviewSummary(
        visible=True,
        count=count,
        count_label=review_count_label(count),
        average=formatted_mean,
        rounded=rounded_mean,
        stars=_stars(rounded_mean),
    )
