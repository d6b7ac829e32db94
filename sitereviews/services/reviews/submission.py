# sitereviews/services/reviews/submission.py
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from sitereviews.common.dates import utc_now_iso
from sitereviews.common.logging import get_logger
from sitereviews.domain.entities.rating_selection import RatingSelector
from sitereviews.domain.entities.review import Review
from sitereviews.domain.enums.submission_outcome import SubmissionOutcome
from sitereviews.domain.errors import AppendFailure, ReviewError, ReviewValidationError
from sitereviews.domain.ports.review_store import ReviewStorePort

logger = get_logger(__name__)


@dataclass
class ReviewForm:
    """Local state of one review form: the two text fields plus the star picker."""
    name: str = ""
    text: str = ""
    selector: RatingSelector = field(default_factory=RatingSelector)

    def reset(self) -> None:
        self.name = ""
        self.text = ""
        self.selector.reset()


@dataclass
class SubmissionResult:
    outcome: SubmissionOutcome
    review: Optional[Review] = None
    error: Optional[ReviewError] = None
    persisted: bool = False  # True only when the store acknowledged the append

    @property
    def ok(self) -> bool:
        return self.outcome is SubmissionOutcome.success

    @property
    def missing(self) -> List[str]:
        if isinstance(self.error, ReviewValidationError):
            return list(self.error.missing)
        return []


class SubmissionWorkflow:
    """
    Validates a ReviewForm, builds the Review and appends it to the store.

    Exactly one append per successful submission. On validation failure the
    store is not touched and the form is left exactly as it was.

    surface_append_failures=True awaits the append; a failed append becomes an
    error outcome and the form keeps its values so the reviewer can retry.
    surface_append_failures=False sends the append without waiting for it and
    reports success right away; a failed append is only logged.
    """

    def __init__(
        self,
        store: Optional[ReviewStorePort],
        *,
        surface_append_failures: bool = True,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self.store = store
        self.surface_append_failures = surface_append_failures
        self._clock = clock
        self._in_flight: Set[asyncio.Task] = set()

    @staticmethod
    def validate(form: ReviewForm) -> List[str]:
        missing = []
        if not (form.name or "").strip():
            missing.append("name")
        if not (form.text or "").strip():
            missing.append("text")
        if not form.selector.has_selection:
            missing.append("rating")
        return missing

    async def submit(self, form: ReviewForm) -> SubmissionResult:
        missing = self.validate(form)
        if missing:
            return SubmissionResult(outcome=SubmissionOutcome.error, error=ReviewValidationError(missing))

        review = Review(
            name=form.name,
            text=form.text,
            rating=form.selector.committed,
            date=self._clock(),
        )

        persisted = False
        if self.store is None:
            logger.debug("No review store; submission from %r not persisted", review.name)
        elif self.surface_append_failures:
            try:
                key = await self.store.append(review.to_record())
            except Exception as e:
                logger.exception("Review append failed: %s", e)
                return SubmissionResult(
                    outcome=SubmissionOutcome.error,
                    review=review,
                    error=AppendFailure("review could not be saved", cause=e),
                )
            review = review.with_key(key)
            persisted = True
        else:
            task = asyncio.get_running_loop().create_task(self._append_unchecked(review))
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)

        form.reset()
        return SubmissionResult(outcome=SubmissionOutcome.success, review=review, persisted=persisted)

    async def _append_unchecked(self, review: Review) -> None:
        try:
            await self.store.append(review.to_record())  # type: ignore[union-attr]
        except Exception as e:
            logger.exception("Review append failed after reporting success: %s", e)

    async def drain(self) -> None:
        """Wait for unchecked appends still in flight (shutdown, tests)."""
        if self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)
