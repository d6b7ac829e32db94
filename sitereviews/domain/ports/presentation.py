from __future__ import annotations

from typing import Protocol, Sequence

from sitereviews.domain.entities.review import Review


class ReviewPresentationPort(Protocol):
    # orderedReviews are newest first
    def render_full_list(self, reviews: Sequence[Review], show_date: bool) -> None: ...

    def prepend_one(self, review: Review, show_date: bool) -> None: ...

    def show_summary(self, count: int, formatted_mean: str, rounded_mean: int) -> None: ...

    def hide_summary(self) -> None: ...

    def show_empty_state(self) -> None: ...
