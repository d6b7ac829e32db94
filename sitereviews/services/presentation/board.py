# sitereviews/services/presentation/board.py
from __future__ import annotations

import asyncio
from typing import List, Sequence

from sitereviews.common.logging import get_logger
from sitereviews.domain.entities.review import Review
from sitereviews.services.mappers.review import to_review_card, to_summary
from sitereviews.services.schemas.reviews import BoardEvent, ReviewBoard, ReviewCard, ReviewSummary

logger = get_logger(__name__)


class ReviewBoardPresenter:
    """
    ReviewPresentationPort that keeps a render-ready view model of the reviews
    page and fans every change out to live listeners (one asyncio.Queue each).
    """

    def __init__(self, *, empty_message: str = "No reviews yet. Be the first!", listener_queue_size: int = 100) -> None:
        self.empty_message = empty_message
        self._cards: List[ReviewCard] = []
        self._summary = ReviewSummary(visible=False)
        self._empty = False
        self._loaded = False
        self._listeners: List[asyncio.Queue] = []
        self._queue_size = listener_queue_size

    # ---- port ------------------------------------------------------------

    def render_full_list(self, reviews: Sequence[Review], show_date: bool) -> None:
        self._cards = [to_review_card(r, show_date) for r in reviews]
        self._empty = False
        self._loaded = True
        self._emit(BoardEvent(type="render", cards=list(self._cards)))

    def prepend_one(self, review: Review, show_date: bool) -> None:
        card = to_review_card(review, show_date)
        self._cards.insert(0, card)
        self._empty = False
        self._loaded = True
        self._emit(BoardEvent(type="prepend", cards=[card]))

    def show_summary(self, count: int, formatted_mean: str, rounded_mean: int) -> None:
        self._summary = to_summary(count, formatted_mean, rounded_mean)
        self._emit(BoardEvent(type="summary", summary=self._summary))

    def hide_summary(self) -> None:
        self._summary = ReviewSummary(visible=False)
        self._emit(BoardEvent(type="summary", summary=self._summary))

    def show_empty_state(self) -> None:
        self._cards = []
        self._empty = True
        self._loaded = True
        self._emit(BoardEvent(type="empty", empty_message=self.empty_message))

    # ---- queries ---------------------------------------------------------

    def board(self) -> ReviewBoard:
        return ReviewBoard(
            cards=list(self._cards),
            summary=self._summary,
            empty=self._empty,
            empty_message=self.empty_message if self._empty else None,
            loaded=self._loaded,
        )

    @property
    def summary(self) -> ReviewSummary:
        return self._summary

    # ---- live listeners --------------------------------------------------

    def listen(self) -> asyncio.Queue:
        q: asyncio.Queue = asyncio.Queue(maxsize=self._queue_size)
        self._listeners.append(q)
        return q

    def unlisten(self, q: asyncio.Queue) -> None:
        try:
            self._listeners.remove(q)
        except ValueError:
            pass

    def close(self) -> None:
        """Tell every live listener the board is going away."""
        for q in list(self._listeners):
            self.unlisten(q)
            self._close_listener(q)

    def _emit(self, event: BoardEvent) -> None:
        for q in list(self._listeners):
            try:
                q.put_nowait(event)
            except asyncio.QueueFull:
                logger.warning("Dropping slow board listener")
                self.unlisten(q)
                self._close_listener(q)

    @staticmethod
    def _close_listener(q: asyncio.Queue) -> None:
        """Replace whatever the listener still has queued with a single "closed" event."""
        while not q.empty():
            q.get_nowait()
        q.put_nowait(BoardEvent(type="closed"))
