# sitereviews/services/reviews/sync.py
from __future__ import annotations

from typing import List, Optional

from sitereviews.common.logging import get_logger
from sitereviews.domain.dataclasses.records import StoredRecord
from sitereviews.domain.dataclasses.stats import AggregateStats
from sitereviews.domain.entities.review import Review
from sitereviews.domain.entities.review_list import ReviewList
from sitereviews.domain.enums.sync_mode import SyncMode
from sitereviews.domain.policies.aggregation import summarize
from sitereviews.domain.ports.presentation import ReviewPresentationPort
from sitereviews.domain.ports.review_store import ReviewStorePort, Subscription
from sitereviews.services.mappers.review import record_to_review

logger = get_logger(__name__)


class SyncController:
    """
    Owns the authoritative newest-first ReviewList for one board/session.

    Sources:
      1. a one-shot bulk read (ascending by date, reversed to newest first)
      2. the store's live "item added" feed

    Live events are merged only after the bulk read completed
    (`initial_load_complete`). What happens to events that arrive *before*
    that point depends on `mode`:

      - SyncMode.gate: they are dropped. Events for pre-existing records are
        redundant with the bulk read, but a record appended while the bulk read
        is still in flight (and missing from its result) is lost as well.
      - SyncMode.buffered: they are held and merged right after the bulk read;
        records the bulk read already returned are discarded, so the cutover is
        exactly the bulk-read completion.

    In both modes a live event for a record that is already in the list is
    ignored, so every stored record is represented at most once.
    """

    def __init__(
        self,
        store: Optional[ReviewStorePort],
        presenter: ReviewPresentationPort,
        *,
        show_date: bool = True,
        mode: SyncMode | str = SyncMode.buffered,
    ) -> None:
        self.store = store
        self.presenter = presenter
        self.show_date = show_date
        self.mode = SyncMode(mode)

        self.reviews = ReviewList()
        self.initial_load_complete = False
        self.suppressed = 0  # gate mode: events dropped before the cutover
        self.load_error: Optional[BaseException] = None
        self._pending: List[Review] = []
        self._subscription: Optional[Subscription] = None

    # ---- lifecycle -------------------------------------------------------

    @property
    def started(self) -> bool:
        return self._subscription is not None

    async def start(self) -> None:
        """
        Subscribe to the live feed, then run the bulk read and render it.
        Without a store nothing initializes: the list stays empty and no
        summary is shown.
        """
        if self.store is None:
            logger.warning("Review sync disabled: no store configured")
            return
        if self.started:
            return

        self._subscription = self.store.subscribe_added(self._on_added)
        try:
            records = await self.store.read_once("date", ascending=True)
        except Exception as e:
            logger.exception("Initial review load failed: %s", e)
            self.load_error = e
            self.stop()
            return

        loaded = [r for r in (record_to_review(rec) for rec in records) if r is not None]
        loaded.reverse()  # newest first
        self.reviews.replace(loaded)
        self.initial_load_complete = True

        merged = self._merge_pending()
        logger.info(
            "Initial review load complete: %d reviews (%d merged from live feed, %d suppressed)",
            len(loaded), merged, self.suppressed,
        )
        self._render_all()

    def stop(self) -> None:
        """Tear down the live subscription; the list keeps its last state."""
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    # ---- live feed -------------------------------------------------------

    def _on_added(self, record: StoredRecord) -> None:
        review = record_to_review(record)
        if review is None:
            return

        if not self.initial_load_complete:
            if self.mode is SyncMode.buffered:
                self._pending.append(review)
            else:
                self.suppressed += 1
                logger.debug("Live review %s arrived before initial load; ignored", record.key)
            return

        if not self.reviews.prepend(review):
            logger.debug("Live review %s already on the board", record.key)
            return
        self.presenter.prepend_one(review, self.show_date)
        self._refresh_summary()

    def _merge_pending(self) -> int:
        pending, self._pending = self._pending, []
        merged = 0
        for review in pending:  # arrival order; each newer one goes in front
            if self.reviews.prepend(review):
                merged += 1
        return merged

    # ---- rendering -------------------------------------------------------

    def _render_all(self) -> None:
        if not self.reviews:
            self.presenter.show_empty_state()
            self.presenter.hide_summary()
            return
        self.presenter.render_full_list(self.reviews.snapshot(), self.show_date)
        self._refresh_summary()

    def _refresh_summary(self) -> None:
        stats = self.stats()
        if stats is None:
            self.presenter.hide_summary()
            return
        self.presenter.show_summary(stats.count, stats.formatted_mean, stats.rounded_mean)

    def stats(self) -> Optional[AggregateStats]:
        return summarize(self.reviews)
