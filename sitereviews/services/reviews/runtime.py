# sitereviews/services/reviews/runtime.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sitereviews.common.logging import get_logger
from sitereviews.common.settings import Settings, get_settings
from sitereviews.domain.errors import StoreUnavailable
from sitereviews.domain.ports.review_store import ReviewStorePort
from sitereviews.services.presentation.board import ReviewBoardPresenter
from sitereviews.services.reviews.submission import SubmissionWorkflow
from sitereviews.services.reviews.sync import SyncController
from sitereviews.services.store.factory import build_review_store

logger = get_logger(__name__)


@dataclass
class ReviewRuntime:
    """Everything one reviews page needs, wired once per app instance."""
    backend: str
    store: Optional[ReviewStorePort]
    presenter: ReviewBoardPresenter
    sync: SyncController
    submissions: SubmissionWorkflow

    @classmethod
    def build(cls, cfg: Optional[Settings] = None, *, store: Optional[ReviewStorePort] = None) -> "ReviewRuntime":
        cfg = cfg or get_settings()
        backend = cfg.store.backend
        if store is None:
            try:
                store = build_review_store(cfg)
            except StoreUnavailable as e:
                logger.warning("%s; continuing without persistence", e)
                backend = "none"
        presenter = ReviewBoardPresenter(empty_message=cfg.reviews.empty_message)
        sync = SyncController(store, presenter, show_date=cfg.reviews.show_date, mode=cfg.reviews.sync_mode)
        submissions = SubmissionWorkflow(store, surface_append_failures=cfg.reviews.surface_append_failures)
        return cls(backend=backend, store=store, presenter=presenter, sync=sync, submissions=submissions)

    async def start(self) -> None:
        await self.sync.start()
        if self.sync.load_error is not None:
            self.degrade(StoreUnavailable(f"review store unreachable: {self.sync.load_error}"))

    def degrade(self, reason: StoreUnavailable) -> None:
        """
        Drop the store and carry on without persistence: submissions still
        validate and reset, nothing is saved and the board stays unloaded.
        """
        logger.warning("%s; continuing without persistence", reason)
        self.sync.stop()
        self._close_store()
        self.store = None
        self.sync.store = None
        self.submissions.store = None
        self.backend = "none"

    async def stop(self) -> None:
        self.sync.stop()
        self.presenter.close()
        await self.submissions.drain()
        self._close_store()
        logger.info("Review runtime stopped")

    def _close_store(self) -> None:
        close = getattr(self.store, "close", None)
        if callable(close):
            close()
