# sitereviews/services/store/factory.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import text

from sitereviews.common.logging import get_logger
from sitereviews.common.settings import Settings, get_settings
from sitereviews.domain.errors import StoreUnavailable
from sitereviews.domain.ports.review_store import ReviewStorePort
from sitereviews.services.store.memory_store import InMemoryReviewStore

logger = get_logger(__name__)


def build_review_store(cfg: Optional[Settings] = None) -> Optional[ReviewStorePort]:
    """
    Pick the store adapter for the configured backend.
    Returns None when no store is configured (degraded, no-persistence mode)
    and raises StoreUnavailable when the postgres server cannot be reached.
    """
    cfg = cfg or get_settings()
    backend = cfg.store.backend
    if backend == "none":
        logger.warning("No review store configured; reviews will not be persisted")
        return None
    if backend == "memory":
        return InMemoryReviewStore(path=cfg.store.reviews_path)
    if backend == "postgres":
        try:
            # imported lazily: creates the engine on import
            from sitereviews.database.core import main as db_main
            from sitereviews.services.store.sql_store import SqlReviewStore

            # the engine connects lazily; make an unreachable server fail here
            with db_main.SessionLocal() as db:
                db.execute(text("SELECT 1"))
        except Exception as e:
            raise StoreUnavailable(f"postgres review store could not be set up: {e}") from e
        return SqlReviewStore(db_main.SessionLocal)
    raise ValueError(f"unknown store backend: {backend!r}")
