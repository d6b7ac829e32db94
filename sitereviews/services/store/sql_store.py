# sitereviews/services/store/sql_store.py
from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Mapping, Set

from sqlalchemy.orm import Session, sessionmaker

from sitereviews.common.dates import parse_iso
from sitereviews.common.logging import get_logger
from sitereviews.common.naming.push_keys import push_key
from sitereviews.database.repos.review_repo import SqlAlchemyReviewRepo
from sitereviews.domain.dataclasses.records import StoredRecord
from sitereviews.domain.ports.review_store import AddedHandler
from sitereviews.services.mappers.review import row_to_record
from sitereviews.services.store.feed import AddedFeed, FeedSubscription

logger = get_logger(__name__)


class SqlReviewStore:
    """
    ReviewStorePort over the Postgres `review` table.

    Blocking SQLAlchemy work runs in worker threads (asyncio.to_thread) so the
    event loop only ever sees the awaitable. The live feed covers rows that
    exist when a subscriber attaches plus rows appended through this adapter.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        key_factory: Callable[[], str] = push_key,
    ) -> None:
        self._session_factory = session_factory
        self._key_factory = key_factory
        self._feed = AddedFeed(name="postgres:review")
        self._tasks: Set[asyncio.Task] = set()

    # ---- blocking helpers (worker thread) --------------------------------

    def _list_records(self, ascending: bool) -> List[StoredRecord]:
        with self._session_factory() as db:
            rows = SqlAlchemyReviewRepo(db).list_ordered(ascending=ascending)
            return [row_to_record(r) for r in rows]

    def _insert(self, key: str, record: Mapping[str, Any]) -> None:
        with self._session_factory() as db, db.begin():
            SqlAlchemyReviewRepo(db).add(
                key=key,
                name=record["name"],
                text=record["text"],
                rating=record["rating"],
                date=parse_iso(record["date"]),
            )

    # ---- port ------------------------------------------------------------

    async def read_once(self, order_by: str = "date", ascending: bool = True) -> List[StoredRecord]:
        if order_by != "date":
            raise ValueError(f"unsupported order key: {order_by!r}")
        records = await asyncio.to_thread(self._list_records, ascending)
        logger.debug("read_once: %d rows", len(records))
        return records

    def subscribe_added(self, handler: AddedHandler) -> FeedSubscription:
        sub = self._feed.subscribe(handler)
        task = asyncio.get_running_loop().create_task(self._replay(sub))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return sub

    async def _replay(self, sub: FeedSubscription) -> None:
        try:
            existing = await asyncio.to_thread(self._list_records, True)
        except Exception as e:
            logger.exception("Replaying existing reviews failed: %s", e)
            return
        self._feed.replay(sub, existing)

    async def append(self, record: Mapping[str, Any]) -> str:
        key = self._key_factory()
        await asyncio.to_thread(self._insert, key, record)
        self._feed.publish(StoredRecord(key=key, body=dict(record)))
        logger.info("Stored review %s", key)
        return key

    def close(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        self._feed.close()
