# sitereviews/services/store/memory_store.py
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Tuple

from sitereviews.common.dates import parse_iso
from sitereviews.common.logging import get_logger
from sitereviews.common.naming.push_keys import push_key
from sitereviews.domain.dataclasses.records import StoredRecord
from sitereviews.domain.errors import DateFormatError
from sitereviews.domain.ports.review_store import AddedHandler
from sitereviews.services.store.feed import AddedFeed, FeedSubscription

logger = get_logger(__name__)

_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


def _order_value(record: StoredRecord, order_by: str) -> Tuple[Any, str]:
    """Sort key matching the SQL store: real instants for dates, unparseable ones first."""
    value = record.body.get(order_by)
    if order_by != "date":
        return (str(value or ""), record.key)
    try:
        instant = parse_iso(value)
    except DateFormatError:
        return (_UNDATED, record.key)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return (instant, record.key)


class InMemoryReviewStore:
    """
    Process-local realtime collection keyed by push keys.
    Used for development, demos and tests; contents vanish with the process.
    """

    def __init__(self, *, path: str = "reviews", key_factory: Callable[[], str] = push_key) -> None:
        self.path = path
        self._key_factory = key_factory
        self._records: Dict[str, Dict[str, Any]] = {}
        self._feed = AddedFeed(name=f"memory:{path}")

    def seed(self, *bodies: Mapping[str, Any]) -> List[str]:
        """Insert records without notifying listeners (fixtures, demo data)."""
        keys = []
        for body in bodies:
            key = self._key_factory()
            self._records[key] = dict(body)
            keys.append(key)
        return keys

    def _ordered(self) -> List[StoredRecord]:
        # key order == insertion order for push keys
        return [StoredRecord(key=k, body=dict(v)) for k, v in sorted(self._records.items())]

    async def read_once(self, order_by: str = "date", ascending: bool = True) -> List[StoredRecord]:
        await asyncio.sleep(0)
        records = sorted(self._ordered(), key=lambda r: _order_value(r, order_by), reverse=not ascending)
        logger.debug("read_once(%s): %d records", self.path, len(records))
        return records

    def subscribe_added(self, handler: AddedHandler) -> FeedSubscription:
        return self._feed.subscribe(handler, replay=self._ordered())

    async def append(self, record: Mapping[str, Any]) -> str:
        if not isinstance(record, Mapping):
            raise TypeError("record must be a mapping")
        key = self._key_factory()
        self._records[key] = dict(record)
        self._feed.publish(StoredRecord(key=key, body=dict(record)))
        return key

    def close(self) -> None:
        self._feed.close()

    def __len__(self) -> int:
        return len(self._records)
