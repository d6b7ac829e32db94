# sitereviews/services/store/feed.py
from __future__ import annotations

import asyncio
from typing import Iterable, List, Set

from sitereviews.common.logging import get_logger
from sitereviews.domain.dataclasses.records import StoredRecord
from sitereviews.domain.ports.review_store import AddedHandler

logger = get_logger(__name__)


class FeedSubscription:
    """
    One "item added" listener. Delivers each record key at most once, even when
    a replayed record is also published live. Cancelled subscriptions never fire.
    """

    def __init__(self, feed: "AddedFeed", handler: AddedHandler) -> None:
        self._feed = feed
        self._handler = handler
        self._delivered: Set[str] = set()
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._feed._discard(self)

    def deliver(self, record: StoredRecord) -> None:
        if not self._active or record.key in self._delivered:
            return
        self._delivered.add(record.key)
        try:
            self._handler(record)
        except Exception as e:
            # one broken listener must not starve the others
            logger.exception("%s: added-handler failed for %s: %s", self._feed.name, record.key, e)


class AddedFeed:
    """In-process broadcast of appended records, delivered on the running event loop."""

    def __init__(self, name: str = "reviews") -> None:
        self.name = name
        self._subs: List[FeedSubscription] = []

    def subscribe(self, handler: AddedHandler, replay: Iterable[StoredRecord] = ()) -> FeedSubscription:
        loop = asyncio.get_running_loop()
        sub = FeedSubscription(self, handler)
        self._subs.append(sub)
        for record in replay:
            loop.call_soon(sub.deliver, record)
        return sub

    def replay(self, sub: FeedSubscription, records: Iterable[StoredRecord]) -> None:
        for record in records:
            sub.deliver(record)

    def publish(self, record: StoredRecord) -> None:
        loop = asyncio.get_running_loop()
        for sub in list(self._subs):
            loop.call_soon(sub.deliver, record)

    def close(self) -> None:
        for sub in list(self._subs):
            sub.cancel()

    def _discard(self, sub: FeedSubscription) -> None:
        try:
            self._subs.remove(sub)
        except ValueError:
            pass
