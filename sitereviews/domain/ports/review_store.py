from __future__ import annotations

from typing import Any, Callable, List, Mapping, Protocol

from sitereviews.domain.dataclasses.records import StoredRecord

AddedHandler = Callable[[StoredRecord], None]


class Subscription(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class ReviewStorePort(Protocol):
    """
    Key-ordered realtime review collection.

    - read_once: one-shot read of every record, ordered by `order_by`.
    - subscribe_added: handler fires once per record that exists now or is
      appended later; no ordering guarantee relative to read_once.
    - append: stores a record body and returns the assigned key.
    """

    async def read_once(self, order_by: str = "date", ascending: bool = True) -> List[StoredRecord]: ...

    def subscribe_added(self, handler: AddedHandler) -> Subscription: ...

    async def append(self, record: Mapping[str, Any]) -> str: ...
