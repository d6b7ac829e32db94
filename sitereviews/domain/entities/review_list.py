# sitereviews/domain/entities/review_list.py
from __future__ import annotations

from typing import Iterable, Iterator, List, Set, Tuple

from sitereviews.domain.entities.review import Review


class ReviewList:
    """
    Newest-first sequence of reviews holding at most one entry per stored record.
    Identity is the record key when present, otherwise the review content.
    """

    def __init__(self, reviews: Iterable[Review] = ()) -> None:
        self._items: List[Review] = []
        self._seen: Set[Tuple[str, ...]] = set()
        self.replace(reviews)

    def replace(self, reviews: Iterable[Review]) -> None:
        """Swap the whole list (bulk load). Later duplicates of an identity are dropped."""
        self._items = []
        self._seen = set()
        for r in reviews:
            ident = r.identity()
            if ident in self._seen:
                continue
            self._seen.add(ident)
            self._items.append(r)

    def prepend(self, review: Review) -> bool:
        """Insert at the front. Returns False (no change) if the record is already present."""
        ident = review.identity()
        if ident in self._seen:
            return False
        self._seen.add(ident)
        self._items.insert(0, review)
        return True

    def contains(self, review: Review) -> bool:
        return review.identity() in self._seen

    def snapshot(self) -> Tuple[Review, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Review]:
        return iter(tuple(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)
