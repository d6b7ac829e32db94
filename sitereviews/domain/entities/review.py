# sitereviews/domain/entities/review.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Review:
    """
    An immutable submitted review.

    `name` and `text` are stored trimmed and must not be blank; `rating` is an
    int in 1..5; `date` is the ISO-8601 submission timestamp (sortable text).

    `key` is the store-assigned record key. It is None until the store has
    accepted the review and is not part of the persisted body.
    """
    name: str
    text: str
    rating: int
    date: str
    key: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Review.name is required")
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("Review.text is required")
        # bool is an int subclass; a stray True must not count as a 1-star rating
        if isinstance(self.rating, bool) or not isinstance(self.rating, int):
            raise ValueError("Review.rating must be an int")
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(f"Review.rating must be between {MIN_RATING} and {MAX_RATING} inclusive")
        if not isinstance(self.date, str) or not self.date.strip():
            raise ValueError("Review.date is required")
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "text", self.text.strip())

    # ---- wire shape ------------------------------------------------------

    def to_record(self) -> Dict[str, Any]:
        """Persisted/transmitted body: {name, text, rating, date}."""
        return {"name": self.name, "text": self.text, "rating": self.rating, "date": self.date}

    @classmethod
    def from_record(cls, record: Mapping[str, Any], key: Optional[str] = None) -> "Review":
        rating = record.get("rating")
        if isinstance(rating, float) and rating.is_integer():
            rating = int(rating)
        return cls(
            name=record.get("name") or "",
            text=record.get("text") or "",
            rating=rating,  # type: ignore[arg-type]
            date=record.get("date") or "",
            key=key if key is not None else record.get("key"),
        )

    def with_key(self, key: str) -> "Review":
        return Review(name=self.name, text=self.text, rating=self.rating, date=self.date, key=key)

    def identity(self) -> Tuple[str, ...]:
        """Stable identity of the underlying stored record."""
        if self.key:
            return ("key", self.key)
        return ("content", self.name, self.text, str(self.rating), self.date)
