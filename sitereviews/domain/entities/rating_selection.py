# sitereviews/domain/entities/rating_selection.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sitereviews.domain.entities.review import MAX_RATING, MIN_RATING


def _check_star(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("star value must be an int")
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValueError(f"star value must be between {MIN_RATING} and {MAX_RATING} inclusive")
    return value


@dataclass
class RatingSelector:
    """
    Star picker state for one form session.

    `committed` is the chosen value (0 = nothing chosen yet). `preview` is a
    hover value used only for visual feedback; it never touches `committed`
    and is never persisted.
    """
    committed: int = 0
    preview: Optional[int] = None

    def select(self, value: int) -> None:
        # idempotent: selecting the current value again changes nothing
        self.committed = _check_star(value)

    def show_preview(self, value: int) -> None:
        self.preview = _check_star(value)

    def clear_preview(self) -> None:
        self.preview = None

    def reset(self) -> None:
        self.committed = 0
        self.preview = None

    @property
    def has_selection(self) -> bool:
        return self.committed > 0

    @property
    def displayed(self) -> int:
        """Value the indicators should currently reflect."""
        return self.preview if self.preview is not None else self.committed

    def filled(self) -> List[bool]:
        shown = self.displayed
        return [i <= shown for i in range(MIN_RATING, MAX_RATING + 1)]
