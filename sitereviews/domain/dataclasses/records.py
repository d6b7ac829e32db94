# sitereviews/domain/dataclasses/records.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class StoredRecord:
    """A raw record as delivered by a review store: its key plus the persisted body."""
    key: str
    body: Dict[str, Any] = field(default_factory=dict)

    def sort_key(self) -> tuple:
        return (str(self.body.get("date") or ""), self.key)
