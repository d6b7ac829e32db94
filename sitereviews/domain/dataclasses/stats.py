# sitereviews/domain/dataclasses/stats.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from fractions import Fraction
from typing import Any, Dict


@dataclass(frozen=True)
class AggregateStats:
    """Derived from the current review list; never stored."""
    count: int
    mean: Fraction
    formatted_mean: str   # one decimal, e.g. "4.3"
    rounded_mean: int     # number of filled summary stars (0..5)

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["mean"] = float(self.mean)
        return d
