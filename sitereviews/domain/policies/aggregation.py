# sitereviews/domain/policies/aggregation.py
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from fractions import Fraction
from typing import Iterable, Optional, Sequence

from sitereviews.domain.dataclasses.stats import AggregateStats
from sitereviews.domain.entities.review import Review

_ONE_DECIMAL = Decimal("0.1")
_WHOLE = Decimal("1")


def count(reviews: Sequence[Review] | Iterable[Review]) -> int:
    return sum(1 for _ in reviews)


def mean_rating(reviews: Iterable[Review]) -> Optional[Fraction]:
    """Exact arithmetic mean of ratings, or None for an empty list."""
    total = 0
    n = 0
    for r in reviews:
        total += r.rating
        n += 1
    if n == 0:
        return None
    return Fraction(total, n)


def format_mean(mean: Fraction) -> str:
    """One decimal place, halves rounded up ("4.25" -> "4.3")."""
    exact = Decimal(mean.numerator) / Decimal(mean.denominator)
    return str(exact.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def rounded_mean(formatted_mean: str) -> int:
    """
    Nearest integer of the *displayed* one-decimal mean, so the summary stars
    always agree with the number shown next to them.
    """
    return int(Decimal(formatted_mean).quantize(_WHOLE, rounding=ROUND_HALF_UP))


def summarize(reviews: Iterable[Review]) -> Optional[AggregateStats]:
    """
    Count/mean summary for the board. Returns None when there are no reviews,
    which callers treat as "hide the summary".
    """
    items = tuple(reviews)
    mean = mean_rating(items)
    if mean is None:
        return None
    text = format_mean(mean)
    return AggregateStats(count=len(items), mean=mean, formatted_mean=text, rounded_mean=rounded_mean(text))
