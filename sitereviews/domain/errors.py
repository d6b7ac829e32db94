# sitereviews/domain/errors.py
from __future__ import annotations

from typing import Iterable, List, Optional


class ReviewError(Exception):
    """Base class for review subsystem failures. None of them are fatal to the page."""


class ReviewValidationError(ReviewError, ValueError):
    """Submission blocked: one or more of name/text/rating missing."""

    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"missing required review fields: {', '.join(self.missing)}")


class StoreUnavailable(ReviewError):
    """No review store is configured or reachable; callers degrade to no persistence."""


class DateFormatError(ReviewError, ValueError):
    pass


class AppendFailure(ReviewError):
    """The store rejected or failed an append."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
