from __future__ import annotations
from enum import StrEnum


class SubmissionOutcome(StrEnum):
    success = "success"
    error = "error"
