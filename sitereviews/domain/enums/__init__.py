from sitereviews.domain.enums.submission_outcome import SubmissionOutcome
from sitereviews.domain.enums.sync_mode import SyncMode
__all__ = [
    "SubmissionOutcome",
    "SyncMode",
]
