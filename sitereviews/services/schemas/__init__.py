from sitereviews.services.schemas.reviews import (
    ReviewCreate,
    ReviewRead,
    SubmissionResponse,
    ReviewCard,
    ReviewSummary,
    ReviewBoard,
    BoardEvent,
)
__all__ = [
    "ReviewCreate",
    "ReviewRead",
    "SubmissionResponse",
    "ReviewCard",
    "ReviewSummary",
    "ReviewBoard",
    "BoardEvent",
]
