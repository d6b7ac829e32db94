# sitereviews/services/schemas/reviews.py
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------- Submission ----------

class ReviewCreate(BaseModel):
    # Blank values are allowed here; the submission workflow reports them as missing.
    name: str = Field("", max_length=255)
    text: str = Field("", max_length=8000)
    rating: int = Field(0, ge=0, le=5, description="0 = no star chosen")


class ReviewRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: Optional[str] = None
    name: str
    text: str
    rating: int
    date: str


class SubmissionResponse(BaseModel):
    outcome: Literal["success", "error"]
    review: Optional[ReviewRead] = None
    missing: List[str] = []
    detail: Optional[str] = None
    persisted: bool = False


# ---------- Board (presentation view model) ----------

class ReviewCard(BaseModel):
    key: Optional[str] = None
    display_name: str
    text: str
    rating: int
    stars: List[bool]
    aria_label: str
    date_label: Optional[str] = None


class ReviewSummary(BaseModel):
    visible: bool = False
    count: int = 0
    count_label: str = ""
    average: Optional[str] = None
    rounded: int = 0
    stars: List[bool] = []


class ReviewBoard(BaseModel):
    cards: List[ReviewCard] = []
    summary: ReviewSummary = ReviewSummary()
    empty: bool = False
    empty_message: Optional[str] = None
    loaded: bool = False


class BoardEvent(BaseModel):
    type: Literal["render", "prepend", "summary", "empty", "closed"]
    cards: List[ReviewCard] = []
    summary: Optional[ReviewSummary] = None
    empty_message: Optional[str] = None
