from __future__ import annotations

from datetime import datetime
from uuid import UUID as PyUUID

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from sitereviews.database.core.main import Base


class Review(Base):
    """
    One stored review. Rows are append-only: the API never updates or deletes
    them, so there are no audit/update columns.
    """
    __tablename__ = "review"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="rating_1_5"),
        CheckConstraint("length(btrim(name)) > 0", name="name_not_blank"),
        CheckConstraint("length(btrim(text)) > 0", name="text_not_blank"),
        Index("ix_review_date_key", "date", "key"),
    )

    # gen_random_uuid() comes from pgcrypto; the migration enables it
    id: Mapped[PyUUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        server_default=func.gen_random_uuid(),
    )
    # push key assigned at append time; sorts chronologically
    key: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    # submission time (reviewer's clock)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
