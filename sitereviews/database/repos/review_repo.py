from __future__ import annotations
from datetime import datetime
from typing import Optional, List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from sitereviews.database.models.review import Review as DBReview


class SqlAlchemyReviewRepo:
    """Append-only access to the review table; there is no update/delete path."""

    def __init__(self, session: Session) -> None:
        self.db = session

    def get_by_key(self, key: str) -> Optional[DBReview]:
        stmt = select(DBReview).where(DBReview.key == key).limit(1)
        return self.db.execute(stmt).scalars().first()

    def list_ordered(self, *, ascending: bool = True) -> List[DBReview]:
        if ascending:
            order = (DBReview.date.asc(), DBReview.key.asc())
        else:
            order = (DBReview.date.desc(), DBReview.key.desc())
        stmt = select(DBReview).order_by(*order)
        return self.db.execute(stmt).scalars().all()

    def count(self) -> int:
        return int(self.db.execute(select(func.count()).select_from(DBReview)).scalar_one())

    def add(
        self,
        *,
        key: str,
        name: str,
        text: str,
        rating: int,
        date: datetime,
    ) -> DBReview:
        obj = DBReview(key=key, name=name, text=text, rating=rating, date=date)
        self.db.add(obj)
        return obj
