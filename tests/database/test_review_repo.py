from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from sitereviews.database.repos.review_repo import SqlAlchemyReviewRepo

T0 = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _add(repo, key, minutes, rating=5, name="Jane Doe"):
    return repo.add(key=key, name=name, text="Great service", rating=rating, date=T0 + timedelta(minutes=minutes))


def test_repo_add_and_list_ordered(db):
    repo = SqlAlchemyReviewRepo(db)
    _add(repo, "-Nb00000002", 20)
    _add(repo, "-Nb00000001", 10)
    _add(repo, "-Nb00000003", 30)
    db.flush()

    asc = [r.key for r in repo.list_ordered(ascending=True)]
    desc = [r.key for r in repo.list_ordered(ascending=False)]
    assert asc == ["-Nb00000001", "-Nb00000002", "-Nb00000003"]
    assert desc == list(reversed(asc))
    assert repo.count() == 3


def test_repo_get_by_key(db):
    repo = SqlAlchemyReviewRepo(db)
    obj = _add(repo, "-Nb0000000a", 0, rating=4)
    db.flush()
    assert obj.id is not None

    got = repo.get_by_key("-Nb0000000a")
    assert got and got.rating == 4 and got.name == "Jane Doe"
    assert repo.get_by_key("missing") is None


def test_repo_rejects_duplicate_key(db):
    repo = SqlAlchemyReviewRepo(db)
    _add(repo, "-Nb0000000d", 0)
    db.flush()
    _add(repo, "-Nb0000000d", 1)
    with pytest.raises(IntegrityError):
        db.flush()


@pytest.mark.parametrize("bad", [0, 6])
def test_repo_rating_check_constraint(db, bad):
    repo = SqlAlchemyReviewRepo(db)
    _add(repo, f"-Nbbad{bad}", 0, rating=bad)
    with pytest.raises(IntegrityError):
        db.flush()
