# tests/database/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy import delete, text
from sqlalchemy.orm import Session, sessionmaker

from sitereviews.database.models import Review

APP_SCHEMA = "sitereviews"


@pytest.fixture()
def db(db_engine) -> Session:
    """
    Per-test SQLAlchemy Session bound to a transaction (rolled back after each test).
    """
    connection = db_engine.connect()
    trans = connection.begin()
    connection.execute(text(f'SET search_path TO "{APP_SCHEMA}", public'))

    session = Session(bind=connection, future=True)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()


@pytest.fixture()
def session_factory(db_engine):
    """
    Real sessionmaker for code that opens its own sessions (SqlReviewStore).
    Those commit, so the table is emptied after each test.
    """
    factory = sessionmaker(bind=db_engine, expire_on_commit=False, future=True, autoflush=False)
    try:
        yield factory
    finally:
        with factory() as s, s.begin():
            s.execute(delete(Review))
