# sitereviews/database/core/main.py
from __future__ import annotations

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from sitereviews.common.settings import get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    # Set a default schema to keep DDL/Autogenerate explicit and consistent
    metadata = MetaData(
        schema=_settings.db_schema if _settings.db_schema and _settings.db_schema.lower() != "public" else None,
        naming_convention=NAMING_CONVENTION,
    )


engine = create_engine(
    _settings.database_url,
    echo=_settings.db.echo,
    pool_size=_settings.db.pool_size,
    max_overflow=_settings.db.max_overflow,
    pool_pre_ping=_settings.db.pool_pre_ping,
    pool_recycle=_settings.db.pool_recycle,
    future=True,
)

# Ensure the app schema is first, then public (so extensions remain visible)
if _settings.db_schema and _settings.db_schema.lower() != "public":
    @event.listens_for(engine, "connect")
    def _set_search_path(dbapi_conn, _):
        with dbapi_conn.cursor() as cur:
            cur.execute(f'SET search_path TO "{_settings.db_schema}", public')


SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)
