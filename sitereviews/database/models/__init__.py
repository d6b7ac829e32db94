# sitereviews/database/models/__init__.py

from sitereviews.database.core.main import Base
from sitereviews.database.models.review import Review

__all__ = [
    "Base",
    "Review",
]
