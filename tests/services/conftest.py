# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from sitereviews.common.settings import ReviewsConfig, Settings, StoreConfig
from sitereviews.services.api.app import create_app
from sitereviews.services.store.memory_store import InMemoryReviewStore


@pytest.fixture()
def review_store() -> InMemoryReviewStore:
    return InMemoryReviewStore()


@pytest.fixture()
def api_client(review_store):
    """
    A TestClient over an app wired to a fresh in-memory store. Entering the
    client runs the lifespan, so the initial bulk load is done before the
    first request.
    """
    cfg = Settings(store=StoreConfig(backend="memory"), reviews=ReviewsConfig(sync_mode="buffered"))
    app = create_app(cfg, store=review_store)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def degraded_client():
    """App with persistence switched off (no store at all)."""
    cfg = Settings(store=StoreConfig(backend="none"))
    app = create_app(cfg)
    with TestClient(app) as client:
        yield client
