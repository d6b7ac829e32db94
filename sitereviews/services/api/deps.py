# sitereviews/services/api/deps.py
from __future__ import annotations

from fastapi import Request

from sitereviews.services.reviews.runtime import ReviewRuntime


def get_runtime(request: Request) -> ReviewRuntime:
    """The ReviewRuntime created by the app lifespan."""
    return request.app.state.reviews
