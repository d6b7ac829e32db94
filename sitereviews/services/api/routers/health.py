from __future__ import annotations

from fastapi import APIRouter, Depends

from sitereviews.common.settings import get_settings
from sitereviews.services.api.deps import get_runtime
from sitereviews.services.reviews.runtime import ReviewRuntime

cfg = get_settings()
router = APIRouter(prefix=cfg.api.prefix, tags=["health"])


@router.get("/health")
def health(rt: ReviewRuntime = Depends(get_runtime)) -> dict:
    return {"ok": True, "store": rt.backend, "loaded": rt.sync.initial_load_complete}
