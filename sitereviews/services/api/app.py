from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sitereviews.common.logging import get_logger
from sitereviews.common.settings import Settings, get_settings
from sitereviews.domain.ports.review_store import ReviewStorePort
from sitereviews.services.api.routers import health, reviews
from sitereviews.services.reviews.runtime import ReviewRuntime

logger = get_logger(__name__)


def create_app(cfg: Optional[Settings] = None, *, store: Optional[ReviewStorePort] = None) -> FastAPI:
    cfg = cfg or get_settings()
    dev = cfg.app_env.lower() == "development"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        rt = ReviewRuntime.build(cfg, store=store)
        app.state.reviews = rt
        # bulk load finishes before the first request is served
        await rt.start()
        logger.info("Reviews ready (store=%s)", rt.backend)
        try:
            yield
        finally:
            await rt.stop()

    app = FastAPI(
        title="Site Reviews API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=lifespan,
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    app.include_router(health.router)
    app.include_router(reviews.router)
    return app


def run() -> None:
    cfg = get_settings()
    uvicorn.run(create_app(cfg), host=cfg.api.host, port=cfg.api.port, log_level=cfg.log_level.lower())


app = create_app()
