from __future__ import annotations

import logging

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from talenthub.api.errors import install_error_handlers
from talenthub.api.router import api_router
from talenthub.core.config import Settings, settings as default_settings
from talenthub.middleware.logging import RequestLoggingMiddleware
from talenthub.store.memory import RecruitmentStore
from talenthub.store.seed import seed_sample_data

logger = logging.getLogger("talenthub")


def create_app(store: RecruitmentStore | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title=settings.app_name)
    if store is None:
        store = RecruitmentStore.from_settings(settings)
        if settings.seed_sample_data:
            seed_sample_data(store)
    app.state.store = store

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "environment": settings.environment}

    logger.info("app_created", extra={"environment": settings.environment, "policy": settings.job_delete_policy})
    return app


app = create_app()
