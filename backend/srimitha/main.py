from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi_pagination import add_pagination
from sqlmodel import Session

from srimitha.api import admin, content, submissions
from srimitha.core.config import settings
from srimitha.core.errors import ApiError, api_error_handler, request_validation_handler
from srimitha.core.logging import configure_logging, get_logger
from srimitha.db import session as db_session
from srimitha.db.seed import seed_database

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    if settings.db_create_all:
        db_session.init_db()
    if settings.seed_on_startup:
        with Session(db_session.engine) as session:
            seed_database(session)
    logger.info("app.startup prefix=%s", settings.api_prefix)
    yield


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(content.router, prefix=settings.api_prefix)
    app.include_router(submissions.router, prefix=settings.api_prefix)
    app.include_router(admin.router, prefix=settings.api_prefix)
    add_pagination(app)

    @app.get("/health")
    def health() -> dict[str, bool]:
        return {"ok": True}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("srimitha.main:app", host="0.0.0.0", port=8000)
