"""FastAPI application factory for the exam archive server."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.gzip import GZipMiddleware

from exams.config import ExamArchiveSettings, get_settings
from logging_config import build_logging_config, configure_logging

configure_logging()
logger = logging.getLogger(__name__)


def create_app(settings: Optional[ExamArchiveSettings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Exam Archive API",
        description="Serves exam JSON/JSONC files grouped by subject, plus static assets",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url="/api/openapi.json",
    )
    app.state.settings = settings

    # Compress responses when the client sends Accept-Encoding: gzip
    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)

    from api.routes import exams_router

    app.include_router(exams_router)

    # Everything outside the API is a plain file read relative to the static root
    app.mount("/", StaticFiles(directory=settings.static_root, html=True), name="static")

    return app


def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    app = create_app(settings)
    logger.info("Application started on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=build_logging_config())


if __name__ == "__main__":
    main()
