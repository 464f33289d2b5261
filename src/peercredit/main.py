"""FastAPI application entrypoint for PeerCredit."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from . import __version__
from .api.error_handlers import register_error_handlers
from .api.v1.router import api_router
from .core.config import Settings, get_settings
from .core.database import Database
from .jobs import build_scheduler

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    ``database`` may be injected (tests, scripts); otherwise it is opened from
    settings at startup. Either way it is disposed at shutdown.
    """

    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = app.state.database or Database.from_settings(settings)
        app.state.database = db
        if settings.create_schema:
            db.create_all()

        scheduler = None
        if settings.scheduler_enabled:
            scheduler = build_scheduler(db, settings)
            scheduler.start()
            logger.info("monthly reset scheduler started")
        try:
            yield
        finally:
            if scheduler is not None and scheduler.running:
                scheduler.shutdown(wait=False)
                logger.info("monthly reset scheduler stopped")
            db.dispose()

    app = FastAPI(title="PeerCredit API", version=__version__, lifespan=lifespan)
    app.state.database = database
    app.include_router(api_router, prefix=settings.api_prefix)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""

    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
