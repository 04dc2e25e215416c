import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from elearn.api.router import api_router
from elearn.core.config import Settings, get_settings
from elearn.core.logger import setup_logging
from elearn.storage.base import Storage
from elearn.storage.selector import select_storage

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """Build the application.

    The storage backend is chosen once, in the lifespan handler, unless one
    is passed in (tests inject their own isolated instance).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        if storage is None:
            app.state.storage = select_storage(settings)
        logger.info(f"Storage backend: {app.state.storage.backend.value}")
        yield

    app = FastAPI(
        title=settings.app_name,
        description="E-learning marketplace API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    if storage is not None:
        app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    def health_check():
        """Health check endpoint."""
        return {"status": "ok", "storage": app.state.storage.backend.value}

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
