"""Startup-time choice between the relational and in-memory backends."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from elearn.core.config import Settings
from elearn.storage.base import Storage
from elearn.storage.database import DatabaseStorage
from elearn.storage.memory import MemoryStorage
from elearn.storage.seed import seed_sample_data

logger = logging.getLogger(__name__)


def _connect(database_url: str) -> DatabaseStorage | None:
    # A missing DBAPI driver surfaces as ImportError from create_engine
    try:
        storage = DatabaseStorage.from_url(database_url)
    except (SQLAlchemyError, ImportError) as e:
        logger.warning(f"Database unavailable, falling back to in-memory storage: {e}")
        return None

    try:
        with storage.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Database unreachable, falling back to in-memory storage: {e}")
        storage.engine.dispose()
        return None
    return storage


def select_storage(settings: Settings) -> Storage:
    """Pick the storage backend for this process.

    The relational backend is used when ``database_url`` is configured and a
    test query succeeds; otherwise an in-memory store is built (and seeded
    with sample data when enabled). Call once at startup: there is no later
    failover, so a database that goes away afterwards surfaces as errors.
    """
    if settings.database_url:
        storage = _connect(settings.database_url)
        if storage is not None:
            logger.info("Using database storage")
            return storage
    else:
        logger.info("DATABASE_URL not set")

    memory = MemoryStorage(enforce_uniqueness=settings.memory_enforce_uniqueness)
    if settings.seed_sample_data:
        seed_sample_data(memory)
    logger.info(f"Using in-memory storage (enforces_uniqueness={memory.enforces_uniqueness})")
    return memory
