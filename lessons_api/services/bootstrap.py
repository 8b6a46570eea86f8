"""Startup: choose the storage backend once and seed it."""
from __future__ import annotations

import logging
from typing import Callable

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from lessons_api.core.config import Settings
from lessons_api.core.errors import BackendError
from lessons_api.db.mongo import connect
from lessons_api.domain.catalog import sample_lessons
from lessons_api.repositories import MemoryRepository, MongoRepository, Repository

logger = logging.getLogger(__name__)

Connector = Callable[..., MongoClient]


def open_repository(settings: Settings, connector: Connector = connect) -> Repository:
    """Make one bounded connection attempt; fall back to memory on failure."""
    logger.info("Connecting to MongoDB...")
    try:
        client = connector(settings.mongo_url, timeout_ms=settings.mongo_timeout_ms)
    except PyMongoError as exc:
        logger.error("Failed to connect to MongoDB (%s). Using in-memory mode.", exc)
        return MemoryRepository()

    repo = MongoRepository(client[settings.db_name], client=client)
    try:
        collections = repo.describe().get("collections") or []
    except BackendError as exc:
        repo.close()
        logger.error("MongoDB is not usable (%s). Using in-memory mode.", exc.message)
        return MemoryRepository()
    logger.info("Connected to MongoDB")
    logger.info("Database: %s", settings.db_name)
    logger.info("Collections: %s", ", ".join(collections) or "none")
    return repo


def seed_repository(repo: Repository) -> int:
    """Insert the sample lessons if the lesson collection is empty."""
    inserted = repo.seed_lessons(sample_lessons())
    if inserted:
        logger.info("Seeded %d sample lessons (%s)", inserted, repo.mode)
    return inserted


def bootstrap(settings: Settings, connector: Connector = connect) -> Repository:
    repo = open_repository(settings, connector)
    seed_repository(repo)
    if repo.connected:
        logger.info("MongoDB connected. Orders will be saved in collection: order")
    else:
        logger.warning("Running in in-memory mode (MongoDB not connected)")
    return repo
