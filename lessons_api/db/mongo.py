"""Client helpers for the MongoDB backend."""
from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.errors import ConfigurationError, PyMongoError

logger = logging.getLogger(__name__)


def connect(url: str, *, timeout_ms: int) -> MongoClient:
    """Open a client and verify the server answers within ``timeout_ms``.

    Exactly one attempt is made; on failure the client is closed and the
    ``PyMongoError`` propagates to the caller.
    """
    url = (url or "").strip()
    if not url:
        raise ConfigurationError("MONGO_URL must be configured to use the MongoDB backend.")
    client: MongoClient = MongoClient(
        url,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
    )
    logger.debug("Pinging MongoDB (timeout %sms)", timeout_ms)
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        raise
    return client
