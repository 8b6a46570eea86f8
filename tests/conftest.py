from __future__ import annotations

import sys
from pathlib import Path

import mongomock
import pytest
from fastapi.testclient import TestClient

# Make the lessons_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lessons_api.app import create_app  # noqa: E402
from lessons_api.core.config import Settings  # noqa: E402
from lessons_api.repositories import MemoryRepository, MongoRepository  # noqa: E402


@pytest.fixture()
def settings(tmp_path):
    """Settings pointing at an unreachable MongoDB and a temporary images dir."""
    images = tmp_path / "images"
    images.mkdir()
    return Settings(
        host="127.0.0.1",
        port=0,
        mongo_url="mongodb://127.0.0.1:1",
        db_name="LessonAppTest",
        mongo_timeout_ms=50,
        images_dir=str(images),
        cors_origins=("*",),
        log_level="WARNING",
    )


@pytest.fixture()
def mongo_db():
    client = mongomock.MongoClient()
    yield client["LessonAppTest"]
    client.close()


@pytest.fixture()
def mongo_repo(mongo_db):
    return MongoRepository(mongo_db)


@pytest.fixture()
def memory_client(settings):
    """HTTP client over an app running in in-memory mode (already seeded)."""
    app = create_app(settings, repository=MemoryRepository())
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def mongo_client(settings, mongo_repo):
    app = create_app(settings, repository=mongo_repo)
    with TestClient(app) as client:
        yield client
