"""High-level data access helpers backed by pymongo."""
from __future__ import annotations

import functools
from typing import Any, Callable, List, Optional, TypeVar

from bson import ObjectId
from bson.errors import BSONError
from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from lessons_api.core.errors import BackendError
from lessons_api.domain.search import LessonQuery
from lessons_api.repositories.base import MODE_MONGODB, Document, Repository

LESSONS = "lessons"
ORDERS = "order"
USERS = "users"

T = TypeVar("T")


def _backend_call(func: Callable[..., T]) -> Callable[..., T]:
    """Re-raise driver and BSON encoding failures as BackendError."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except (PyMongoError, BSONError, OverflowError) as exc:
            raise BackendError(str(exc)) from exc

    return wrapper


def _to_str_id(doc: Optional[Document]) -> Optional[Document]:
    if not doc:
        return doc
    d = dict(doc)
    if "_id" in d:
        d["_id"] = str(d["_id"])
    return d


def id_candidates(lesson_id: str) -> list:
    """Native ObjectId first (when well-formed), then the raw string."""
    candidates: list = []
    if ObjectId.is_valid(lesson_id):
        candidates.append(ObjectId(lesson_id))
    candidates.append(lesson_id)
    return candidates


class MongoRepository(Repository):
    """CRUD helpers wrapping a pymongo Database."""

    mode = MODE_MONGODB

    def __init__(self, db: Database, client: Any = None) -> None:
        self.db = db
        self.client = client

    # -------------------------- lessons --------------------------
    @_backend_call
    def list_lessons(self) -> List[Document]:
        return [_to_str_id(d) for d in self.db[LESSONS].find()]

    @_backend_call
    def find_lessons(self, query: LessonQuery) -> List[Document]:
        return [_to_str_id(d) for d in self.db[LESSONS].find(query.to_mongo())]

    @_backend_call
    def seed_lessons(self, docs: List[Document]) -> int:
        col = self.db[LESSONS]
        if col.count_documents({}) > 0:
            return 0
        result = col.insert_many([dict(d) for d in docs])
        return len(result.inserted_ids)

    @_backend_call
    def update_lesson(self, lesson_id: str, fields: Document) -> Optional[Document]:
        col = self.db[LESSONS]
        for candidate in id_candidates(lesson_id):
            if fields:
                doc = col.find_one_and_update(
                    {"_id": candidate},
                    {"$set": fields},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                doc = col.find_one({"_id": candidate})
            if doc is not None:
                return _to_str_id(doc)
        return None

    @_backend_call
    def count_lessons(self) -> int:
        return self.db[LESSONS].count_documents({})

    # -------------------------- orders --------------------------
    @_backend_call
    def insert_order(self, doc: Document) -> str:
        result = self.db[ORDERS].insert_one(dict(doc))
        return str(result.inserted_id)

    @_backend_call
    def recent_orders(self, limit: int) -> List[Document]:
        cursor = self.db[ORDERS].find().sort("createdAt", DESCENDING).limit(limit)
        return [_to_str_id(d) for d in cursor]

    @_backend_call
    def count_orders(self) -> int:
        return self.db[ORDERS].count_documents({})

    # -------------------------- users --------------------------
    @_backend_call
    def find_user(self, email: str) -> Optional[Document]:
        return _to_str_id(self.db[USERS].find_one({"email": email}))

    @_backend_call
    def insert_user(self, doc: Document) -> str:
        result = self.db[USERS].insert_one(dict(doc))
        return str(result.inserted_id)

    @_backend_call
    def set_user_password(self, email: str, password_hash: str) -> None:
        self.db[USERS].update_one({"email": email}, {"$set": {"password": password_hash}})

    # -------------------------- misc --------------------------
    @_backend_call
    def describe(self) -> Document:
        return {"database": self.db.name, "collections": sorted(self.db.list_collection_names())}

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
