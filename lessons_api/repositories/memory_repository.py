"""
In-memory persistence adapter.

Used when MongoDB is unreachable at startup. Data lives in process-local lists
and is lost on restart.
"""

from __future__ import annotations

import copy
import itertools
import time
from typing import List, Optional

from lessons_api.domain.search import LessonQuery
from lessons_api.repositories.base import MODE_MEMORY, Document, Repository


class MemoryRepository(Repository):
    mode = MODE_MEMORY

    def __init__(self) -> None:
        self.lessons: List[Document] = []
        self.orders: List[Document] = []
        self.users: List[Document] = []
        self._seq = itertools.count()

    def _new_id(self, prefix: str) -> str:
        return f"{prefix}-{int(time.time() * 1000)}-{next(self._seq)}"

    # -------------------------- lessons --------------------------
    def list_lessons(self) -> List[Document]:
        return copy.deepcopy(self.lessons)

    def find_lessons(self, query: LessonQuery) -> List[Document]:
        return [copy.deepcopy(doc) for doc in self.lessons if query.matches(doc)]

    def seed_lessons(self, docs: List[Document]) -> int:
        if self.lessons:
            return 0
        self.lessons = [{**doc, "_id": self._new_id("mem")} for doc in docs]
        return len(self.lessons)

    def update_lesson(self, lesson_id: str, fields: Document) -> Optional[Document]:
        for lesson in self.lessons:
            if lesson["_id"] == lesson_id:
                lesson.update(fields)
                return copy.deepcopy(lesson)
        return None

    def count_lessons(self) -> int:
        return len(self.lessons)

    # -------------------------- orders --------------------------
    def insert_order(self, doc: Document) -> str:
        order_id = self._new_id("order")
        self.orders.insert(0, {**doc, "_id": order_id})
        return order_id

    def recent_orders(self, limit: int) -> List[Document]:
        return copy.deepcopy(self.orders[:limit])

    def count_orders(self) -> int:
        return len(self.orders)

    # -------------------------- users --------------------------
    def find_user(self, email: str) -> Optional[Document]:
        for user in self.users:
            if user.get("email") == email:
                return copy.deepcopy(user)
        return None

    def insert_user(self, doc: Document) -> str:
        user_id = self._new_id("user")
        self.users.append({**doc, "_id": user_id})
        return user_id

    def set_user_password(self, email: str, password_hash: str) -> None:
        for user in self.users:
            if user.get("email") == email:
                user["password"] = password_hash
