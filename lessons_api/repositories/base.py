"""Abstract storage interface shared by both backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from lessons_api.domain.search import LessonQuery

MODE_MONGODB = "mongodb"
MODE_MEMORY = "in-memory"

Document = Dict[str, Any]


class Repository(ABC):
    """Lessons, orders and users storage.

    Ids are opaque strings at this boundary; documents are returned as plain
    dicts with ``_id`` already converted to ``str``.
    """

    mode: str = ""

    @property
    def connected(self) -> bool:
        return self.mode == MODE_MONGODB

    # -------------------------- lessons --------------------------
    @abstractmethod
    def list_lessons(self) -> List[Document]:
        """All lessons in store order."""

    @abstractmethod
    def find_lessons(self, query: LessonQuery) -> List[Document]:
        """Lessons matching the search query."""

    @abstractmethod
    def seed_lessons(self, docs: List[Document]) -> int:
        """Insert ``docs`` only if there are no lessons yet. Returns inserted count."""

    @abstractmethod
    def update_lesson(self, lesson_id: str, fields: Document) -> Optional[Document]:
        """Merge ``fields`` into a lesson; None when the id is unknown."""

    @abstractmethod
    def count_lessons(self) -> int: ...

    # -------------------------- orders --------------------------
    @abstractmethod
    def insert_order(self, doc: Document) -> str:
        """Persist an order and return its id."""

    @abstractmethod
    def recent_orders(self, limit: int) -> List[Document]:
        """Newest orders first, at most ``limit``."""

    @abstractmethod
    def count_orders(self) -> int: ...

    # -------------------------- users --------------------------
    @abstractmethod
    def find_user(self, email: str) -> Optional[Document]: ...

    @abstractmethod
    def insert_user(self, doc: Document) -> str: ...

    @abstractmethod
    def set_user_password(self, email: str, password_hash: str) -> None: ...

    # -------------------------- misc --------------------------
    def describe(self) -> Document:
        """Backend specific details for the status endpoint."""
        return {}

    def close(self) -> None:
        return None
