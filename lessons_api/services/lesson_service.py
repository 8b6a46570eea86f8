"""Lesson listing, search and partial updates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from lessons_api.core.errors import NotFoundError, ValidationError
from lessons_api.domain.orders import ensure_storable
from lessons_api.domain.search import build_query
from lessons_api.repositories.base import Document, Repository

IGNORED_UPDATE_FIELDS = ("_id", "id")


@dataclass
class LessonService:
    repository: Repository

    def list_lessons(self) -> List[Document]:
        return self.repository.list_lessons()

    def search(self, raw_query: str | None) -> List[Document]:
        query = build_query(raw_query)
        if query is None:
            return []
        return self.repository.find_lessons(query)

    def update(self, lesson_id: str, payload: Any) -> Document:
        if not isinstance(payload, dict):
            raise ValidationError("Update body must be a JSON object")
        fields = {k: v for k, v in payload.items() if k not in IGNORED_UPDATE_FIELDS}
        for key, value in fields.items():
            ensure_storable(key, "update")
            ensure_storable(value, key)
        lesson = self.repository.update_lesson(lesson_id, fields)
        if lesson is None:
            raise NotFoundError("Lesson not found")
        return lesson
