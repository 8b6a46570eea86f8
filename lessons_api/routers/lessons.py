from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Request

from lessons_api.core.errors import BackendError, NotFoundError, ValidationError
from lessons_api.routers.common import error_response, get_service
from lessons_api.services.lesson_service import LessonService

router = APIRouter(tags=["lessons"])
logger = logging.getLogger(__name__)


def _lesson_service(request: Request) -> LessonService:
    return get_service(request, "lesson_service")


@router.get("/lessons")
def list_lessons(request: Request):
    try:
        return _lesson_service(request).list_lessons()
    except BackendError as exc:
        logger.error("Could not fetch lessons: %s", exc.message)
        return error_response(500, "Could not fetch lessons")


@router.get("/search")
def search_lessons(request: Request, q: str = ""):
    try:
        return _lesson_service(request).search(q)
    except BackendError as exc:
        logger.error("Search failed for %r: %s", q, exc.message)
        return error_response(500, "Search failed")


@router.put("/lessons/{lesson_id}")
def update_lesson(lesson_id: str, request: Request, payload: dict = Body(...)):
    try:
        return _lesson_service(request).update(lesson_id, payload)
    except ValidationError as exc:
        return error_response(400, exc.message)
    except NotFoundError as exc:
        return error_response(404, exc.message)
    except BackendError as exc:
        logger.error("Could not update lesson %s: %s", lesson_id, exc.message)
        return error_response(500, "Could not update lesson")
