from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from lessons_api.core.errors import BackendError
from lessons_api.routers.common import error_response, get_service

router = APIRouter(tags=["status"])
logger = logging.getLogger(__name__)


@router.get("/")
def root():
    return {"message": "Lessons API running"}


@router.get("/status")
def status(request: Request):
    try:
        return get_service(request, "status_service").status()
    except BackendError as exc:
        logger.error("Could not check status: %s", exc.message)
        return error_response(500, "Could not check status")
