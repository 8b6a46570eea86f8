from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Request

from lessons_api.core.errors import (
    BackendError,
    DuplicateError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from lessons_api.routers.common import error_response, get_service
from lessons_api.services.auth_service import AuthService

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


def _auth_service(request: Request) -> AuthService:
    return get_service(request, "auth_service")


@router.post("/register", status_code=201)
def register(request: Request, payload: dict = Body(...)):
    try:
        _auth_service(request).register(payload)
    except (ValidationError, DuplicateError) as exc:
        return error_response(400, exc.message)
    except BackendError as exc:
        logger.error("Registration failed: %s", exc.message)
        return error_response(500, "Could not register user")
    return {"message": "Registration successful"}


@router.post("/login")
def login(request: Request, payload: dict = Body(...)):
    try:
        user = _auth_service(request).login(payload)
    except (ValidationError, NotFoundError, InvalidCredentialsError) as exc:
        return error_response(400, exc.message)
    except BackendError as exc:
        logger.error("Login failed: %s", exc.message)
        return error_response(500, "Could not log in")
    return {"message": "Login successful", "user": {"name": user.name, "email": user.email}}
