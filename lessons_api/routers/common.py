"""Helpers shared by the routers."""
from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


def get_service(request: Request, name: str) -> Any:
    svc = getattr(getattr(request.app, "state", None), name, None)
    if svc is None:
        raise RuntimeError(f"{name} is not configured")
    return svc


def error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse({"error": message, **extra}, status_code=status_code)
