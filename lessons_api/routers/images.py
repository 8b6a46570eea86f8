"""Explicit image route with a readable 404 for missing files."""
from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import unquote

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from lessons_api.routers.common import error_response, get_service

router = APIRouter(prefix="/images", tags=["images"])


def resolve_image(images_dir: str, filename: str) -> Path | None:
    """Return the file path when it is a readable file inside ``images_dir``."""
    base = Path(images_dir).resolve()
    candidate = (base / filename).resolve()
    if candidate != base and base not in candidate.parents:
        return None
    if not candidate.is_file() or not os.access(candidate, os.R_OK):
        return None
    return candidate


@router.get("/{filename:path}")
def get_image(filename: str, request: Request):
    name = unquote(filename)
    settings = get_service(request, "settings")
    path = resolve_image(settings.images_dir, name)
    if path is None:
        return error_response(404, "Image not found", file=name)
    return FileResponse(path)
