from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Request

from lessons_api.core.errors import BackendError, ValidationError
from lessons_api.routers.common import error_response, get_service
from lessons_api.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])
logger = logging.getLogger(__name__)


def _order_service(request: Request) -> OrderService:
    return get_service(request, "order_service")


@router.post("", status_code=201)
def create_order(request: Request, payload: dict = Body(...)):
    try:
        result = _order_service(request).create(payload)
    except ValidationError as exc:
        return error_response(400, exc.message)
    except BackendError as exc:
        logger.error("Could not save order: %s", exc.message)
        return error_response(500, "Could not save order", details=exc.message)
    body = {"insertedId": result.order_id}
    if result.persisted:
        body["message"] = "Order saved successfully"
    else:
        body["warning"] = "Saved in memory only (MongoDB not connected)"
    return body


@router.get("")
def recent_orders(request: Request):
    svc = _order_service(request)
    try:
        orders = svc.recent()
    except BackendError as exc:
        logger.error("Could not fetch orders: %s", exc.message)
        return error_response(500, "Could not fetch orders", details=exc.message)
    return {"mode": svc.repository.mode, "count": len(orders), "orders": orders}
