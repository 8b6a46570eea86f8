"""Order submission and listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from lessons_api.core.errors import ValidationError
from lessons_api.domain.orders import validate_order
from lessons_api.repositories.base import Document, Repository
from lessons_api.schemas import Order

RECENT_ORDERS_LIMIT = 50


@dataclass
class OrderResult:
    order_id: str
    persisted: bool


@dataclass
class OrderService:
    repository: Repository

    def create(self, payload: Any) -> OrderResult:
        if not isinstance(payload, dict):
            raise ValidationError("Missing order fields")
        order = Order(**validate_order(payload))
        order_id = self.repository.insert_order(order.model_dump())
        return OrderResult(order_id=order_id, persisted=self.repository.connected)

    def recent(self, limit: int = RECENT_ORDERS_LIMIT) -> List[Document]:
        return self.repository.recent_orders(limit)
