from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone

from .models import OrderOut, OrderRequest


class OrderStore:
    """In-memory order store keyed by account id."""

    def __init__(self) -> None:
        self._orders: list[OrderOut] = []
        self._lock = threading.Lock()

    def create(self, user_id: str, order: OrderRequest) -> OrderOut:
        created = OrderOut(
            id=uuid.uuid4().hex,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
            **order.model_dump(),
        )
        with self._lock:
            self._orders.append(created)
        return created

    def list_by_account(self, user_id: str) -> list[OrderOut]:
        with self._lock:
            return [o for o in self._orders if o.user_id == user_id]


_default_store = OrderStore()


def get_order_store() -> OrderStore:
    return _default_store
