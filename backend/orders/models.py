from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class OrderLine(BaseModel):
    product_id: str = Field(..., min_length=1)
    product_title: str
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0.0)


class OrderRequest(BaseModel):
    items: list[OrderLine] = Field(..., min_length=1)
    total_price: float = Field(..., ge=0.0)
    delivery_address: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    payment_method: str | None = None


class OrderOut(OrderRequest):
    id: str
    user_id: str
    created_at: datetime
