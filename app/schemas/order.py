from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.order import OrderStatus
from app.schemas.money import Money


def _now():
    return datetime.now(timezone.utc)


class OrderItemRequest(BaseModel):
    """Schema for a single line item."""
    product_id: int
    quantity: int = Field(..., gt=0)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Unit price.")


class OrderRequest(BaseModel):
    """Schema for the full order placement request body."""
    client_id: int
    date: datetime = Field(default_factory=_now)
    status: OrderStatus = OrderStatus.PENDING
    total: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2,
                                     description="Computed from items when omitted.")
    items: List[OrderItemRequest] = Field(default_factory=list)


class OrderUpdate(BaseModel):
    client_id: Optional[int] = None
    date: Optional[datetime] = None
    status: Optional[OrderStatus] = None
    total: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    product_id: int
    quantity: int
    price: Money


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    date: datetime
    status: OrderStatus
    total: Money


class OrderDetailResponse(OrderResponse):
    """Order with its line items."""
    items: List[OrderItemResponse] = Field(default_factory=list)
