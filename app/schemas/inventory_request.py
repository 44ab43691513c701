from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.inventory_request import RequestPriority, RequestStatus


class InventoryRequestCreate(BaseModel):
    """Replenishment request; the requesting user comes from the session."""
    product_id: Optional[int] = Field(None, description="Catalogue product, omitted for ad-hoc items.")
    product_name: str = Field(..., min_length=1, max_length=255)
    quantity: int = Field(..., gt=0)
    priority: RequestPriority = RequestPriority.MEDIUM
    notes: Optional[str] = None


class InventoryRequestUpdate(BaseModel):
    product_id: Optional[int] = None
    product_name: Optional[str] = Field(None, min_length=1, max_length=255)
    quantity: Optional[int] = Field(None, gt=0)
    priority: Optional[RequestPriority] = None
    notes: Optional[str] = None
    status: Optional[RequestStatus] = None


class RequestStatusUpdate(BaseModel):
    """Schema for moving a request through its workflow."""
    status: RequestStatus


class InventoryRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: Optional[int] = None
    product_name: str
    quantity: int
    priority: RequestPriority
    notes: Optional[str] = None
    status: RequestStatus
    user_id: int
    created_at: datetime
