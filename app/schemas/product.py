from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import DEFAULT_MIN_QUANTITY
from app.models.product import ProductStatus
from app.schemas.money import Money


class ProductCreate(BaseModel):
    """Schema for adding a product to the catalogue."""
    name: str = Field(..., min_length=1, max_length=255)
    sku: str = Field(..., min_length=1, max_length=64, description="Stock keeping unit, unique per product.")
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=128)
    quantity: int = Field(0, ge=0, description="Units currently in stock.")
    min_quantity: int = Field(DEFAULT_MIN_QUANTITY, ge=0, description="Reorder threshold for low stock alerts.")
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    cost: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    status: ProductStatus = ProductStatus.ACTIVE


class ProductUpdate(BaseModel):
    """Partial update; only the fields sent are merged."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    sku: Optional[str] = Field(None, min_length=1, max_length=64)
    description: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=128)
    quantity: Optional[int] = Field(None, ge=0)
    min_quantity: Optional[int] = Field(None, ge=0)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    cost: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    status: Optional[ProductStatus] = None


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    sku: str
    description: Optional[str] = None
    category: str
    quantity: int
    min_quantity: int
    price: Money
    cost: Money
    status: ProductStatus


class LowStockProductResponse(ProductResponse):
    """Product row in the low stock table, with its depletion ratio and display level."""
    ratio: float
    stock_level: str
