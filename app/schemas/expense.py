from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.money import Money


class ExpenseCreate(BaseModel):
    category: str = Field(..., min_length=1, max_length=128)
    # Accepts "2500.00" as well as 2500; stored as a two-place decimal
    amount: Decimal = Field(..., ge=0, max_digits=14, decimal_places=2)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    description: Optional[str] = None


class ExpenseUpdate(BaseModel):
    category: Optional[str] = Field(None, min_length=1, max_length=128)
    amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    date: Optional[datetime] = None
    description: Optional[str] = None


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category: str
    amount: Money
    date: datetime
    description: Optional[str] = None
