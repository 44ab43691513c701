from typing import List

from pydantic import BaseModel

from app.schemas.money import Money
from app.schemas.product import LowStockProductResponse


class DashboardStats(BaseModel):
    total_inventory: int
    total_inventory_value: Money
    monthly_revenue: Money
    total_clients: int
    low_stock_count: int
    profit: Money


class InventoryTrendPoint(BaseModel):
    month: str
    inventory: int
    sold: int


class FinanceTrendPoint(BaseModel):
    month: str
    revenue: int
    expenses: int


class DashboardResponse(BaseModel):
    stats: DashboardStats
    inventory_trends: List[InventoryTrendPoint]
    finance_trends: List[FinanceTrendPoint]
    # Trend series are generated placeholders, not recorded history
    synthetic_trends: bool = True
    low_stock: List[LowStockProductResponse]
