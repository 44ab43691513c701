"""
Dashboard aggregation.

Stats are computed on every request from the current store contents; nothing
is cached or accumulated. Revenue is the sum of all order totals and profit is
revenue minus the sum of all expenses.

No sales or stock history is recorded, so the monthly trend series are
placeholders drawn from fixed ranges. They are flagged ``synthetic_trends`` in
the dashboard payload and must not be read as real analytics.
"""
import random
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from app.models.client import Client
from app.models.expense import Expense
from app.models.order import Order
from app.models.product import Product
from app.services import low_stock

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

# Half-open ranges (low, high) for the placeholder series
INVENTORY_RANGE = (4000, 5500)
SOLD_RANGE = (300, 800)
REVENUE_RANGE = (20000, 35000)
EXPENSES_RANGE = (15000, 23000)


def _money(values) -> Decimal:
    return sum((Decimal(str(v)) for v in values), Decimal("0"))


def summarize(products: Sequence, clients: Sequence, orders: Sequence, expenses: Sequence) -> Dict:
    total_inventory_value = _money(Decimal(str(p.price)) * p.quantity for p in products)
    revenue = _money(o.total for o in orders)
    total_expenses = _money(e.amount for e in expenses)

    return {
        "total_inventory": sum(p.quantity for p in products),
        "total_inventory_value": total_inventory_value,
        "monthly_revenue": revenue,
        "total_clients": len(clients),
        "low_stock_count": len(low_stock.evaluate(products)),
        "profit": revenue - total_expenses,
    }


def _draw(rng: random.Random, bounds) -> int:
    low, high = bounds
    return rng.randrange(low, high)


def trends(rng: Optional[random.Random] = None) -> Dict[str, List[Dict]]:
    """Twelve synthetic points (Jan..Dec) for each chart."""
    rng = rng or random.Random()
    inventory_trends = [
        {"month": month, "inventory": _draw(rng, INVENTORY_RANGE), "sold": _draw(rng, SOLD_RANGE)}
        for month in MONTHS
    ]
    finance_trends = [
        {"month": month, "revenue": _draw(rng, REVENUE_RANGE), "expenses": _draw(rng, EXPENSES_RANGE)}
        for month in MONTHS
    ]
    return {"inventory_trends": inventory_trends, "finance_trends": finance_trends}


async def _load():
    products = await Product.all().order_by("id")
    clients = await Client.all()
    orders = await Order.all()
    expenses = await Expense.all()
    return products, clients, orders, expenses


async def get_dashboard_stats() -> Dict:
    return summarize(*(await _load()))


async def get_dashboard(rng: Optional[random.Random] = None) -> Dict:
    """Stats, trend series and the ranked low stock list in one payload."""
    products, clients, orders, expenses = await _load()
    payload = {"stats": summarize(products, clients, orders, expenses)}
    payload.update(trends(rng))
    payload["synthetic_trends"] = True
    payload["low_stock"] = low_stock.evaluate(products)
    return payload
