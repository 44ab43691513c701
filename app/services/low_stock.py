"""
Low stock detection.

A product is low on stock once its quantity has reached or dropped below its
reorder threshold (``min_quantity``). Products are ranked by depletion ratio,
``quantity / min_quantity``: the lower the ratio, the sooner it needs restocking.
"""
from typing import Iterable, List

from app.models.product import Product

CRITICAL = "critical"
LOW = "low"
NORMAL = "normal"

CRITICAL_RATIO = 0.25
LOW_RATIO = 0.5


def is_low_stock(product) -> bool:
    return product.quantity <= product.min_quantity


def depletion_ratio(product) -> float:
    # min_quantity == 0 only qualifies as low stock at quantity 0: fully depleted
    if product.min_quantity <= 0:
        return 0.0
    return product.quantity / product.min_quantity


def classify(product) -> str:
    """Display level for the low stock table. Not stored."""
    ratio = depletion_ratio(product)
    if ratio < CRITICAL_RATIO:
        return CRITICAL
    if ratio < LOW_RATIO:
        return LOW
    return NORMAL


def evaluate(products: Iterable) -> List:
    """Low stock products, most urgent first. The input is left untouched."""
    return sorted((p for p in products if is_low_stock(p)), key=depletion_ratio)


async def get_low_stock_products() -> List[Product]:
    products = await Product.all().order_by("id")
    return evaluate(products)
