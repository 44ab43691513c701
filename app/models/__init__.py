# app/models/__init__.py
from .activity import Activity
from .client import Client
from .expense import Expense
from .inventory_request import InventoryRequest, RequestPriority, RequestStatus
from .order import Order, OrderItem, OrderStatus
from .product import Product, ProductStatus
from .user import User

# Export all models
__all__ = [
    "Activity",
    "Client",
    "Expense",
    "InventoryRequest",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Product",
    "ProductStatus",
    "RequestPriority",
    "RequestStatus",
    "User",
]
