import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from tortoise.transactions import in_transaction

from app.core.errors import ValidationFailure
from app.models.client import Client
from app.models.order import Order, OrderItem
from app.models.product import Product
from app.services import activity_service

log = logging.getLogger(__name__)


async def list_orders() -> List[Order]:
    return await Order.all().order_by("-date", "-id")


async def get_order(order_id: int) -> Optional[Order]:
    return await Order.get_or_none(id=order_id)


async def get_order_with_items(order_id: int) -> Optional[Order]:
    """Fetches an order together with its line items."""
    return await Order.get_or_none(id=order_id).prefetch_related("items")


async def list_order_items(order_id: int) -> List[OrderItem]:
    return await OrderItem.filter(order_id=order_id).order_by("id")


async def _ensure_client(client_id: int, conn: Any):
    if not await Client.filter(id=client_id).using_db(conn).exists():
        raise ValidationFailure(f"Client {client_id} does not exist.", field="client_id")


async def _add_item(order_id: int, item: Dict[str, Any], conn: Any) -> OrderItem:
    """
    Inserts one line item and takes its quantity out of stock.
    Stock never goes below zero: an oversold product is clamped at 0.
    """
    qty = int(item["quantity"])
    if qty <= 0:
        raise ValidationFailure("Item quantity must be positive.", field="quantity")

    # Row lock so concurrent line items for the same product cannot lose a decrement
    product = await Product.filter(id=item["product_id"]).using_db(conn).select_for_update().first()
    if not product:
        raise ValidationFailure(f"Product {item['product_id']} does not exist.", field="product_id")

    order_item = await OrderItem.create(
        order_id=order_id,
        product_id=product.id,
        quantity=qty,
        price=item["price"],
        using_db=conn,
    )

    product.quantity = max(0, product.quantity - qty)
    await product.save(update_fields=["quantity"], using_db=conn)
    return order_item


async def create_order(data: Dict[str, Any], user_id: Optional[int] = None) -> Order:
    """
    Creates the order header, its optional line items, and the 'sale' activity atomically.
    When no total is supplied it is the sum of price * quantity over the items.
    """
    items = data.pop("items", None) or []
    async with in_transaction() as conn:
        await _ensure_client(data["client_id"], conn)

        total = data.get("total")
        if total is None:
            total = sum((Decimal(str(it["price"])) * int(it["quantity"]) for it in items), Decimal("0"))
        data["total"] = total

        order = await Order.create(**data, using_db=conn)
        for it in items:
            await _add_item(order.id, it, conn)

        await activity_service.record(
            type="sale",
            description=f"New order #{order.id} created with total ${order.total:.2f}",
            user_id=user_id,
            related_id=order.id,
            related_type="order",
            conn=conn,
        )

    log.info("Order %s created for client %s with %d item(s).", order.id, order.client_id, len(items))
    return order


async def create_order_item(data: Dict[str, Any]) -> OrderItem:
    """Adds a line item to an existing order and decrements the product's stock."""
    async with in_transaction() as conn:
        if not await Order.filter(id=data["order_id"]).using_db(conn).exists():
            raise ValidationFailure(f"Order {data['order_id']} does not exist.", field="order_id")
        return await _add_item(data["order_id"], data, conn)


async def update_order(order_id: int, data: Dict[str, Any]) -> Optional[Order]:
    async with in_transaction() as conn:
        order = await Order.get_or_none(id=order_id, using_db=conn)
        if not order:
            return None
        if "client_id" in data and data["client_id"] != order.client_id:
            await _ensure_client(data["client_id"], conn)
        order.update_from_dict(data)
        await order.save(using_db=conn)
    return order


async def delete_order(order_id: int) -> bool:
    """Removes the order and its items. Stock is not given back."""
    async with in_transaction() as conn:
        await OrderItem.filter(order_id=order_id).using_db(conn).delete()
        deleted = await Order.filter(id=order_id).using_db(conn).delete()
    return deleted > 0
