import logging
from typing import Any, Dict, List, Optional

from tortoise.transactions import in_transaction

from app.core.errors import ValidationFailure
from app.models.inventory_request import InventoryRequest
from app.models.order import OrderItem
from app.models.product import Product
from app.services import activity_service

log = logging.getLogger(__name__)


async def _ensure_sku_free(sku: str, conn: Any, exclude_id: Optional[int] = None):
    query = Product.filter(sku=sku).using_db(conn)
    if exclude_id is not None:
        query = query.exclude(id=exclude_id)
    if await query.exists():
        raise ValidationFailure(f"SKU '{sku}' is already in use.", field="sku")


async def list_products() -> List[Product]:
    return await Product.all().order_by("id")


async def get_product(product_id: int) -> Optional[Product]:
    return await Product.get_or_none(id=product_id)


async def create_product(data: Dict[str, Any], user_id: Optional[int] = None) -> Product:
    """Adds a product and logs it to the activity feed in one transaction."""
    async with in_transaction() as conn:
        await _ensure_sku_free(data["sku"], conn)
        product = await Product.create(**data, using_db=conn)

        await activity_service.record(
            type="inventory",
            description=f"Product {product.name} added to inventory",
            user_id=user_id,
            related_id=product.id,
            related_type="product",
            conn=conn,
        )

    log.info("Product %s (%s) created.", product.id, product.sku)
    return product


async def update_product(product_id: int, data: Dict[str, Any], user_id: Optional[int] = None) -> Optional[Product]:
    """Merges the given fields. Returns None when the product does not exist."""
    async with in_transaction() as conn:
        product = await Product.get_or_none(id=product_id, using_db=conn)
        if not product:
            return None

        if data.get("sku") and data["sku"] != product.sku:
            await _ensure_sku_free(data["sku"], conn, exclude_id=product_id)

        product.update_from_dict(data)
        await product.save(using_db=conn)

        await activity_service.record(
            type="inventory",
            description=f"Product {product.name} updated",
            user_id=user_id,
            related_id=product.id,
            related_type="product",
            conn=conn,
        )

    return product


async def delete_product(product_id: int, user_id: Optional[int] = None) -> bool:
    async with in_transaction() as conn:
        product = await Product.get_or_none(id=product_id, using_db=conn)
        if not product:
            return False

        if await OrderItem.filter(product_id=product_id).using_db(conn).exists():
            raise ValidationFailure(f"Product {product.name} appears on existing orders and cannot be deleted.")

        # Requests for the product stay on file as ad-hoc requests
        await InventoryRequest.filter(product_id=product_id).using_db(conn).update(product_id=None)
        await product.delete(using_db=conn)

        await activity_service.record(
            type="inventory",
            description=f"Product {product.name} deleted from inventory",
            user_id=user_id,
            related_id=product_id,
            related_type="product",
            conn=conn,
        )

    log.info("Product %s deleted.", product_id)
    return True
