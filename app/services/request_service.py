import logging
from typing import Any, Dict, List, Optional

from tortoise.transactions import in_transaction

from app.core.errors import ValidationFailure
from app.models.inventory_request import InventoryRequest, RequestPriority, RequestStatus
from app.models.product import Product
from app.models.user import User
from app.services import activity_service

log = logging.getLogger(__name__)

# Approved and rejected requests are final; re-opening is not supported
TERMINAL_STATES = (RequestStatus.APPROVED, RequestStatus.REJECTED)


async def list_requests(status: Optional[RequestStatus] = None) -> List[InventoryRequest]:
    query = InventoryRequest.all()
    if status:
        query = query.filter(status=status)
    return await query.order_by("-created_at", "-id")


async def get_request(request_id: int) -> Optional[InventoryRequest]:
    return await InventoryRequest.get_or_none(id=request_id)


async def _ensure_product(product_id: Optional[int], conn: Any):
    if product_id is not None and not await Product.filter(id=product_id).using_db(conn).exists():
        raise ValidationFailure(f"Product {product_id} does not exist.", field="product_id")


async def submit(
    product_name: str,
    quantity: int,
    user_id: int,
    priority: RequestPriority = RequestPriority.MEDIUM,
    product_id: Optional[int] = None,
    notes: Optional[str] = None,
) -> InventoryRequest:
    """Files a replenishment request in 'pending' and logs it to the activity feed."""
    if quantity <= 0:
        raise ValidationFailure("Requested quantity must be positive.", field="quantity")

    async with in_transaction() as conn:
        if not await User.filter(id=user_id).using_db(conn).exists():
            raise ValidationFailure(f"User {user_id} does not exist.", field="user_id")
        await _ensure_product(product_id, conn)

        request = await InventoryRequest.create(
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            priority=priority,
            notes=notes,
            status=RequestStatus.PENDING,
            user_id=user_id,
            using_db=conn,
        )

        await activity_service.record(
            type="request",
            description=f"New inventory request for {quantity} units of {product_name}",
            user_id=user_id,
            related_id=request.id,
            related_type="request",
            conn=conn,
        )

    log.info("Inventory request %s submitted by user %s.", request.id, user_id)
    return request


async def _transition(request: InventoryRequest, new_status: RequestStatus, user_id: Optional[int], conn: Any):
    if request.status == new_status:
        return # No-op, nothing to log

    if request.status in TERMINAL_STATES:
        raise ValidationFailure(
            f"Inventory request #{request.id} is already {request.status.value}. Status cannot be updated.",
            field="status",
        )

    request.status = new_status
    await request.save(update_fields=["status"], using_db=conn)

    if new_status in TERMINAL_STATES:
        await activity_service.record(
            type="request",
            description=(
                f"Inventory request #{request.id} for {request.quantity} units "
                f"of {request.product_name} {new_status.value}"
            ),
            user_id=user_id,
            related_id=request.id,
            related_type="request",
            conn=conn,
        )
        log.info("Inventory request %s %s.", request.id, new_status.value)


async def set_status(request_id: int, new_status: RequestStatus, user_id: Optional[int] = None) -> Optional[InventoryRequest]:
    """
    Moves a request through pending -> approved | rejected.
    Returns None if the request does not exist; raises ValidationFailure when
    the request has already been decided.
    """
    new_status = RequestStatus(new_status)
    async with in_transaction() as conn:
        request = await InventoryRequest.get_or_none(id=request_id, using_db=conn)
        if not request:
            return None
        await _transition(request, new_status, user_id, conn)
    return request


async def update_request(request_id: int, data: Dict[str, Any], user_id: Optional[int] = None) -> Optional[InventoryRequest]:
    """Merges editable fields; a 'status' field goes through the workflow rules."""
    data = dict(data)
    new_status = data.pop("status", None)

    async with in_transaction() as conn:
        request = await InventoryRequest.get_or_none(id=request_id, using_db=conn)
        if not request:
            return None

        if "product_id" in data:
            await _ensure_product(data["product_id"], conn)
        if data:
            request.update_from_dict(data)
            await request.save(using_db=conn)
        if new_status is not None:
            await _transition(request, RequestStatus(new_status), user_id, conn)

    return request


async def delete_request(request_id: int) -> bool:
    deleted = await InventoryRequest.filter(id=request_id).delete()
    return deleted > 0
