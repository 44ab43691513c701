import logging
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import current_user_id
from app.schemas.order import (
    OrderDetailResponse,
    OrderItemRequest,
    OrderItemResponse,
    OrderRequest,
    OrderResponse,
    OrderUpdate,
)
from app.schemas.response import MessageData, SuccessResponse
from app.services import order_service

log = logging.getLogger("uvicorn")

router = APIRouter(dependencies=[Depends(current_user_id)])


def _out(order):
    return OrderResponse.model_validate(order).model_dump(mode="json")


def _detail(order):
    items = [OrderItemResponse.model_validate(i) for i in order.items]
    return OrderDetailResponse(**OrderResponse.model_validate(order).model_dump(), items=items).model_dump(mode="json")


@router.get("/", response_model=SuccessResponse)
async def list_orders_endpoint():
    orders = await order_service.list_orders()
    return SuccessResponse(data=[_out(o) for o in orders])


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_order_endpoint(request_data: OrderRequest, user_id: int = Depends(current_user_id)):
    """
    Places a new order. Line items sent with the order are created in the same
    transaction and taken out of stock.
    """
    data = request_data.model_dump()
    order = await order_service.create_order(data, user_id=user_id)
    log.info(f"Order {order.id} placed successfully by user {user_id}.")

    order = await order_service.get_order_with_items(order.id)
    return SuccessResponse(data=_detail(order))


@router.get("/{order_id}", response_model=SuccessResponse)
async def get_order_endpoint(order_id: int):
    """Fetches details for a specific order, including its line items."""
    order = await order_service.get_order_with_items(order_id)
    if not order:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return SuccessResponse(data=_detail(order))


@router.put("/{order_id}", response_model=SuccessResponse)
async def update_order_endpoint(order_id: int, payload: OrderUpdate):
    order = await order_service.update_order(order_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if not order:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return SuccessResponse(data=_out(order))


@router.delete("/{order_id}", response_model=SuccessResponse)
async def delete_order_endpoint(order_id: int):
    if not await order_service.delete_order(order_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return SuccessResponse(data=MessageData(message="Order deleted successfully").model_dump())


@router.get("/{order_id}/items", response_model=SuccessResponse)
async def list_order_items_endpoint(order_id: int):
    if not await order_service.get_order(order_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    items = await order_service.list_order_items(order_id)
    return SuccessResponse(data=[OrderItemResponse.model_validate(i).model_dump(mode="json") for i in items])


@router.post("/{order_id}/items", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def add_order_item_endpoint(order_id: int, payload: OrderItemRequest):
    """Adds a line item to an order; the product's stock drops by the item quantity (never below 0)."""
    if not await order_service.get_order(order_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    item = await order_service.create_order_item({"order_id": order_id, **payload.model_dump()})
    return SuccessResponse(data=OrderItemResponse.model_validate(item).model_dump(mode="json"))
