import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import current_user_id
from app.models.inventory_request import RequestStatus
from app.schemas.inventory_request import (
    InventoryRequestCreate,
    InventoryRequestResponse,
    InventoryRequestUpdate,
    RequestStatusUpdate,
)
from app.schemas.response import MessageData, SuccessResponse
from app.services import request_service

log = logging.getLogger("uvicorn")

router = APIRouter(dependencies=[Depends(current_user_id)])


def _out(request):
    return InventoryRequestResponse.model_validate(request).model_dump(mode="json")


@router.get("/", response_model=SuccessResponse)
async def list_requests_endpoint(status_filter: Optional[RequestStatus] = Query(None, alias="status")):
    requests = await request_service.list_requests(status=status_filter)
    return SuccessResponse(data=[_out(r) for r in requests])


@router.get("/{request_id}", response_model=SuccessResponse)
async def get_request_endpoint(request_id: int):
    request = await request_service.get_request(request_id)
    if not request:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory request not found")
    return SuccessResponse(data=_out(request))


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def submit_request_endpoint(payload: InventoryRequestCreate, user_id: int = Depends(current_user_id)):
    """Files a replenishment request on behalf of the logged-in user. Starts as 'pending'."""
    request = await request_service.submit(user_id=user_id, **payload.model_dump())
    return SuccessResponse(data=_out(request))


@router.put("/{request_id}", response_model=SuccessResponse)
async def update_request_endpoint(request_id: int, payload: InventoryRequestUpdate, user_id: int = Depends(current_user_id)):
    data = payload.model_dump(exclude_unset=True)
    # product_id may be cleared explicitly; everything else ignores nulls
    data = {k: v for k, v in data.items() if v is not None or k in ("product_id", "notes")}
    request = await request_service.update_request(request_id, data, user_id=user_id)
    if not request:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory request not found")
    return SuccessResponse(data=_out(request))


@router.patch("/{request_id}/status", response_model=SuccessResponse)
async def update_status_endpoint(request_id: int, payload: RequestStatusUpdate, user_id: int = Depends(current_user_id)):
    """Approves or rejects a pending request. Decided requests cannot change again (400)."""
    request = await request_service.set_status(request_id, payload.status, user_id=user_id)
    if not request:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory request not found")
    log.info(f"Inventory request {request_id} is now {request.status.value}.")
    return SuccessResponse(data=_out(request))


@router.delete("/{request_id}", response_model=SuccessResponse)
async def delete_request_endpoint(request_id: int):
    if not await request_service.delete_request(request_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory request not found")
    return SuccessResponse(data=MessageData(message="Inventory request deleted successfully").model_dump())
