from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import current_user_id
from app.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from app.schemas.response import MessageData, SuccessResponse
from app.services import client_service

router = APIRouter(dependencies=[Depends(current_user_id)])


def _out(client):
    return ClientResponse.model_validate(client).model_dump(mode="json")


@router.get("/", response_model=SuccessResponse)
async def list_clients_endpoint():
    clients = await client_service.list_clients()
    return SuccessResponse(data=[_out(c) for c in clients])


@router.get("/{client_id}", response_model=SuccessResponse)
async def get_client_endpoint(client_id: int):
    client = await client_service.get_client(client_id)
    if not client:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return SuccessResponse(data=_out(client))


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_client_endpoint(payload: ClientCreate, user_id: int = Depends(current_user_id)):
    client = await client_service.create_client(payload.model_dump(), user_id=user_id)
    return SuccessResponse(data=_out(client))


@router.put("/{client_id}", response_model=SuccessResponse)
async def update_client_endpoint(client_id: int, payload: ClientUpdate):
    client = await client_service.update_client(client_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if not client:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return SuccessResponse(data=_out(client))


@router.delete("/{client_id}", response_model=SuccessResponse)
async def delete_client_endpoint(client_id: int):
    if not await client_service.delete_client(client_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return SuccessResponse(data=MessageData(message="Client deleted successfully").model_dump())
