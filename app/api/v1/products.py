import logging
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import current_user_id
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.schemas.response import MessageData, SuccessResponse
from app.services import product_service

log = logging.getLogger("uvicorn")

router = APIRouter(dependencies=[Depends(current_user_id)])


def _out(product):
    return ProductResponse.model_validate(product).model_dump(mode="json")


@router.get("/", response_model=SuccessResponse)
async def list_products_endpoint():
    products = await product_service.list_products()
    return SuccessResponse(data=[_out(p) for p in products])


@router.get("/{product_id}", response_model=SuccessResponse)
async def get_product_endpoint(product_id: int):
    product = await product_service.get_product(product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return SuccessResponse(data=_out(product))


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_product_endpoint(payload: ProductCreate, user_id: int = Depends(current_user_id)):
    product = await product_service.create_product(payload.model_dump(), user_id=user_id)
    log.info(f"Product {product.id} created by user {user_id}.")
    return SuccessResponse(data=_out(product))


@router.put("/{product_id}", response_model=SuccessResponse)
async def update_product_endpoint(product_id: int, payload: ProductUpdate, user_id: int = Depends(current_user_id)):
    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    product = await product_service.update_product(product_id, data, user_id=user_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return SuccessResponse(data=_out(product))


@router.delete("/{product_id}", response_model=SuccessResponse)
async def delete_product_endpoint(product_id: int, user_id: int = Depends(current_user_id)):
    if not await product_service.delete_product(product_id, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return SuccessResponse(data=MessageData(message="Product deleted successfully").model_dump())
