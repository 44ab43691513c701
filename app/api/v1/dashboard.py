from fastapi import APIRouter, Depends, Query

from app.api.deps import current_user_id
from app.core.config import ACTIVITY_FEED_LIMIT
from app.schemas.activity import ActivityResponse
from app.schemas.dashboard import DashboardResponse, DashboardStats
from app.schemas.product import LowStockProductResponse, ProductResponse
from app.schemas.response import SuccessResponse
from app.services import activity_service, dashboard_service, low_stock

router = APIRouter(dependencies=[Depends(current_user_id)])
activity_router = APIRouter(dependencies=[Depends(current_user_id)])


def _low_stock_row(product):
    return LowStockProductResponse(
        **ProductResponse.model_validate(product).model_dump(),
        ratio=low_stock.depletion_ratio(product),
        stock_level=low_stock.classify(product),
    )


@router.get("/", response_model=SuccessResponse)
async def get_dashboard_endpoint():
    """Stats, (synthetic) monthly trend series and the ranked low stock list."""
    payload = await dashboard_service.get_dashboard()
    payload["low_stock"] = [_low_stock_row(p) for p in payload["low_stock"]]
    return SuccessResponse(data=DashboardResponse(**payload).model_dump(mode="json"))


@router.get("/stats", response_model=SuccessResponse)
async def get_stats_endpoint():
    stats = await dashboard_service.get_dashboard_stats()
    return SuccessResponse(data=DashboardStats(**stats).model_dump(mode="json"))


@router.get("/low-stock", response_model=SuccessResponse)
async def get_low_stock_endpoint():
    """Products at or below their reorder threshold, most depleted first."""
    products = await low_stock.get_low_stock_products()
    return SuccessResponse(data=[_low_stock_row(p).model_dump(mode="json") for p in products])


@activity_router.get("/", response_model=SuccessResponse)
async def recent_activity_endpoint(limit: int = Query(ACTIVITY_FEED_LIMIT, ge=1, le=500)):
    activities = await activity_service.recent(limit)
    return SuccessResponse(data=[ActivityResponse.model_validate(a).model_dump(mode="json") for a in activities])
