# module foodparadise.analytics.views
from fastapi import APIRouter, Depends

from foodparadise.infra.supabase_client import get_db
from . import service as analytics_service

router = APIRouter(tags=["Analytics API"])

@router.get("/admin-stats")
def admin_stats(db=Depends(get_db)):
    return analytics_service.revenue_summary(db)

@router.get("/order-stats")
def order_stats(db=Depends(get_db)):
    return analytics_service.order_breakdown(db)

@router.get("/order-stats/categories")
def order_stats_by_category(db=Depends(get_db)):
    return analytics_service.category_rollup(analytics_service.order_breakdown(db))
