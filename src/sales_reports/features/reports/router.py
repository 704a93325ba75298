import datetime
import logging
from typing import List

from fastapi import APIRouter, Query

from ...common.errors import bad_request_on_error
# Schemas for responses
from .schemas import ProductSalesInfo, SalesReport, StorePerformanceInfo
# Service functions that contain the query logic
from . import service as report_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reports",
    tags=["Reports"],
    responses={400: {"description": "The report query failed"}},
)


@router.get("/sales-unoptimized", response_model=SalesReport)
async def get_sales_report_unoptimized(
    start_date: datetime.date = Query(..., alias="startDate", description="First day of the report window (YYYY-MM-DD)"),
    end_date: datetime.date = Query(..., alias="endDate", description="Last day of the report window (YYYY-MM-DD)"),
):
    with bad_request_on_error("sales-unoptimized"):
        return await report_service.generate_sales_report_unoptimized(start_date, end_date)


@router.get("/sales-optimized", response_model=SalesReport)
async def get_sales_report_optimized(
    start_date: datetime.date = Query(..., alias="startDate", description="First day of the report window (YYYY-MM-DD)"),
    end_date: datetime.date = Query(..., alias="endDate", description="Last day of the report window (YYYY-MM-DD)"),
):
    with bad_request_on_error("sales-optimized"):
        return await report_service.generate_sales_report_optimized(start_date, end_date)


@router.get("/top-products", response_model=List[ProductSalesInfo])
async def get_top_products(
    top_count: int = Query(10, alias="topCount", ge=0, description="Number of products to return"),
):
    with bad_request_on_error("top-products"):
        return await report_service.generate_top_products_report(top_count)


@router.get("/store-performance", response_model=List[StorePerformanceInfo])
async def get_store_performance():
    with bad_request_on_error("store-performance"):
        return await report_service.generate_store_performance_report()
