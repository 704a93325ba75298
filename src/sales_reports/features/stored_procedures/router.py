import logging

from fastapi import APIRouter

from ...common.errors import bad_request_on_error
from .schemas import (
    OrderRow, OrderStoreRow, ProductSalesRow, QueryRunResponse,
    RankedStoreRow, StoreRankingRow
)
from . import service as query_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/stored-procedures",
    tags=["Named queries"],
    responses={400: {"description": "The named query failed"}},
)


# Plain scan of orders, store details need follow-up lookups
@router.get("/orders-unoptimized", response_model=QueryRunResponse[OrderRow])
async def get_orders_unoptimized():
    with bad_request_on_error("orders-unoptimized"):
        return await query_service.get_orders_with_stores_unoptimized()


# Single join with per-store window metrics
@router.get("/orders-optimized", response_model=QueryRunResponse[OrderStoreRow])
async def get_orders_optimized():
    with bad_request_on_error("orders-optimized"):
        return await query_service.get_orders_with_stores_optimized()


# Join key hidden behind an expression
@router.get("/products-unoptimized", response_model=QueryRunResponse[ProductSalesRow])
async def get_products_unoptimized():
    with bad_request_on_error("products-unoptimized"):
        return await query_service.get_product_sales_unoptimized()


# Join on the indexed product_id
@router.get("/products-optimized", response_model=QueryRunResponse[ProductSalesRow])
async def get_products_optimized():
    with bad_request_on_error("products-optimized"):
        return await query_service.get_product_sales_optimized()


# Correlated subqueries, one round per store
@router.get("/stores-unoptimized", response_model=QueryRunResponse[StoreRankingRow])
async def get_stores_unoptimized():
    with bad_request_on_error("stores-unoptimized"):
        return await query_service.get_store_rankings_unoptimized()


# CTE plus DENSE_RANK
@router.get("/stores-optimized", response_model=QueryRunResponse[RankedStoreRow])
async def get_stores_optimized():
    with bad_request_on_error("stores-optimized"):
        return await query_service.get_store_rankings_optimized()
