import logging
import time
from typing import List, Type

from pydantic import BaseModel
from tortoise import connections

from .queries import SUPPORTING_INDEXES, get_named_query
from .schemas import (
    OrderRow, OrderStoreRow, ProductSalesRow, QueryRunResponse,
    RankedStoreRow, StoreRankingRow
)

logger = logging.getLogger(__name__)


async def run_named_query(name: str, row_schema: Type[BaseModel]) -> QueryRunResponse:
    """
    Executes a named query and wraps its rows with timing metadata.

    The clock covers dispatching the statement and materialising the rows
    into `row_schema` instances, not the JSON serialization that follows.
    """
    query = get_named_query(name)
    conn = connections.get("default")

    started = time.perf_counter()
    rows = await conn.execute_query_dict(query.sql)
    data = [row_schema.model_validate(row) for row in rows]
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(f"{query.name} v{query.version} -- {len(data)} rows in {elapsed_ms:.3f} ms")

    return QueryRunResponse[row_schema](
        data=data,
        execution_time_ms=round(elapsed_ms, 3),
        query_type=query.query_type,
        description=query.description,
    )


# Orders with stores
async def get_orders_with_stores_unoptimized() -> QueryRunResponse[OrderRow]:
    return await run_named_query("orders_with_stores_unoptimized", OrderRow)


async def get_orders_with_stores_optimized() -> QueryRunResponse[OrderStoreRow]:
    return await run_named_query("orders_with_stores_optimized", OrderStoreRow)


# Product sales
async def get_product_sales_unoptimized() -> QueryRunResponse[ProductSalesRow]:
    return await run_named_query("product_sales_unoptimized", ProductSalesRow)


async def get_product_sales_optimized() -> QueryRunResponse[ProductSalesRow]:
    return await run_named_query("product_sales_optimized", ProductSalesRow)


# Store rankings
async def get_store_rankings_unoptimized() -> QueryRunResponse[StoreRankingRow]:
    return await run_named_query("store_rankings_unoptimized", StoreRankingRow)


async def get_store_rankings_optimized() -> QueryRunResponse[RankedStoreRow]:
    return await run_named_query("store_rankings_optimized", RankedStoreRow)


async def ensure_supporting_indexes() -> List[str]:
    """Creates the indexes the optimized queries rely on; existing ones are left alone."""
    conn = connections.get("default")
    for index_name, ddl in SUPPORTING_INDEXES.items():
        await conn.execute_script(ddl)
        logger.info(f"Ensured index {index_name}")
    return list(SUPPORTING_INDEXES)
