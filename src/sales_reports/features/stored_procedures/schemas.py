"""Row and envelope schemas for the named-query endpoints.

Rows are validated straight from the dictionaries the database driver
returns, so field names match the SQL column aliases."""
import datetime
from typing import Generic, List, Optional, TypeVar

from ...common.schemas import CamelModel

RowT = TypeVar("RowT")


class QueryRunResponse(CamelModel, Generic[RowT]):
    data: List[RowT]
    execution_time_ms: float
    query_type: str
    description: str


# Orders with stores
class OrderRow(CamelModel):
    order_id: int
    store_id: int
    order_date: datetime.datetime
    order_total: float
    delivery_time_minutes: int


class OrderStoreRow(OrderRow):
    store_name: str
    location: str
    order_count_per_store: int
    avg_order_value_per_store: float


# Product sales
class ProductSalesRow(CamelModel):
    product_id: int
    product_name: str
    total_sold: int
    total_revenue: float


# Store rankings; correlated subqueries return NULL sums for stores without orders
class StoreRankingRow(CamelModel):
    store_id: int
    store_name: str
    order_count: Optional[int] = None
    total_revenue: Optional[float] = None
    avg_delivery_time: Optional[int] = None


class RankedStoreRow(CamelModel):
    store_id: int
    store_name: str
    order_count: int
    total_revenue: float
    avg_delivery_time: Optional[int] = None
    revenue_rank: int
