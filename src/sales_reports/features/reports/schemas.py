"""Aggregate Reports API Schemas

Response models for the reporting endpoints:

1. Sales summary (shared by the unoptimized and optimized variants)
2. Top products by revenue
3. Store performance

Money and averages are serialized as numbers rounded to cents."""
from ...common.schemas import CamelModel


# 1. Sales summary over a date window
class SalesReport(CamelModel):
    total_orders: int
    total_revenue: float
    average_order_value: float
    store_count: int
    average_delivery_time: float


# 2. Top products by revenue
class ProductSalesInfo(CamelModel):
    product_id: int
    product_name: str
    total_quantity_sold: int
    total_revenue: float
    average_sale_price: float


# 3. Store performance
class StorePerformanceInfo(CamelModel):
    store_id: int
    store_name: str
    location: str
    total_orders: int
    total_revenue: float
    average_order_value: float
    average_delivery_time: float
