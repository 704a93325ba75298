"""
Reports Service Module

Aggregate reports over the seeded sales data. The sales summary is offered
twice so the two query strategies can be compared:

- the unoptimized variant loads every order in the window, then loads the
  matching stores with a second query, and aggregates in Python;
- the optimized variant asks the database for one pre-aggregated row.

Both variants round through the same Decimal helpers, so they agree to the cent.
"""

import datetime
import logging
from decimal import Decimal
from typing import List

from tortoise.functions import Count, Sum

from ...common.errors import ReportError
from ...common.models import average, to_money
from ..catalog.models import Product, Store
from ..orders.models import Order
from .schemas import ProductSalesInfo, SalesReport, StorePerformanceInfo

logger = logging.getLogger(__name__)


def _order_window(start_date: datetime.date, end_date: datetime.date) -> dict:
    # The end date is inclusive, so filter strictly before the following midnight
    return {
        "order_date__gte": datetime.datetime.combine(start_date, datetime.time()),
        "order_date__lt": datetime.datetime.combine(end_date + datetime.timedelta(days=1), datetime.time()),
    }


def _sales_report(total_orders: int, total_revenue: Decimal, store_count: int, delivery_minutes) -> SalesReport:
    return SalesReport(
        total_orders=total_orders,
        total_revenue=float(total_revenue),
        average_order_value=float(average(total_revenue, total_orders)),
        store_count=store_count,
        average_delivery_time=float(average(delivery_minutes or 0, total_orders)),
    )


async def generate_sales_report_unoptimized(start_date: datetime.date, end_date: datetime.date) -> SalesReport:
    """
    Generates the sales summary by aggregating in application memory.

    Two round trips: all orders in the window, then the stores they belong to.
    Counts, sums and averages are then computed in Python.

    Args:
        start_date: First day of the window (inclusive)
        end_date: Last day of the window (inclusive)

    Returns:
        SalesReport: Zero-valued when no orders fall inside the window.

    Raises:
        ReportError: Wraps any database failure with the requested window.
    """
    try:
        orders = await Order.filter(**_order_window(start_date, end_date)).all()
        store_ids = sorted({order.store_id for order in orders})
        stores = await Store.filter(id__in=store_ids).all() if store_ids else []
    except Exception as exc:
        raise ReportError(
            f"Unoptimized sales report for {start_date} to {end_date} failed: {exc}"
        ) from exc

    total_revenue = sum((to_money(order.total) for order in orders), Decimal("0.00"))
    delivery_minutes = sum(order.delivery_time_minutes for order in orders)
    logger.debug(f"Aggregated {len(orders)} orders from {len(stores)} stores in memory")

    return _sales_report(len(orders), total_revenue, len(stores), delivery_minutes)


async def generate_sales_report_optimized(start_date: datetime.date, end_date: datetime.date) -> SalesReport:
    """
    Generates the sales summary with a single aggregate query.

    The store side of the join is read through orders.store_id rather than
    an explicit JOIN on stores: a joined annotate() makes Tortoise group by
    the order primary key and return one row per order. The foreign key is
    non-null and references exactly one store, so COUNT(DISTINCT store_id)
    equals the number of stores the joined query would see.
    """
    rows = await (
        Order.filter(**_order_window(start_date, end_date))
        .annotate(
            total_orders=Count("id"),
            total_revenue=Sum("total"),
            store_count=Count("store_id", distinct=True),
            delivery_minutes=Sum("delivery_time_minutes"),
        )
        .values("total_orders", "total_revenue", "store_count", "delivery_minutes")
    )
    row = rows[0] if rows else {}
    total_orders = row.get("total_orders") or 0

    return _sales_report(
        total_orders,
        to_money(row.get("total_revenue")),
        row.get("store_count") or 0,
        row.get("delivery_minutes"),
    )


async def generate_top_products_report(top_count: int = 10) -> List[ProductSalesInfo]:
    """
    Ranks sold products by revenue.

    Order items are joined to products and grouped per product in the
    database. Products that never sold are left out.

    Args:
        top_count: Maximum number of products to return; 0 returns an empty list

    Returns:
        List[ProductSalesInfo]: Sorted by total revenue, highest first.
    """
    if top_count <= 0:
        return []

    products = await (
        Product.annotate(
            total_quantity_sold=Sum("order_items__quantity"),
            total_revenue=Sum("order_items__line_total"),
            line_count=Count("order_items"),
        )
        .filter(line_count__gt=0)
        .order_by("-total_revenue", "id")
        .limit(top_count)
    )

    response_items = []
    for product in products:
        revenue = to_money(product.total_revenue)
        response_items.append(
            ProductSalesInfo(
                product_id=product.id,
                product_name=product.name,
                total_quantity_sold=int(product.total_quantity_sold or 0),
                total_revenue=float(revenue),
                average_sale_price=float(average(revenue, product.line_count)),
            )
        )
    return response_items


async def generate_store_performance_report() -> List[StorePerformanceInfo]:
    """
    Summarises every store that has at least one order, best revenue first.
    """
    stores = await (
        Store.annotate(
            total_orders=Count("orders"),
            total_revenue=Sum("orders__total"),
            delivery_minutes=Sum("orders__delivery_time_minutes"),
        )
        .filter(total_orders__gt=0)
        .order_by("-total_revenue", "id")
    )

    response_items = []
    for store in stores:
        revenue = to_money(store.total_revenue)
        response_items.append(
            StorePerformanceInfo(
                store_id=store.id,
                store_name=store.name,
                location=store.location,
                total_orders=store.total_orders,
                total_revenue=float(revenue),
                average_order_value=float(average(revenue, store.total_orders)),
                average_delivery_time=float(average(store.delivery_minutes or 0, store.total_orders)),
            )
        )
    return response_items
