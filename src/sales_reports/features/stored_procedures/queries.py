"""Versioned SQL definitions for the named-query endpoints.

The statements stick to SQL understood by both SQLite (3.25+) and PostgreSQL:
CTEs, window functions and correlated subqueries, without vendor hints. Bump
`version` whenever a statement changes so timings stay comparable."""

from typing import Dict

from pydantic import BaseModel, ConfigDict

from ...common.errors import ReportError

UNOPTIMIZED = "Unoptimized"
OPTIMIZED = "Optimized"


class NamedQuery(BaseModel):
    name: str
    version: int
    query_type: str
    description: str
    sql: str

    model_config = ConfigDict(frozen=True)


_QUERIES = [
    NamedQuery(
        name="orders_with_stores_unoptimized",
        version=1,
        query_type=UNOPTIMIZED,
        description="Simple SELECT without JOIN - requires additional queries to get store info",
        sql="""
            SELECT o.id AS order_id,
                   o.store_id,
                   o.order_date,
                   o.total AS order_total,
                   o.delivery_time_minutes
            FROM orders o
            ORDER BY o.order_date DESC, o.id
        """,
    ),
    NamedQuery(
        name="orders_with_stores_optimized",
        version=1,
        query_type=OPTIMIZED,
        description="Single query with JOIN and window functions for store-level metrics",
        sql="""
            SELECT o.id AS order_id,
                   o.store_id,
                   s.name AS store_name,
                   s.location,
                   o.order_date,
                   o.total AS order_total,
                   o.delivery_time_minutes,
                   COUNT(*) OVER (PARTITION BY o.store_id) AS order_count_per_store,
                   ROUND(AVG(o.total) OVER (PARTITION BY o.store_id), 2) AS avg_order_value_per_store
            FROM orders o
            INNER JOIN stores s ON s.id = o.store_id
            ORDER BY o.order_date DESC, o.id
        """,
    ),
    NamedQuery(
        name="product_sales_unoptimized",
        version=1,
        query_type=UNOPTIMIZED,
        description="Missing index on foreign key - table scan required",
        # "+ 0" turns the join key into an expression, so no index on it can be used
        sql="""
            SELECT p.id AS product_id,
                   p.name AS product_name,
                   SUM(oi.quantity) AS total_sold,
                   ROUND(SUM(oi.line_total), 2) AS total_revenue
            FROM products p
            INNER JOIN order_items oi ON oi.product_id + 0 = p.id
            GROUP BY p.id, p.name
            ORDER BY total_revenue DESC, p.id
        """,
    ),
    NamedQuery(
        name="product_sales_optimized",
        version=1,
        query_type=OPTIMIZED,
        description="Index on OrderItems.ProductId for efficient joins",
        sql="""
            SELECT p.id AS product_id,
                   p.name AS product_name,
                   SUM(oi.quantity) AS total_sold,
                   ROUND(SUM(oi.line_total), 2) AS total_revenue
            FROM products p
            INNER JOIN order_items oi ON oi.product_id = p.id
            GROUP BY p.id, p.name
            ORDER BY total_revenue DESC, p.id
        """,
    ),
    NamedQuery(
        name="store_rankings_unoptimized",
        version=2,
        query_type=UNOPTIMIZED,
        description="Correlated subqueries - runs subquery for each store (N+1 problem)",
        # Stores without orders have NULL revenue and sort last on every backend
        sql="""
            SELECT * FROM (
                SELECT s.id AS store_id,
                       s.name AS store_name,
                       (SELECT COUNT(*) FROM orders o WHERE o.store_id = s.id) AS order_count,
                       (SELECT ROUND(SUM(o.total), 2) FROM orders o WHERE o.store_id = s.id) AS total_revenue,
                       (SELECT CAST(AVG(o.delivery_time_minutes) AS INTEGER)
                          FROM orders o WHERE o.store_id = s.id) AS avg_delivery_time
                FROM stores s
            ) rankings
            ORDER BY total_revenue IS NULL, total_revenue DESC, store_id
        """,
    ),
    NamedQuery(
        name="store_rankings_optimized",
        version=1,
        query_type=OPTIMIZED,
        description="Window functions and CTE - single pass through data",
        sql="""
            WITH store_totals AS (
                SELECT o.store_id,
                       COUNT(*) AS order_count,
                       ROUND(SUM(o.total), 2) AS total_revenue,
                       CAST(AVG(o.delivery_time_minutes) AS INTEGER) AS avg_delivery_time
                FROM orders o
                GROUP BY o.store_id
            )
            SELECT s.id AS store_id,
                   s.name AS store_name,
                   t.order_count,
                   t.total_revenue,
                   t.avg_delivery_time,
                   DENSE_RANK() OVER (ORDER BY t.total_revenue DESC) AS revenue_rank
            FROM stores s
            INNER JOIN store_totals t ON t.store_id = s.id
            ORDER BY revenue_rank, s.id
        """,
    ),
]

NAMED_QUERIES: Dict[str, NamedQuery] = {query.name: query for query in _QUERIES}

# Indexes the optimized definitions assume
SUPPORTING_INDEXES: Dict[str, str] = {
    "ix_order_items_product_id": "CREATE INDEX IF NOT EXISTS ix_order_items_product_id ON order_items (product_id)",
}


def get_named_query(name: str) -> NamedQuery:
    try:
        return NAMED_QUERIES[name]
    except KeyError:
        raise ReportError(f"Unknown named query '{name}'") from None
