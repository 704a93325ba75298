"""
Seed Data Module

Populates an empty store with the fixed store network, the fixed menu and a
pseudo-random but reproducible set of orders and order items. Every random
value is drawn from a single `random.Random` seeded by the caller, in a fixed
order, so seeding two empty stores with the same arguments yields the same
rows.
"""

import datetime
import logging
import random
from decimal import Decimal
from typing import List, Optional

from tortoise.transactions import in_transaction

from ...common.models import to_money
from ..catalog.models import Product, Store
from ..orders.models import Order, OrderItem

logger = logging.getLogger(__name__)

STORES = [
    {"name": "Ann Arbor Downtown", "location": "Ann Arbor, MI", "manager": "John Smith", "opened_date": datetime.date(2010, 5, 15)},
    {"name": "Ann Arbor West Side", "location": "Ann Arbor, MI", "manager": "Sarah Johnson", "opened_date": datetime.date(2012, 3, 20)},
    {"name": "Ypsilanti Main", "location": "Ypsilanti, MI", "manager": "Mike Davis", "opened_date": datetime.date(2008, 1, 10)},
    {"name": "Canton Center", "location": "Canton, MI", "manager": "Jennifer Lee", "opened_date": datetime.date(2015, 7, 25)},
    {"name": "Plymouth North", "location": "Plymouth, MI", "manager": "Robert Martinez", "opened_date": datetime.date(2011, 11, 5)},
]

PRODUCTS = [
    {"name": "Large Pepperoni Pizza", "category": "Pizza", "price": Decimal("14.99")},
    {"name": "Large ExtravaganZZa", "category": "Pizza", "price": Decimal("18.99")},
    {"name": "Medium MeatZZa Mania", "category": "Pizza", "price": Decimal("12.99")},
    {"name": "Cali Chicken Bacon Ranch", "category": "Pizza", "price": Decimal("13.99")},
    {"name": "Honolulu Hawaiian", "category": "Pizza", "price": Decimal("13.99")},
    {"name": "Buffalo Chicken", "category": "Wings", "price": Decimal("7.99")},
    {"name": "Marinated Buffalo Chicken", "category": "Wings", "price": Decimal("8.99")},
    {"name": "Parmesan Bread Bites", "category": "Sides", "price": Decimal("5.99")},
    {"name": "Marbled Cookie Brownie", "category": "Dessert", "price": Decimal("3.99")},
    {"name": "Coca-Cola 2L", "category": "Beverage", "price": Decimal("2.99")},
]

ORDER_WINDOW_DAYS = 90


def _build_orders(rng: random.Random, stores: List[Store], order_count: int, anchor_date: datetime.date) -> List[Order]:
    orders = []
    for _ in range(order_count):
        store = rng.choice(stores)
        order_day = anchor_date - datetime.timedelta(days=rng.randrange(ORDER_WINDOW_DAYS))
        # Orders are placed between 11:00 and 23:00
        placed_at = datetime.datetime.combine(order_day, datetime.time()) + datetime.timedelta(
            minutes=rng.randrange(11 * 60, 23 * 60)
        )
        item_count = rng.randint(1, 5)
        orders.append(
            Order(
                store_id=store.id,
                order_date=placed_at,
                total=to_money(rng.random() * 60 + 15),  # $15-$75
                delivery_time_minutes=rng.randint(15, 59),
                status="Delivered",
                item_count=item_count,
            )
        )
    return orders


def _build_order_items(rng: random.Random, orders: List[Order], products: List[Product]) -> List[OrderItem]:
    order_items = []
    for order in orders:
        for _ in range(rng.randint(1, 3)):
            product = rng.choice(products)
            quantity = rng.randint(1, 2)
            order_items.append(
                OrderItem(
                    order_id=order.id,
                    product_id=product.id,
                    quantity=quantity,
                    line_total=to_money(Decimal(str(product.price)) * quantity),
                )
            )
    return order_items


async def initialize(
    order_count: int = 500,
    random_seed: int = 42,
    anchor_date: Optional[datetime.date] = None,
) -> bool:
    """
    Seeds the database unless it already holds at least one store.

    Args:
        order_count: Number of orders to generate
        random_seed: Seed for the random stream that drives every generated value
        anchor_date: Last day of the 90-day order window (defaults to today)

    Returns:
        bool: True when rows were inserted, False when the store was already seeded.
    """
    if await Store.all().exists():
        logger.info("Stores already present, skipping seed data.")
        return False

    anchor_date = anchor_date or datetime.date.today()
    rng = random.Random(random_seed)
    logger.info(f"Seeding {order_count} orders with random seed {random_seed}, ending {anchor_date}.")

    async with in_transaction() as conn:
        await Store.bulk_create([Store(**data) for data in STORES], using_db=conn)
    stores = await Store.all().order_by("id")

    async with in_transaction() as conn:
        await Product.bulk_create([Product(**data) for data in PRODUCTS], using_db=conn)
    products = await Product.all().order_by("id")

    new_orders = _build_orders(rng, stores, order_count, anchor_date)
    if new_orders:
        async with in_transaction() as conn:
            await Order.bulk_create(new_orders, using_db=conn)
    orders = await Order.all().order_by("id")

    order_items = _build_order_items(rng, orders, products)
    if order_items:
        async with in_transaction() as conn:
            await OrderItem.bulk_create(order_items, using_db=conn)

    logger.info(
        f"Seeded {len(stores)} stores, {len(products)} products, {len(orders)} orders and {len(order_items)} order items."
    )
    return True
