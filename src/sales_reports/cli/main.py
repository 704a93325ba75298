import asyncio
import logging

import typer
import uvicorn
from tortoise import Tortoise

from sales_reports.core import config
from sales_reports.core.database import build_tortoise_config
from sales_reports.core.logging_config import configure_logging
from sales_reports.features.catalog.models import Product, Store
from sales_reports.features.orders.models import Order, OrderItem
from sales_reports.features.seed import service as seed_service
from sales_reports.features.stored_procedures.service import ensure_supporting_indexes

logger = logging.getLogger(__name__)

app = typer.Typer(name="sales-reports", help="CLI for managing the Sales Reports database.")

DB_URL_OPTION = typer.Option(config.DATABASE_URL, "--db-url", help="Tortoise database URL.")


# Shared async context manager for database connection
class DBConnection:
    def __init__(self, db_url: str):
        self.db_url = db_url

    async def __aenter__(self):
        await Tortoise.init(config=build_tortoise_config(self.db_url))
        await Tortoise.generate_schemas(safe=True) # Generate schema if it doesn't exist
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await Tortoise.close_connections()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level.")):
    configure_logging("DEBUG" if verbose else config.LOG_LEVEL)


@app.command("seed")
def seed_command(
    orders: int = typer.Option(config.SEED_ORDER_COUNT, "--orders", min=0, help="Number of orders to generate."),
    random_seed: int = typer.Option(config.SEED_RANDOM_SEED, "--random-seed", help="Seed for the data generator."),
    db_url: str = DB_URL_OPTION,
):
    """Seeds an empty database with stores, products, orders and order items."""
    asyncio.run(_seed(db_url, orders, random_seed))


async def _seed(db_url: str, orders: int, random_seed: int):
    async with DBConnection(db_url):
        seeded = await seed_service.initialize(order_count=orders, random_seed=random_seed)
        if seeded:
            typer.secho(f"Seeded {orders} orders (random seed {random_seed}).", fg=typer.colors.GREEN)
        else:
            typer.secho("Database already contains stores; nothing to do.", fg=typer.colors.YELLOW)


@app.command("create-indexes")
def create_indexes_command(db_url: str = DB_URL_OPTION):
    """Creates the indexes the optimized named queries expect."""
    asyncio.run(_create_indexes(db_url))


async def _create_indexes(db_url: str):
    async with DBConnection(db_url):
        try:
            created = await ensure_supporting_indexes()
        except Exception as e:
            typer.secho(f"Could not create indexes: {e}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        for index_name in created:
            typer.secho(f"Index '{index_name}' is in place.", fg=typer.colors.GREEN)


@app.command("check-db")
def check_db_command(db_url: str = DB_URL_OPTION):
    """Tests the database connection and prints row counts per table."""
    asyncio.run(_check_db(db_url))


async def _check_db(db_url: str):
    async with DBConnection(db_url):
        typer.echo("Successfully connected to the database.")
        for model in (Store, Product, Order, OrderItem):
            count = await model.all().count()
            typer.echo(f"{model._meta.db_table}: {count}")


@app.command("serve")
def serve_command(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes."),
):
    """Runs the API with uvicorn."""
    typer.echo(f"Serving the Sales Reports API on http://{host}:{port}")
    uvicorn.run("sales_reports.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
