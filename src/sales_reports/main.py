import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from tortoise.contrib.fastapi import RegisterTortoise, tortoise_exception_handlers

from .core import config
from .core.database import TORTOISE_ORM_CONFIG
from .core.logging_config import configure_logging
from .features.reports.router import router as reports_router
from .features.seed import service as seed_service
from .features.stored_procedures.router import router as stored_procedures_router
from .features.stored_procedures.service import ensure_supporting_indexes

configure_logging()
logger = logging.getLogger("sales_reports.main")  # This logger will inherit from 'sales_reports'


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Connects to the database, creates missing tables, optionally provisions
    the supporting indexes and seeds an empty store before serving requests.
    RegisterTortoise makes the connection visible to request handlers, which
    run outside the lifespan task, and closes it on shutdown.
    """
    logger.info("Starting application...")
    async with RegisterTortoise(app, config=TORTOISE_ORM_CONFIG, generate_schemas=True):
        logger.info("Tortoise-ORM has been initialized.")

        if config.PROVISION_INDEXES:
            await ensure_supporting_indexes()
        if config.SEED_ON_STARTUP:
            await seed_service.initialize(
                order_count=config.SEED_ORDER_COUNT, random_seed=config.SEED_RANDOM_SEED
            )

        yield

    logger.info("Tortoise-ORM connections have been closed.")


app = FastAPI(
    title="Sales Reports API",
    description="Paired unoptimized and optimized reporting queries over store sales data.",
    version="0.1.0",
    exception_handlers=tortoise_exception_handlers(),
    lifespan=lifespan,
)


@app.get("/")
async def read_root(request: Request):
    """
    Root endpoint for the API.
    """
    client_host = request.client.host if request.client else "unknown client"
    logger.info(f"Root endpoint '/' accessed by {client_host}")
    return {"message": "Welcome to the Sales Reports API!"}


app.include_router(reports_router)
app.include_router(stored_procedures_router)
