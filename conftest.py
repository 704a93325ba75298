"""
Root conftest for the pytest test suite.

This file contains the main fixtures that are used across the entire test suite.

Each test runs against a fresh, isolated in-memory SQLite database created by
an async autouse fixture, and talks to the API through an httpx AsyncClient
bound to the ASGI app, so requests run on the same event loop as the
database connection.

Key Fixtures:
- `anyio_backend`: Specifies the asyncio backend.
- `initialize_test_db`: (autouse) Creates a fresh DB schema for each test.
  Tests marked `no_db` are left alone.
- `client`: Provides an httpx AsyncClient for the FastAPI app.
- `seeded_db`: Seeds the test DB with a small, reproducible data set.
"""

import datetime
from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from sales_reports.core.database import build_tortoise_config
from sales_reports.features.seed import service as seed_service

# Import the app
from sales_reports.main import app as actual_app

TEST_DB_URL = "sqlite://:memory:"
SEED_ORDER_COUNT = 120
SEED_RANDOM_SEED = 42
SEED_ANCHOR_DATE = datetime.date(2025, 6, 30)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """
    Specifies the asyncio backend.
    """
    return "asyncio"


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_test_db(request) -> AsyncGenerator[None, None]:
    """
    Initializes the database for each test function.

    This async, autouse fixture creates a fresh in-memory database and schema
    for each test and tears it down afterwards.
    """
    if request.node.get_closest_marker("no_db"):
        yield
        return

    await Tortoise.init(config=build_tortoise_config(TEST_DB_URL))
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, Any]:
    """
    Provides an httpx AsyncClient wired directly to the ASGI app.

    The app's lifespan is not run; `initialize_test_db` owns the connection.
    """
    transport = ASGITransport(app=actual_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def seeded_db() -> datetime.date:
    """Seeds the test DB and returns the last day of the seeded order window."""
    await seed_service.initialize(
        order_count=SEED_ORDER_COUNT, random_seed=SEED_RANDOM_SEED, anchor_date=SEED_ANCHOR_DATE
    )
    return SEED_ANCHOR_DATE
