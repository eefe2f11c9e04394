import asyncio
import os

# Must be set before product_catalog.config is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_DEMO_DATA"] = "false"

from decimal import Decimal  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from product_catalog.database import create_tables, get_session  # noqa: E402
from product_catalog.main import create_app  # noqa: E402
from product_catalog.models import Product  # noqa: E402


@pytest.fixture
def run_db(tmp_path):
    """Run ``scenario(session_maker)`` against a fresh SQLite file database."""

    def _run(scenario):
        async def _main():
            engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
            await create_tables(engine)
            maker = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
            try:
                return await scenario(maker)
            finally:
                await engine.dispose()

        return asyncio.run(_main())

    return _run


@pytest.fixture
def run_api(run_db):
    """Run ``scenario(client, session_maker)`` with the app wired to the test database."""

    def _run(scenario):
        async def _with_client(maker):
            app = create_app()

            async def _session_override():
                async with maker() as session:
                    yield session

            app.dependency_overrides[get_session] = _session_override
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
                return await scenario(client, maker)

        return run_db(_with_client)

    return _run


async def add_products(maker, *rows):
    """Insert products from (name, price, stock[, is_active[, description]]) tuples; returns their ids."""
    async with maker() as session:
        products = []
        for row in rows:
            name, price, stock = row[:3]
            is_active = row[3] if len(row) > 3 else True
            description = row[4] if len(row) > 4 else ""
            products.append(
                Product(
                    name=name,
                    price=Decimal(price),
                    stock=stock,
                    is_active=is_active,
                    description=description,
                )
            )
        session.add_all(products)
        await session.commit()
        return [p.id for p in products]


# three active products priced 10/20/30 with stocks 1/2/3
SAMPLE = (
    ("Gamma", "30.00", 3),
    ("Alpha", "10.00", 1),
    ("Beta", "20.00", 2),
)
