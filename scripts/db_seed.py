"""Create the products table and seed the demo catalog.

Idempotent: products are only inserted when the table is empty.

Usage:
    python scripts/db_seed.py

The script reads DATABASE_URL from the environment; default matches docker-compose.
"""
import asyncio
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path so the package imports without installation
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from product_catalog.config import settings
from product_catalog.database import async_session_maker, create_tables, engine
from product_catalog.logging_config import setup_logging
from product_catalog.seed import seed_demo_products

logger = logging.getLogger("db_seed")


async def main() -> int:
    logger.info("DB seed starting, DATABASE_URL=%s", settings.database_url)
    try:
        await create_tables()
        async with async_session_maker() as session:
            inserted = await seed_demo_products(session)
    finally:
        await engine.dispose()
    logger.info("DB seed complete, %s products inserted", inserted)
    return inserted


if __name__ == "__main__":
    setup_logging(settings.log_level)
    asyncio.run(main())
