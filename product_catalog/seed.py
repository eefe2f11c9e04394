# product_catalog/seed.py
"""Demo catalog inserted into an empty ``products`` table."""
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Product

logger = logging.getLogger(__name__)

# (name, description, price, stock, age in days)
DEMO_PRODUCTS = [
    ("Laptop", "High-performance laptop for work and gaming", Decimal("1299.99"), 15, 30),
    ("Smartphone", "Latest model smartphone with advanced features", Decimal("899.99"), 25, 20),
    ("Wireless Headphones", "Premium wireless headphones with noise cancellation", Decimal("299.99"), 50, 10),
]


async def seed_demo_products(session: AsyncSession) -> int:
    """Insert the demo products unless the table already has rows. Returns the number inserted."""
    existing = (await session.execute(select(func.count(Product.id)))).scalar_one()
    if existing:
        logger.info("Skipping demo seed: %s products already present", existing)
        return 0

    now = datetime.now(timezone.utc)
    for name, description, price, stock, age_days in DEMO_PRODUCTS:
        session.add(
            Product(
                name=name,
                description=description,
                price=price,
                stock=stock,
                created_date=now - timedelta(days=age_days),
                is_active=True,
            )
        )
    await session.commit()
    logger.info("Seeded %s demo products", len(DEMO_PRODUCTS))
    return len(DEMO_PRODUCTS)
