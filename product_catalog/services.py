# product_catalog/services.py
"""Product query service.

Every read/write/filter/aggregate operation on the ``products`` table goes through
``ProductService``. The service owns no connection of its own: it is handed a
request-scoped ``AsyncSession`` and commits on it.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from .config import settings
from .errors import BadRequest, Conflict, NotFound, ValidationError
from .models import Product
from .schemas import ProductCreate, ProductReplace, ProductStatistics
from .validation import INT_MAX, ProductDraft, validate_product

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def _money(value) -> Decimal:
    # drivers hand back Decimal, float or int depending on the backend
    return Decimal(str(value)).quantize(CENTS)


def _valid_id(product_id: int) -> bool:
    return 1 <= product_id <= INT_MAX


class ProductService:
    def __init__(self, session: AsyncSession):
        self.session = session

    # reads

    async def list_products(
        self,
        search: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        is_active: Optional[bool] = None,
    ) -> List[Product]:
        """All products matching every supplied filter, ordered by name.

        ``search`` is a case-insensitive substring match on name or description.
        """
        stmt = select(Product)
        if search:
            stmt = stmt.where(
                Product.name.icontains(search, autoescape=True)
                | Product.description.icontains(search, autoescape=True)
            )
        if min_price is not None:
            stmt = stmt.where(Product.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(Product.price <= max_price)
        if is_active is not None:
            stmt = stmt.where(Product.is_active.is_(is_active))

        result = await self.session.execute(stmt.order_by(Product.name, Product.id))
        return list(result.scalars().all())

    async def list_active(self) -> List[Product]:
        return await self.list_products(is_active=True)

    async def get(self, product_id: int) -> Product:
        # ids outside the column range can never have been assigned
        product = await self.session.get(Product, product_id) if _valid_id(product_id) else None
        if product is None:
            raise NotFound(f"Product {product_id} not found")
        return product

    async def search_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Product]:
        # an inverted range simply matches nothing
        result = await self.session.execute(
            select(Product)
            .where(Product.is_active.is_(True), Product.price >= min_price, Product.price <= max_price)
            .order_by(Product.price, Product.id)
        )
        return list(result.scalars().all())

    async def low_stock(self, threshold: Optional[int] = None) -> List[Product]:
        if threshold is None:
            threshold = settings.low_stock_threshold
        # stock is a 32-bit column, so clamping keeps the result unchanged
        threshold = max(-INT_MAX - 1, min(threshold, INT_MAX))
        result = await self.session.execute(
            select(Product)
            .where(Product.is_active.is_(True), Product.stock <= threshold)
            .order_by(Product.stock, Product.id)
        )
        return list(result.scalars().all())

    async def statistics(self) -> Optional[ProductStatistics]:
        """Aggregate figures over active products, or None when there are none."""
        result = await self.session.execute(
            select(
                func.count(Product.id),
                func.sum(Product.price * Product.stock),
                func.avg(Product.price),
                func.min(Product.price),
                func.max(Product.price),
                func.sum(Product.stock),
            ).where(Product.is_active.is_(True))
        )
        count, total_value, average_price, min_price, max_price, total_stock = result.one()
        if not count:
            return None

        return ProductStatistics(
            total_products=count,
            total_value=_money(total_value),
            average_price=_money(average_price),
            min_price=_money(min_price),
            max_price=_money(max_price),
            total_stock=int(total_stock),
        )

    # writes

    async def create(self, payload: ProductCreate) -> Product:
        draft = self._validated(payload)
        product = Product(
            name=draft.name,
            description=draft.description,
            price=draft.price,
            stock=draft.stock,
            is_active=draft.is_active,
        )
        self.session.add(product)
        await self.session.commit()
        await self.session.refresh(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    async def replace(self, product_id: int, payload: ProductReplace) -> None:
        if payload.id != product_id:
            raise BadRequest(f"Product id {payload.id} does not match route id {product_id}")

        draft = self._validated(payload)
        product = await self.get(product_id)
        if payload.version is not None and payload.version != product.version:
            logger.warning(
                "Stale update for product %s: client version %s, stored %s",
                product_id, payload.version, product.version,
            )
            raise Conflict(f"Product {product_id} was modified by another request")

        product.name = draft.name
        product.description = draft.description
        product.price = draft.price
        product.stock = draft.stock
        product.is_active = draft.is_active

        try:
            await self.session.commit()
        except StaleDataError:
            await self.session.rollback()
            await self._raise_for_stale(product_id)
        logger.info("Replaced product %s", product_id)

    async def delete(self, product_id: int) -> None:
        product = await self.get(product_id)
        await self.session.delete(product)
        try:
            await self.session.commit()
        except StaleDataError:
            await self.session.rollback()
            await self._raise_for_stale(product_id)
        logger.info("Deleted product %s", product_id)

    # helpers

    async def exists(self, product_id: int) -> bool:
        if not _valid_id(product_id):
            return False
        result = await self.session.execute(select(Product.id).where(Product.id == product_id))
        return result.scalar_one_or_none() is not None

    async def _raise_for_stale(self, product_id: int) -> None:
        if not await self.exists(product_id):
            raise NotFound(f"Product {product_id} not found")
        logger.warning("Concurrent modification detected for product %s", product_id)
        raise Conflict(f"Product {product_id} was modified by another request")

    @staticmethod
    def _validated(payload) -> ProductDraft:
        result = validate_product(payload)
        if not result.ok:
            raise ValidationError([e.to_dict() for e in result.errors])
        return result.draft
