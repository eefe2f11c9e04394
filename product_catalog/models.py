# product_catalog/models.py
from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, Numeric, String

from .database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(String(500), nullable=True, default="")
    price = Column(Numeric(18, 2), nullable=False)           # exact money
    stock = Column(Integer, nullable=False, default=0)
    created_date = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    is_active = Column(Boolean, nullable=False, default=True)
    # bumped by the ORM on every UPDATE; a stale value fails the flush
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_nonneg"),
        CheckConstraint("stock >= 0", name="ck_products_stock_nonneg"),
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} price={self.price} stock={self.stock}>"
