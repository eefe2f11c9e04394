# product_catalog/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .validation import INT_MAX


class CamelModel(BaseModel):
    # JSON uses camelCase keys; snake_case is accepted on input too
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Product
class ProductBase(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default="", max_length=500)
    price: Decimal = Field(ge=0, max_digits=18, decimal_places=2)
    stock: int = Field(default=0, ge=0, le=INT_MAX)
    is_active: bool = True


class ProductCreate(ProductBase):
    # the store assigns ids; a client-supplied one is accepted and ignored
    id: Optional[int] = None


class ProductReplace(ProductBase):
    id: int
    # last version the client read; omitted means "don't check"
    version: Optional[int] = None


class ProductOut(ProductBase):
    id: int
    created_date: datetime
    version: int


# Statistics
class ProductStatistics(CamelModel):
    total_products: int
    total_value: Decimal
    average_price: Decimal
    min_price: Decimal
    max_price: Decimal
    total_stock: int


class StatisticsOut(CamelModel):
    has_data: bool
    statistics: Optional[ProductStatistics] = None
