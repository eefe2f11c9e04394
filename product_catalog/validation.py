# product_catalog/validation.py
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Optional

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
# products.id and products.stock are 32-bit INTEGER columns
INT_MAX = 2**31 - 1


@dataclass
class ProductDraft:
    """Normalized field values of a product about to be written."""

    name: str
    description: str
    price: Decimal
    stock: int
    is_active: bool = True


@dataclass
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    draft: Optional[ProductDraft] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_product(payload) -> ValidationResult:
    """Check name/description/price/stock constraints on any object carrying those attributes.

    Returns a result holding either the normalized draft or the list of field errors.
    """
    errors: List[FieldError] = []

    name = (getattr(payload, "name", None) or "").strip()
    if not name:
        errors.append(FieldError("name", "name is required"))
    elif len(name) > NAME_MAX_LENGTH:
        errors.append(FieldError("name", f"name must be at most {NAME_MAX_LENGTH} characters"))

    description = getattr(payload, "description", None) or ""
    if len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            FieldError("description", f"description must be at most {DESCRIPTION_MAX_LENGTH} characters")
        )

    price = getattr(payload, "price", None)
    try:
        price = Decimal(str(price)) if price is not None else None
    except InvalidOperation:
        price = None
    if price is None or not price.is_finite():
        errors.append(FieldError("price", "price must be a number"))
    elif price < 0:
        errors.append(FieldError("price", "price must be >= 0"))

    stock = getattr(payload, "stock", 0)
    if isinstance(stock, bool) or not isinstance(stock, int):
        errors.append(FieldError("stock", "stock must be an integer"))
    elif stock < 0:
        errors.append(FieldError("stock", "stock must be >= 0"))
    elif stock > INT_MAX:
        errors.append(FieldError("stock", f"stock must be <= {INT_MAX}"))

    if errors:
        return ValidationResult(errors=errors)

    is_active = getattr(payload, "is_active", True)
    return ValidationResult(
        draft=ProductDraft(
            name=name,
            description=description,
            price=price,
            stock=stock,
            is_active=True if is_active is None else bool(is_active),
        )
    )
