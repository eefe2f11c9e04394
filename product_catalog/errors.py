# product_catalog/errors.py
"""Errors raised by the catalog service and mapped to HTTP status codes at the edge."""
from typing import List, Optional


class CatalogError(Exception):
    status_code = 500
    default_detail = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFound(CatalogError):
    status_code = 404
    default_detail = "Product not found"


class BadRequest(CatalogError):
    status_code = 400
    default_detail = "Bad request"


class ValidationError(CatalogError):
    status_code = 400
    default_detail = "Validation failed"

    def __init__(self, errors: List[dict], detail: Optional[str] = None):
        super().__init__(detail)
        self.errors = errors


class Conflict(CatalogError):
    status_code = 409
    default_detail = "Product was modified by another request"
