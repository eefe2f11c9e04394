# product_catalog/products.py
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_session
from .schemas import ProductCreate, ProductOut, ProductReplace, StatisticsOut
from .services import ProductService
from .validation import INT_MAX

router = APIRouter(prefix="/api/products", tags=["products"])


def get_product_service(session: AsyncSession = Depends(get_session)) -> ProductService:
    return ProductService(session)


@router.get("", response_model=List[ProductOut])
async def list_products(
    search: Optional[str] = None,
    min_price: Optional[Decimal] = Query(None, alias="minPrice"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    service: ProductService = Depends(get_product_service),
):
    return await service.list_products(search, min_price, max_price, is_active)


# fixed paths go before /{product_id}, otherwise they would be parsed as ids
@router.get("/search-by-price-range", response_model=List[ProductOut])
async def search_by_price_range(
    min_price: Decimal = Query(..., alias="minPrice"),
    max_price: Decimal = Query(..., alias="maxPrice"),
    service: ProductService = Depends(get_product_service),
):
    return await service.search_by_price_range(min_price, max_price)


@router.get("/low-stock", response_model=List[ProductOut])
async def low_stock(
    threshold: Optional[int] = Query(None, ge=-INT_MAX - 1, le=INT_MAX),
    service: ProductService = Depends(get_product_service),
):
    return await service.low_stock(threshold)


@router.get("/statistics", response_model=StatisticsOut, response_model_exclude_none=True)
async def statistics(service: ProductService = Depends(get_product_service)):
    stats = await service.statistics()
    return StatisticsOut(has_data=stats is not None, statistics=stats)


@router.get("/{product_id}", response_model=ProductOut)
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return await service.get(product_id)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreate,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    product = await service.create(payload)
    response.headers["Location"] = f"{router.prefix}/{product.id}"
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def replace_product(
    product_id: int,
    payload: ProductReplace,
    service: ProductService = Depends(get_product_service),
):
    await service.replace(product_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
