# product_catalog/pages.py
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .products import get_product_service
from .services import ProductService

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def index_page(request: Request, service: ProductService = Depends(get_product_service)):
    products = await service.list_active()
    return templates.TemplateResponse(request, "index.html", {"products": products})


@router.get("/products/create", response_class=HTMLResponse)
async def create_page(request: Request):
    return templates.TemplateResponse(request, "create.html", {})


@router.get("/products/{product_id}", response_class=HTMLResponse)
async def details_page(request: Request, product_id: int, service: ProductService = Depends(get_product_service)):
    # NotFound bubbles up to the app handler, which renders not_found.html for pages
    product = await service.get(product_id)
    return templates.TemplateResponse(request, "details.html", {"product": product})


@router.get("/products/{product_id}/edit", response_class=HTMLResponse)
async def edit_page(request: Request, product_id: int, service: ProductService = Depends(get_product_service)):
    product = await service.get(product_id)
    return templates.TemplateResponse(request, "edit.html", {"product": product})


@router.get("/statistics", response_class=HTMLResponse)
async def statistics_page(request: Request, service: ProductService = Depends(get_product_service)):
    stats = await service.statistics()
    return templates.TemplateResponse(request, "statistics.html", {"stats": stats})
