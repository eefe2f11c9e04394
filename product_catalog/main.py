# product_catalog/main.py
"""FastAPI application: REST API under /api/products plus server-rendered pages.

Run with::

    uvicorn product_catalog.main:app --reload
"""
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from . import pages, products
from .config import settings
from .database import async_session_maker, create_tables
from .errors import CatalogError, NotFound, ValidationError
from .logging_config import setup_logging
from .seed import seed_demo_products

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _wants_html(request: Request) -> bool:
    return not request.url.path.startswith("/api")


async def catalog_error_handler(request: Request, exc: CatalogError):
    if isinstance(exc, NotFound) and _wants_html(request):
        return pages.templates.TemplateResponse(
            request, "not_found.html", {"detail": exc.detail}, status_code=exc.status_code
        )
    content = {"detail": exc.detail}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed bodies and query strings are reported as 400, same as service-side validation
    return JSONResponse(
        status_code=400,
        content={"detail": "Validation failed", "errors": jsonable_encoder(exc.errors())},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        description="Product catalog: list, detail, create, edit, delete and statistics",
        version=settings.api_version,
    )

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    # Routers
    app.include_router(products.router)
    app.include_router(pages.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.on_event("startup")
    async def on_startup():
        await create_tables()
        if settings.seed_demo_data:
            async with async_session_maker() as session:
                await seed_demo_products(session)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("product_catalog.main:app", host=settings.host, port=settings.port, reload=True)
