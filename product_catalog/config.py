# product_catalog/config.py
import os
from dataclasses import dataclass
from typing import Optional


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings read from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # Use DATABASE_URL when available (containerized runs); the default points at
    # the compose Postgres service. sqlite+aiosqlite URLs work for local dev.
    database_url: str = os.getenv(
        "DATABASE_URL",
        "postgresql+asyncpg://postgres:postgres@db:5432/product_catalog",
    )
    sql_echo: bool = _flag("SQL_ECHO", "false")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    seed_demo_data: bool = _flag("SEED_DEMO_DATA", "true")
    low_stock_threshold: int = int(os.getenv("LOW_STOCK_THRESHOLD", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


settings = Settings()
