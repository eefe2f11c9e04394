# product_catalog/database.py
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from .config import settings

# Create engine
engine = create_async_engine(settings.database_url, echo=settings.sql_echo, future=True)

# Create session factory
async_session_maker = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

# Base declarative
Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session


async def create_tables(bind: AsyncEngine = engine) -> None:
    # Tables are created on startup; there is no migration tooling.
    from . import models  # noqa: F401  registers the mappers on Base

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
