"""
SQLAlchemy async database setup.
"""
from __future__ import annotations

from functools import lru_cache

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

metadata = MetaData()


class Base(DeclarativeBase):
    metadata = metadata


@lru_cache(maxsize=None)
def get_async_engine(
    database_url: str, echo: bool = False, pool_size: int = 5, max_overflow: int = 10
) -> AsyncEngine:
    """Create (once per URL) the async SQLAlchemy engine."""
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
    )


def get_async_session_factory(database_url: str, **engine_kwargs) -> async_sessionmaker[AsyncSession]:
    """Create async session factory."""
    engine = get_async_engine(database_url, **engine_kwargs)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(database_url: str, **engine_kwargs) -> None:
    """Create the accounts, conversions and purchases tables if missing."""
    # Model modules register their tables on Base.metadata when imported.
    from backend.src.adapters.outbound.persistence import (  # noqa: F401
        postgres_account_repo,
        postgres_conversion_repo,
        postgres_purchase_repo,
    )

    engine = get_async_engine(database_url, **engine_kwargs)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
