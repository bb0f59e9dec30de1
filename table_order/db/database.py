"""
Table Order Service — Async SQLAlchemy engine and session factory
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from table_order.core.config import Settings
from table_order.core.errors import ConnectionFailure


class Base(DeclarativeBase):
    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """One bounded pool per process; callers wait up to POSTGRES_POOL_TIMEOUT for a slot."""
    url = settings.database_url
    if url.startswith("sqlite"):
        # SQLite has no server-side pool to bound
        return create_async_engine(url, echo=settings.DEBUG)
    return create_async_engine(
        url,
        pool_size=settings.POSTGRES_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.POSTGRES_POOL_TIMEOUT,
        pool_pre_ping=True,
        echo=settings.DEBUG,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@asynccontextmanager
async def connected_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Open a session and check out its pooled connection up front.

    Any failure while acquiring the connection surfaces as ConnectionFailure,
    so statement errors raised later can be told apart from pool errors.
    """
    async with session_factory() as session:
        try:
            await session.connection()
        except (SQLAlchemyError, OSError) as exc:
            raise ConnectionFailure(exc) from exc
        yield session


async def create_schema(engine: AsyncEngine) -> None:
    # Importing the models registers their tables on Base.metadata
    from table_order.models import menu, order  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
