"""
Table Order Service — Menu repository backed by PostgreSQL (read-only)
"""
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from table_order.core.errors import CreateFailure, MenuNotFound
from table_order.db.database import connected_session
from table_order.domain import Menu
from table_order.models.menu import MenuRecord
from table_order.repositories.base import MenuRepository


class SqlMenuRepository(MenuRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_by_id(self, menu_id: int) -> Menu:
        stmt = select(MenuRecord.menu_id, MenuRecord.name).where(MenuRecord.menu_id == menu_id)
        async with connected_session(self._session_factory) as session:
            try:
                row = (await session.execute(stmt)).first()
            except SQLAlchemyError as exc:
                raise CreateFailure(exc) from exc
        if row is None:
            raise MenuNotFound(menu_id)
        return Menu(menu_id=row.menu_id, name=row.name)
