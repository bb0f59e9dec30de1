"""
Table Order Service — Order repository backed by PostgreSQL

Every method checks out one pooled connection and issues a single statement
(INSERT … RETURNING, SELECT … JOIN, or DELETE … RETURNING).
"""
import dataclasses
import logging
from datetime import datetime, timezone

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from table_order.core.errors import CreateFailure, DetailFailure
from table_order.db.database import connected_session
from table_order.domain import Order
from table_order.models.menu import MenuRecord
from table_order.models.order import OrderRecord
from table_order.repositories.base import OrderRepository
from table_order.services.validation import MAX_ROW_ID, is_storable_order_id

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything we store is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_order(record: OrderRecord, menu_name: str | None) -> Order:
    return Order(
        order_id=record.order_id,
        table_number=record.table_number,
        menu_id=record.menu_id,
        cook_time=record.cook_time,
        name=menu_name,
        created_at=_as_utc(record.created_at),
    )


def _joined_select() -> Select:
    return select(OrderRecord, MenuRecord.name).outerjoin(
        MenuRecord, MenuRecord.menu_id == OrderRecord.menu_id
    )


class SqlOrderRepository(OrderRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create(self, order: Order) -> Order:
        async with connected_session(self._session_factory) as session:
            record = OrderRecord(
                menu_id=order.menu_id,
                table_number=order.table_number,
                cook_time=order.cook_time,
                created_at=order.created_at,
            )
            try:
                session.add(record)
                await session.commit()
            except SQLAlchemyError as exc:
                raise CreateFailure(exc) from exc

        logger.debug("Order %s stored for table %s", record.order_id, order.table_number)
        return dataclasses.replace(order, order_id=record.order_id)

    async def list_by_table(self, table_number: int, page: int, limit: int) -> list[Order]:
        limit = min(limit, MAX_ROW_ID)
        offset = page * limit
        if offset > MAX_ROW_ID:
            # past any row a bigint key can address
            return []
        stmt = (
            _joined_select()
            .where(OrderRecord.table_number == table_number)
            .order_by(OrderRecord.created_at.asc(), OrderRecord.order_id.asc())
            .offset(offset)
            .limit(limit)
        )
        async with connected_session(self._session_factory) as session:
            try:
                rows = (await session.execute(stmt)).all()
            except SQLAlchemyError as exc:
                raise CreateFailure(exc) from exc
        return [_to_order(record, name) for record, name in rows]

    async def get_detail(self, table_number: int, order_id: int) -> Order | None:
        if not is_storable_order_id(order_id):
            return None
        stmt = _joined_select().where(
            OrderRecord.order_id == order_id,
            OrderRecord.table_number == table_number,
        )
        async with connected_session(self._session_factory) as session:
            try:
                row = (await session.execute(stmt)).first()
            except SQLAlchemyError as exc:
                raise DetailFailure(exc) from exc
        if row is None:
            return None
        record, name = row
        return _to_order(record, name)

    async def delete(self, table_number: int, order_id: int) -> int | None:
        if not is_storable_order_id(order_id):
            return None
        stmt = (
            delete(OrderRecord)
            .where(
                OrderRecord.order_id == order_id,
                OrderRecord.table_number == table_number,
            )
            .returning(OrderRecord.order_id)
            .execution_options(synchronize_session=False)
        )
        async with connected_session(self._session_factory) as session:
            try:
                deleted = (await session.execute(stmt)).scalar_one_or_none()
                await session.commit()
            except SQLAlchemyError as exc:
                raise DetailFailure(exc) from exc
        return deleted
