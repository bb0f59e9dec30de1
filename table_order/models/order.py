"""
Table Order Service — Order DB model

[TRANSACTIONAL DATA] — one row per placed order, removed on cancel.
"""
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Index, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from table_order.db.database import Base

# bigserial on PostgreSQL; SQLite only autoincrements INTEGER PRIMARY KEY
IdType = BigInteger().with_variant(Integer, "sqlite")


class OrderRecord(Base):
    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    menu_id: Mapped[int] = mapped_column(Integer, nullable=False)
    table_number: Mapped[int] = mapped_column(Integer, nullable=False)
    cook_time: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index("ix_orders_table_number_created_at", "table_number", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<OrderRecord id={self.order_id} table={self.table_number} menu={self.menu_id}>"
