"""
Table Order Service — Menu DB model

[CONFIG DATA] — owned by menu management; this service only reads it.
"""
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from table_order.db.database import Base
from table_order.models.order import IdType


class MenuRecord(Base):
    __tablename__ = "menus"

    menu_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
