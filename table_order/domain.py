"""
Table Order Service — Domain entities

These are what repositories hand back and the order service passes around;
the ORM rows in ``table_order.models`` never leave the repository layer.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Order:
    table_number: int
    menu_id: int
    cook_time: int
    order_id: int = 0                 # 0 until storage assigns one
    name: str | None = None           # menu name, only set on joined reads
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def new(cls, table_number: int, menu_id: int, cook_time: int) -> "Order":
        """An unsaved order, stamped with the current UTC time."""
        return cls(table_number=table_number, menu_id=menu_id, cook_time=cook_time)


@dataclass(frozen=True)
class Menu:
    menu_id: int
    name: str | None                  # column is nullable; callers pick a placeholder
