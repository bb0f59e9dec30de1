"""
Table Order Service — Domain → wire mapping

Never fails a response over presentation: an unformattable timestamp becomes
TIMESTAMP_PLACEHOLDER and a missing menu name becomes an empty string.
"""
import logging
from datetime import datetime, timezone

from table_order.domain import Order
from table_order.schemas.order import (
    DeleteResponse,
    MenuData,
    OrderData,
    OrderListResponse,
    OrderResponse,
)

logger = logging.getLogger(__name__)

TIMESTAMP_PLACEHOLDER = ""
MENU_NAME_PLACEHOLDER = ""


def format_timestamp(value: datetime) -> str:
    """RFC 3339 in UTC; naive datetimes are taken to be UTC already."""
    try:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()
    except (AttributeError, TypeError, ValueError, OverflowError) as exc:
        logger.warning("Could not format timestamp %r: %s", value, exc)
        return TIMESTAMP_PLACEHOLDER


def to_order_data(order: Order) -> OrderData:
    return OrderData(
        order_id=order.order_id,
        table_number=order.table_number,
        cook_time=order.cook_time,
        menu=MenuData(id=order.menu_id, name=order.name or MENU_NAME_PLACEHOLDER),
        created_at=format_timestamp(order.created_at),
    )


def to_order_response(order: Order) -> OrderResponse:
    return OrderResponse(order=to_order_data(order))


def to_order_list_response(orders: list[Order]) -> OrderListResponse:
    return OrderListResponse(orders=[to_order_data(o) for o in orders])


def to_delete_response(order_id: int) -> DeleteResponse:
    return DeleteResponse(order_id=order_id)
