"""
Table Order Service — Order orchestration

Stateless pipeline per request:
  validate → (create only) draw cook time → repository call(s) → enriched Order

ValidationFailure is raised before any I/O. OperationError from a repository
propagates unchanged; the HTTP boundary logs it and hides the details.
"""
import dataclasses
import logging

from table_order.core.cook_time import CookTimePolicy
from table_order.domain import Order
from table_order.repositories.base import MenuRepository, OrderRepository
from table_order.services.validation import (
    is_storable_order_id,
    normalize_pagination,
    validate_menu_id,
    validate_table_number,
)

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(
        self,
        orders: OrderRepository,
        menus: MenuRepository,
        cook_time: CookTimePolicy,
    ):
        self.orders = orders
        self.menus = menus
        self.cook_time = cook_time

    async def create_order(self, table_number: int, menu_id: int) -> Order:
        """Place an order and return it enriched with its menu name."""
        validate_table_number(table_number)
        validate_menu_id(menu_id)

        order = Order.new(table_number, menu_id, self.cook_time.draw())
        created = await self.orders.create(order)
        menu = await self.menus.get_by_id(created.menu_id)

        logger.info(
            "Order %s created: table=%s menu=%s cook_time=%s",
            created.order_id, table_number, menu_id, created.cook_time,
        )
        return dataclasses.replace(created, name=menu.name)

    async def list_orders(
        self,
        table_number: int,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[Order]:
        validate_table_number(table_number)
        window = normalize_pagination(page, limit)
        return await self.orders.list_by_table(table_number, window.page, window.limit)

    async def get_order(self, table_number: int, order_id: int) -> Order | None:
        validate_table_number(table_number)
        if not is_storable_order_id(order_id):
            return None
        return await self.orders.get_detail(table_number, order_id)

    async def delete_order(self, table_number: int, order_id: int) -> int | None:
        """Cancel an order. None means nothing matched, including a repeat delete."""
        validate_table_number(table_number)
        if not is_storable_order_id(order_id):
            return None
        deleted = await self.orders.delete(table_number, order_id)
        if deleted is not None:
            logger.info("Order %s deleted from table %s", deleted, table_number)
        return deleted
