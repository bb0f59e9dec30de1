"""
Table Order Service — Repository interfaces

The order service depends only on these; production wires in the SQL
implementations, tests wire in in-memory doubles.
"""
from abc import ABC, abstractmethod

from table_order.domain import Menu, Order


class OrderRepository(ABC):

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Persist a new order and return it with its storage-assigned ``order_id``.

        Raises ConnectionFailure or CreateFailure.
        """

    @abstractmethod
    async def list_by_table(self, table_number: int, page: int, limit: int) -> list[Order]:
        """Orders of one table joined with their menu name, oldest first.

        ``page`` is zero-based; the window is ``[page*limit, page*limit + limit)``.
        Raises ConnectionFailure or CreateFailure.
        """

    @abstractmethod
    async def get_detail(self, table_number: int, order_id: int) -> Order | None:
        """One order of one table, or None. Raises ConnectionFailure or DetailFailure."""

    @abstractmethod
    async def delete(self, table_number: int, order_id: int) -> int | None:
        """Remove an order; return its id, or None when nothing matched.

        Raises ConnectionFailure or DetailFailure.
        """


class MenuRepository(ABC):

    @abstractmethod
    async def get_by_id(self, menu_id: int) -> Menu:
        """Raises ConnectionFailure, MenuNotFound, or CreateFailure."""
