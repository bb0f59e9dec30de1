"""
Table Order Service — Input validation

Range checks raise ValidationFailure; pagination is normalized, never rejected.
"""
from typing import NamedTuple

from table_order.core.errors import ValidationFailure

TABLE_NUMBER_MIN, TABLE_NUMBER_MAX = 1, 100
MENU_ID_MIN, MENU_ID_MAX = 1, 10

DEFAULT_PAGE = 0
DEFAULT_LIMIT = 5

# signed 64-bit: the widest integer OFFSET, LIMIT and bigserial values accepted
MAX_ROW_ID = 2**63 - 1


class Pagination(NamedTuple):
    page: int
    limit: int


def validate_table_number(table_number: int) -> int:
    if not TABLE_NUMBER_MIN <= table_number <= TABLE_NUMBER_MAX:
        raise ValidationFailure(
            "table_number",
            f"table_number must be in range of {TABLE_NUMBER_MIN} to {TABLE_NUMBER_MAX}",
        )
    return table_number


def validate_menu_id(menu_id: int) -> int:
    if not MENU_ID_MIN <= menu_id <= MENU_ID_MAX:
        raise ValidationFailure(
            "menu_id",
            f"menu_id must be in range of {MENU_ID_MIN} to {MENU_ID_MAX}",
        )
    return menu_id


def is_storable_order_id(order_id: int) -> bool:
    """Order ids live in a bigserial column; anything outside it can never match."""
    return 1 <= order_id <= MAX_ROW_ID


def normalize_pagination(page: int | None = None, limit: int | None = None) -> Pagination:
    """Missing page → 0, missing limit → 5, zero or negative limit → 1.

    Both values are clamped so page * limit still fits a 64-bit OFFSET; a page
    past the end simply yields no rows.
    """
    page = DEFAULT_PAGE if page is None else max(page, 0)
    if limit is None:
        limit = DEFAULT_LIMIT
    limit = min(max(limit, 1), MAX_ROW_ID)
    page = min(page, MAX_ROW_ID // limit)
    return Pagination(page=page, limit=limit)
