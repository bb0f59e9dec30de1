"""
Table Order Service — Orders API

All routes are scoped to one table: /table/{table_number}/order[/{order_id}]
Absent orders answer 404 with an empty body; errors are translated in api.errors.
"""
from fastapi import APIRouter, Depends, Query, Response, status

from table_order.api.deps import get_order_service
from table_order.schemas.mapper import to_delete_response, to_order_list_response, to_order_response
from table_order.schemas.order import (
    CreateOrderRequest,
    DeleteResponse,
    ErrorResponse,
    OrderListResponse,
    OrderResponse,
)
from table_order.services.order_service import OrderService

router = APIRouter(
    prefix="/table/{table_number}",
    tags=["orders"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "No such order at this table (empty body)"}}


@router.post("/order", response_model=OrderResponse)
async def create_order(
    table_number: int,
    payload: CreateOrderRequest,
    service: OrderService = Depends(get_order_service),
):
    """Place an order for a menu item; cook time is assigned here, once."""
    order = await service.create_order(table_number, payload.menu_id)
    return to_order_response(order)


@router.get("/order", response_model=OrderListResponse)
async def list_orders(
    table_number: int,
    page: int | None = Query(None, description="Zero-based page, default 0"),
    limit: int | None = Query(None, description="Page size, default 5; 0 is treated as 1"),
    service: OrderService = Depends(get_order_service),
):
    """Orders of a table, oldest first."""
    orders = await service.list_orders(table_number, page, limit)
    return to_order_list_response(orders)


@router.get("/order/{order_id}", response_model=OrderResponse, responses=_NOT_FOUND)
async def get_order(
    table_number: int,
    order_id: int,
    service: OrderService = Depends(get_order_service),
):
    order = await service.get_order(table_number, order_id)
    if order is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return to_order_response(order)


@router.delete("/order/{order_id}", response_model=DeleteResponse, responses=_NOT_FOUND)
async def delete_order(
    table_number: int,
    order_id: int,
    service: OrderService = Depends(get_order_service),
):
    """Cancel an order. Repeating the call is safe and answers 404."""
    deleted = await service.delete_order(table_number, order_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return to_delete_response(deleted)
