"""
Table Order Service — Pydantic Schemas
"""
from pydantic import BaseModel, Field


class CreateOrderRequest(BaseModel):
    menu_id: int = Field(..., examples=[5])


class MenuData(BaseModel):
    id: int
    name: str


class OrderData(BaseModel):
    order_id: int
    table_number: int
    cook_time: int
    menu: MenuData
    created_at: str   # RFC 3339


class OrderResponse(BaseModel):
    order: OrderData


class OrderListResponse(BaseModel):
    orders: list[OrderData]


class DeleteResponse(BaseModel):
    order_id: int


class ErrorResponse(BaseModel):
    error: bool = True
    message: str

