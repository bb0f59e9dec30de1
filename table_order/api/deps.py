"""
Table Order Service — FastAPI dependencies
"""
from fastapi import Request

from table_order.services.order_service import OrderService


def get_order_service(request: Request) -> OrderService:
    """The service wired up in the app lifespan. Tests override this dependency."""
    return request.app.state.order_service
