"""Delivery domain API package."""

from delivery.api.errors import register_delivery_error_handler
from delivery.api.routes import courier_router, dispatch_router, order_router

__all__ = ["order_router", "courier_router", "dispatch_router", "register_delivery_error_handler"]
