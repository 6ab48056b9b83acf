"""Lambdaハンドラーモジュール."""
from .cart import add_to_cart, clear_cart, get_cart, remove_from_cart, update_cart_item
from .health import health_check
from .items import create_item, delete_item, get_item, update_item

__all__ = [
    # Health
    "health_check",
    # Cart
    "add_to_cart",
    "get_cart",
    "update_cart_item",
    "remove_from_cart",
    "clear_cart",
    # Items
    "create_item",
    "get_item",
    "update_item",
    "delete_item",
]
