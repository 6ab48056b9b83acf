"""ポートモジュール."""
from .cart_repository import CartRepository
from .item_repository import ItemRepository

__all__ = [
    "CartRepository",
    "ItemRepository",
]
