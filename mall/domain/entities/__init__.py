"""エンティティモジュール."""
from .cart import Cart
from .item import Item

__all__ = [
    "Cart",
    "Item",
]
