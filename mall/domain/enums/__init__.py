"""列挙型モジュール."""
from .cart_status import CartStatus
from .item_type import ItemType

__all__ = [
    "CartStatus",
    "ItemType",
]
