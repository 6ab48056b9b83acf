"""識別子モジュール."""
from .cart_id import CartId
from .item_id import ItemId
from .user_id import UserId

__all__ = [
    "CartId",
    "ItemId",
    "UserId",
]
