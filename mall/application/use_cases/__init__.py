"""ユースケースモジュール."""
from .add_to_cart import AddToCartResult, AddToCartUseCase, CartNotFoundError
from .clear_cart import ClearCartResult, ClearCartUseCase
from .create_item import CreateItemUseCase
from .delete_item import DeleteItemUseCase
from .get_cart import CartItemDTO, GetCartResult, GetCartUseCase
from .get_item import GetItemUseCase, ItemNotFoundError
from .remove_from_cart import RemoveFromCartResult, RemoveFromCartUseCase
from .update_cart_item import UpdateCartItemResult, UpdateCartItemUseCase
from .update_item import UpdateItemUseCase

__all__ = [
    # Cart Use Cases
    "AddToCartUseCase",
    "AddToCartResult",
    "CartNotFoundError",
    "GetCartUseCase",
    "GetCartResult",
    "CartItemDTO",
    "UpdateCartItemUseCase",
    "UpdateCartItemResult",
    "RemoveFromCartUseCase",
    "RemoveFromCartResult",
    "ClearCartUseCase",
    "ClearCartResult",
    # Item Use Cases
    "CreateItemUseCase",
    "GetItemUseCase",
    "ItemNotFoundError",
    "UpdateItemUseCase",
    "DeleteItemUseCase",
]
