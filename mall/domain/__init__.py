"""ドメイン層モジュール."""
from .entities import Cart, Item
from .enums import CartStatus, ItemType
from .errors import (
    CreateError,
    DomainError,
    DomainErrorKind,
    StorageError,
    StorageErrorKind,
)
from .identifiers import CartId, ItemId, UserId
from .ports import CartRepository, ItemRepository

__all__ = [
    # Identifiers
    "CartId",
    "ItemId",
    "UserId",
    # Enums
    "CartStatus",
    "ItemType",
    # Entities
    "Cart",
    "Item",
    # Errors
    "CreateError",
    "DomainError",
    "DomainErrorKind",
    "StorageError",
    "StorageErrorKind",
    # Ports
    "CartRepository",
    "ItemRepository",
]
