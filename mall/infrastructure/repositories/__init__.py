"""リポジトリ実装モジュール."""
from .dynamodb_cart_repository import DynamoDBCartRepository
from .in_memory_cart_repository import InMemoryCartRepository
from .in_memory_item_repository import InMemoryItemRepository
from .postgres_item_repository import PostgresItemRepository

__all__ = [
    "DynamoDBCartRepository",
    "InMemoryCartRepository",
    "InMemoryItemRepository",
    "PostgresItemRepository",
]
