"""インフラストラクチャ層モジュール."""
from .repositories import (
    DynamoDBCartRepository,
    InMemoryCartRepository,
    InMemoryItemRepository,
    PostgresItemRepository,
)

__all__ = [
    "DynamoDBCartRepository",
    "InMemoryCartRepository",
    "InMemoryItemRepository",
    "PostgresItemRepository",
]
