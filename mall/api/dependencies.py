"""依存性注入コンテナ."""
import os

from mall.domain.ports import CartRepository, ItemRepository
from mall.infrastructure.repositories import (
    DynamoDBCartRepository,
    InMemoryCartRepository,
    InMemoryItemRepository,
    PostgresItemRepository,
)


def _use_dynamodb() -> bool:
    """DynamoDBを使用するか判定する."""
    # CART_TABLE_NAME が設定されていればDynamoDBを使用
    return os.environ.get("CART_TABLE_NAME") is not None


def _use_postgres() -> bool:
    """PostgreSQLを使用するか判定する."""
    return os.environ.get("DATABASE_URL") is not None


class Dependencies:
    """依存性を管理するコンテナ.

    環境変数が設定されている場合は DynamoDB / PostgreSQL 実装を使用。
    そうでない場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _cart_repository: CartRepository | None = None
    _item_repository: ItemRepository | None = None

    @classmethod
    def get_cart_repository(cls) -> CartRepository:
        """カートリポジトリを取得する."""
        if cls._cart_repository is None:
            if _use_dynamodb():
                cls._cart_repository = DynamoDBCartRepository()
            else:
                cls._cart_repository = InMemoryCartRepository()
        return cls._cart_repository

    @classmethod
    def set_cart_repository(cls, repository: CartRepository) -> None:
        """カートリポジトリを設定する（テスト用）."""
        cls._cart_repository = repository

    @classmethod
    def get_item_repository(cls) -> ItemRepository:
        """商品リポジトリを取得する."""
        if cls._item_repository is None:
            if _use_postgres():
                cls._item_repository = PostgresItemRepository()
            else:
                cls._item_repository = InMemoryItemRepository()
        return cls._item_repository

    @classmethod
    def set_item_repository(cls, repository: ItemRepository) -> None:
        """商品リポジトリを設定する（テスト用）."""
        cls._item_repository = repository

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._cart_repository = None
        cls._item_repository = None
