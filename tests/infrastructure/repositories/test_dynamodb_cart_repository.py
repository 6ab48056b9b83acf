"""DynamoDBCartRepositoryのテスト."""
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from mall.domain.entities import Cart
from mall.domain.enums import CartStatus
from mall.domain.errors import StorageError, StorageErrorKind
from mall.domain.identifiers import CartId, ItemId, UserId
from mall.infrastructure.repositories.dynamodb_cart_repository import (
    ANONYMOUS_USER,
    DynamoDBCartRepository,
)


def _make_repository() -> DynamoDBCartRepository:
    with patch.object(DynamoDBCartRepository, "__init__", lambda self: None):
        repo = DynamoDBCartRepository()
    repo._table_name = "mall-cart"
    repo._table = MagicMock()
    return repo


class TestDynamoDBCartSerialization:
    """DynamoDBシリアライズのテスト."""

    def test_カートをシリアライズできる(self) -> None:
        repo = _make_repository()
        cart = Cart.create(user_id=UserId("user-1"))
        cart.add_item(ItemId("item-1"), 2)

        item = repo._to_dynamodb_item(cart)

        assert item["cart_id"] == cart.cart_id.value
        assert item["user_id"] == "user-1"
        assert item["items"] == {"item-1": 2}
        assert item["status"] == "active"
        assert item["items_price"] == Decimal("0")
        assert item["ttl"] == int(cart.expires_at.timestamp())

    def test_ゲストカートは匿名ユーザーとして保存される(self) -> None:
        item = _make_repository()._to_dynamodb_item(Cart.create())
        assert item["user_id"] == ANONYMOUS_USER

    def test_アイテムからカートを復元できる(self) -> None:
        item = {
            "cart_id": "cart-1",
            "user_id": ANONYMOUS_USER,
            "items": {"item-1": Decimal("3")},
            "items_price": Decimal("1200"),
            "total_price": Decimal("1320"),
            "status": "checkout",
            "expires_at": "2026-03-01T00:00:00+00:00",
            "created_at": "2026-01-01T00:00:00+00:00",
            "updated_at": "2026-01-02T00:00:00+00:00",
        }

        cart = _make_repository()._from_dynamodb_item(item)

        assert cart.cart_id == CartId("cart-1")
        assert cart.user_id is None
        assert cart.get_items() == {ItemId("item-1"): 3}
        assert isinstance(cart.get_quantity(ItemId("item-1")), int)
        assert cart.items_price == Decimal("1200")
        assert cart.status == CartStatus.CHECKOUT
        assert cart.expires_at == datetime(2026, 3, 1, tzinfo=timezone.utc)


class TestDynamoDBCartRepository:
    """DynamoDBCartRepositoryの単体テスト."""

    def test_saveはput_itemを呼ぶ(self) -> None:
        repo = _make_repository()
        cart = Cart.create()
        repo.save(cart)
        repo._table.put_item.assert_called_once()
        assert repo._table.put_item.call_args.kwargs["Item"]["cart_id"] == cart.cart_id.value

    def test_find_by_idで見つからなければNone(self) -> None:
        repo = _make_repository()
        repo._table.get_item.return_value = {}
        assert repo.find_by_id(CartId("missing")) is None

    def test_find_by_user_idはGSIで検索する(self) -> None:
        repo = _make_repository()
        repo._table.query.return_value = {"Items": []}
        assert repo.find_by_user_id(UserId("user-1")) is None
        assert repo._table.query.call_args.kwargs["IndexName"] == "user_id-index"

    def test_find_by_user_idで見つかったカートを復元する(self) -> None:
        repo = _make_repository()
        cart = Cart.create(user_id=UserId("user-1"))
        cart.add_item(ItemId("item-1"), 2)
        repo._table.query.return_value = {"Items": [repo._to_dynamodb_item(cart)]}

        found = repo.find_by_user_id(UserId("user-1"))

        assert found.cart_id == cart.cart_id
        assert found.get_items() == {ItemId("item-1"): 2}

    def test_ClientErrorはStorageErrorに分類される(self) -> None:
        repo = _make_repository()
        repo._table.put_item.side_effect = ClientError(
            {"Error": {"Code": "ConditionalCheckFailedException", "Message": "exists"}}, "PutItem"
        )

        with pytest.raises(StorageError) as exc_info:
            repo.save(Cart.create())

        assert exc_info.value.kind == StorageErrorKind.DUPLICATE
        assert isinstance(exc_info.value.__cause__, ClientError)

    def test_接続失敗はCONNECTION(self) -> None:
        repo = _make_repository()
        repo._table.get_item.side_effect = EndpointConnectionError(endpoint_url="http://localhost:8000")

        with pytest.raises(StorageError) as exc_info:
            repo.find_by_id(CartId("cart-1"))

        assert exc_info.value.kind == StorageErrorKind.CONNECTION
