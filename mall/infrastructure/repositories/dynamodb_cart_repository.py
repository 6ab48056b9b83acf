"""カートリポジトリのDynamoDB実装."""
import logging
import os
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from mall.domain.entities import Cart
from mall.domain.enums import CartStatus
from mall.domain.identifiers import CartId, ItemId, UserId
from mall.domain.ports import CartRepository
from mall.infrastructure.storage_errors import from_boto_error, from_client_error

logger = logging.getLogger(__name__)

ANONYMOUS_USER = "__anonymous__"


@contextmanager
def _storage_errors(operation: str):
    """botocore の例外を StorageError に分類して送出する."""
    try:
        yield
    except ClientError as e:
        logger.error(f"DynamoDB {operation} failed: {e}")
        raise from_client_error(e) from e
    except BotoCoreError as e:
        logger.error(f"DynamoDB {operation} failed: {e}")
        raise from_boto_error(e) from e


class DynamoDBCartRepository(CartRepository):
    """カートリポジトリのDynamoDB実装."""

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get("CART_TABLE_NAME", "mall-cart")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        item = self._to_dynamodb_item(cart)
        with _storage_errors("put_item"):
            self._table.put_item(Item=item)

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        with _storage_errors("get_item"):
            response = self._table.get_item(Key={"cart_id": cart_id.value})
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_by_user_id(self, user_id: UserId) -> Cart | None:
        """ユーザーIDで検索する（GSI使用）."""
        with _storage_errors("query"):
            response = self._table.query(
                IndexName="user_id-index",
                KeyConditionExpression=Key("user_id").eq(user_id.value),
                Limit=1,
            )
        items = response["Items"]
        if not items:
            return None
        return self._from_dynamodb_item(items[0])

    def _to_dynamodb_item(self, cart: Cart) -> dict[str, Any]:
        """CartエンティティをDynamoDBアイテムに変換."""
        item: dict[str, Any] = {
            "cart_id": cart.cart_id.value,
            "user_id": cart.user_id.value if cart.user_id else ANONYMOUS_USER,
            "items": {item_id.value: quantity for item_id, quantity in cart.items.items()},
            "status": cart.status.value,
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
        }
        if cart.items_price is not None:
            item["items_price"] = cart.items_price
        if cart.total_price is not None:
            item["total_price"] = cart.total_price
        if cart.expires_at is not None:
            item["expires_at"] = cart.expires_at.isoformat()
            # DynamoDB TTL（エポック秒）
            item["ttl"] = int(cart.expires_at.timestamp())
        return item

    def _from_dynamodb_item(self, item: dict[str, Any]) -> Cart:
        """DynamoDBアイテムをCartエンティティに変換."""
        user_id_str = item.get("user_id")
        user_id = None if user_id_str in (None, ANONYMOUS_USER) else UserId(user_id_str)

        # 数値は Decimal で返る
        items = {
            ItemId(item_id): int(quantity)
            for item_id, quantity in (item.get("items") or {}).items()
        }

        expires_at = item.get("expires_at")
        return Cart(
            cart_id=CartId(item["cart_id"]),
            user_id=user_id,
            items=items,
            items_price=self._to_decimal(item.get("items_price")),
            total_price=self._to_decimal(item.get("total_price")),
            status=CartStatus(item.get("status", CartStatus.ACTIVE.value)),
            expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
        )

    @staticmethod
    def _to_decimal(value: Any) -> Decimal | None:
        if value is None:
            return None
        return Decimal(str(value))
