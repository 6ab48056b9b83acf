"""PostgresItemRepositoryのテスト."""
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from pg8000.exceptions import DatabaseError

from mall.domain.entities import Item
from mall.domain.enums import ItemType
from mall.domain.errors import StorageError, StorageErrorKind
from mall.domain.identifiers import ItemId
from mall.infrastructure.database import DatabaseConfig
from mall.infrastructure.repositories import PostgresItemRepository

CONFIG = DatabaseConfig(host="localhost", database="shop", user="mall")


@pytest.fixture
def conn():
    """pg8000接続のモック."""
    connection = MagicMock()
    with patch("mall.infrastructure.database.pg8000.connect", return_value=connection):
        yield connection


def _item() -> Item:
    return Item.create(name="体温計", price=3000, item_type=ItemType.MEDICAL_DEVICE, item_id=ItemId("item-1"))


class TestPostgresItemRepository:
    """PostgresItemRepositoryの単体テスト."""

    def test_saveはINSERTしてコミットする(self, conn) -> None:
        PostgresItemRepository(CONFIG).save(_item())

        cursor = conn.cursor.return_value
        sql, params = cursor.execute.call_args.args
        assert sql.startswith("INSERT INTO items")
        assert params[0] == "item-1"
        assert params[3] == "medical_device"
        conn.commit.assert_called_once()
        conn.close.assert_called_once()

    def test_主キー重複はDUPLICATE(self, conn) -> None:
        cursor = conn.cursor.return_value
        cursor.execute.side_effect = DatabaseError({"S": "ERROR", "C": "23505", "M": "dup key"})

        with pytest.raises(StorageError) as exc_info:
            PostgresItemRepository(CONFIG).save(_item())

        assert exc_info.value.kind == StorageErrorKind.DUPLICATE
        assert exc_info.value.message == "dup key"
        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()

    def test_コミット時の一意制約違反もDUPLICATE(self, conn) -> None:
        """遅延制約によるコミット失敗もロールバックしてStorageErrorとして送出する."""
        conn.commit.side_effect = DatabaseError({"S": "ERROR", "C": "23505", "M": "dup key"})

        with pytest.raises(StorageError) as exc_info:
            PostgresItemRepository(CONFIG).save(_item())

        assert exc_info.value.kind == StorageErrorKind.DUPLICATE
        assert isinstance(exc_info.value.__cause__, DatabaseError)
        conn.rollback.assert_called_once()
        conn.close.assert_called_once()

    def test_find_by_idで行を商品に変換する(self, conn) -> None:
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        cursor = conn.cursor.return_value
        cursor.description = [
            (name,) for name in
            ("item_id", "name", "price", "item_type", "images", "description", "created_at", "updated_at")
        ]
        cursor.fetchone.return_value = ("item-1", "体温計", 3000, "medical_device", ["a.png"], None, now, now)

        item = PostgresItemRepository(CONFIG).find_by_id(ItemId("item-1"))

        assert item.item_id == ItemId("item-1")
        assert item.item_type == ItemType.MEDICAL_DEVICE
        assert item.images == ["a.png"]
        assert item.created_at == now

    def test_find_by_idで行がなければNone(self, conn) -> None:
        conn.cursor.return_value.fetchone.return_value = None
        assert PostgresItemRepository(CONFIG).find_by_id(ItemId("missing")) is None

    def test_更新対象がなければNOT_FOUND(self, conn) -> None:
        conn.cursor.return_value.rowcount = 0

        with pytest.raises(StorageError) as exc_info:
            PostgresItemRepository(CONFIG).update(_item())

        assert exc_info.value.message == "Requested data not found"
        conn.rollback.assert_called_once()

    def test_deleteは削除件数で結果を返す(self, conn) -> None:
        conn.cursor.return_value.rowcount = 1
        assert PostgresItemRepository(CONFIG).delete(ItemId("item-1")) is True
        conn.commit.assert_called_once()

        conn.cursor.return_value.rowcount = 0
        assert PostgresItemRepository(CONFIG).delete(ItemId("item-1")) is False
