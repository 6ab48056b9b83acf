"""商品リポジトリのPostgreSQL実装."""
import logging
from contextlib import contextmanager
from typing import Any

from pg8000.exceptions import DatabaseError, InterfaceError

from mall.domain.entities import Item
from mall.domain.enums import ItemType
from mall.domain.identifiers import ItemId
from mall.domain.ports import ItemRepository
from mall.infrastructure.database import DatabaseConfig, get_connection
from mall.infrastructure.storage_errors import from_pg_error, row_not_found

logger = logging.getLogger(__name__)

_COLUMNS = (
    "item_id, name, price, item_type, images, description, created_at, updated_at"
)


class PostgresItemRepository(ItemRepository):
    """商品リポジトリのPostgreSQL実装（items テーブル）."""

    def __init__(self, config: DatabaseConfig | None = None) -> None:
        """初期化."""
        self._config = config or DatabaseConfig.from_env()

    def save(self, item: Item) -> None:
        """商品を新規保存する（主キー重複は SQLSTATE 23505）."""
        with self._cursor("save item") as cur:
            cur.execute(
                f"INSERT INTO items ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    item.item_id.value,
                    item.name,
                    item.price,
                    item.item_type.value,
                    item.images,
                    item.description,
                    item.created_at,
                    item.updated_at,
                ),
            )

    def find_by_id(self, item_id: ItemId) -> Item | None:
        """商品IDで検索する."""
        with self._cursor("find item") as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM items WHERE item_id = %s", (item_id.value,))
            row = _fetch_one_as_dict(cur)
        if row is None:
            return None
        return self._to_entity(row)

    def update(self, item: Item) -> None:
        """既存の商品を更新する."""
        with self._cursor("update item") as cur:
            cur.execute(
                "UPDATE items SET name = %s, price = %s, item_type = %s, images = %s, "
                "description = %s, updated_at = %s WHERE item_id = %s",
                (
                    item.name,
                    item.price,
                    item.item_type.value,
                    item.images,
                    item.description,
                    item.updated_at,
                    item.item_id.value,
                ),
            )
            if cur.rowcount == 0:
                raise row_not_found()

    def delete(self, item_id: ItemId) -> bool:
        """商品を削除する."""
        with self._cursor("delete item") as cur:
            cur.execute("DELETE FROM items WHERE item_id = %s", (item_id.value,))
            return cur.rowcount > 0

    @contextmanager
    def _cursor(self, operation: str):
        """トランザクション付きカーソル.

        コミット時を含め、ドライバの例外はロールバック後に StorageError として送出する。
        """
        with get_connection(self._config) as conn:
            cur = conn.cursor()
            try:
                yield cur
                conn.commit()
            except (DatabaseError, InterfaceError, TimeoutError) as e:
                logger.error(f"Failed to {operation}: {e}")
                conn.rollback()
                raise from_pg_error(e) from e
            except Exception:
                conn.rollback()
                raise

    @staticmethod
    def _to_entity(row: dict[str, Any]) -> Item:
        return Item(
            item_id=ItemId(row["item_id"]),
            name=row["name"],
            price=int(row["price"]),
            item_type=ItemType(row["item_type"]),
            images=list(row["images"] or []),
            description=row["description"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


def _fetch_one_as_dict(cursor) -> dict | None:
    """カーソルから1行を辞書として取得."""
    row = cursor.fetchone()
    if row is None:
        return None
    columns = [desc[0] for desc in cursor.description]
    return dict(zip(columns, row))
