"""商品リポジトリのインメモリ実装."""
from mall.domain.entities import Item
from mall.domain.errors import StorageError
from mall.domain.identifiers import ItemId
from mall.domain.ports import ItemRepository
from mall.infrastructure.storage_errors import row_not_found


class InMemoryItemRepository(ItemRepository):
    """商品リポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._items: dict[str, Item] = {}

    def save(self, item: Item) -> None:
        """商品を新規保存する."""
        if item.item_id.value in self._items:
            raise StorageError.duplicate(f"Item already exists: {item.item_id}")
        self._items[item.item_id.value] = item

    def find_by_id(self, item_id: ItemId) -> Item | None:
        """商品IDで検索する."""
        return self._items.get(item_id.value)

    def update(self, item: Item) -> None:
        """既存の商品を更新する."""
        if item.item_id.value not in self._items:
            raise row_not_found()
        self._items[item.item_id.value] = item

    def delete(self, item_id: ItemId) -> bool:
        """商品を削除する."""
        return self._items.pop(item_id.value, None) is not None
