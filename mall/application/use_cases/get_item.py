"""商品取得ユースケース."""
from mall.domain.entities import Item
from mall.domain.errors import StorageError, StorageErrorKind
from mall.domain.identifiers import ItemId
from mall.domain.ports import ItemRepository


class ItemNotFoundError(StorageError):
    """商品が見つからないエラー."""

    def __init__(self, item_id: ItemId) -> None:
        self.item_id = item_id
        super().__init__(StorageErrorKind.NOT_FOUND, f"Item not found: {item_id}")


class GetItemUseCase:
    """商品を取得するユースケース."""

    def __init__(self, item_repository: ItemRepository) -> None:
        """初期化."""
        self._item_repository = item_repository

    def execute(self, item_id: ItemId) -> Item:
        """商品を取得する.

        Raises:
            ItemNotFoundError: 商品が見つからない場合
        """
        item = self._item_repository.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item
