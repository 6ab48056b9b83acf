"""商品登録ユースケース."""
from mall.domain.entities import Item
from mall.domain.errors import DomainError, StorageError
from mall.domain.ports import ItemRepository


class CreateItemUseCase:
    """商品を登録するユースケース."""

    def __init__(self, item_repository: ItemRepository) -> None:
        """初期化."""
        self._item_repository = item_repository

    def execute(self, item: Item) -> Item:
        """商品を保存して返す.

        Raises:
            DomainError: 保存に失敗した場合（重複IDを含む）
        """
        try:
            self._item_repository.save(item)
        except StorageError as e:
            raise DomainError.from_storage_error(e) from e
        return item
