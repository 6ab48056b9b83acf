"""商品削除ユースケース."""
from mall.domain.errors import DomainError, StorageError
from mall.domain.identifiers import ItemId
from mall.domain.ports import ItemRepository


class DeleteItemUseCase:
    """商品を削除するユースケース."""

    def __init__(self, item_repository: ItemRepository) -> None:
        """初期化."""
        self._item_repository = item_repository

    def execute(self, item_id: ItemId) -> None:
        """商品を削除する.

        Raises:
            DomainError: 削除対象がない場合は DELETE、永続化層の失敗は SAVE
        """
        try:
            deleted = self._item_repository.delete(item_id)
        except StorageError as e:
            raise DomainError.from_storage_error(e) from e

        if not deleted:
            raise DomainError.delete(f"Item not found: {item_id}")
