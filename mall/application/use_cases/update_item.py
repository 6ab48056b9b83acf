"""商品更新ユースケース."""
from mall.domain.entities import Item
from mall.domain.enums import ItemType
from mall.domain.errors import DomainError, StorageError
from mall.domain.identifiers import ItemId
from mall.domain.ports import ItemRepository

from .get_item import ItemNotFoundError


class UpdateItemUseCase:
    """既存商品の情報を更新するユースケース."""

    def __init__(self, item_repository: ItemRepository) -> None:
        """初期化.

        Args:
            item_repository: 商品リポジトリ
        """
        self._item_repository = item_repository

    def execute(
        self,
        item_id: ItemId,
        name: str,
        price: int,
        item_type: ItemType,
        images: list[str] | None = None,
        description: str | None = None,
    ) -> Item:
        """商品を更新して返す.

        Raises:
            ItemNotFoundError: 商品が見つからない場合
            CreateError: 入力値が不正な場合
            DomainError: 更新に失敗した場合（読み込み後に削除された場合を含む）
        """
        item = self._item_repository.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)

        item.update_details(
            name=name,
            price=price,
            item_type=item_type,
            images=images,
            description=description,
        )

        try:
            self._item_repository.update(item)
        except StorageError as e:
            raise DomainError.from_storage_error(e) from e
        return item
