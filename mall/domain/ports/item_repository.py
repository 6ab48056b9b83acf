"""商品リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Item
from ..identifiers import ItemId


class ItemRepository(ABC):
    """商品リポジトリのインターフェース.

    実装は失敗時に StorageError を送出する。
    """

    @abstractmethod
    def save(self, item: Item) -> None:
        """商品を新規保存する（同一IDは重複エラー）."""
        pass

    @abstractmethod
    def find_by_id(self, item_id: ItemId) -> Item | None:
        """商品IDで検索する."""
        pass

    @abstractmethod
    def update(self, item: Item) -> None:
        """既存の商品を更新する（存在しなければNOT_FOUND）."""
        pass

    @abstractmethod
    def delete(self, item_id: ItemId) -> bool:
        """商品を削除する.

        Returns:
            削除した場合True
        """
        pass
