"""カートリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Cart
from ..identifiers import CartId, UserId


class CartRepository(ABC):
    """カートリポジトリのインターフェース.

    実装は失敗時に StorageError を送出する。
    """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        pass

    @abstractmethod
    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> Cart | None:
        """ユーザーのカートを検索する（複数ある場合はどれか1つ）."""
        pass
