"""カート商品削除ユースケース."""
from dataclasses import dataclass

from mall.domain.errors import DomainError, StorageError
from mall.domain.identifiers import CartId, ItemId
from mall.domain.ports import CartRepository

from .add_to_cart import CartNotFoundError


@dataclass(frozen=True)
class RemoveFromCartResult:
    """商品削除結果."""

    removed: bool
    item_count: int
    total_items: int


class RemoveFromCartUseCase:
    """カートから商品を削除するユースケース."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化."""
        self._cart_repository = cart_repository

    def execute(self, cart_id: CartId, item_id: ItemId) -> RemoveFromCartResult:
        """商品を削除する.

        Raises:
            CartNotFoundError: カートが見つからない場合
            DomainError: カートの保存に失敗した場合
        """
        cart = self._cart_repository.find_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(cart_id)

        removed = cart.remove_item(item_id)
        if removed:
            try:
                self._cart_repository.save(cart)
            except StorageError as e:
                raise DomainError.from_storage_error(e) from e

        return RemoveFromCartResult(
            removed=removed,
            item_count=cart.item_count(),
            total_items=cart.total_items(),
        )
