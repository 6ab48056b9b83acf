"""カート内商品の数量変更ユースケース."""
from dataclasses import dataclass

from mall.domain.errors import DomainError, StorageError
from mall.domain.identifiers import CartId, ItemId
from mall.domain.ports import CartRepository

from .add_to_cart import CartNotFoundError


@dataclass(frozen=True)
class UpdateCartItemResult:
    """数量変更結果."""

    applied: bool
    item_count: int
    total_items: int


class UpdateCartItemUseCase:
    """カート内の既存商品の数量を変更するユースケース."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
        """
        self._cart_repository = cart_repository

    def execute(self, cart_id: CartId, item_id: ItemId, quantity: int) -> UpdateCartItemResult:
        """数量を変更する.

        数量0は削除として扱う。カートにない商品は追加せず applied=False を返す。

        Raises:
            CartNotFoundError: カートが見つからない場合
            DomainError: カートの保存に失敗した場合
        """
        cart = self._cart_repository.find_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(cart_id)

        applied = cart.update_quantity(item_id, quantity)
        if applied:
            try:
                self._cart_repository.save(cart)
            except StorageError as e:
                raise DomainError.from_storage_error(e) from e

        return UpdateCartItemResult(
            applied=applied,
            item_count=cart.item_count(),
            total_items=cart.total_items(),
        )
