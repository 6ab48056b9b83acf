"""カートクリアユースケース."""
from dataclasses import dataclass

from mall.domain.errors import DomainError, StorageError
from mall.domain.identifiers import CartId
from mall.domain.ports import CartRepository

from .add_to_cart import CartNotFoundError


@dataclass(frozen=True)
class ClearCartResult:
    """カートクリア結果."""

    success: bool
    item_count: int
    total_items: int


class ClearCartUseCase:
    """カートを全クリアするユースケース."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
        """
        self._cart_repository = cart_repository

    def execute(self, cart_id: CartId) -> ClearCartResult:
        """カートを全クリアする.

        Args:
            cart_id: カートID

        Returns:
            クリア結果

        Raises:
            CartNotFoundError: カートが見つからない場合
            DomainError: カートの保存に失敗した場合
        """
        cart = self._cart_repository.find_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(cart_id)

        cart.clear()

        try:
            self._cart_repository.save(cart)
        except StorageError as e:
            raise DomainError.from_storage_error(e) from e

        return ClearCartResult(
            success=True,
            item_count=cart.item_count(),
            total_items=cart.total_items(),
        )
