"""カート追加ユースケース."""
from dataclasses import dataclass

from mall.domain.entities import Cart
from mall.domain.enums import CartStatus
from mall.domain.errors import DomainError, StorageError, StorageErrorKind
from mall.domain.identifiers import CartId, ItemId, UserId
from mall.domain.ports import CartRepository


class CartNotFoundError(StorageError):
    """カートが見つからないエラー."""

    def __init__(self, cart_id: CartId) -> None:
        self.cart_id = cart_id
        super().__init__(StorageErrorKind.NOT_FOUND, f"Cart not found: {cart_id}")


@dataclass(frozen=True)
class AddToCartResult:
    """カート追加結果."""

    cart_id: CartId
    quantity: int
    item_count: int
    total_items: int


class AddToCartUseCase:
    """カートに商品を追加するユースケース."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
        """
        self._cart_repository = cart_repository

    def execute(
        self,
        cart_id: CartId | None,
        item_id: ItemId,
        quantity: int,
        user_id: UserId | None = None,
    ) -> AddToCartResult:
        """商品をカートに追加する.

        Args:
            cart_id: カートID（新規の場合はNone）
            item_id: 商品ID
            quantity: 追加数量
            user_id: カートの所有者（ゲストの場合はNone）。cart_id 未指定時は
                このユーザーの ACTIVE なカートがあれば再利用する

        Returns:
            カート追加結果

        Raises:
            CartNotFoundError: 指定されたカートが存在しない場合
            DomainError: カートの保存に失敗した場合
        """
        if cart_id is None:
            cart = self._find_active_cart(user_id) or Cart.create(user_id=user_id)
        else:
            cart = self._cart_repository.find_by_id(cart_id)
            if cart is None:
                raise CartNotFoundError(cart_id)

        cart.add_item(item_id, quantity)

        try:
            self._cart_repository.save(cart)
        except StorageError as e:
            raise DomainError.from_storage_error(e) from e

        return AddToCartResult(
            cart_id=cart.cart_id,
            quantity=cart.get_quantity(item_id) or 0,
            item_count=cart.item_count(),
            total_items=cart.total_items(),
        )

    def _find_active_cart(self, user_id: UserId | None) -> Cart | None:
        if user_id is None:
            return None
        cart = self._cart_repository.find_by_user_id(user_id)
        if cart is None or cart.status != CartStatus.ACTIVE:
            return None
        return cart
