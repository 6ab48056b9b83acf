"""カート取得ユースケース."""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from mall.domain.enums import CartStatus
from mall.domain.identifiers import CartId, ItemId, UserId
from mall.domain.ports import CartRepository

from .add_to_cart import CartNotFoundError


@dataclass(frozen=True)
class CartItemDTO:
    """カート内商品のDTO."""

    item_id: ItemId
    quantity: int


@dataclass(frozen=True)
class GetCartResult:
    """カート取得結果."""

    cart_id: CartId
    user_id: UserId | None
    items: list[CartItemDTO]
    item_count: int
    total_items: int
    items_price: Decimal | None
    total_price: Decimal | None
    status: CartStatus
    expires_at: datetime | None
    created_at: datetime
    updated_at: datetime


class GetCartUseCase:
    """カートを取得するユースケース."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化."""
        self._cart_repository = cart_repository

    def execute(self, cart_id: CartId) -> GetCartResult:
        """カートを取得する.

        Raises:
            CartNotFoundError: カートが見つからない場合
            StorageError: 読み込みに失敗した場合
        """
        cart = self._cart_repository.find_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(cart_id)

        items = [
            CartItemDTO(item_id=item_id, quantity=quantity)
            for item_id, quantity in cart.get_items().items()
        ]

        return GetCartResult(
            cart_id=cart.cart_id,
            user_id=cart.user_id,
            items=items,
            item_count=cart.item_count(),
            total_items=cart.total_items(),
            items_price=cart.items_price,
            total_price=cart.total_price,
            status=cart.status,
            expires_at=cart.expires_at,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )
