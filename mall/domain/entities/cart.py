"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from ..enums import CartStatus
from ..identifiers import CartId, ItemId, UserId

# カートの有効期限: 作成から60日
EXPIRATION_DAYS = 60


@dataclass
class Cart:
    """1人の買い物客が選択した商品と数量を保持する集約ルート.

    内部で排他制御は行わない。同一カートへの変更は呼び出し側で直列化すること。
    """

    cart_id: CartId
    user_id: UserId | None = None
    items: dict[ItemId, int] = field(default_factory=dict)
    # 金額は保持のみで、アイテム変更時に再計算しない
    items_price: Decimal | None = None
    total_price: Decimal | None = None
    status: CartStatus = CartStatus.ACTIVE
    expires_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot be earlier than created_at")

    @classmethod
    def create(cls, user_id: UserId | None = None) -> Cart:
        """新しいカートを作成する."""
        now = datetime.now(timezone.utc)
        return cls(
            cart_id=CartId.generate(),
            user_id=user_id,
            items={},
            items_price=Decimal("0"),
            total_price=Decimal("0"),
            status=CartStatus.ACTIVE,
            expires_at=now + timedelta(days=EXPIRATION_DAYS),
            created_at=now,
            updated_at=now,
        )

    def add_item(self, item_id: ItemId, quantity: int) -> None:
        """商品を追加する.

        既にある商品は数量を加算する（置き換えない）。
        """
        _validate_quantity(quantity)
        new_quantity = self.items.get(item_id, 0) + quantity
        if new_quantity > 0:
            self.items[item_id] = new_quantity
        self._touch()

    def remove_item(self, item_id: ItemId) -> bool:
        """指定商品を削除する.

        Returns:
            削除した場合True。存在しない場合は更新日時も変えずFalse。
        """
        if self.items.pop(item_id, None) is None:
            return False
        self._touch()
        return True

    def update_quantity(self, item_id: ItemId, quantity: int) -> bool:
        """既存商品の数量を変更する.

        数量0は削除と同じ。カートにない商品は追加せずFalseを返す。
        """
        _validate_quantity(quantity)
        if quantity == 0:
            return self.remove_item(item_id)
        if item_id not in self.items:
            return False
        self.items[item_id] = quantity
        self._touch()
        return True

    def clear(self) -> None:
        """全商品を削除する."""
        self.items.clear()
        self._touch()

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self.items) == 0

    def item_count(self) -> int:
        """商品の種類数を取得する."""
        return len(self.items)

    def total_items(self) -> int:
        """全商品の数量合計を取得する."""
        return sum(self.items.values())

    def get_quantity(self, item_id: ItemId) -> int | None:
        """指定商品の数量を取得する."""
        return self.items.get(item_id)

    def get_items(self) -> dict[ItemId, int]:
        """商品と数量の辞書のコピーを取得する."""
        return dict(self.items)

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


def _validate_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError("Quantity must be an integer")
    if quantity < 0:
        raise ValueError("Quantity cannot be negative")
