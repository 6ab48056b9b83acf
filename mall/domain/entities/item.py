"""商品エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..enums import ItemType
from ..errors import CreateError
from ..identifiers import ItemId


@dataclass
class Item:
    """商品エンティティ."""

    item_id: ItemId
    name: str
    price: int
    item_type: ItemType
    images: list[str] = field(default_factory=list)
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        price: int,
        item_type: ItemType,
        images: list[str] | None = None,
        description: str | None = None,
        item_id: ItemId | None = None,
    ) -> Item:
        """バリデーション済みの商品を生成する.

        Raises:
            CreateError: 名前が空、または価格が0以上の整数でない場合
        """
        _validate(name, price, item_type)

        now = datetime.now(timezone.utc)
        return cls(
            item_id=item_id or ItemId.generate(),
            name=name,
            price=price,
            item_type=item_type,
            images=list(images or []),
            description=description or None,
            created_at=now,
            updated_at=now,
        )

    def update_details(
        self,
        name: str,
        price: int,
        item_type: ItemType,
        images: list[str] | None = None,
        description: str | None = None,
    ) -> None:
        """商品情報を置き換える.

        検証に失敗した場合は何も変更しない。
        """
        _validate(name, price, item_type)
        self.name = name
        self.price = price
        self.item_type = item_type
        self.images = list(images or [])
        self.description = description or None
        self.updated_at = datetime.now(timezone.utc)


def _validate(name: str, price: int, item_type: ItemType) -> None:
    if not isinstance(name, str) or not name.strip():
        raise CreateError("Name is empty")
    if isinstance(price, bool) or not isinstance(price, int):
        raise CreateError("Price must be an integer")
    if price < 0:
        raise CreateError("Price cannot be negative")
    if not isinstance(item_type, ItemType):
        raise CreateError(f"Invalid item_type: {item_type}")
