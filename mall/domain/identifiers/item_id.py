"""商品識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ItemId:
    """商品の一意識別子."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("ItemId cannot be empty")

    @classmethod
    def generate(cls) -> ItemId:
        """新しいItemIdを生成する."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value
