"""ポート（CartRepository, ItemRepository）のテスト."""
from abc import ABC

import pytest

from mall.domain.ports import CartRepository, ItemRepository


class TestRepositoryPorts:
    """リポジトリポートの単体テスト."""

    def test_CartRepositoryは抽象基底クラスである(self) -> None:
        assert issubclass(CartRepository, ABC)

    def test_ItemRepositoryは抽象基底クラスである(self) -> None:
        assert issubclass(ItemRepository, ABC)

    def test_CartRepositoryの抽象メソッド(self) -> None:
        assert CartRepository.__abstractmethods__ == {"save", "find_by_id", "find_by_user_id"}

    def test_CartRepositoryは直接インスタンス化できない(self) -> None:
        with pytest.raises(TypeError):
            CartRepository()

    def test_ItemRepositoryの抽象メソッド(self) -> None:
        """save, find_by_id, update, deleteが抽象メソッドであることを確認."""
        assert ItemRepository.__abstractmethods__ == {"save", "find_by_id", "update", "delete"}
