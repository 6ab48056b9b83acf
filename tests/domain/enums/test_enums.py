"""列挙型（CartStatus, ItemType）のテスト."""
from mall.domain.enums import CartStatus, ItemType


class TestCartStatus:
    """CartStatusの単体テスト."""

    def test_4つの状態が定義されている(self) -> None:
        """ACTIVE, ABANDONED, CHECKOUT, COMPLETEDのみが存在することを確認."""
        assert [s.value for s in CartStatus] == ["active", "abandoned", "checkout", "completed"]

    def test_文字列から復元できる(self) -> None:
        assert CartStatus("checkout") is CartStatus.CHECKOUT


class TestItemType:
    """ItemTypeの単体テスト."""

    def test_FUNCTIONAL_FOODが定義されている(self) -> None:
        assert ItemType.FUNCTIONAL_FOOD.value == "functional_food"

    def test_MEDICAL_DEVICEが定義されている(self) -> None:
        assert ItemType.MEDICAL_DEVICE.value == "medical_device"

    def test_5種類が定義されている(self) -> None:
        assert len(ItemType) == 5
