"""カートステータスの列挙型."""
from enum import Enum


class CartStatus(str, Enum):
    """カートのライフサイクル上の状態.

    状態遷移のルールは定義していない。
    """

    ACTIVE = "active"
    ABANDONED = "abandoned"
    CHECKOUT = "checkout"
    COMPLETED = "completed"
