"""商品種別の列挙型."""
from enum import Enum


class ItemType(str, Enum):
    """商品種別."""

    FUNCTIONAL_FOOD = "functional_food"  # 健康機能食品
    OTC = "otc"  # 一般用医薬品
    ETC = "etc"  # 医療用医薬品
    MEDICAL_DEVICE = "medical_device"
    BASE = "base"
