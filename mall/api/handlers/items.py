"""商品API ハンドラー."""
import logging
from typing import Any

from mall.api.dependencies import Dependencies
from mall.api.errors import AppError
from mall.api.request import get_body, get_path_parameter
from mall.api.response import (
    bad_request_response,
    error_response,
    internal_error_response,
    success_response,
)
from mall.application.use_cases import (
    CreateItemUseCase,
    DeleteItemUseCase,
    GetItemUseCase,
    UpdateItemUseCase,
)
from mall.domain.entities import Item
from mall.domain.enums import ItemType
from mall.domain.errors import CreateError, DomainError, StorageError
from mall.domain.identifiers import ItemId

logger = logging.getLogger(__name__)


def _item_to_dict(item: Item) -> dict:
    return {
        "item_id": str(item.item_id),
        "name": item.name,
        "price": item.price,
        "item_type": item.item_type.value,
        "images": item.images,
        "description": item.description,
        "created_at": item.created_at.isoformat(),
        "updated_at": item.updated_at.isoformat(),
    }


def _parse_item_fields(body: dict) -> dict:
    """リクエストボディから商品の入力項目を取り出す.

    Raises:
        ValueError: 必須項目がない、または形式が不正な場合
    """
    for param in ("name", "price", "item_type"):
        if param not in body:
            raise ValueError(f"{param} is required")

    try:
        # 大文字・小文字両方を受け付ける
        item_type = ItemType(str(body["item_type"]).lower())
    except ValueError:
        raise ValueError(f"Invalid item_type: {body['item_type']}")

    images = body.get("images") or []
    if not isinstance(images, list) or not all(isinstance(i, str) for i in images):
        raise ValueError("images must be a list of strings")

    description = body.get("description")
    if description is not None and not isinstance(description, str):
        raise ValueError("description must be a string")

    return {
        "name": body["name"],
        "price": body["price"],
        "item_type": item_type,
        "images": images,
        "description": description,
    }


def create_item(event: dict, context: Any) -> dict:
    """商品を登録する.

    POST /items

    Request Body:
        name: 商品名
        price: 価格（0以上の整数）
        item_type: 商品種別 (functional_food, otc, etc, medical_device, base)
        images: 画像URLリスト（オプション）
        description: 説明（オプション）

    Returns:
        登録した商品
    """
    try:
        fields = _parse_item_fields(get_body(event))
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    try:
        item = Item.create(**fields)
    except CreateError as e:
        return error_response(AppError.from_exception(e), event=event)

    use_case = CreateItemUseCase(Dependencies.get_item_repository())
    try:
        created = use_case.execute(item)
    except (DomainError, StorageError) as e:
        logger.warning("Failed to create item: %s", e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error creating item")
        return internal_error_response(event=event)

    return success_response(_item_to_dict(created), status_code=201, event=event)


def get_item(event: dict, context: Any) -> dict:
    """商品を取得する.

    GET /items/{item_id}
    """
    item_id_str = get_path_parameter(event, "item_id")
    if not item_id_str:
        return bad_request_response("item_id is required", event=event)

    use_case = GetItemUseCase(Dependencies.get_item_repository())
    try:
        item = use_case.execute(ItemId(item_id_str))
    except (DomainError, StorageError) as e:
        logger.warning("Failed to get item %s: %s", item_id_str, e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error getting item %s", item_id_str)
        return internal_error_response(event=event)

    return success_response(_item_to_dict(item), event=event)


def update_item(event: dict, context: Any) -> dict:
    """商品を更新する.

    PUT /items/{item_id}

    Request Body:
        POST /items と同じ項目（全項目を置き換える）

    Returns:
        更新後の商品
    """
    item_id_str = get_path_parameter(event, "item_id")
    if not item_id_str:
        return bad_request_response("item_id is required", event=event)

    try:
        fields = _parse_item_fields(get_body(event))
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    use_case = UpdateItemUseCase(Dependencies.get_item_repository())
    try:
        item = use_case.execute(ItemId(item_id_str), **fields)
    except CreateError as e:
        return error_response(AppError.from_exception(e), event=event)
    except (DomainError, StorageError) as e:
        logger.warning("Failed to update item %s: %s", item_id_str, e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error updating item %s", item_id_str)
        return internal_error_response(event=event)

    return success_response(_item_to_dict(item), event=event)


def delete_item(event: dict, context: Any) -> dict:
    """商品を削除する.

    DELETE /items/{item_id}
    """
    item_id_str = get_path_parameter(event, "item_id")
    if not item_id_str:
        return bad_request_response("item_id is required", event=event)

    use_case = DeleteItemUseCase(Dependencies.get_item_repository())
    try:
        use_case.execute(ItemId(item_id_str))
    except (DomainError, StorageError) as e:
        logger.warning("Failed to delete item %s: %s", item_id_str, e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error deleting item %s", item_id_str)
        return internal_error_response(event=event)

    return success_response({"item_id": item_id_str, "deleted": True}, event=event)
