"""カートAPI ハンドラー."""
import logging
from typing import Any

from mall.api.auth import get_authenticated_user_id
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
    AddToCartUseCase,
    ClearCartUseCase,
    GetCartUseCase,
    RemoveFromCartUseCase,
    UpdateCartItemUseCase,
)
from mall.domain.errors import DomainError, StorageError
from mall.domain.identifiers import CartId, ItemId

logger = logging.getLogger(__name__)


def _parse_quantity(body: dict) -> int:
    """quantity を0以上の整数として取り出す."""
    if "quantity" not in body:
        raise ValueError("quantity is required")
    quantity = body["quantity"]
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError("quantity must be an integer")
    if quantity < 0:
        raise ValueError("quantity must not be negative")
    return quantity


def _format_decimal(value) -> str | None:
    return str(value) if value is not None else None


def add_to_cart(event: dict, context: Any) -> dict:
    """商品をカートに追加する.

    POST /cart/items

    Request Body:
        cart_id: カートID（オプション、新規の場合は省略）
        item_id: 商品ID
        quantity: 追加数量

    Returns:
        追加結果
    """
    try:
        body = get_body(event)
        quantity = _parse_quantity(body)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    item_id_str = body.get("item_id")
    if not isinstance(item_id_str, str) or not item_id_str.strip():
        return bad_request_response("item_id must be a non-empty string", event=event)

    cart_id_str = body.get("cart_id")
    if cart_id_str is not None and (not isinstance(cart_id_str, str) or not cart_id_str.strip()):
        return bad_request_response("cart_id must be a non-empty string", event=event)
    cart_id = CartId(cart_id_str) if cart_id_str else None

    # 認証ユーザーID（オプション）
    user_id = get_authenticated_user_id(event)

    use_case = AddToCartUseCase(Dependencies.get_cart_repository())
    try:
        result = use_case.execute(
            cart_id=cart_id,
            item_id=ItemId(item_id_str),
            quantity=quantity,
            user_id=user_id,
        )
    except (DomainError, StorageError) as e:
        logger.warning("Failed to add item to cart: %s", e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error adding item to cart")
        return internal_error_response(event=event)

    response_data = {
        "cart_id": str(result.cart_id),
        "item_id": item_id_str,
        "quantity": result.quantity,
        "item_count": result.item_count,
        "total_items": result.total_items,
    }
    if user_id:
        response_data["user_id"] = str(user_id)

    return success_response(response_data, status_code=201, event=event)


def get_cart(event: dict, context: Any) -> dict:
    """カートを取得する.

    GET /cart/{cart_id}

    Path Parameters:
        cart_id: カートID

    Returns:
        カート情報
    """
    cart_id_str = get_path_parameter(event, "cart_id")
    if not cart_id_str:
        return bad_request_response("cart_id is required", event=event)

    use_case = GetCartUseCase(Dependencies.get_cart_repository())
    try:
        result = use_case.execute(CartId(cart_id_str))
    except (DomainError, StorageError) as e:
        logger.warning("Failed to get cart %s: %s", cart_id_str, e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error getting cart %s", cart_id_str)
        return internal_error_response(event=event)

    items = [
        {"item_id": str(item.item_id), "quantity": item.quantity}
        for item in result.items
    ]

    return success_response(
        {
            "cart_id": str(result.cart_id),
            "user_id": str(result.user_id) if result.user_id else None,
            "items": items,
            "item_count": result.item_count,
            "total_items": result.total_items,
            "items_price": _format_decimal(result.items_price),
            "total_price": _format_decimal(result.total_price),
            "status": result.status.value,
            "expires_at": result.expires_at.isoformat() if result.expires_at else None,
            "created_at": result.created_at.isoformat(),
            "updated_at": result.updated_at.isoformat(),
        },
        event=event,
    )


def update_cart_item(event: dict, context: Any) -> dict:
    """カート内商品の数量を変更する.

    PUT /cart/{cart_id}/items/{item_id}

    Request Body:
        quantity: 新しい数量（0は削除）
    """
    cart_id_str = get_path_parameter(event, "cart_id")
    item_id_str = get_path_parameter(event, "item_id")

    if not cart_id_str:
        return bad_request_response("cart_id is required", event=event)
    if not item_id_str:
        return bad_request_response("item_id is required", event=event)

    try:
        quantity = _parse_quantity(get_body(event))
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    use_case = UpdateCartItemUseCase(Dependencies.get_cart_repository())
    try:
        result = use_case.execute(CartId(cart_id_str), ItemId(item_id_str), quantity)
    except (DomainError, StorageError) as e:
        logger.warning("Failed to update cart %s: %s", cart_id_str, e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error updating cart %s", cart_id_str)
        return internal_error_response(event=event)

    return success_response(
        {
            "cart_id": cart_id_str,
            "item_id": item_id_str,
            "applied": result.applied,
            "item_count": result.item_count,
            "total_items": result.total_items,
        },
        event=event,
    )


def remove_from_cart(event: dict, context: Any) -> dict:
    """カートから商品を削除する.

    DELETE /cart/{cart_id}/items/{item_id}

    Path Parameters:
        cart_id: カートID
        item_id: 商品ID

    Returns:
        削除結果
    """
    cart_id_str = get_path_parameter(event, "cart_id")
    item_id_str = get_path_parameter(event, "item_id")

    if not cart_id_str:
        return bad_request_response("cart_id is required", event=event)
    if not item_id_str:
        return bad_request_response("item_id is required", event=event)

    use_case = RemoveFromCartUseCase(Dependencies.get_cart_repository())
    try:
        result = use_case.execute(CartId(cart_id_str), ItemId(item_id_str))
    except (DomainError, StorageError) as e:
        logger.warning("Failed to remove item from cart %s: %s", cart_id_str, e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error removing item from cart %s", cart_id_str)
        return internal_error_response(event=event)

    return success_response(
        {
            "cart_id": cart_id_str,
            "item_id": item_id_str,
            "removed": result.removed,
            "item_count": result.item_count,
            "total_items": result.total_items,
        },
        event=event,
    )


def clear_cart(event: dict, context: Any) -> dict:
    """カートをクリアする.

    DELETE /cart/{cart_id}
    """
    cart_id_str = get_path_parameter(event, "cart_id")
    if not cart_id_str:
        return bad_request_response("cart_id is required", event=event)

    use_case = ClearCartUseCase(Dependencies.get_cart_repository())
    try:
        result = use_case.execute(CartId(cart_id_str))
    except (DomainError, StorageError) as e:
        logger.warning("Failed to clear cart %s: %s", cart_id_str, e)
        return error_response(AppError.from_exception(e), event=event)
    except Exception:
        logger.exception("Unexpected error clearing cart %s", cart_id_str)
        return internal_error_response(event=event)

    return success_response(
        {
            "cart_id": cart_id_str,
            "success": result.success,
            "item_count": result.item_count,
        },
        event=event,
    )
