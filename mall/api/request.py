"""API リクエストユーティリティ."""
import json
from typing import Any
from urllib.parse import unquote


def get_path_parameter(event: dict, name: str) -> str | None:
    """パスパラメータを取得する.

    Args:
        event: Lambda イベント
        name: パラメータ名

    Returns:
        パラメータ値（存在しない場合はNone、URLデコード済み）
    """
    path_params = event.get("pathParameters") or {}
    value = path_params.get(name)
    if value is not None:
        # URLエンコードされている可能性があるのでデコード
        return unquote(value)
    return None


def get_body(event: dict) -> dict[str, Any]:
    """リクエストボディを取得する.

    Args:
        event: Lambda イベント

    Returns:
        パースされたボディ（空の場合は空辞書）

    Raises:
        ValueError: JSONパースに失敗した場合、またはオブジェクトでない場合
    """
    body = event.get("body")
    if not body:
        return {}

    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON body: {e}")
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object")
    return parsed
