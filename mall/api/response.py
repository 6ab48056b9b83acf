"""API レスポンスユーティリティ."""
import json
import os
from typing import Any

from mall.api.errors import AppError


def _allowed_origins() -> list[str]:
    """許可するオリジンの一覧.

    ALLOWED_ORIGINS（カンマ区切り）が未設定の場合は開発用オリジンのみ許可する。
    """
    origins = [o.strip() for o in os.environ.get("ALLOWED_ORIGINS", "").split(",") if o.strip()]
    if os.environ.get("ALLOW_DEV_ORIGINS") == "true" or not origins:
        origins.extend([
            "http://localhost:5173",
            "http://localhost:3000",
            "http://127.0.0.1:5173",
            "http://127.0.0.1:3000",
        ])
    return origins


def get_cors_origin(event: dict | None = None) -> str:
    """リクエストの Origin ヘッダーから許可するオリジンを返す."""
    allowed = _allowed_origins()
    if event:
        headers = event.get("headers") or {}
        origin = headers.get("origin") or headers.get("Origin") or ""
        if origin in allowed:
            return origin
    return allowed[0]


def _headers(event: dict | None) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": get_cors_origin(event),
        "Access-Control-Allow-Headers": "Content-Type,Authorization",
        "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    }


def success_response(body: Any, status_code: int = 200, event: dict | None = None) -> dict:
    """成功レスポンスを生成する.

    Args:
        body: レスポンスボディ
        status_code: HTTPステータスコード
        event: API Gatewayイベント（CORS Origin判定用）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    return {
        "statusCode": status_code,
        "headers": _headers(event),
        "body": json.dumps(body, ensure_ascii=False, default=str),
    }


def error_response(error: AppError, event: dict | None = None) -> dict:
    """エラーレスポンスを生成する.

    Args:
        error: トランスポート層エラー
        event: API Gatewayイベント（CORS Origin判定用）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    return {
        "statusCode": error.status_code,
        "headers": _headers(event),
        "body": json.dumps(error.to_body(), ensure_ascii=False),
    }


def bad_request_response(message: str, event: dict | None = None) -> dict:
    """400 Validation errorレスポンスを生成する."""
    return error_response(AppError.validation(message), event=event)


def internal_error_response(message: str = "Internal server error", event: dict | None = None) -> dict:
    """500 Internal Server Errorレスポンスを生成する."""
    return error_response(AppError.other(message), event=event)
