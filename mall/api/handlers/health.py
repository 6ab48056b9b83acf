"""ヘルスチェック ハンドラー."""
from datetime import datetime, timezone
from typing import Any

from mall.api.response import success_response


def health_check(event: dict, context: Any) -> dict:
    """サーバーの稼働状態を返す.

    GET /health
    """
    return success_response(
        {
            "status": "ok",
            "message": "Server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        event=event,
    )
