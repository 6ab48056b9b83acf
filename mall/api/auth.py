"""認証ユーティリティ."""
from mall.domain.identifiers import UserId


def get_authenticated_user_id(event: dict) -> UserId | None:
    """カートの所有者となる買い物客のIDを取得する.

    API Gateway のオーソライザーが検証済みのクレームを
    requestContext.authorizer.claims に載せる前提で、その sub を使う。
    トークンの検証はここでは行わない。クレームがなければゲスト扱い。

    Args:
        event: Lambda イベント

    Returns:
        買い物客のID（ゲストの場合はNone）
    """
    request_context = event.get("requestContext")
    if not isinstance(request_context, dict):
        return None
    authorizer = request_context.get("authorizer")
    if not isinstance(authorizer, dict):
        return None
    claims = authorizer.get("claims")
    if not isinstance(claims, dict):
        return None

    sub = claims.get("sub")
    if isinstance(sub, str) and sub:
        return UserId(sub)
    return None
