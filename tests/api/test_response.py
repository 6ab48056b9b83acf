"""レスポンスヘルパーのテスト."""
import json

from mall.api.errors import AppError
from mall.api.response import (
    bad_request_response,
    error_response,
    get_cors_origin,
    internal_error_response,
    success_response,
)
from mall.domain.errors import StorageError


def _make_event(origin: str) -> dict:
    """Origin ヘッダー付きのイベントを生成する."""
    return {"headers": {"origin": origin}}


class TestGetCorsOrigin:
    """get_cors_originのテスト."""

    def test_ALLOWED_ORIGINSの先頭がデフォルト(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://shop.example.com,https://www.shop.example.com")
        monkeypatch.delenv("ALLOW_DEV_ORIGINS", raising=False)
        assert get_cors_origin() == "https://shop.example.com"

    def test_許可オリジンはそのまま返す(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://shop.example.com,https://www.shop.example.com")
        assert get_cors_origin(_make_event("https://www.shop.example.com")) == "https://www.shop.example.com"

    def test_非許可オリジンはデフォルトを返す(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://shop.example.com")
        monkeypatch.delenv("ALLOW_DEV_ORIGINS", raising=False)
        assert get_cors_origin(_make_event("https://evil.example.com")) == "https://shop.example.com"

    def test_開発用オリジンを許可できる(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://shop.example.com")
        monkeypatch.setenv("ALLOW_DEV_ORIGINS", "true")
        assert get_cors_origin(_make_event("http://localhost:5173")) == "http://localhost:5173"

    def test_大文字のOriginヘッダーも受け付ける(self, monkeypatch):
        monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
        event = {"headers": {"Origin": "http://127.0.0.1:3000"}}
        assert get_cors_origin(event) == "http://127.0.0.1:3000"


class TestResponses:
    """レスポンス生成のテスト."""

    def test_成功レスポンス(self):
        response = success_response({"name": "体温計"}, status_code=201)
        assert response["statusCode"] == 201
        assert response["headers"]["Content-Type"] == "application/json"
        assert json.loads(response["body"]) == {"name": "体温計"}

    def test_エラーレスポンスはAppErrorのステータスとボディ(self):
        response = error_response(AppError.database(StorageError.not_found("Cart not found: c1")))
        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {
            "error": {"type": "Not found", "message": "Cart not found: c1"}
        }

    def test_バリデーションエラー(self):
        response = bad_request_response("quantity is required")
        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"]["type"] == "Validation error"

    def test_内部エラー(self):
        response = internal_error_response()
        assert response["statusCode"] == 500
        assert json.loads(response["body"])["error"]["message"] == "Internal server error"

    def test_エラーレスポンスにもCORSヘッダーが付く(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://shop.example.com")
        response = internal_error_response(event=_make_event("https://shop.example.com"))
        assert response["headers"]["Access-Control-Allow-Origin"] == "https://shop.example.com"
