"""トランスポート層のエラー.

DomainError / StorageError などを HTTP ステータスと
{"error": {"type", "message"}} 形式のボディに対応付ける。
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from mall.domain.errors import DomainError, DomainErrorKind, StorageError, StorageErrorKind


class AppErrorKind(Enum):
    """トランスポート層エラーの種別."""

    DOMAIN = "domain"
    DATABASE = "database"
    EXTERNAL_SERVICE = "external_service"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    OTHER = "other"


# (ステータスコード, type ラベル)
_DOMAIN_RESPONSES = {
    DomainErrorKind.SAVE: (400, "Save error"),
    DomainErrorKind.DELETE: (400, "Delete error"),
}

_DATABASE_RESPONSES = {
    StorageErrorKind.NOT_FOUND: (404, "Not found"),
    StorageErrorKind.DUPLICATE: (409, "Duplicate data"),
    StorageErrorKind.QUERY: (400, "Query error"),
    StorageErrorKind.CONNECTION: (503, "Database connection error"),
    StorageErrorKind.OTHER: (500, "Database error"),
}

_TEXT_RESPONSES = {
    AppErrorKind.VALIDATION: (400, "Validation error"),
    AppErrorKind.AUTHENTICATION: (401, "Authentication error"),
    AppErrorKind.AUTHORIZATION: (403, "Authorization error"),
    AppErrorKind.EXTERNAL_SERVICE: (502, "External service error"),
    AppErrorKind.OTHER: (500, "Internal server error"),
}

_DISPLAY_PREFIXES = {
    AppErrorKind.DOMAIN: "Domain error",
    AppErrorKind.DATABASE: "Database error",
    AppErrorKind.EXTERNAL_SERVICE: "External service error",
    AppErrorKind.VALIDATION: "Validation error",
    AppErrorKind.AUTHENTICATION: "Authentication error",
    AppErrorKind.AUTHORIZATION: "Authorization error",
    AppErrorKind.OTHER: "Other error",
}


class AppError(Exception):
    """呼び出し元に返すエラー.

    DOMAIN は DomainError を、DATABASE は StorageError を保持する。
    それ以外の種別はメッセージ文字列のみを持つ。
    """

    def __init__(
        self,
        kind: AppErrorKind,
        message: str,
        cause: DomainError | StorageError | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.cause = cause
        super().__init__(message)

    @classmethod
    def domain(cls, error: DomainError) -> AppError:
        return cls(AppErrorKind.DOMAIN, error.detail, cause=error)

    @classmethod
    def database(cls, error: StorageError) -> AppError:
        return cls(AppErrorKind.DATABASE, error.message, cause=error)

    @classmethod
    def external_service(cls, message: str) -> AppError:
        return cls(AppErrorKind.EXTERNAL_SERVICE, message)

    @classmethod
    def validation(cls, message: str) -> AppError:
        return cls(AppErrorKind.VALIDATION, message)

    @classmethod
    def authentication(cls, message: str) -> AppError:
        return cls(AppErrorKind.AUTHENTICATION, message)

    @classmethod
    def authorization(cls, message: str) -> AppError:
        return cls(AppErrorKind.AUTHORIZATION, message)

    @classmethod
    def other(cls, message: str) -> AppError:
        return cls(AppErrorKind.OTHER, message)

    @classmethod
    def from_exception(cls, exc: Exception) -> AppError:
        """例外を AppError に変換する.

        想定外の例外は内部情報を含めず OTHER として扱う。
        """
        if isinstance(exc, AppError):
            return exc
        if isinstance(exc, DomainError):
            return cls.domain(exc)
        if isinstance(exc, StorageError):
            return cls.database(exc)
        if isinstance(exc, ValueError):
            return cls.validation(str(exc))
        return cls.other("Internal server error")

    def _status_and_type(self) -> tuple[int, str]:
        if self.kind == AppErrorKind.DOMAIN:
            return _DOMAIN_RESPONSES[self.cause.kind]
        if self.kind == AppErrorKind.DATABASE:
            return _DATABASE_RESPONSES[self.cause.kind]
        return _TEXT_RESPONSES[self.kind]

    @property
    def status_code(self) -> int:
        """HTTPステータスコード."""
        return self._status_and_type()[0]

    @property
    def error_type(self) -> str:
        """レスポンスボディの type ラベル."""
        return self._status_and_type()[1]

    def to_body(self) -> dict[str, Any]:
        """レスポンスボディを生成する."""
        return {"error": {"type": self.error_type, "message": self.message}}

    def __str__(self) -> str:
        """文字列表現."""
        if self.cause is not None:
            return f"{_DISPLAY_PREFIXES[self.kind]}: {self.cause}"
        return f"{_DISPLAY_PREFIXES[self.kind]}: {self.message}"
