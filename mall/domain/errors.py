"""ドメイン層のエラー分類.

永続化層の失敗（StorageError）とドメイン層の失敗（DomainError）を定義する。
StorageError は DomainError.from_storage_error によって粗い2種類の
ドメインエラーに畳み込まれる。変換は情報を落とす一方向の写像で、
ログ出力やリトライは行わない。
"""
from __future__ import annotations

from enum import Enum


class StorageErrorKind(Enum):
    """永続化層エラーの種別."""

    CONNECTION = "connection"
    QUERY = "query"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    OTHER = "other"

    def get_label(self) -> str:
        """表示用ラベルを返す."""
        labels = {
            StorageErrorKind.CONNECTION: "Connection error",
            StorageErrorKind.QUERY: "Query error",
            StorageErrorKind.DUPLICATE: "Duplicate data",
            StorageErrorKind.NOT_FOUND: "Data not found",
            StorageErrorKind.OTHER: "Other database error",
        }
        return labels[self]


class StorageError(Exception):
    """永続化層で発生したエラー.

    リポジトリ実装はドライバ固有の例外をこの型に分類してから送出する。
    """

    def __init__(self, kind: StorageErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)

    @classmethod
    def connection(cls, message: str) -> StorageError:
        return cls(StorageErrorKind.CONNECTION, message)

    @classmethod
    def query(cls, message: str) -> StorageError:
        return cls(StorageErrorKind.QUERY, message)

    @classmethod
    def duplicate(cls, message: str) -> StorageError:
        return cls(StorageErrorKind.DUPLICATE, message)

    @classmethod
    def not_found(cls, message: str) -> StorageError:
        return cls(StorageErrorKind.NOT_FOUND, message)

    @classmethod
    def other(cls, message: str) -> StorageError:
        return cls(StorageErrorKind.OTHER, message)

    def __str__(self) -> str:
        """文字列表現."""
        return f"{self.kind.get_label()}: {self.message}"


class DomainErrorKind(Enum):
    """ドメインエラーの種別."""

    SAVE = "save"
    DELETE = "delete"


class DomainError(Exception):
    """サービス境界を越えて公開されるドメインエラー."""

    def __init__(self, kind: DomainErrorKind, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(detail)

    @classmethod
    def save(cls, detail: str) -> DomainError:
        """保存失敗のエラーを生成する."""
        return cls(DomainErrorKind.SAVE, detail)

    @classmethod
    def delete(cls, detail: str) -> DomainError:
        """削除失敗のエラーを生成する.

        永続化層エラーからの変換では生成されない。
        """
        return cls(DomainErrorKind.DELETE, detail)

    @classmethod
    def from_storage_error(cls, error: StorageError) -> DomainError:
        """永続化層エラーをドメインエラーに変換する.

        NOT_FOUND と DUPLICATE はタグ付きの SAVE に、
        それ以外は表示文字列のまま SAVE に畳み込む。
        """
        prefixes = {
            StorageErrorKind.NOT_FOUND: "Not found:",
            StorageErrorKind.DUPLICATE: "Duplicate:",
        }
        prefix = prefixes.get(error.kind)
        if prefix is not None:
            return cls.save(f"{prefix}{error.message}")
        return cls.save(str(error))

    def __str__(self) -> str:
        """文字列表現."""
        if self.kind == DomainErrorKind.DELETE:
            return f"Item delete error:{self.detail}"
        return f"Item save error:{self.detail}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return self.kind == other.kind and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((self.kind, self.detail))


class CreateError(ValueError):
    """エンティティ生成時のバリデーションエラー."""

    pass
