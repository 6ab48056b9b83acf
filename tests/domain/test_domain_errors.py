"""ドメインエラーのテスト."""
import pytest

from mall.domain.errors import DomainError, DomainErrorKind, StorageError, StorageErrorKind


class TestStorageError:
    """StorageErrorの単体テスト."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (StorageError.connection("timeout"), "Connection error: timeout"),
            (StorageError.query("syntax"), "Query error: syntax"),
            (StorageError.duplicate("dup key"), "Duplicate data: dup key"),
            (StorageError.not_found("row"), "Data not found: row"),
            (StorageError.other("boom"), "Other database error: boom"),
        ],
    )
    def test_表示文字列は種別ラベル付き(self, error: StorageError, expected: str) -> None:
        assert str(error) == expected

    def test_種別とメッセージを保持する(self) -> None:
        error = StorageError.duplicate("dup key")
        assert error.kind == StorageErrorKind.DUPLICATE
        assert error.message == "dup key"


class TestDomainErrorFromStorageError:
    """DomainError.from_storage_errorのテスト."""

    def test_NOT_FOUNDはタグ付きSAVEになる(self) -> None:
        error = DomainError.from_storage_error(StorageError.not_found("row"))
        assert error == DomainError.save("Not found:row")

    def test_DUPLICATEはタグ付きSAVEになる(self) -> None:
        error = DomainError.from_storage_error(StorageError.duplicate("dup key"))
        assert error.kind == DomainErrorKind.SAVE
        assert error.detail == "Duplicate:dup key"

    @pytest.mark.parametrize(
        ("error", "detail"),
        [
            (StorageError.connection("timeout"), "Connection error: timeout"),
            (StorageError.query("syntax"), "Query error: syntax"),
            (StorageError.other("boom"), "Other database error: boom"),
        ],
    )
    def test_その他は表示文字列のままSAVEになる(self, error: StorageError, detail: str) -> None:
        assert DomainError.from_storage_error(error) == DomainError.save(detail)

    def test_DELETEは生成されない(self) -> None:
        """永続化層エラーの変換結果は常にSAVE."""
        for kind in StorageErrorKind:
            assert DomainError.from_storage_error(StorageError(kind, "x")).kind == DomainErrorKind.SAVE


class TestDomainError:
    """DomainErrorの単体テスト."""

    def test_SAVEの表示文字列(self) -> None:
        assert str(DomainError.save("Duplicate:dup key")) == "Item save error:Duplicate:dup key"

    def test_DELETEの表示文字列(self) -> None:
        assert str(DomainError.delete("gone")) == "Item delete error:gone"

    def test_種別と詳細が同じなら等価(self) -> None:
        assert DomainError.save("a") == DomainError.save("a")
        assert DomainError.save("a") != DomainError.delete("a")
