"""ドライバ固有の例外を StorageError に分類する.

PostgreSQL（pg8000）は SQLSTATE、DynamoDB（botocore）はエラーコードを見て分類する。
構造化コードを持たない失敗は OTHER になる。
"""
from botocore.exceptions import BotoCoreError, ClientError, ReadTimeoutError
from botocore.exceptions import ConnectionError as BotoConnectionError
from pg8000.exceptions import DatabaseError, InterfaceError

from mall.domain.errors import StorageError

# PostgreSQL SQLSTATE
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

# DynamoDB で接続・容量不足として扱うエラーコード
_DYNAMODB_CONNECTION_CODES = frozenset({
    "ProvisionedThroughputExceededException",
    "RequestLimitExceeded",
    "ThrottlingException",
    "ServiceUnavailable",
    "InternalServerError",
})


def from_sqlstate(code: str | None, message: str) -> StorageError:
    """SQLSTATE とメッセージから StorageError を生成する."""
    if code is None:
        return StorageError.other(message)
    if code == UNIQUE_VIOLATION:
        return StorageError.duplicate(message)
    if code == FOREIGN_KEY_VIOLATION:
        return StorageError.query(f"Foreign key violation: {message}")
    return StorageError.query(message)


def row_not_found() -> StorageError:
    """対象行が存在しない場合のエラー."""
    return StorageError.not_found("Requested data not found")


def from_pg_error(exc: Exception) -> StorageError:
    """pg8000 の例外を分類する."""
    if isinstance(exc, TimeoutError):
        return StorageError.connection("Database connection pool timeout")
    if isinstance(exc, InterfaceError):
        return StorageError.connection(str(exc))
    if isinstance(exc, DatabaseError):
        # サーバーエラーは args[0] にフィールド辞書（C: SQLSTATE, M: メッセージ）を持つ
        fields = exc.args[0] if exc.args and isinstance(exc.args[0], dict) else None
        if fields is None:
            return StorageError.other(str(exc))
        return from_sqlstate(fields.get("C"), fields.get("M", str(exc)))
    return StorageError.other(str(exc))


def from_client_error(exc: ClientError) -> StorageError:
    """botocore の ClientError をエラーコードで分類する."""
    error = exc.response.get("Error", {})
    code = error.get("Code")
    message = error.get("Message") or str(exc)

    if not code:
        return StorageError.other(message)
    if code == "ConditionalCheckFailedException":
        return StorageError.duplicate(message)
    if code == "ResourceNotFoundException":
        return StorageError.not_found(message)
    if code in _DYNAMODB_CONNECTION_CODES:
        return StorageError.connection(message)
    return StorageError.query(message)


def from_boto_error(exc: BotoCoreError) -> StorageError:
    """ClientError 以外の botocore 例外を分類する."""
    if isinstance(exc, (BotoConnectionError, ReadTimeoutError)):
        return StorageError.connection(str(exc))
    return StorageError.other(str(exc))
