"""Storage Errors"""
from __future__ import annotations

from enum import Enum


class StorageErrorKind(str, Enum):
    """ストレージ障害の分類"""

    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    TRANSIENT = "transient"
    UNKNOWN = "unknown"


class StorageError(Exception):
    """
    ストレージ操作エラー

    分類・メッセージ・対象オブジェクトを保持する。
    元の例外（トレースを含む）は __cause__ に保持される。
    """

    def __init__(
        self,
        kind: StorageErrorKind,
        message: str,
        bucket: str | None = None,
        key: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.bucket = bucket
        self.key = key

    def __repr__(self) -> str:
        return (
            f"StorageError(kind={self.kind.value!r}, message={self.message!r}, "
            f"bucket={self.bucket!r}, key={self.key!r})"
        )
