"""Object Location Value Object"""
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote_plus


@dataclass(frozen=True)
class ObjectLocation:
    """
    オブジェクトの所在（値オブジェクト）

    バケット名とオブジェクトキーの組。どちらかが空の場合は
    不完全な参照として扱い、処理対象にしない。
    """

    bucket: str | None
    key: str | None

    @property
    def is_complete(self) -> bool:
        """バケット名とキーが両方そろっているか"""
        return bool(self.bucket) and bool(self.key)

    @property
    def uri(self) -> str:
        """s3:// 形式の URI"""
        return f"s3://{self.bucket or ''}/{self.key or ''}"

    @classmethod
    def from_notification(cls, bucket: str | None, encoded_key: str | None) -> ObjectLocation:
        """通知のキーは URL エンコードされているためデコードして生成"""
        key = unquote_plus(encoded_key) if encoded_key else encoded_key
        return cls(bucket=bucket, key=key)

    def __str__(self) -> str:
        return self.uri
