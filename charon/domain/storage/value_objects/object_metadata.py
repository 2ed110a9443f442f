"""Object Metadata Value Object"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ObjectMetadata:
    """
    オブジェクトメタデータ（値オブジェクト）

    本体を取得せずに得られるオブジェクトの属性。
    ハンドラが利用するのは content_type と last_modified のみ。
    """

    content_type: str | None
    last_modified: datetime | None = None
    content_length: int = 0
    etag: str | None = None
    version_id: str | None = None

    def __post_init__(self) -> None:
        if self.content_length < 0:
            raise ValueError("Content length cannot be negative")

    @classmethod
    def from_head_response(cls, response: dict[str, Any]) -> ObjectMetadata:
        """S3 HeadObject レスポンスから生成"""
        etag = response.get("ETag")
        return cls(
            content_type=response.get("ContentType"),
            last_modified=response.get("LastModified"),
            content_length=response.get("ContentLength", 0),
            etag=etag.strip('"') if etag else None,
            version_id=response.get("VersionId"),
        )
