"""S3 Event Notification Model"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.object_location import ObjectLocation


class S3Bucket(BaseModel):
    """通知に含まれるバケット情報"""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    arn: Any = None


class S3Object(BaseModel):
    """通知に含まれるオブジェクト情報"""

    model_config = ConfigDict(populate_by_name=True)

    key: str | None = None
    # key 以外は参照しないため型を強制しない
    size: Any = None
    etag: Any = Field(default=None, alias="eTag")
    version_id: Any = Field(default=None, alias="versionId")
    sequencer: Any = None


class S3Entity(BaseModel):
    """レコードの s3 要素"""

    bucket: S3Bucket | None = None
    object: S3Object | None = None


class S3EventRecord(BaseModel):
    """通知レコード（1 オブジェクトの変更）"""

    model_config = ConfigDict(populate_by_name=True)

    event_name: Any = Field(default=None, alias="eventName")
    event_time: Any = Field(default=None, alias="eventTime")
    aws_region: Any = Field(default=None, alias="awsRegion")
    s3: S3Entity | None = None

    @property
    def location(self) -> ObjectLocation:
        """レコードが指すオブジェクトの所在"""
        bucket = self.s3.bucket.name if self.s3 and self.s3.bucket else None
        key = self.s3.object.key if self.s3 and self.s3.object else None
        return ObjectLocation.from_notification(bucket, key)


class S3Notification(BaseModel):
    """
    S3 イベント通知

    Lambda ランタイムから渡される通知ペイロード。
    レコードが無い、あるいは必須フィールドが欠けていても
    パースは失敗させない（ハンドラ側で no-op として扱う）。
    """

    model_config = ConfigDict(populate_by_name=True)

    records: list[S3EventRecord] | None = Field(default=None, alias="Records")

    @property
    def first_record(self) -> S3EventRecord | None:
        """先頭レコード。2 件目以降は参照しない"""
        if not self.records:
            return None
        return self.records[0]

    @property
    def record_count(self) -> int:
        return len(self.records) if self.records else 0
