"""Shared test fixtures"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from charon.application.ports.gateways import IObjectMetadataGateway
from charon.domain.storage.value_objects import ObjectMetadata


class FakeMetadataGateway(IObjectMetadataGateway):
    """呼び出しを記録するインメモリ Gateway"""

    def __init__(
        self,
        metadata: ObjectMetadata | None = None,
        error: Exception | None = None,
    ):
        self.metadata = metadata
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def get_object_metadata(self, bucket: str, key: str) -> ObjectMetadata:
        self.calls.append((bucket, key))
        if self.error is not None:
            raise self.error
        return self.metadata


def make_s3_event(*records: tuple[str | None, str | None]) -> dict[str, Any]:
    """S3 通知イベントを作成"""
    return {
        "Records": [
            {
                "eventVersion": "2.1",
                "eventSource": "aws:s3",
                "awsRegion": "us-east-1",
                "eventTime": "2024-01-15T10:30:00.000Z",
                "eventName": "ObjectCreated:Put",
                "s3": {
                    "s3SchemaVersion": "1.0",
                    "bucket": {"name": bucket, "arn": f"arn:aws:s3:::{bucket}"},
                    "object": {"key": key, "size": 1024, "eTag": "abc123"},
                },
            }
            for bucket, key in records
        ]
    }


@pytest.fixture
def last_modified() -> datetime:
    return datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def csv_metadata(last_modified: datetime) -> ObjectMetadata:
    return ObjectMetadata(
        content_type="text/csv",
        last_modified=last_modified,
        content_length=2048,
        etag="abc123",
    )


@pytest.fixture
def s3_event():
    """S3 通知イベントのファクトリ"""
    return make_s3_event


@pytest.fixture
def gateway_factory():
    """FakeMetadataGateway のファクトリ"""
    return FakeMetadataGateway
