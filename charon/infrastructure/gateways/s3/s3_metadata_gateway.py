"""S3 Metadata Gateway Implementation"""
from __future__ import annotations

import asyncio
from functools import partial
from typing import Any

import boto3
import structlog
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from charon.application.ports.gateways import IObjectMetadataGateway
from charon.domain.storage.errors import StorageError, StorageErrorKind
from charon.domain.storage.value_objects import ObjectMetadata

logger = structlog.get_logger()

NOT_FOUND_CODES = frozenset(["404", "NoSuchKey", "NotFound", "NoSuchBucket"])
ACCESS_DENIED_CODES = frozenset(["403", "AccessDenied", "Forbidden"])
TRANSIENT_CODES = frozenset([
    "500",
    "503",
    "SlowDown",
    "RequestTimeout",
    "Throttling",
    "ThrottlingException",
    "InternalError",
    "ServiceUnavailable",
])
TRANSIENT_EXCEPTIONS = (
    BotoConnectionError,
    ConnectTimeoutError,
    ReadTimeoutError,
    EndpointConnectionError,
)


def classify_error(error: Exception) -> StorageErrorKind:
    """boto3 の例外をストレージ障害の分類に変換"""
    if isinstance(error, ClientError):
        code = str(error.response.get("Error", {}).get("Code", ""))
        if code in NOT_FOUND_CODES:
            return StorageErrorKind.NOT_FOUND
        if code in ACCESS_DENIED_CODES:
            return StorageErrorKind.ACCESS_DENIED
        if code in TRANSIENT_CODES:
            return StorageErrorKind.TRANSIENT
        return StorageErrorKind.UNKNOWN

    if isinstance(error, TRANSIENT_EXCEPTIONS):
        return StorageErrorKind.TRANSIENT

    return StorageErrorKind.UNKNOWN


class S3MetadataGateway(IObjectMetadataGateway):
    """
    S3 Metadata Gateway

    HeadObject でオブジェクトのメタデータを取得する。
    リトライは boto3 クライアントの設定に任せ、ここでは行わない。
    """

    def __init__(
        self,
        region: str = "us-east-1",
        client: Any = None,
        client_config: Config | None = None,
    ):
        self.region = region
        self._client = client or boto3.client(
            "s3",
            region_name=region,
            config=client_config,
        )

    @property
    def client(self) -> Any:
        return self._client

    async def get_object_metadata(self, bucket: str, key: str) -> ObjectMetadata:
        """
        オブジェクトのメタデータを取得

        Args:
            bucket: バケット名
            key: S3オブジェクトキー

        Returns:
            ObjectMetadata: メタデータ

        Raises:
            StorageError: 取得に失敗した場合
        """
        log = logger.bind(bucket=bucket, key=key)
        log.debug("head_object_started")

        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(
                None,
                partial(self._client.head_object, Bucket=bucket, Key=key),
            )
        except (ClientError, BotoCoreError) as e:
            kind = classify_error(e)
            log.debug("head_object_failed", error=str(e), error_kind=kind.value)
            raise StorageError(kind, str(e), bucket=bucket, key=key) from e

        metadata = ObjectMetadata.from_head_response(response)
        log.debug("head_object_completed", content_length=metadata.content_length)
        return metadata
