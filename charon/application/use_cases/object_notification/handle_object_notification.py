"""Handle Object Notification Use Case"""
from __future__ import annotations

import structlog
from structlog.typing import FilteringBoundLogger

from charon.application.filters import AlwaysProcessPathFilter
from charon.application.ports.gateways import IObjectMetadataGateway
from charon.application.ports.path_filter import IPathFilter
from charon.domain.storage.errors import StorageError
from charon.domain.storage.events import S3Notification

logger = structlog.get_logger()


class HandleObjectNotificationUseCase:
    """
    S3 オブジェクト通知 ユースケース

    1. 通知の先頭レコードから (bucket, key) を取り出す
    2. フィルタで処理対象か判定
    3. オブジェクトのメタデータを取得
    4. Content-Type を返す

    不完全な通知・フィルタ除外は no-op として None を返す。
    メタデータ取得の失敗はログに残したうえでそのまま再送出する（リトライしない）。
    """

    def __init__(
        self,
        metadata_gateway: IObjectMetadataGateway,
        path_filter: IPathFilter | None = None,
    ):
        self._metadata_gateway = metadata_gateway
        self._path_filter = path_filter or AlwaysProcessPathFilter()

    @property
    def path_filter(self) -> IPathFilter:
        return self._path_filter

    async def execute(
        self,
        notification: S3Notification,
        log: FilteringBoundLogger | None = None,
    ) -> str | None:
        """ユースケースを実行"""
        log = log or logger

        record = notification.first_record
        location = record.location if record else None
        if location is None or not location.is_complete:
            log.info(
                "notification_ignored",
                reason="null event, null bucket name or null key name",
                record_count=notification.record_count,
            )
            return None

        if notification.record_count > 1:
            # 2 件目以降は処理しない
            log.debug("additional_records_ignored", ignored=notification.record_count - 1)

        bucket, key = location.bucket, location.key
        log = log.bind(bucket=bucket, key=key)

        if not self._path_filter.should_process(bucket, key):
            log.info("notification_filtered_out")
            return None

        log.info("object_processing_started")

        try:
            metadata = await self._metadata_gateway.get_object_metadata(bucket, key)
        except Exception as e:
            log.error(
                "object_metadata_fetch_failed",
                message=(
                    f"Error getting object {key} from bucket {bucket}. Make sure they exist "
                    "and your bucket is in the same region as this function."
                ),
                error=str(e),
                error_kind=e.kind.value if isinstance(e, StorageError) else None,
                exc_info=True,
            )
            raise

        log.info(
            "object_metadata_fetched",
            last_modified=metadata.last_modified.isoformat() if metadata.last_modified else None,
        )
        return metadata.content_type
