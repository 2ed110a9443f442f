"""
S3 Object Notification Lambda Handler

S3 のオブジェクト変更通知を受け取り、対象オブジェクトの Content-Type を返す。

- 先頭レコードのみ処理（複数レコードは未対応）
- フィルタで除外されたもの・不完全な通知は None を返す
- メタデータ取得の失敗は再送出し、再試行はランタイムに任せる
"""
from __future__ import annotations

import asyncio
from typing import Any

import structlog
from pydantic import ValidationError

from charon.application.use_cases.object_notification import HandleObjectNotificationUseCase
from charon.domain.storage.events import S3Notification
from charon.infrastructure.config import get_settings
from charon.infrastructure.container import create_use_case
from charon.infrastructure.logging import bind_invocation_context, configure_logging

logger = structlog.get_logger()

_use_case: HandleObjectNotificationUseCase | None = None


def get_use_case() -> HandleObjectNotificationUseCase:
    """コンテナ内で使い回すユースケースを取得"""
    global _use_case
    if _use_case is None:
        configure_logging(get_settings())
        _use_case = create_use_case()
    return _use_case


def set_use_case(use_case: HandleObjectNotificationUseCase | None) -> None:
    """ユースケースを差し替える（テスト用）"""
    global _use_case
    _use_case = use_case


def parse_notification(event: dict[str, Any] | None) -> S3Notification | None:
    """イベントを通知モデルに変換。形式不正なら None"""
    try:
        return S3Notification.model_validate(event or {})
    except ValidationError as e:
        logger.warning("notification_parse_failed", error=str(e))
        return None


def lambda_handler(event: dict[str, Any], context: Any) -> str | None:
    """Lambda エントリポイント"""
    use_case = get_use_case()
    bind_invocation_context(get_settings(), context)

    notification = parse_notification(event)
    if notification is None:
        return None

    return asyncio.run(use_case.execute(notification, logger))
