"""Dependency Wiring"""
from __future__ import annotations

from botocore.config import Config

from charon.application.filters import (
    AllOfPathFilter,
    AlwaysProcessPathFilter,
    BucketDenyListPathFilter,
    PrefixPathFilter,
    RegexPathFilter,
    SuffixPathFilter,
)
from charon.application.ports.gateways import IObjectMetadataGateway
from charon.application.ports.path_filter import IPathFilter
from charon.application.use_cases.object_notification import HandleObjectNotificationUseCase
from charon.infrastructure.config import Settings, get_settings
from charon.infrastructure.gateways.s3 import S3MetadataGateway


def build_path_filter(settings: Settings) -> IPathFilter:
    """設定からフィルタを組み立てる。設定が無ければ AlwaysProcess"""
    if not settings.has_path_filter:
        return AlwaysProcessPathFilter()

    filters: list[IPathFilter] = []

    if settings.filter_denied_buckets:
        filters.append(BucketDenyListPathFilter(settings.filter_denied_buckets))
    if settings.filter_key_prefixes:
        filters.append(PrefixPathFilter(settings.filter_key_prefixes))
    if settings.filter_key_suffixes:
        filters.append(SuffixPathFilter(settings.filter_key_suffixes))
    if settings.filter_key_pattern:
        filters.append(RegexPathFilter(settings.filter_key_pattern))

    if len(filters) == 1:
        return filters[0]
    return AllOfPathFilter(filters)


def build_metadata_gateway(settings: Settings) -> IObjectMetadataGateway:
    """Metadata Gateway の依存性注入"""
    client_config = Config(
        retries={
            "max_attempts": settings.s3_max_attempts,
            "mode": settings.s3_retry_mode,
        },
        connect_timeout=settings.s3_connect_timeout,
        read_timeout=settings.s3_read_timeout,
    )
    return S3MetadataGateway(
        region=settings.aws_region,
        client_config=client_config,
    )


def create_use_case(
    settings: Settings | None = None,
    metadata_gateway: IObjectMetadataGateway | None = None,
    path_filter: IPathFilter | None = None,
) -> HandleObjectNotificationUseCase:
    """
    ユースケースを組み立てる

    Lambda 上では引数なしで呼ばれ、IAM ロールの認証情報と実行リージョンの
    S3 クライアントを使う。テストではゲートウェイやフィルタを差し替えられる。
    """
    settings = settings or get_settings()
    return HandleObjectNotificationUseCase(
        metadata_gateway=metadata_gateway or build_metadata_gateway(settings),
        path_filter=path_filter or build_path_filter(settings),
    )
