"""Structured Logging Configuration"""
from __future__ import annotations

import logging

import structlog

from charon.infrastructure.config import Settings


def configure_logging(settings: Settings) -> None:
    """構造化ログを設定"""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.use_json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def bind_invocation_context(settings: Settings, context: object | None) -> None:
    """呼び出し単位のコンテキストをログに設定"""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=settings.service_name,
        request_id=getattr(context, "aws_request_id", None),
    )
