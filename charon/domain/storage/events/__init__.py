"""Storage Events"""
from .s3_notification import (
    S3Bucket,
    S3Entity,
    S3EventRecord,
    S3Notification,
    S3Object,
)

__all__ = [
    "S3Bucket",
    "S3Entity",
    "S3EventRecord",
    "S3Notification",
    "S3Object",
]
