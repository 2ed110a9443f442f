"""Storage Domain Module"""
from .errors import StorageError, StorageErrorKind
from .events.s3_notification import S3EventRecord, S3Notification
from .value_objects.object_location import ObjectLocation
from .value_objects.object_metadata import ObjectMetadata

__all__ = [
    "StorageError",
    "StorageErrorKind",
    "S3EventRecord",
    "S3Notification",
    "ObjectLocation",
    "ObjectMetadata",
]
