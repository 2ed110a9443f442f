"""S3 Gateway implementations"""
from charon.infrastructure.gateways.s3.s3_metadata_gateway import (
    S3MetadataGateway,
    classify_error,
)

__all__ = [
    "S3MetadataGateway",
    "classify_error",
]
