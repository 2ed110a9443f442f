"""Gateway implementations"""
from charon.infrastructure.gateways.s3 import S3MetadataGateway

__all__ = ["S3MetadataGateway"]
