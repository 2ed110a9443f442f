"""Storage Value Objects"""
from .object_location import ObjectLocation
from .object_metadata import ObjectMetadata

__all__ = ["ObjectLocation", "ObjectMetadata"]
