"""Application Ports (Interfaces)"""
from .gateways import IObjectMetadataGateway
from .path_filter import IPathFilter

__all__ = [
    "IObjectMetadataGateway",
    "IPathFilter",
]
