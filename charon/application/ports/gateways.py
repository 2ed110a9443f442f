"""Gateway Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod

from charon.domain.storage.value_objects import ObjectMetadata


class IObjectMetadataGateway(ABC):
    """
    Object Metadata Gateway Interface

    S3 などのストレージサービスからオブジェクトのメタデータを取得する処理を抽象化する。
    失敗時は StorageError を送出する。
    """

    @abstractmethod
    async def get_object_metadata(self, bucket: str, key: str) -> ObjectMetadata:
        """オブジェクト本体を取得せずにメタデータを取得"""
        pass
