"""Path Filter Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod


class IPathFilter(ABC):
    """
    Path Filter Interface

    (bucket, key) を処理対象とするかを判定する。
    実装は副作用を持たず、例外を送出してはならない。
    """

    @abstractmethod
    def should_process(self, bucket: str, key: str) -> bool:
        """処理対象なら True"""
        pass
