"""Path Filter Implementations"""
from __future__ import annotations

import re
from collections.abc import Iterable

from charon.application.ports.path_filter import IPathFilter


class AlwaysProcessPathFilter(IPathFilter):
    """
    既定のフィルタ

    すべてのオブジェクトを処理対象とする。入力の検証は行わない。
    """

    def should_process(self, bucket: str, key: str) -> bool:
        return True


class PrefixPathFilter(IPathFilter):
    """キーが指定プレフィックスのいずれかで始まるものを処理"""

    def __init__(self, prefixes: Iterable[str]):
        self._prefixes = tuple(prefixes)

    def should_process(self, bucket: str, key: str) -> bool:
        return bool(key) and key.startswith(self._prefixes)


class SuffixPathFilter(IPathFilter):
    """キーが指定サフィックス（拡張子など）のいずれかで終わるものを処理"""

    def __init__(self, suffixes: Iterable[str], case_sensitive: bool = False):
        self._case_sensitive = case_sensitive
        if case_sensitive:
            self._suffixes = tuple(suffixes)
        else:
            self._suffixes = tuple(s.lower() for s in suffixes)

    def should_process(self, bucket: str, key: str) -> bool:
        if not key:
            return False
        target = key if self._case_sensitive else key.lower()
        return target.endswith(self._suffixes)


class RegexPathFilter(IPathFilter):
    """キーが正規表現にマッチするものを処理"""

    def __init__(self, pattern: str | re.Pattern[str]):
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def should_process(self, bucket: str, key: str) -> bool:
        return bool(key) and self._pattern.search(key) is not None


class BucketDenyListPathFilter(IPathFilter):
    """指定バケットのオブジェクトを除外"""

    def __init__(self, buckets: Iterable[str]):
        self._denied = frozenset(buckets)

    def should_process(self, bucket: str, key: str) -> bool:
        return bucket not in self._denied


class AllOfPathFilter(IPathFilter):
    """
    複合フィルタ

    すべての内部フィルタが許可した場合のみ処理対象とする。
    内部フィルタが空なら常に許可。
    """

    def __init__(self, filters: Iterable[IPathFilter]):
        self._filters = tuple(filters)

    @property
    def filters(self) -> tuple[IPathFilter, ...]:
        return self._filters

    def should_process(self, bucket: str, key: str) -> bool:
        return all(f.should_process(bucket, key) for f in self._filters)
