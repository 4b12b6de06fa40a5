# fx_translator/cache.py
"""本模块提供带 TTL 的内存缓存，用于减少重复的翻译请求。"""

import threading
import time
from collections.abc import Callable

from cachetools import LRUCache
from pydantic import BaseModel, Field

from fx_translator.types import CacheEntry


class CacheConfig(BaseModel):
    """缓存配置模型。"""

    maxsize: int = Field(default=1000, gt=0)
    ttl: float = Field(default=30 * 60, gt=0, description="条目存活时间（秒）")
    sweep_interval: float = Field(
        default=5 * 60, gt=0, description="周期清理的间隔（秒）"
    )
    sweep_initial_delay: float = Field(
        default=5 * 60, ge=0, description="首次清理前的等待时间（秒）"
    )


class TranslationCache:
    """
    一个线程安全的翻译结果缓存。

    条目的存活时间超过 TTL 后，读取时被视为未命中，但仍然占用空间，
    直到 `sweep()` 把它真正移除。`maxsize` 限制了两次清理之间的内存占用，
    超出时按 LRU 顺序淘汰。所有操作都在内部锁中执行，调用方无需额外同步。
    """

    def __init__(
        self,
        config: CacheConfig | None = None,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.config = config or CacheConfig()
        self._timer = timer
        self._lock = threading.Lock()
        self._cache: LRUCache[str, CacheEntry] = LRUCache(maxsize=self.config.maxsize)

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        # 恰好达到 TTL 的条目仍然有效
        return now - entry.created_at > self.config.ttl

    @property
    def size(self) -> int:
        """当前实际存储的条目数（包括已过期但尚未清理的条目）。"""
        with self._lock:
            return len(self._cache)

    def __len__(self) -> int:
        return self.size

    def get(self, key: str) -> CacheEntry | None:
        """返回未过期的条目；不存在或已过期时返回 None。"""
        with self._lock:
            entry = self._cache.get(key)
            if entry is None or self._is_expired(entry, self._timer()):
                return None
            return entry

    def put(self, key: str, translation: str) -> CacheEntry:
        """以当前时间创建新条目，覆盖同一键下的旧条目。"""
        entry = CacheEntry(translation=translation, created_at=self._timer())
        with self._lock:
            self._cache[key] = entry
        return entry

    def sweep(self) -> int:
        """移除所有过期条目，返回被移除的条目数。"""
        with self._lock:
            now = self._timer()
            expired = [
                key
                for key, entry in list(self._cache.items())
                if self._is_expired(entry, now)
            ]
            for key in expired:
                del self._cache[key]
            return len(expired)

    def clear(self) -> None:
        """清空整个缓存。"""
        with self._lock:
            self._cache.clear()
