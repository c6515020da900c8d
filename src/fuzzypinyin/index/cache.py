"""
索引快取（開發模式用）

把各索引建好的 items 依 id 存起來，同一個行程內重新載入時直接沿用，
不必重建。只存在記憶體中，行程結束即消失。

IndexRegistry 只依賴 IndexCacheStore 介面；
PROCESS_INDEX_CACHE 是行程共用的預設實例，測試可改注入獨立的 InMemoryIndexCache。

用法：
    from fuzzypinyin.index.cache import InMemoryIndexCache

    cache = InMemoryIndexCache()
    cache.put("file", items)
    cache.get("file")   # -> items
"""

import threading
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class IndexCacheStore(Protocol):
    def get(self, index_id: str) -> Optional[List[Any]]:
        """取得快取的 items，不存在時回傳 None"""
        ...

    def put(self, index_id: str, items: List[Any]) -> None:
        ...

    def clear(self) -> None:
        ...


class InMemoryIndexCache:
    """
    記憶體索引快取

    值是整個 items 物件本身（整體替換，不做複製或合併）。
    附帶命中/未命中統計。
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, List[Any]] = {}
        self._stats = {"hits": 0, "misses": 0}

    def get(self, index_id: str) -> Optional[List[Any]]:
        with self._lock:
            items = self._entries.get(index_id)
            if items is None:
                self._stats["misses"] += 1
            else:
                self._stats["hits"] += 1
            return items

    def put(self, index_id: str, items: List[Any]) -> None:
        with self._lock:
            self._entries[index_id] = items

    def clear(self) -> None:
        with self._lock:
            self._entries = {}

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, index_id: object) -> bool:
        with self._lock:
            return index_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        """
        獲取快取統計

        Returns:
            Dict: hits / misses / hit_rate / size
        """
        with self._lock:
            total = self._stats["hits"] + self._stats["misses"]
            return {
                "hits": self._stats["hits"],
                "misses": self._stats["misses"],
                "hit_rate": self._stats["hits"] / total if total > 0 else 0.0,
                "size": len(self._entries),
            }

    def reset_stats(self) -> None:
        """只重置統計計數，不清除快取內容"""
        with self._lock:
            self._stats = {"hits": 0, "misses": 0}


# 行程共用的快取：外掛/腳本在同一個行程內重新載入時沿用
PROCESS_INDEX_CACHE = InMemoryIndexCache()
