"""
索引模組

- IndexRegistry: 索引生命週期管理（建構、快取、快照）
- IndexCacheStore / InMemoryIndexCache: 可注入的索引快取
- PinyinIndex 與內建消費者（檔案、資料夾、命令、標籤）
"""

from .base import Pinyin, PinyinIndex, PinyinItem
from .cache import PROCESS_INDEX_CACHE, IndexCacheStore, InMemoryIndexCache
from .consumers import CommandIndex, FileIndex, FolderIndex, TagIndex
from .registry import CACHED, STANDARD, BuildRecord, IndexRegistry, LoadReport

__all__ = [
    "IndexRegistry",
    "BuildRecord",
    "LoadReport",
    "STANDARD",
    "CACHED",
    "IndexCacheStore",
    "InMemoryIndexCache",
    "PROCESS_INDEX_CACHE",
    "Pinyin",
    "PinyinItem",
    "PinyinIndex",
    "FileIndex",
    "FolderIndex",
    "CommandIndex",
    "TagIndex",
]
