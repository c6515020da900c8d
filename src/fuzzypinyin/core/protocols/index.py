"""
Index Handle Protocol

定義索引管理器對各個消費者索引的最小要求（id / items / init_index）。
"""

from typing import Any, List, Protocol, runtime_checkable


@runtime_checkable
class IndexHandle(Protocol):
    id: str
    items: List[Any]

    def init_index(self) -> None:
        """依目前的拼音字典完整重建 items（可重複呼叫）"""
        ...
