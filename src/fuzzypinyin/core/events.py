"""
事件模型（Event Model）

索引管理器預設只寫 log，不直接輸出到 stdout。
若需要取得「哪個索引花了多久、用了快取、建構失敗」等資訊，請使用事件回呼。

回呼本身拋出的例外會被記錄下來，不會中斷索引建構。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class IndexEvent(TypedDict, total=False):
    type: Literal["build", "cache_hit", "build_failed", "snapshot", "conversion_miss"]
    index_id: str

    # build
    item_count: int
    elapsed: float
    started_at: float
    finished_at: float

    # build_failed
    exception_type: str
    exception_message: str

    # snapshot
    index_ids: list

    # conversion_miss
    scheme: str
    syllable: str
    fragment: str


IndexEventHandler = Callable[[IndexEvent], None]
