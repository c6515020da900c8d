"""
核心抽象層

定義與消費者無關的介面與事件模型。
"""

from .events import IndexEvent, IndexEventHandler
from .protocols import IndexHandle

__all__ = [
    "IndexEvent",
    "IndexEventHandler",
    "IndexHandle",
]
