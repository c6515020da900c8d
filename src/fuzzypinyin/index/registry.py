"""
索引管理器 (IndexRegistry)

持有所有消費者的索引（檔案、資料夾、命令、標籤），負責：
- 一般模式：依註冊順序逐一呼叫 init_index()，記錄耗時與項目數
- 快取模式：快取中已有的索引直接沿用 items，其餘照常建構
- 卸載快照：把每個索引目前的 items 寫回快取
- 強制重建：清空快取後走一般模式

所有操作都是同步、單執行緒的；一個索引建完才會開始下一個，
建構中途不會被打斷。

使用方式:
    from fuzzypinyin.index import IndexRegistry, InMemoryIndexCache

    registry = IndexRegistry(cache=InMemoryIndexCache())
    registry.register(file_index)
    registry.register(folder_index)
    report = registry.load_all()
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from fuzzypinyin.core.events import IndexEvent, IndexEventHandler
from fuzzypinyin.core.protocols.index import IndexHandle
from fuzzypinyin.errors import IndexBuildError
from fuzzypinyin.utils.logger import TimingContext, get_logger

from .cache import PROCESS_INDEX_CACHE, IndexCacheStore

STANDARD = "standard"
CACHED = "cached"


@dataclass
class BuildRecord:
    """
    單一索引在一次載入中的結果

    Attributes:
        index_id: 索引 id
        item_count: 建構（或從快取取回）後的項目數
        elapsed: 建構耗時（秒），快取命中時為 0
        started_at / finished_at: time.perf_counter() 時間戳，可用來排序
        cache_hit: 是否直接沿用快取
        error: 建構失敗時的例外
    """

    index_id: str
    item_count: int = 0
    elapsed: float = 0.0
    started_at: float = 0.0
    finished_at: float = 0.0
    cache_hit: bool = False
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LoadReport:
    """一次載入（load_all / load_cached / reload）的結果彙總"""

    mode: str = STANDARD
    records: List[BuildRecord] = field(default_factory=list)

    @property
    def builds(self) -> List[BuildRecord]:
        return [r for r in self.records if not r.cache_hit and r.ok]

    @property
    def cache_hits(self) -> List[BuildRecord]:
        return [r for r in self.records if r.cache_hit]

    @property
    def failures(self) -> List[BuildRecord]:
        return [r for r in self.records if not r.ok]

    @property
    def total_elapsed(self) -> float:
        return sum(r.elapsed for r in self.records)


class IndexRegistry:
    """
    索引管理器

    以組合方式持有一個有序的索引列表（不繼承內建容器）。
    快取透過 IndexCacheStore 介面注入，預設使用行程共用的 PROCESS_INDEX_CACHE。

    Attributes:
        cache: 快取存放處
        isolate_failures: True 時單一索引失敗只記錄並繼續；
                          預設 False，失敗會中止整輪載入
        last_report: 最近一次載入的結果
    """

    def __init__(
        self,
        handles: Iterable[IndexHandle] = (),
        *,
        cache: Optional[IndexCacheStore] = None,
        isolate_failures: bool = False,
        on_event: Optional[IndexEventHandler] = None,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._handles: List[IndexHandle] = []
        self.cache: IndexCacheStore = cache if cache is not None else PROCESS_INDEX_CACHE
        self.isolate_failures = isolate_failures
        self._on_event = on_event
        self._timing_callback = on_timing
        self._logger = get_logger("index.registry")
        self.last_report: Optional[LoadReport] = None

        for handle in handles:
            self.register(handle)

    # ========== 註冊 ==========

    def register(self, handle: IndexHandle) -> IndexHandle:
        """
        註冊索引（依註冊順序處理）

        Raises:
            TypeError: 物件不符合 IndexHandle 介面
            ValueError: id 已被註冊
        """
        if not isinstance(handle, IndexHandle):
            raise TypeError(f"{handle!r} 不符合 IndexHandle 介面 (id / items / init_index)")
        if any(existing.id == handle.id for existing in self._handles):
            raise ValueError(f"索引 id {handle.id!r} 已註冊")
        self._handles.append(handle)
        return handle

    @property
    def handles(self) -> Tuple[IndexHandle, ...]:
        return tuple(self._handles)

    def ids(self) -> List[str]:
        return [handle.id for handle in self._handles]

    def get(self, index_id: str) -> Optional[IndexHandle]:
        for handle in self._handles:
            if handle.id == index_id:
                return handle
        return None

    def __iter__(self) -> Iterator[IndexHandle]:
        return iter(tuple(self._handles))

    def __len__(self) -> int:
        return len(self._handles)

    # ========== 載入 ==========

    def load_all(self) -> LoadReport:
        """一般模式：每個索引都重建"""
        return self._run(self._handles, mode=STANDARD)

    load = load_all

    def reload(self, index_ids: Iterable[str]) -> LoadReport:
        """
        只重建指定的索引（仍依註冊順序）

        Raises:
            KeyError: 有 id 未註冊
        """
        wanted = set(index_ids)
        unknown = wanted.difference(self.ids())
        if unknown:
            raise KeyError(f"未註冊的索引: {sorted(unknown)}")
        return self._run([h for h in self._handles if h.id in wanted], mode=STANDARD)

    def load_cached(self) -> LoadReport:
        """快取模式：快取中有的索引直接沿用，沒有的才重建"""
        return self._run(self._handles, mode=CACHED)

    def force_reload(self) -> LoadReport:
        """清空快取後全部重建（用於丟棄過期快取）"""
        self.cache.clear()
        self._logger.info("索引快取已清空，重新建構所有索引")
        return self.load_all()

    def snapshot_all(self) -> List[str]:
        """
        把每個索引目前的 items 寫入快取

        寫入前會先清空快取，因此快取內容永遠是最後一次快照。

        Returns:
            List[str]: 寫入的索引 id
        """
        self.cache.clear()
        for handle in self._handles:
            self.cache.put(handle.id, handle.items)
        ids = self.ids()
        self._logger.debug(f"已快照 {len(ids)} 個索引: {ids}")
        self._emit({"type": "snapshot", "index_ids": ids})
        return ids

    # ========== 內部實作 ==========

    def _run(self, handles: List[IndexHandle], mode: str) -> LoadReport:
        report = LoadReport(mode=mode)
        self.last_report = report
        for handle in list(handles):
            if mode == CACHED:
                record = self._restore(handle)
                if record is not None:
                    report.records.append(record)
                    continue
            report.records.append(self._build(handle, report))
        return report

    def _restore(self, handle: IndexHandle) -> Optional[BuildRecord]:
        items = self.cache.get(handle.id)
        if items is None:
            return None
        handle.items = items
        now = time.perf_counter()
        self._logger.info(f"Use old {handle.id} index ({len(items)} items)")
        self._emit({"type": "cache_hit", "index_id": handle.id, "item_count": len(items)})
        return BuildRecord(
            index_id=handle.id,
            item_count=len(items),
            started_at=now,
            finished_at=now,
            cache_hit=True,
        )

    def _build(self, handle: IndexHandle, report: LoadReport) -> BuildRecord:
        record = BuildRecord(index_id=handle.id)
        timer = TimingContext(
            operation=f"init_index({handle.id})",
            logger=self._logger,
            callback=self._timing_callback,
        )
        record.started_at = time.perf_counter()
        try:
            with timer:
                handle.init_index()
        except Exception as e:
            record.finished_at = time.perf_counter()
            record.elapsed = timer.elapsed
            record.error = e
            self._emit(
                {
                    "type": "build_failed",
                    "index_id": handle.id,
                    "elapsed": record.elapsed,
                    "exception_type": type(e).__name__,
                    "exception_message": str(e),
                }
            )
            if not self.isolate_failures:
                report.records.append(record)
                raise IndexBuildError(handle.id, f"索引 {handle.id!r} 建構失敗: {e}") from e
            self._logger.exception(f"索引 {handle.id} 建構失敗，繼續處理其餘索引")
            return record

        record.finished_at = time.perf_counter()
        record.elapsed = timer.elapsed
        record.item_count = len(handle.items)
        self._logger.info(
            f"{handle.id} indexing completed, totaling {record.item_count} items, "
            f"taking {record.elapsed:.3f}s"
        )
        self._emit(
            {
                "type": "build",
                "index_id": handle.id,
                "item_count": record.item_count,
                "elapsed": record.elapsed,
                "started_at": record.started_at,
                "finished_at": record.finished_at,
            }
        )
        return record

    def _emit(self, event: IndexEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")
