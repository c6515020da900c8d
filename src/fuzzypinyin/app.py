"""
拼音搜尋應用 (PinyinSearchApp)

對應宿主程式中的外掛物件：持有設定、拼音字典表、各消費者索引與索引管理器，
並處理啟動、卸載與設定變更。

生命週期:
    app = PinyinSearchApp(vault_root, settings)
    app.on_load(layout_ready=False)   # 載入字典、建立索引物件
    app.notify_layout_ready()          # 宿主就緒後才建索引（只會執行一次）
    ...
    app.on_unload()                    # 開發模式下把索引快照到行程快取

設定變更:
- set_traditional_support(): 重新載入整份字典；索引要由呼叫端 reindex()
- set_double_pinyin(): 由全拼 key 重新產生雙拼 key，並重建依賴拼音 key 的索引
- set_dev_mode(): 切換下一次載入/卸載使用的模式
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .config import PinyinSettings, configure_logging
from .core.events import IndexEventHandler
from .dictionary import DictionaryTable, load_pinyin_dict
from .double_pinyin import DoublePinyinConverter, get_scheme
from .errors import InvalidSettingError, UnknownSchemeError
from .index import (
    CommandIndex,
    FileIndex,
    FolderIndex,
    IndexCacheStore,
    IndexRegistry,
    LoadReport,
    TagIndex,
)
from .utils.logger import TimingContext, get_logger

DEFAULT_COMMANDS: Tuple[Tuple[str, str], ...] = (
    ("open-search", "Open Search"),
    ("move-file", "Move File"),
    ("execute-command", "Execute Command"),
)


class PinyinSearchApp:
    """
    拼音搜尋應用

    Attributes:
        settings: 目前設定
        pinyin_dict: 目前的 DictionaryTable（整體替換，不就地修改）
        registry: 索引管理器，註冊順序為 file, folder, command, tag
    """

    def __init__(
        self,
        vault_root: Union[str, Path],
        settings: Union[PinyinSettings, Mapping[str, Any], None] = None,
        *,
        command_source: Optional[Callable[[], Iterable[Tuple[str, str]]]] = None,
        cache: Optional[IndexCacheStore] = None,
        isolate_failures: bool = False,
        verbose: bool = False,
        on_event: Optional[IndexEventHandler] = None,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        configure_logging(verbose)
        self._logger = get_logger("app")
        self._timing_callback = on_timing
        self._on_event = on_event

        if isinstance(settings, PinyinSettings):
            self.settings = settings.validate()
        else:
            self.settings = PinyinSettings.from_dict(settings)

        self.vault_root = Path(vault_root)
        self._command_source = command_source or (lambda: DEFAULT_COMMANDS)
        self._cache = cache
        self._isolate_failures = isolate_failures

        self.pinyin_dict: Optional[DictionaryTable] = None
        self.converter: Optional[DoublePinyinConverter] = None
        self.registry: Optional[IndexRegistry] = None
        self.file_index: Optional[FileIndex] = None
        self.folder_index: Optional[FolderIndex] = None
        self.command_index: Optional[CommandIndex] = None
        self.tag_index: Optional[TagIndex] = None

        self._loaded = False
        self._layout_callback: Optional[Callable[[], Optional[LoadReport]]] = None

    # ========== 字典 ==========

    def load_pinyin_dict(self) -> DictionaryTable:
        """
        依設定整份重新載入字典（並套用雙拼方案）

        之前取得的 pinyin_dict 參考在此之後都視為過期。
        """
        scheme = get_scheme(self.settings.double_pinyin)
        self.converter = DoublePinyinConverter(scheme, on_event=self._on_event)
        with TimingContext("load_pinyin_dict", self._logger, callback=self._timing_callback):
            self.pinyin_dict = load_pinyin_dict(
                traditional=self.settings.traditional_chinese_support,
                scheme=scheme,
                converter=self.converter,
            )
        return self.pinyin_dict

    def _current_table(self) -> DictionaryTable:
        if self.pinyin_dict is None:
            return self.load_pinyin_dict()
        return self.pinyin_dict

    # ========== 生命週期 ==========

    def on_load(self, layout_ready: bool = True) -> Optional[LoadReport]:
        """
        啟動：載入字典、建立索引物件並註冊到管理器

        Args:
            layout_ready: 宿主是否已就緒；False 時索引建構延後到 notify_layout_ready()

        Returns:
            已就緒時回傳索引載入結果，否則為 None
        """
        self.load_pinyin_dict()

        self.file_index = FileIndex(self._current_table, self.vault_root, lambda: self.settings)
        self.folder_index = FolderIndex(self._current_table, self.vault_root)
        self.command_index = CommandIndex(self._current_table, self._command_source)
        self.tag_index = TagIndex(self._current_table, self.vault_root)

        self.registry = IndexRegistry(
            [self.file_index, self.folder_index, self.command_index, self.tag_index],
            cache=self._cache,
            isolate_failures=self._isolate_failures,
            on_event=self._on_event,
            on_timing=self._timing_callback,
        )
        self._loaded = True
        self._layout_callback = self._load_indices

        if layout_ready:
            return self.notify_layout_ready()
        self._logger.debug("等待宿主就緒後再建立索引")
        return None

    def notify_layout_ready(self) -> Optional[LoadReport]:
        """宿主就緒通知；延後的索引建構只會執行一次"""
        callback, self._layout_callback = self._layout_callback, None
        if callback is None:
            return None
        return callback()

    def _load_indices(self) -> LoadReport:
        if self.settings.dev_mode:
            return self.registry.load_cached()
        return self.registry.load_all()

    def on_unload(self) -> List[str]:
        """
        卸載：開發模式下把所有索引快照到快取

        非開發模式卸載時清空快取，避免之後重新開啟開發模式時沿用過期的快照。
        宿主尚未就緒（索引還沒建）時不快照，保留上一次的快照。

        Returns:
            List[str]: 被快照的索引 id（未快照時為空列表）
        """
        layout_pending = self._layout_callback is not None
        self._layout_callback = None
        if not self._loaded:
            return []
        self._loaded = False
        if not self.settings.dev_mode:
            self.registry.cache.clear()
            return []
        if layout_pending:
            self._logger.debug("索引尚未建立，略過快照")
            return []
        return self.registry.snapshot_all()

    def refresh_index(self) -> LoadReport:
        """丟棄快取並重建所有索引"""
        self._require_loaded()
        return self.registry.force_reload()

    def reindex(self) -> LoadReport:
        """依目前字典重建所有索引"""
        self._require_loaded()
        return self.registry.load_all()

    def _require_loaded(self) -> None:
        if self.registry is None:
            raise RuntimeError("尚未呼叫 on_load()")

    # ========== 設定變更 ==========

    def set_traditional_support(self, value: bool) -> DictionaryTable:
        """
        切換繁簡字典

        只重新載入字典；已建好的索引仍是舊字典的結果，需要呼叫 reindex()。
        """
        if not isinstance(value, bool):
            raise InvalidSettingError("traditional_chinese_support", value, "必須是布林值")
        self.settings.traditional_chinese_support = value
        return self.load_pinyin_dict()

    def set_double_pinyin(self, name: str) -> Optional[LoadReport]:
        """
        切換雙拼方案

        由 original_keys 整批重新產生 keys，再重建所有 uses_pinyin_keys 的索引。

        Returns:
            重建結果；尚未 on_load() 時為 None
        """
        try:
            scheme = get_scheme(name)
        except UnknownSchemeError as e:
            raise InvalidSettingError("double_pinyin", name, str(e)) from e

        self.settings.double_pinyin = scheme.name
        if self.pinyin_dict is None:
            self.load_pinyin_dict()
        else:
            self.converter = DoublePinyinConverter(scheme, on_event=self._on_event)
            self.pinyin_dict = self.pinyin_dict.with_scheme(scheme, converter=self.converter)
        self._logger.info(f"雙拼方案切換為：{scheme.name}")

        if self.registry is None:
            return None
        targets = [h.id for h in self.registry if getattr(h, "uses_pinyin_keys", True)]
        return self.registry.reload(targets)

    def set_dev_mode(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise InvalidSettingError("dev_mode", value, "必須是布林值")
        self.settings.dev_mode = value

    # ========== 診斷 ==========

    def get_stats(self) -> Dict[str, Any]:
        """目前字典、轉換失敗與索引大小的摘要"""
        stats: Dict[str, Any] = {
            "variant": self.pinyin_dict.variant if self.pinyin_dict else None,
            "scheme": self.settings.double_pinyin,
            "syllables": len(self.pinyin_dict) if self.pinyin_dict else 0,
            "conversion_misses": self.converter.miss_count if self.converter else 0,
            "indices": {},
        }
        if self.registry is not None:
            stats["indices"] = {h.id: len(h.items) for h in self.registry}
        return stats
