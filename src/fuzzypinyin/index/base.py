"""
拼音索引基類

消費者（檔案、資料夾、命令、標籤）各自繼承 PinyinIndex，只需提供來源列舉；
init_index() 會依目前的 DictionaryTable 把每個名稱轉成逐字的拼音候選，
整批替換 items。

比對與評分不在這裡處理，items 只是交給比對器使用的拼音 key。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Tuple

from fuzzypinyin.dictionary import DictionaryTable
from fuzzypinyin.utils.logger import get_logger

TableProvider = Callable[[], DictionaryTable]


@dataclass(frozen=True)
class Pinyin:
    """
    一段文字的逐字拼音

    Attributes:
        text: 原文字
        syllables: 每個字的候選 key（多音字有多個候選）；
                   非中文字元以小寫自身作為唯一候選

    範例：
        >>> Pinyin.from_text("中A", table).syllables
        (('zhong',), ('a',))
    """

    text: str
    syllables: Tuple[Tuple[str, ...], ...]

    @classmethod
    def from_text(cls, text: str, table: DictionaryTable) -> "Pinyin":
        syllables = []
        for char in text:
            readings = table.readings_of(char)
            if readings:
                syllables.append(tuple(dict.fromkeys(readings)))
            else:
                syllables.append((char.lower(),))
        return cls(text=text, syllables=tuple(syllables))

    def __len__(self) -> int:
        return len(self.syllables)

    @property
    def primary(self) -> str:
        """每個字取第一個候選串接起來的 key"""
        return "".join(options[0] for options in self.syllables)

    @property
    def initials(self) -> str:
        """每個字第一個候選的首字母（供首字母縮寫搜尋）"""
        return "".join(options[0][:1] for options in self.syllables)


@dataclass(frozen=True)
class PinyinItem:
    """索引中的一筆可搜尋項目"""

    name: str
    pinyin: Pinyin
    payload: Any = None


class PinyinIndex(ABC):
    """
    拼音索引基類（符合 IndexHandle 介面）

    子類設定 id 並實作 iter_sources()。

    Attributes:
        id: 穩定的索引識別字串，作為快取 key
        items: 建好的 PinyinItem 列表
        uses_pinyin_keys: 是否依賴拼音 key；雙拼方案切換時會被重建
    """

    id: str = "base"
    uses_pinyin_keys: bool = True

    def __init__(self, table_provider: TableProvider):
        self._table_provider = table_provider
        self.items: List[PinyinItem] = []
        self._logger = get_logger(f"index.{self.id}")

    @abstractmethod
    def iter_sources(self) -> Iterable[Tuple[str, Any]]:
        """
        列舉要建索引的來源

        Returns:
            Iterable[Tuple[str, Any]]: (顯示名稱, payload)
        """

    def init_index(self) -> None:
        """依目前的拼音字典完整重建 items（不做增量更新）"""
        table = self._table_provider()
        items = [
            PinyinItem(name=name, pinyin=Pinyin.from_text(name, table), payload=payload)
            for name, payload in self.iter_sources()
        ]
        self.items = items
        self._logger.debug(f"{self.id}: {len(items)} items ({table.scheme.name})")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, items={len(self.items)})"
