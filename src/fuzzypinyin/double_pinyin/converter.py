"""
全拼 → 雙拼轉換器

轉換規則（每個音節獨立，無狀態）:
1. 以 zh / ch / sh 開頭時，整個捲舌聲母查表取得對應鍵；
   其他情況直接保留第一個字母作為聲母（單字母聲母不重新編碼）
2. 剩餘部分（韻母）整段查表取得對應鍵
3. 查無對應時該位置輸出空字串，不做任何推測補位；
   這類失敗會被計數並記錄到 log

使用方式:
    >>> from fuzzypinyin.double_pinyin import convert, XIAOHE
    >>> convert("zhong", XIAOHE)
    'vs'
"""

from typing import Dict, Iterable, List, Optional, Tuple

from fuzzypinyin.core.events import IndexEventHandler
from fuzzypinyin.utils.logger import get_logger

from .schemes import DoublePinyinScheme, get_scheme

RETROFLEX_INITIALS = ("zh", "ch", "sh")

_logger = get_logger("double_pinyin")


def split_syllable(full_pinyin: str) -> Tuple[str, str]:
    """
    把全拼音節切成 (聲母段, 剩餘段)

    範例:
        >>> split_syllable("shuang")
        ('sh', 'uang')
        >>> split_syllable("a")
        ('a', '')
    """
    if full_pinyin[:2] in RETROFLEX_INITIALS:
        return full_pinyin[:2], full_pinyin[2:]
    return full_pinyin[:1], full_pinyin[1:]


class DoublePinyinConverter:
    """
    雙拼轉換器

    持有一個方案，並統計查表失敗（miss）的次數。
    轉換本身是純函式；統計只是附帶的診斷資訊。

    Attributes:
        scheme: 使用中的雙拼方案
        misses: 片段 -> 失敗次數
    """

    def __init__(
        self,
        scheme,
        on_event: Optional[IndexEventHandler] = None,
    ):
        self.scheme: DoublePinyinScheme = get_scheme(scheme)
        self.misses: Dict[str, int] = {}
        self._on_event = on_event

    @property
    def miss_count(self) -> int:
        return sum(self.misses.values())

    def reset_stats(self) -> None:
        self.misses = {}

    def _lookup(self, fragment: str, syllable: str) -> str:
        code = self.scheme.code_for(fragment)
        if code is not None:
            return code

        self.misses[fragment] = self.misses.get(fragment, 0) + 1
        _logger.debug(f"[{self.scheme.name}] 查無片段 '{fragment}' (音節 '{syllable}')")
        if self._on_event is not None:
            try:
                self._on_event(
                    {
                        "type": "conversion_miss",
                        "scheme": self.scheme.id,
                        "syllable": syllable,
                        "fragment": fragment,
                    }
                )
            except Exception:
                _logger.exception("on_event 回呼執行失敗")
        return ""

    def convert(self, full_pinyin: str) -> str:
        """
        單一音節轉換

        全拼方案直接回傳原字串。

        Args:
            full_pinyin: 無聲調全拼（ü 寫作 v）

        Returns:
            str: 雙拼編碼，查表失敗的位置為空字串
        """
        if self.scheme.is_identity or not full_pinyin:
            return full_pinyin

        initial, rest = split_syllable(full_pinyin)
        if initial in RETROFLEX_INITIALS:
            double_pinyin = self._lookup(initial, full_pinyin)
        else:
            double_pinyin = initial

        if rest:
            double_pinyin += self._lookup(rest, full_pinyin)
        return double_pinyin

    def convert_all(self, keys: Iterable[str]) -> Tuple[str, ...]:
        """
        整批轉換（順序、長度與輸入一致）

        全拼方案回傳輸入本身的 tuple。
        """
        keys = tuple(keys)
        if self.scheme.is_identity:
            return keys

        before = self.miss_count
        converted = tuple(self.convert(key) for key in keys)
        missed = self.miss_count - before
        if missed:
            _logger.warning(
                f"[{self.scheme.name}] {missed} 個音節片段無法轉換，"
                f"這些字的雙拼 key 不完整: {self.missed_fragments()}"
            )
        return converted

    def missed_fragments(self) -> List[str]:
        return sorted(self.misses)


def convert(full_pinyin: str, scheme) -> str:
    """以指定方案轉換單一音節（不保留統計）"""
    return DoublePinyinConverter(scheme).convert(full_pinyin)


def convert_all(keys: Iterable[str], scheme) -> Tuple[str, ...]:
    """以指定方案整批轉換"""
    return DoublePinyinConverter(scheme).convert_all(keys)
