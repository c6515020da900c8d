"""
拼音字典表 (DictionaryTable)

索引建構時使用的工作結構，三個序列位置一一對應：
- original_keys: 永遠是全拼
- keys: 依目前雙拼方案轉換後的拼音（全拼方案時與 original_keys 相同）
- values: 該音節對應的同音字串

表本身不可變；切換方案時由 original_keys 整批重新產生 keys，得到新的表。
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, Iterator, List, Optional, Tuple

from fuzzypinyin.double_pinyin import FULL_PINYIN, DoublePinyinConverter, DoublePinyinScheme, get_scheme

SIMPLIFIED = "simplified"
TRADITIONAL = "traditional"
VARIANTS = (SIMPLIFIED, TRADITIONAL)


@dataclass(frozen=True)
class DictionaryTable:
    original_keys: Tuple[str, ...]
    keys: Tuple[str, ...]
    values: Tuple[str, ...]
    variant: str = SIMPLIFIED
    scheme: DoublePinyinScheme = field(default=FULL_PINYIN)

    def __post_init__(self):
        if not len(self.original_keys) == len(self.keys) == len(self.values):
            raise ValueError(
                "original_keys / keys / values 長度不一致: "
                f"{len(self.original_keys)} / {len(self.keys)} / {len(self.values)}"
            )

    @classmethod
    def from_entries(
        cls,
        entries,
        variant: str = SIMPLIFIED,
        scheme=FULL_PINYIN,
        converter: Optional[DoublePinyinConverter] = None,
    ) -> "DictionaryTable":
        """
        由 (音節, 同音字串) 序列建立表，並套用雙拼方案

        Args:
            entries: (音節, 同音字串) 序列
            variant: 字典版本
            scheme: 雙拼方案（名稱或物件）
            converter: 沿用既有轉換器以累計 miss 統計
        """
        entries = tuple(entries)
        original_keys = tuple(syllable for syllable, _ in entries)
        values = tuple(chars for _, chars in entries)
        base = cls(original_keys, original_keys, values, variant=variant)
        return base.with_scheme(scheme, converter=converter)

    def with_scheme(
        self,
        scheme,
        converter: Optional[DoublePinyinConverter] = None,
    ) -> "DictionaryTable":
        """
        以 original_keys 為基準重新產生 keys

        全拼方案時 keys 就是 original_keys 本身。
        """
        scheme = get_scheme(scheme)
        if scheme.is_identity:
            keys = self.original_keys
        else:
            if converter is None or converter.scheme != scheme:
                converter = DoublePinyinConverter(scheme)
            keys = converter.convert_all(self.original_keys)
        return DictionaryTable(
            original_keys=self.original_keys,
            keys=keys,
            values=self.values,
            variant=self.variant,
            scheme=scheme,
        )

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(zip(self.keys, self.values))

    @cached_property
    def _positions_by_char(self) -> Dict[str, Tuple[int, ...]]:
        positions: Dict[str, List[int]] = {}
        for i, chars in enumerate(self.values):
            for char in chars:
                positions.setdefault(char, []).append(i)
        return {char: tuple(idx) for char, idx in positions.items()}

    def readings_of(self, char: str) -> List[str]:
        """
        取得單字的所有拼音 key（依目前方案）

        不在字典中的字回傳空列表。
        """
        return [self.keys[i] for i in self._positions_by_char.get(char, ())]

    def original_readings_of(self, char: str) -> List[str]:
        """取得單字的所有全拼讀音"""
        return [self.original_keys[i] for i in self._positions_by_char.get(char, ())]

    def __contains__(self, char: object) -> bool:
        return char in self._positions_by_char
