"""
拼音字典載入

每次都整表載入（沒有部分載入）；同樣的版本永遠得到相同順序的序列。
呼叫端拿到新表後，之前取得的表都應視為過期。
"""

from typing import Optional, Tuple

from fuzzypinyin.double_pinyin import FULL_PINYIN, DoublePinyinConverter
from fuzzypinyin.errors import InvalidSettingError
from fuzzypinyin.utils.logger import get_logger, log_timing

from .table import SIMPLIFIED, TRADITIONAL, VARIANTS, DictionaryTable
from .tables import build_variant_table

_logger = get_logger("dictionary")


class PhoneticDictionary:
    """
    拼音字典（不可變）

    Attributes:
        variant: "simplified" 或 "traditional"
        entries: (音節, 同音字串) 序列
    """

    def __init__(self, entries, variant: str = SIMPLIFIED):
        if variant not in VARIANTS:
            raise InvalidSettingError("variant", variant, f"只接受 {VARIANTS}")
        self.variant = variant
        self.entries: Tuple[Tuple[str, str], ...] = tuple(entries)

    @classmethod
    @log_timing("PhoneticDictionary.load")
    def load(cls, variant: str = SIMPLIFIED) -> "PhoneticDictionary":
        """載入內嵌的簡體或繁體字典"""
        if variant not in VARIANTS:
            raise InvalidSettingError("variant", variant, f"只接受 {VARIANTS}")
        return cls(build_variant_table(variant == TRADITIONAL), variant=variant)

    def __len__(self) -> int:
        return len(self.entries)

    def table(
        self,
        scheme=FULL_PINYIN,
        converter: Optional[DoublePinyinConverter] = None,
    ) -> DictionaryTable:
        """產生套用指定雙拼方案的工作表"""
        return DictionaryTable.from_entries(
            self.entries, variant=self.variant, scheme=scheme, converter=converter
        )


def load_pinyin_dict(
    traditional: bool = False,
    scheme=FULL_PINYIN,
    converter: Optional[DoublePinyinConverter] = None,
) -> DictionaryTable:
    """
    載入字典並套用雙拼方案

    Args:
        traditional: True 使用繁體字典
        scheme: 雙拼方案名稱或物件，預設全拼（不轉換）
        converter: 沿用既有轉換器以累計 miss 統計

    Returns:
        DictionaryTable
    """
    dictionary = PhoneticDictionary.load(TRADITIONAL if traditional else SIMPLIFIED)
    table = dictionary.table(scheme, converter=converter)
    _logger.debug(
        f"載入 {dictionary.variant} 字典: {len(table)} 個音節, 方案 {table.scheme.name}"
    )
    return table
