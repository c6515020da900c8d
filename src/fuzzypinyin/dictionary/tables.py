"""
內嵌拼音字典

由 pypinyin 內建的單字拼音表產生「音節 -> 同音字串」對照表，
分成簡體與繁體兩個版本：
- 簡體版：HanziConv 轉簡體後不變的字
- 繁體版：HanziConv 轉繁體後不變的字
兩岸共用的字兩邊都會出現。

讀音一律為無聲調全拼（ü 寫作 v），多音字的每個讀音都收錄；
非 [a-z] 組成的讀音（如 ê）不收錄。
"""

import re
from functools import lru_cache
from typing import Dict, List, Tuple

from fuzzypinyin.utils.lazy_imports import get_hanziconv, get_pinyin_dict, get_pypinyin
from fuzzypinyin.utils.logger import TimingContext, get_logger

# 中日韓統一表意文字基本區
CJK_START = 0x4E00
CJK_END = 0x9FA5

_PLAIN_SYLLABLE = re.compile(r"^[a-z]+$")

_logger = get_logger("dictionary")


def _toneless_readings(pypinyin, char: str) -> List[str]:
    readings = pypinyin.pinyin(char, style=pypinyin.Style.NORMAL, heteronym=True)[0]
    # 去聲調後不同聲調會變成相同讀音，保留第一次出現的順序
    return [r for r in dict.fromkeys(readings) if _PLAIN_SYLLABLE.match(r)]


@lru_cache(maxsize=2)
def build_variant_table(traditional: bool) -> Tuple[Tuple[str, str], ...]:
    """
    產生指定版本的完整字典

    Args:
        traditional: True 為繁體版，False 為簡體版

    Returns:
        Tuple[Tuple[str, str], ...]: (音節, 同音字串)，依音節排序，
        同音字串內依碼位排序
    """
    pypinyin = get_pypinyin()
    hanziconv = get_hanziconv()
    pinyin_dict = get_pinyin_dict()
    convert = hanziconv.toTraditional if traditional else hanziconv.toSimplified
    variant = "traditional" if traditional else "simplified"

    grouped: Dict[str, List[str]] = {}
    with TimingContext(f"build_variant_table({variant})", _logger):
        for code_point in sorted(pinyin_dict):
            if not CJK_START <= code_point <= CJK_END:
                continue
            char = chr(code_point)
            if convert(char) != char:
                continue
            for reading in _toneless_readings(pypinyin, char):
                grouped.setdefault(reading, []).append(char)

    _logger.debug(f"{variant} 字典共 {len(grouped)} 個音節")
    return tuple((syllable, "".join(grouped[syllable])) for syllable in sorted(grouped))
