"""
雙拼模組

把全拼音節壓縮成兩個字母的雙拼編碼，支援多種廠商鍵位。
"""

from .converter import (
    RETROFLEX_INITIALS,
    DoublePinyinConverter,
    convert,
    convert_all,
    split_syllable,
)
from .schemes import (
    ABC,
    FULL_PINYIN,
    MICROSOFT,
    SCHEMES,
    XIAOHE,
    DoublePinyinScheme,
    get_scheme,
    scheme_names,
)

__all__ = [
    "DoublePinyinScheme",
    "DoublePinyinConverter",
    "convert",
    "convert_all",
    "split_syllable",
    "get_scheme",
    "scheme_names",
    "RETROFLEX_INITIALS",
    "SCHEMES",
    "FULL_PINYIN",
    "ABC",
    "XIAOHE",
    "MICROSOFT",
]
