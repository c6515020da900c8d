"""
拼音字典模組

提供簡體/繁體兩個內嵌字典，以及索引建構用的 DictionaryTable。

安裝字典支援:
    pip install pypinyin hanziconv
"""

from .loader import PhoneticDictionary, load_pinyin_dict
from .table import SIMPLIFIED, TRADITIONAL, VARIANTS, DictionaryTable
from .tables import build_variant_table

__all__ = [
    "PhoneticDictionary",
    "DictionaryTable",
    "load_pinyin_dict",
    "build_variant_table",
    "SIMPLIFIED",
    "TRADITIONAL",
    "VARIANTS",
]
