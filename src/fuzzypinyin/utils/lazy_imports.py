"""
延遲導入與依賴檢查

pypinyin 與 hanziconv 只在第一次載入拼音字典時才導入，
讓只使用索引管理（IndexRegistry）的程式不必付出導入成本。
"""

import importlib
import importlib.util
from functools import lru_cache
from typing import Any, Dict

from fuzzypinyin.errors import DependencyError

DICTIONARY_INSTALL_HINT = (
    "缺少拼音字典依賴。請執行:\n"
    "  pip install pypinyin hanziconv\n"
    "或安裝完整版本:\n"
    "  pip install \"fuzzypinyin\""
)

_DICTIONARY_MODULES = ("pypinyin", "hanziconv")


def is_dictionary_available() -> bool:
    """pypinyin 與 hanziconv 是否都可導入"""
    return all(importlib.util.find_spec(name) is not None for name in _DICTIONARY_MODULES)


def check_dictionary_dependencies() -> Dict[str, bool]:
    """
    回報各依賴的可用狀態

    Returns:
        Dict[str, bool]: 例如 {"pypinyin": True, "hanziconv": False}
    """
    return {name: importlib.util.find_spec(name) is not None for name in _DICTIONARY_MODULES}


def _import(name: str) -> Any:
    try:
        return importlib.import_module(name)
    except ImportError as e:
        raise DependencyError(DICTIONARY_INSTALL_HINT) from e


@lru_cache(maxsize=None)
def get_pypinyin() -> Any:
    """延遲載入 pypinyin 模組"""
    return _import("pypinyin")


@lru_cache(maxsize=None)
def get_pinyin_dict() -> Dict[int, str]:
    """延遲載入 pypinyin 內建的單字拼音表（碼位 -> 帶聲調讀音）"""
    return _import("pypinyin.pinyin_dict").pinyin_dict


@lru_cache(maxsize=None)
def get_hanziconv() -> Any:
    """延遲載入 HanziConv 類別"""
    return _import("hanziconv").HanziConv
