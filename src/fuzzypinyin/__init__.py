"""
fuzzypinyin - 以拼音搜尋筆記庫項目 (Fuzzy Chinese Pinyin)

核心概念：
- 使用者以拉丁字母輸入拼音（全拼或雙拼），搜尋檔案、資料夾、命令、標籤
- 拼音字典在全拼與各家雙拼鍵位之間轉換
- 每個消費者各自持有一個索引，由 IndexRegistry 統一建構、重建與快取

官方入口（穩定 API）：
- `fuzzypinyin.PinyinSearchApp`
- `fuzzypinyin.IndexRegistry`
- `fuzzypinyin.load_pinyin_dict` / `fuzzypinyin.convert`
"""

# =============================================================================
# 應用層（官方入口）
# =============================================================================
from fuzzypinyin.app import PinyinSearchApp
from fuzzypinyin.config import DEFAULT_SETTINGS, PinyinSettings

# =============================================================================
# 字典與雙拼
# =============================================================================
from fuzzypinyin.dictionary import DictionaryTable, PhoneticDictionary, load_pinyin_dict
from fuzzypinyin.double_pinyin import (
    DoublePinyinConverter,
    DoublePinyinScheme,
    convert,
    get_scheme,
    scheme_names,
)

# =============================================================================
# 索引管理
# =============================================================================
from fuzzypinyin.index import (
    PROCESS_INDEX_CACHE,
    IndexCacheStore,
    IndexRegistry,
    InMemoryIndexCache,
    PinyinIndex,
)

# =============================================================================
# 日誌工具與例外
# =============================================================================
from fuzzypinyin.errors import (
    FuzzyPinyinError,
    IndexBuildError,
    InvalidSettingError,
    UnknownSchemeError,
)
from fuzzypinyin.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # App
    "PinyinSearchApp",
    "PinyinSettings",
    "DEFAULT_SETTINGS",
    # Dictionary
    "PhoneticDictionary",
    "DictionaryTable",
    "load_pinyin_dict",
    # Double pinyin
    "DoublePinyinScheme",
    "DoublePinyinConverter",
    "convert",
    "get_scheme",
    "scheme_names",
    # Index
    "IndexRegistry",
    "IndexCacheStore",
    "InMemoryIndexCache",
    "PROCESS_INDEX_CACHE",
    "PinyinIndex",
    # Errors
    "FuzzyPinyinError",
    "IndexBuildError",
    "InvalidSettingError",
    "UnknownSchemeError",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
