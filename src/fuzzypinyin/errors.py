"""
例外類別

設定值在進入核心之前就要被擋下（UnknownSchemeError / InvalidSettingError），
核心本身假設輸入已驗證。索引建構失敗以 IndexBuildError 往上拋，
並保留原始例外作為 __cause__。
"""

from typing import Optional


class FuzzyPinyinError(Exception):
    """所有 fuzzypinyin 例外的基類"""


class UnknownSchemeError(FuzzyPinyinError, KeyError):
    """雙拼方案名稱不在已知清單中"""

    def __init__(self, name: str, known: Optional[list] = None):
        self.name = name
        self.known = list(known or [])
        super().__init__(name)

    def __str__(self) -> str:
        if self.known:
            return f"未知的雙拼方案 {self.name!r}，可用方案: {', '.join(self.known)}"
        return f"未知的雙拼方案 {self.name!r}"


class InvalidSettingError(FuzzyPinyinError, ValueError):
    """設定值不合法"""

    def __init__(self, field: str, value: object, reason: str = ""):
        self.field = field
        self.value = value
        message = f"設定 {field}={value!r} 不合法"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class IndexBuildError(FuzzyPinyinError, RuntimeError):
    """某個索引在 init_index() 期間失敗"""

    def __init__(self, index_id: str, message: str = ""):
        self.index_id = index_id
        super().__init__(message or f"索引 {index_id!r} 建構失敗")


class DependencyError(FuzzyPinyinError, ImportError):
    """缺少選用依賴（pypinyin / hanziconv）"""
