"""
設定模組

提供外掛層級的設定類別，以及控制日誌輸出的 configure_logging。
設定值在這裡就被驗證，核心（字典、轉換器、索引管理器）假設輸入合法。

使用方式:
    from fuzzypinyin.config import PinyinSettings

    settings = PinyinSettings.from_dict(stored_data)
    settings.double_pinyin = "小鹤双拼"
    settings.validate()

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("fuzzypinyin").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from .double_pinyin import FULL_PINYIN, get_scheme, scheme_names
from .errors import InvalidSettingError, UnknownSchemeError
from .utils.logger import get_logger, setup_logger

logger = get_logger("config")

DEFAULT_ATTACHMENT_EXTENSIONS = [
    "bmp",
    "png",
    "jpg",
    "jpeg",
    "gif",
    "svg",
    "webp",
    "mp3",
    "wav",
    "m4a",
    "3gp",
    "flac",
    "ogg",
    "oga",
    "opus",
    "mp4",
    "webm",
    "ogv",
    "mov",
    "mkv",
    "pdf",
]

_BOOLEAN_FIELDS = (
    "traditional_chinese_support",
    "show_all_file_types",
    "show_attachments",
    "use_path_to_search",
    "use_file_editor_suggest",
    "use_tag_editor_suggest",
    "show_path",
    "show_tags",
    "close_with_backspace",
    "dev_mode",
)


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    else:
        # 不主動設定，讓使用者可以透過標準 logging 控制
        pass


@dataclass
class PinyinSettings:
    """
    外掛設定

    屬性:
        traditional_chinese_support: 使用繁體字典（False 為簡體）
        show_all_file_types: 檔案搜尋顯示所有類型檔案
        show_attachments: 檔案搜尋顯示附件
        attachment_extensions: 附件副檔名白名單（不含點、小寫）
        use_path_to_search: 結果太少時改以路徑搜尋
        use_file_editor_suggest: 輸入 [[ 時提供拼音檔案建議
        use_tag_editor_suggest: 輸入 # 時提供拼音標籤建議
        show_path: 結果顯示路徑
        show_tags: 結果顯示標籤
        double_pinyin: 雙拼方案名稱，"全拼" 表示不轉換
        close_with_backspace: 輸入框為空時按 Backspace 關閉搜尋
        dev_mode: 開發模式，卸載時把索引存到行程快取，重新載入時沿用
    """

    traditional_chinese_support: bool = False
    show_all_file_types: bool = False
    show_attachments: bool = False
    attachment_extensions: List[str] = field(
        default_factory=lambda: list(DEFAULT_ATTACHMENT_EXTENSIONS)
    )
    use_path_to_search: bool = False
    use_file_editor_suggest: bool = False
    use_tag_editor_suggest: bool = False
    show_path: bool = True
    show_tags: bool = False
    double_pinyin: str = FULL_PINYIN.name
    close_with_backspace: bool = False
    dev_mode: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "PinyinSettings":
        """
        以預設值為底，合併已儲存的設定

        未知欄位會被忽略（舊版設定檔可能留有已移除的欄位）。

        Raises:
            InvalidSettingError: 欄位值不合法
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in (data or {}).items():
            if key in known:
                values[key] = value
            else:
                logger.debug(f"忽略未知設定欄位: {key}")
        settings = cls(**values)
        settings.validate()
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> "PinyinSettings":
        """檢查設定值，失敗時拋出例外；通過則回傳自己"""
        for name in _BOOLEAN_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidSettingError(name, value, "必須是布林值")

        try:
            scheme = get_scheme(self.double_pinyin)
        except UnknownSchemeError as e:
            raise InvalidSettingError(
                "double_pinyin", self.double_pinyin, f"可用方案: {', '.join(scheme_names())}"
            ) from e
        # 方案 id（如 "xiaohe"）一律存成顯示名稱
        self.double_pinyin = scheme.name

        if not isinstance(self.attachment_extensions, (list, tuple)) or not all(
            isinstance(ext, str) for ext in self.attachment_extensions
        ):
            raise InvalidSettingError(
                "attachment_extensions", self.attachment_extensions, "必須是字串列表"
            )
        return self

    def set_attachment_extensions(self, text: str) -> None:
        """由設定頁的多行文字更新附件副檔名（每行一個）"""
        self.attachment_extensions = [
            line.strip().lstrip(".").lower() for line in text.strip().split("\n") if line.strip()
        ]


DEFAULT_SETTINGS = PinyinSettings()
