"""
內建索引消費者

- FileIndex: 筆記庫中的檔案（依設定決定是否含附件/所有類型）
- FolderIndex: 筆記庫中的資料夾
- CommandIndex: 宿主程式提供的命令
- TagIndex: 筆記中出現的 #標籤

以 "." 開頭的檔案或資料夾（如 .obsidian、.trash）一律略過。
"""

import os
import re
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Tuple

from fuzzypinyin.config import PinyinSettings

from .base import PinyinIndex, TableProvider

NOTE_EXTENSIONS = ("md",)

# 標籤結尾的中英文標點不屬於標籤
_TAG_TERMINATORS = r"\s#,.;:!?()\[\]{}<>\"'，。、；：！？（）【】《》「」『』“”‘’…"

# 前面不能緊接非空白字元，避免把網址片段 (a#b) 當成標籤
_TAG_PATTERN = re.compile(rf"(?<!\S)#([^{_TAG_TERMINATORS}]+)")

SettingsProvider = Callable[[], PinyinSettings]
CommandSource = Callable[[], Iterable[Tuple[str, str]]]


def _walk(root: Path) -> Iterator[Path]:
    """由上而下列舉資料夾與檔案，隱藏資料夾整個不進入"""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if not name.startswith("."))
        current = Path(dirpath)
        for name in dirnames:
            yield current / name
        for name in sorted(filenames):
            if not name.startswith("."):
                yield current / name


class FileIndex(PinyinIndex):
    """
    檔案索引

    筆記顯示檔名（不含 .md），其他檔案顯示完整檔名；payload 為相對路徑。
    """

    id = "file"

    def __init__(self, table_provider: TableProvider, vault_root, settings_provider: SettingsProvider):
        super().__init__(table_provider)
        self.vault_root = Path(vault_root)
        self._settings_provider = settings_provider

    def accepts(self, path: Path) -> bool:
        settings = self._settings_provider()
        extension = path.suffix.lstrip(".").lower()
        if extension in NOTE_EXTENSIONS or settings.show_all_file_types:
            return True
        return settings.show_attachments and extension in {
            ext.lower() for ext in settings.attachment_extensions
        }

    def iter_sources(self) -> Iterable[Tuple[str, Any]]:
        for path in _walk(self.vault_root):
            if not path.is_file() or not self.accepts(path):
                continue
            name = path.stem if path.suffix.lower() == ".md" else path.name
            yield name, path.relative_to(self.vault_root).as_posix()


class FolderIndex(PinyinIndex):
    """資料夾索引，名稱為相對路徑，根目錄為 "/" """

    id = "folder"

    def __init__(self, table_provider: TableProvider, vault_root):
        super().__init__(table_provider)
        self.vault_root = Path(vault_root)

    def iter_sources(self) -> Iterable[Tuple[str, Any]]:
        yield "/", "/"
        for path in _walk(self.vault_root):
            if path.is_dir():
                relative = path.relative_to(self.vault_root).as_posix()
                yield relative, relative


class CommandIndex(PinyinIndex):
    """命令索引，來源為 (command_id, 顯示名稱) 列表"""

    id = "command"

    def __init__(self, table_provider: TableProvider, command_source: CommandSource):
        super().__init__(table_provider)
        self._command_source = command_source

    def iter_sources(self) -> Iterable[Tuple[str, Any]]:
        for command_id, name in self._command_source():
            yield name, command_id


class TagIndex(PinyinIndex):
    """標籤索引，掃描所有筆記中的 #標籤（去重、排序），payload 為出現次數"""

    id = "tag"

    def __init__(self, table_provider: TableProvider, vault_root):
        super().__init__(table_provider)
        self.vault_root = Path(vault_root)

    def collect_tags(self) -> List[Tuple[str, int]]:
        counts = {}
        for path in _walk(self.vault_root):
            if not path.is_file() or path.suffix.lstrip(".").lower() not in NOTE_EXTENSIONS:
                continue
            text = path.read_text(encoding="utf-8", errors="replace")
            for tag in _TAG_PATTERN.findall(text):
                counts[tag] = counts.get(tag, 0) + 1
        return sorted(counts.items())

    def iter_sources(self) -> Iterable[Tuple[str, Any]]:
        return self.collect_tags()
