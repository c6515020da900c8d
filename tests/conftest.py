"""
共用 fixtures

小型字典表讓索引/應用層測試不必載入完整的 pypinyin 字典。
"""

import pytest

from fuzzypinyin.dictionary import DictionaryTable
from fuzzypinyin.double_pinyin import FULL_PINYIN

SAMPLE_ENTRIES = (
    ("a", "阿啊"),
    ("ang", "昂"),
    ("chang", "长常"),
    ("hao", "好号"),
    ("ni", "你"),
    ("shi", "是十"),
    ("wen", "文闻"),
    ("zhang", "长张"),
    ("zhong", "中钟"),
)


def make_sample_table(traditional=False, scheme=FULL_PINYIN, converter=None):
    return DictionaryTable.from_entries(
        SAMPLE_ENTRIES,
        variant="traditional" if traditional else "simplified",
        scheme=scheme,
        converter=converter,
    )


@pytest.fixture
def sample_table():
    return make_sample_table()


@pytest.fixture
def table_factory():
    return make_sample_table


@pytest.fixture
def vault(tmp_path):
    """
    測試用筆記庫

    vault/
        中文.md          (#标签 #项目/子项)
        图片.png
        data.csv
        文件夹/子笔记.md  (#标签)
        .obsidian/config.json
    """
    (tmp_path / "中文.md").write_text("# 标题\n#标签 正文 #项目/子项 http://a#b\n", encoding="utf-8")
    (tmp_path / "图片.png").write_bytes(b"\x89PNG")
    (tmp_path / "data.csv").write_text("a,b\n", encoding="utf-8")
    (tmp_path / "文件夹").mkdir()
    (tmp_path / "文件夹" / "子笔记.md").write_text("#标签\n", encoding="utf-8")
    (tmp_path / ".obsidian").mkdir()
    (tmp_path / ".obsidian" / "config.json").write_text("{}", encoding="utf-8")
    return tmp_path


@pytest.fixture
def patched_dictionary(monkeypatch):
    """以小型字典取代 PinyinSearchApp 的完整字典載入"""
    calls = []

    def _fake_load(traditional=False, scheme=FULL_PINYIN, converter=None):
        calls.append({"traditional": traditional, "scheme": scheme})
        return make_sample_table(traditional=traditional, scheme=scheme, converter=converter)

    monkeypatch.setattr("fuzzypinyin.app.load_pinyin_dict", _fake_load)
    return calls
