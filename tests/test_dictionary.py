"""
測試拼音字典載入與 DictionaryTable

驗證：
1. 三個序列永遠等長且位置對齊
2. 全拼方案時 keys 與 original_keys 相同
3. 切換雙拼再切回全拼可以還原
4. 簡體/繁體字典的內容與順序
"""

import pytest

from fuzzypinyin.dictionary import (
    SIMPLIFIED,
    TRADITIONAL,
    DictionaryTable,
    PhoneticDictionary,
    load_pinyin_dict,
)
from fuzzypinyin.double_pinyin import FULL_PINYIN, XIAOHE, DoublePinyinConverter
from fuzzypinyin.errors import InvalidSettingError
from fuzzypinyin.utils.lazy_imports import is_dictionary_available


def assert_aligned(table):
    assert len(table.original_keys) == len(table.keys) == len(table.values)


class TestDictionaryTable:
    """測試 DictionaryTable（不依賴 pypinyin）"""

    def test_full_pinyin_keys_are_original_keys(self, sample_table):
        assert sample_table.keys == sample_table.original_keys
        assert sample_table.scheme is FULL_PINYIN
        assert_aligned(sample_table)

    def test_misaligned_sequences_rejected(self):
        with pytest.raises(ValueError, match="長度不一致"):
            DictionaryTable(("a", "b"), ("a",), ("阿", "波"))

    def test_with_scheme_regenerates_keys(self, sample_table):
        double = sample_table.with_scheme(XIAOHE)

        assert_aligned(double)
        assert double.original_keys == sample_table.original_keys
        assert double.values == sample_table.values
        assert double.keys[double.original_keys.index("zhong")] == "vs"
        assert double.keys[double.original_keys.index("zhang")] == "vh"
        # 原表不受影響
        assert sample_table.keys == sample_table.original_keys

    def test_round_trip_back_to_full(self, sample_table):
        restored = sample_table.with_scheme("小鹤双拼").with_scheme("全拼")
        assert restored.keys == sample_table.original_keys

    def test_converter_collects_misses(self, sample_table):
        converter = DoublePinyinConverter(XIAOHE)
        sample_table.with_scheme(XIAOHE, converter=converter)
        # "ang" -> 韻母 "ng" 查無
        assert converter.misses == {"ng": 1}

    def test_readings_of(self, sample_table):
        assert sample_table.readings_of("长") == ["chang", "zhang"]
        assert sample_table.original_readings_of("中") == ["zhong"]
        assert sample_table.readings_of("A") == []

    def test_readings_follow_scheme(self, sample_table):
        double = sample_table.with_scheme(XIAOHE)
        assert double.readings_of("长") == ["ih", "vh"]
        assert double.original_readings_of("长") == ["chang", "zhang"]

    def test_contains_and_iter(self, sample_table):
        assert "中" in sample_table
        assert "X" not in sample_table
        assert ("zhong", "中钟") in list(sample_table)
        assert len(sample_table) == 9


@pytest.mark.skipif(not is_dictionary_available(), reason="需要 pypinyin 與 hanziconv")
class TestLoadPinyinDict:
    """測試完整字典載入（需要 pypinyin 與 hanziconv）"""

    def test_simplified_alignment(self):
        table = load_pinyin_dict(traditional=False)
        assert_aligned(table)
        assert table.variant == SIMPLIFIED
        assert len(table) > 300

    def test_simplified_full_pinyin_keys_equal_original(self):
        table = load_pinyin_dict(traditional=False, scheme="全拼")
        assert table.keys == table.original_keys

    def test_known_characters(self):
        table = load_pinyin_dict(traditional=False)
        zhong = table.original_keys.index("zhong")
        assert "中" in table.values[zhong]
        assert "zhong" in table.original_readings_of("中")

    def test_keys_are_sorted_plain_syllables(self):
        table = load_pinyin_dict(traditional=False)
        assert list(table.original_keys) == sorted(table.original_keys)
        assert all(key.isascii() and key.isalpha() and key.islower() for key in table.original_keys)

    def test_heteronyms_are_included(self):
        table = load_pinyin_dict(traditional=False)
        readings = table.original_readings_of("长")
        assert "chang" in readings
        assert "zhang" in readings

    def test_simplified_vs_traditional(self):
        simplified = load_pinyin_dict(traditional=False)
        traditional = load_pinyin_dict(traditional=True)

        assert traditional.variant == TRADITIONAL
        assert "国" in simplified
        assert "國" not in simplified
        assert "國" in traditional
        assert "国" not in traditional
        # 兩岸共用字兩邊都有
        assert "中" in simplified and "中" in traditional

    def test_deterministic(self):
        first = PhoneticDictionary.load(SIMPLIFIED)
        second = PhoneticDictionary.load(SIMPLIFIED)
        assert first.entries == second.entries

    def test_double_pinyin_load(self):
        table = load_pinyin_dict(traditional=False, scheme=XIAOHE)
        assert_aligned(table)
        assert table.keys[table.original_keys.index("zhong")] == "vs"
        assert table.with_scheme(FULL_PINYIN).keys == table.original_keys

    def test_invalid_variant(self):
        with pytest.raises(InvalidSettingError):
            PhoneticDictionary.load("cantonese")
