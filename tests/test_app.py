"""
測試 PinyinSearchApp 生命週期與設定變更

字典以 conftest 的小型字典取代（patched_dictionary）。
"""

import pytest

from fuzzypinyin import PinyinSearchApp
from fuzzypinyin.errors import InvalidSettingError
from fuzzypinyin.index import InMemoryIndexCache

INDEX_ORDER = ["file", "folder", "command", "tag"]


@pytest.fixture
def make_app(vault, patched_dictionary):
    def _make(**kwargs):
        kwargs.setdefault("cache", InMemoryIndexCache())
        settings = kwargs.pop("settings", None)
        return PinyinSearchApp(vault, settings, **kwargs)

    return _make


class TestLifecycle:
    """測試啟動與卸載"""

    def test_on_load_builds_every_index_in_order(self, make_app):
        app = make_app()
        report = app.on_load()

        assert [r.index_id for r in report.records] == INDEX_ORDER
        assert len(report.builds) == 4
        assert [item.payload for item in app.command_index.items] == [
            "open-search",
            "move-file",
            "execute-command",
        ]

    def test_deferred_until_layout_ready(self, make_app):
        app = make_app()
        assert app.on_load(layout_ready=False) is None
        assert app.file_index.items == []

        report = app.notify_layout_ready()
        assert len(report.builds) == 4
        # 延後的建構只會執行一次
        assert app.notify_layout_ready() is None

    def test_unload_without_dev_mode_clears_old_snapshot(self, make_app):
        cache = InMemoryIndexCache()
        first = make_app(cache=cache, settings={"dev_mode": True})
        first.on_load()
        first.on_unload()
        assert len(cache) == 4

        second = make_app(cache=cache, settings={"dev_mode": True})
        second.on_load()
        second.set_dev_mode(False)

        assert second.on_unload() == []
        assert cache.ids() == []

    def test_unload_before_layout_ready_keeps_unbuilt_items_out(self, make_app):
        cache = InMemoryIndexCache()
        early = make_app(cache=cache, settings={"dev_mode": True})
        early.on_load(layout_ready=False)

        assert early.on_unload() == []
        assert len(cache) == 0

        later = make_app(cache=cache, settings={"dev_mode": True})
        report = later.on_load()

        assert report.cache_hits == []
        assert len(later.file_index.items) == 2

    def test_dev_mode_reuses_snapshot(self, make_app):
        cache = InMemoryIndexCache()
        first = make_app(cache=cache, settings={"dev_mode": True})
        first.on_load()
        before = {h.id: h.items for h in first.registry}

        assert first.on_unload() == INDEX_ORDER

        second = make_app(cache=cache, settings={"dev_mode": True})
        report = second.on_load()

        assert len(report.cache_hits) == 4
        assert report.builds == []
        for handle in second.registry:
            assert handle.items is before[handle.id]

    def test_refresh_index_discards_cache(self, make_app):
        cache = InMemoryIndexCache()
        app = make_app(cache=cache, settings={"dev_mode": True})
        app.on_load()
        app.on_unload()

        report = app.refresh_index()
        assert len(report.builds) == 4
        assert len(cache) == 0

    def test_refresh_before_load(self, make_app):
        with pytest.raises(RuntimeError):
            make_app().refresh_index()


class TestSettingChanges:
    """測試設定變更"""

    def test_double_pinyin_switch_rebuilds_indices(self, make_app):
        app = make_app()
        app.on_load()

        report = app.set_double_pinyin("小鹤双拼")

        assert [r.index_id for r in report.records] == INDEX_ORDER
        assert app.settings.double_pinyin == "小鹤双拼"
        item = next(item for item in app.file_index.items if item.name == "中文")
        assert item.pinyin.syllables == (("vs",), ("wf",))

    def test_double_pinyin_round_trip(self, make_app):
        app = make_app()
        app.on_load()
        original = app.pinyin_dict.original_keys

        app.set_double_pinyin("xiaohe")
        assert app.pinyin_dict.keys != original
        app.set_double_pinyin("全拼")

        assert app.pinyin_dict.keys == original
        assert len(app.pinyin_dict.keys) == len(app.pinyin_dict.values)

    def test_double_pinyin_before_load(self, make_app, patched_dictionary):
        app = make_app()
        assert app.set_double_pinyin("微软双拼") is None
        assert app.pinyin_dict.scheme.id == "microsoft"

    def test_unknown_scheme_rejected(self, make_app):
        app = make_app()
        app.on_load()
        with pytest.raises(InvalidSettingError):
            app.set_double_pinyin("自然码")
        assert app.settings.double_pinyin == "全拼"

    def test_traditional_switch_reloads_dictionary_only(self, make_app, patched_dictionary):
        app = make_app()
        app.on_load()
        items_before = app.file_index.items

        table = app.set_traditional_support(True)

        assert table.variant == "traditional"
        assert patched_dictionary[-1]["traditional"] is True
        # 索引重建由呼叫端負責
        assert app.file_index.items is items_before
        app.reindex()
        assert app.file_index.items is not items_before

    def test_invalid_setting_values(self, make_app):
        app = make_app()
        with pytest.raises(InvalidSettingError):
            app.set_traditional_support("yes")
        with pytest.raises(InvalidSettingError):
            app.set_dev_mode(1)

    def test_stats(self, make_app):
        app = make_app()
        app.on_load()
        app.set_double_pinyin("小鹤双拼")

        stats = app.get_stats()
        assert stats["scheme"] == "小鹤双拼"
        assert stats["syllables"] == 9
        assert stats["conversion_misses"] == 1
        assert stats["indices"]["file"] == 2

    def test_scheme_id_in_settings_reported_as_name(self, make_app):
        app = make_app(settings={"double_pinyin": "xiaohe"})
        app.on_load()
        assert app.get_stats()["scheme"] == "小鹤双拼"
        assert app.pinyin_dict.scheme.id == "xiaohe"
