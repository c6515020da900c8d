"""
測試設定與日誌工具
"""

import logging

import pytest

from fuzzypinyin.config import DEFAULT_ATTACHMENT_EXTENSIONS, PinyinSettings
from fuzzypinyin.errors import InvalidSettingError
from fuzzypinyin.utils.lazy_imports import check_dictionary_dependencies
from fuzzypinyin.utils.logger import TimingContext, get_logger, log_timing, setup_logger


class TestPinyinSettings:
    """測試設定載入與驗證"""

    def test_defaults(self):
        settings = PinyinSettings()
        assert settings.double_pinyin == "全拼"
        assert settings.traditional_chinese_support is False
        assert settings.show_path is True
        assert settings.dev_mode is False

    def test_default_extensions_are_independent_copies(self):
        first = PinyinSettings()
        second = PinyinSettings()
        first.attachment_extensions.append("xyz")
        assert "xyz" not in second.attachment_extensions
        assert "xyz" not in DEFAULT_ATTACHMENT_EXTENSIONS

    def test_from_dict_merges_over_defaults(self):
        settings = PinyinSettings.from_dict({"double_pinyin": "小鹤双拼", "dev_mode": True})
        assert settings.double_pinyin == "小鹤双拼"
        assert settings.dev_mode is True
        assert settings.show_path is True

    def test_from_dict_ignores_unknown_keys(self):
        settings = PinyinSettings.from_dict({"removedOption": 1, "show_tags": True})
        assert settings.show_tags is True
        assert "removedOption" not in settings.to_dict()

    def test_from_none(self):
        assert PinyinSettings.from_dict(None) == PinyinSettings()

    def test_to_dict_round_trip(self):
        settings = PinyinSettings(show_attachments=True, double_pinyin="微软双拼")
        assert PinyinSettings.from_dict(settings.to_dict()) == settings

    def test_unknown_scheme(self):
        with pytest.raises(InvalidSettingError) as exc_info:
            PinyinSettings.from_dict({"double_pinyin": "自然码"})
        assert exc_info.value.field == "double_pinyin"

    def test_non_boolean_flag(self):
        with pytest.raises(InvalidSettingError):
            PinyinSettings.from_dict({"dev_mode": "true"})

    def test_extensions_must_be_list(self):
        with pytest.raises(InvalidSettingError):
            PinyinSettings(attachment_extensions="png").validate()

    @pytest.mark.parametrize("value", [None, 3, {"png": True}])
    def test_extensions_of_wrong_type(self, value):
        with pytest.raises(InvalidSettingError) as exc_info:
            PinyinSettings(attachment_extensions=value).validate()
        assert exc_info.value.field == "attachment_extensions"

    def test_scheme_id_is_stored_as_name(self):
        settings = PinyinSettings.from_dict({"double_pinyin": "xiaohe"})
        assert settings.double_pinyin == "小鹤双拼"
        assert settings.to_dict()["double_pinyin"] == "小鹤双拼"

    def test_set_attachment_extensions(self):
        settings = PinyinSettings()
        settings.set_attachment_extensions("png\n .JPG \n\n.pdf\n")
        assert settings.attachment_extensions == ["png", "jpg", "pdf"]


class TestLogger:
    """測試日誌工具"""

    def test_namespace(self):
        assert get_logger("index.registry").name == "fuzzypinyin.index.registry"
        assert get_logger("fuzzypinyin.app").name == "fuzzypinyin.app"
        assert get_logger().name == "fuzzypinyin"

    def test_setup_logger_installs_once(self):
        root = logging.getLogger("fuzzypinyin")
        before = list(root.handlers)
        try:
            setup_logger(level=logging.DEBUG)
            setup_logger(level=logging.DEBUG)
            added = [h for h in root.handlers if h not in before]
            assert len(added) <= 1
        finally:
            for handler in list(root.handlers):
                if handler not in before:
                    root.removeHandler(handler)
            root.setLevel(logging.NOTSET)

    def test_timing_context_callback(self):
        calls = []
        with TimingContext("work", callback=lambda op, t: calls.append((op, t))) as timer:
            pass
        assert calls == [("work", timer.elapsed)]
        assert timer.elapsed >= 0

    def test_timing_context_does_not_swallow(self):
        calls = []
        with pytest.raises(ValueError):
            with TimingContext("boom", callback=lambda op, t: calls.append(op)):
                raise ValueError("x")
        assert calls == ["boom"]


class TestLazyImports:
    """測試依賴檢查"""

    def test_dependency_report(self):
        status = check_dictionary_dependencies()
        assert set(status) == {"pypinyin", "hanziconv"}
        assert all(isinstance(v, bool) for v in status.values())

    def test_log_timing_decorator(self, caplog):
        caplog.set_level(logging.DEBUG, logger="fuzzypinyin")

        @log_timing("sample_op")
        def work():
            return 42

        assert work() == 42
        assert any("[Timing] sample_op" in r.getMessage() for r in caplog.records)
