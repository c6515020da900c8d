"""
拼音索引範例

展示如何建立筆記庫索引、切換雙拼方案，
以及開發模式下沿用快取索引。
"""

import sys
import tempfile
from pathlib import Path

from fuzzypinyin import InMemoryIndexCache, PinyinSearchApp


def make_vault(root: Path) -> Path:
    (root / "中文笔记.md").write_text("#学习 #项目/拼音\n", encoding="utf-8")
    (root / "图片.png").write_bytes(b"")
    (root / "资料").mkdir()
    (root / "资料" / "会议记录.md").write_text("#会议\n", encoding="utf-8")
    return root


def demo_standard_load(vault: Path):
    """一般模式：每次啟動都重建索引"""
    print("=" * 60)
    print("範例 1: 一般模式建立索引")
    print("=" * 60)

    app = PinyinSearchApp(vault, {"show_attachments": True}, verbose=True)
    report = app.on_load()

    for record in report.records:
        print(f"{record.index_id}: {record.item_count} 筆, {record.elapsed:.3f}s")
    for item in app.file_index.items:
        print(f"  {item.name} -> {item.pinyin.primary} ({item.pinyin.initials})")
    print()
    return app


def demo_double_pinyin(app: PinyinSearchApp):
    """切換雙拼方案後，依賴拼音 key 的索引會重建"""
    print("=" * 60)
    print("範例 2: 切換為小鹤双拼")
    print("=" * 60)

    app.set_double_pinyin("小鹤双拼")
    for item in app.file_index.items:
        print(f"  {item.name} -> {item.pinyin.primary}")
    print(f"轉換失敗: {app.converter.miss_count} 次")
    print()


def demo_dev_mode(vault: Path):
    """開發模式：卸載時快照，重新載入時直接沿用"""
    print("=" * 60)
    print("範例 3: 開發模式快取")
    print("=" * 60)

    timing_data = []
    cache = InMemoryIndexCache()

    first = PinyinSearchApp(vault, {"dev_mode": True}, cache=cache)
    first.on_load()
    print(f"卸載時快照: {first.on_unload()}")

    second = PinyinSearchApp(
        vault,
        {"dev_mode": True},
        cache=cache,
        on_timing=lambda op, t: timing_data.append(op),
    )
    report = second.on_load()
    print(f"沿用快取: {[r.index_id for r in report.cache_hits]}")
    print(f"計時紀錄: {timing_data}")
    print(f"快取統計: {cache.get_stats()}")
    print()


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        vault = make_vault(Path(tmp))
        app = demo_standard_load(vault)
        demo_double_pinyin(app)
        demo_dev_mode(vault)
    sys.exit(0)
