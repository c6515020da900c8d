"""
雙拼方案表

每個方案把「一個輸出鍵」對應到它所代表的全拼片段集合：
- 捲舌聲母 zh / ch / sh 各佔一個鍵
- 韻母（含單韻母 a / e / i / o / u / v）依方案分配到鍵位

同一片段若出現在兩個鍵上，以方案表中先出現的鍵為準。
「全拼」是不做轉換的哨兵方案，其表為空。
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from fuzzypinyin.errors import UnknownSchemeError


@dataclass(frozen=True)
class DoublePinyinScheme:
    """
    雙拼方案（不可變）

    Attributes:
        id: 方案代號（如 "xiaohe"）
        name: 顯示名稱，同時也是設定中儲存的值（如 "小鹤双拼"）
        layout: 鍵 -> 全拼片段集合
        reverse: 片段 -> 鍵 的反向索引，建構時預先計算
    """

    id: str
    name: str
    layout: Mapping[str, Tuple[str, ...]] = field(default_factory=dict, compare=False)
    reverse: Dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        reverse: Dict[str, str] = {}
        for code, fragments in self.layout.items():
            for fragment in fragments:
                reverse.setdefault(fragment, code)
        object.__setattr__(self, "reverse", reverse)

    @property
    def is_identity(self) -> bool:
        """是否為不轉換的全拼方案"""
        return not self.layout

    def code_for(self, fragment: str) -> Optional[str]:
        """查詢片段對應的鍵，查無時回傳 None"""
        return self.reverse.get(fragment)

    def fragments_of(self, code: str) -> Tuple[str, ...]:
        return tuple(self.layout.get(code, ()))


FULL_PINYIN = DoublePinyinScheme(id="full", name="全拼")

ABC = DoublePinyinScheme(
    id="abc",
    name="智能ABC",
    layout={
        "q": ("ei",),
        "w": ("ian",),
        "e": ("ch", "e"),
        "r": ("iu", "er"),
        "t": ("uang", "iang"),
        "y": ("ing",),
        "u": ("u",),
        "i": ("i",),
        "o": ("o", "uo"),
        "p": ("uan", "van"),
        "a": ("zh", "a"),
        "s": ("ong", "iong"),
        "d": ("ua", "ia"),
        "f": ("en",),
        "g": ("eng",),
        "h": ("ang",),
        "j": ("an",),
        "k": ("ao",),
        "l": ("ai",),
        "z": ("iao",),
        "x": ("ie",),
        "c": ("in", "uai"),
        "v": ("sh", "v"),
        "b": ("ou",),
        "n": ("un", "vn"),
        "m": ("ue", "ui", "ve"),
    },
)

XIAOHE = DoublePinyinScheme(
    id="xiaohe",
    name="小鹤双拼",
    layout={
        "q": ("iu",),
        "w": ("ei",),
        "e": ("e",),
        "r": ("uan", "van"),
        "t": ("ue", "ve"),
        "y": ("un", "vn"),
        "u": ("sh", "u"),
        "i": ("ch", "i"),
        "o": ("uo", "o"),
        "p": ("ie",),
        "a": ("a",),
        "s": ("ong", "iong"),
        "d": ("ai",),
        "f": ("en",),
        "g": ("eng",),
        "h": ("ang",),
        "j": ("an",),
        "k": ("ing", "uai"),
        "l": ("iang", "uang"),
        "z": ("ou",),
        "x": ("ia", "ua"),
        "c": ("ao",),
        "v": ("zh", "ui", "v"),
        "b": ("in",),
        "n": ("iao",),
        "m": ("ian",),
    },
)

MICROSOFT = DoublePinyinScheme(
    id="microsoft",
    name="微软双拼",
    layout={
        "q": ("iu",),
        "w": ("ia", "ua"),
        "e": ("e",),
        "r": ("uan", "van"),
        "t": ("ue",),
        "y": ("uai", "v"),
        "u": ("sh", "u"),
        "i": ("ch", "i"),
        "o": ("uo", "o"),
        "p": ("un", "vn"),
        "a": ("a",),
        "s": ("ong", "iong"),
        "d": ("iang", "uang"),
        "f": ("en",),
        "g": ("eng",),
        "h": ("ang",),
        "j": ("an",),
        "k": ("ao",),
        "l": ("ai",),
        ";": ("ing",),
        "z": ("ei",),
        "x": ("ie",),
        "c": ("iao",),
        "v": ("zh", "ui", "ve"),
        "b": ("ou",),
        "n": ("in",),
        "m": ("ian",),
    },
)

SCHEMES: Dict[str, DoublePinyinScheme] = {
    scheme.id: scheme for scheme in (FULL_PINYIN, ABC, XIAOHE, MICROSOFT)
}

_BY_NAME: Dict[str, DoublePinyinScheme] = {scheme.name: scheme for scheme in SCHEMES.values()}


def scheme_names() -> List[str]:
    """所有方案的顯示名稱（設定下拉選單的選項）"""
    return [scheme.name for scheme in SCHEMES.values()]


def get_scheme(name: str) -> DoublePinyinScheme:
    """
    依顯示名稱或代號取得方案

    Args:
        name: "小鹤双拼" 或 "xiaohe"（代號不分大小寫）

    Raises:
        UnknownSchemeError: 名稱不在已知方案中
    """
    if isinstance(name, DoublePinyinScheme):
        return name
    if name in _BY_NAME:
        return _BY_NAME[name]
    if isinstance(name, str) and name.lower() in SCHEMES:
        return SCHEMES[name.lower()]
    raise UnknownSchemeError(name, known=scheme_names())
