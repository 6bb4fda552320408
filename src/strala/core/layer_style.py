"""
どこで: `src/strala/core/layer_style.py`。
何を: Layer ごとの線色・不透明度・線幅（LayerStyle）と、色表現の変換ヘルパを定義する。
なぜ: 描画側は `rgb01`（0..1 float）を扱い、Layer 管理側は hex 文字列で色を保持するため。

I/O と型
--------
- Layer 管理側: `primary`/`secondary` は `#rrggbb` 形式の hex 文字列。
- 描画側: `hex_to_rgb01()` で `(r, g, b)` の 0..1 float に変換して受け取る。
- `color_type == "gradient"` の場合のみ `secondary` を使う。補間そのものは描画側の責務。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

ColorType = Literal["solid", "gradient"]

RGB01 = tuple[float, float, float]
RGB255 = tuple[int, int, int]

# 線幅の上限（下限は 0 を含まない）。
MAX_LINE_WIDTH = 10.0

COLOR_TYPES: frozenset[str] = frozenset({"solid", "gradient"})

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


@dataclass(frozen=True, slots=True)
class LayerStyle:
    """Layer の見た目。

    Attributes
    ----------
    color_type : {"solid", "gradient"}
        単色かグラデーションか。
    primary : str
        主色（hex）。
    secondary : str | None
        グラデーション終端色（hex）。solid では無視する。
    alpha : float
        不透明度 `[0, 1]`。
    line_width : float
        線幅 `(0, 10]`。
    """

    color_type: ColorType = "solid"
    primary: str = "#ffffff"
    secondary: str | None = None
    alpha: float = 1.0
    line_width: float = 1.0


def is_hex_color(value: object) -> bool:
    """`#rrggbb`（`#` 省略可）形式の文字列か。"""
    return isinstance(value, str) and _HEX_RE.match(value.strip()) is not None


def hex_to_rgb255(value: str) -> RGB255:
    """`#rrggbb`（`#` 省略可）を 0..255 の RGB タプルへ変換する。"""
    match = _HEX_RE.match(str(value).strip())
    if match is None:
        raise ValueError(f"hex カラーは #rrggbb 形式である必要がある: got={value!r}")
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def rgb255_to_rgb01(rgb: RGB255) -> RGB01:
    r, g, b = rgb
    return r / 255.0, g / 255.0, b / 255.0


def rgb01_to_rgb255(rgb: RGB01) -> RGB255:
    """0..1 の RGB を 0..255 へ丸める（範囲外はクランプ）。"""
    return tuple(int(round(min(max(float(c), 0.0), 1.0) * 255.0)) for c in rgb)  # type: ignore[return-value]


def hex_to_rgb01(value: str) -> RGB01:
    return rgb255_to_rgb01(hex_to_rgb255(value))


def rgb01_to_hex(rgb: RGB01) -> str:
    r, g, b = rgb01_to_rgb255(rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def resolve_colors(style: LayerStyle) -> tuple[RGB01, RGB01 | None]:
    """描画に渡す `(primary_rgb01, secondary_rgb01)` を返す。

    solid、または secondary 未指定の gradient では secondary は None。
    """
    primary = hex_to_rgb01(style.primary)
    if style.color_type == "gradient" and style.secondary is not None:
        return primary, hex_to_rgb01(style.secondary)
    return primary, None


__all__ = [
    "COLOR_TYPES",
    "ColorType",
    "LayerStyle",
    "MAX_LINE_WIDTH",
    "RGB01",
    "RGB255",
    "hex_to_rgb01",
    "hex_to_rgb255",
    "is_hex_color",
    "resolve_colors",
    "rgb01_to_hex",
    "rgb01_to_rgb255",
    "rgb255_to_rgb01",
]
