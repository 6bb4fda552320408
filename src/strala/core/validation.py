"""
どこで: `src/strala/core/validation.py`。
何を: LayerGeometry の数値パラメータが点数 N と整合しているか、LayerStyle が範囲内かを判定する。
なぜ: Layer 更新の採否を呼び出し側が決められるよう、例外ではなく bool で結果を返すため。
"""

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any

from strala.core.dispatch import GeometrySource, resolve_geometry
from strala.core.layer_geometry import COMPLETE, SinglePointGeometry, TwoPointGeometry
from strala.core.layer_style import COLOR_TYPES, MAX_LINE_WIDTH, LayerStyle, is_hex_color

if TYPE_CHECKING:
    from strala.core.layer import Layer


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _in_range(value: Any, lo: int, hi: int) -> bool:
    """整数 value が閉区間 `[lo, hi]` に入るか。"""
    return _is_int(value) and lo <= int(value) <= hi


def _is_max_iterations_valid(value: Any) -> bool:
    if value is None or value == COMPLETE:
        return True
    return _is_int(value) and int(value) >= 0


def is_layer_valid(source: GeometrySource, point_count: int) -> bool:
    """LayerGeometry の範囲検証。

    Parameters
    ----------
    source : LayerGeometry | Layer | Mapping
        検証対象。mapping が解釈できない場合は False。
    point_count : int
        点数 N。

    Returns
    -------
    bool
        single-point: `start ∈ [0, N-1]`, `step ∈ [1, N-1]`。
        two-point: `initial ∈ [0, N-1]`, `offset ∈ [-(N-1), N-1]`, 両ステップ `∈ [1, N-1]`。
    """
    try:
        geometry = resolve_geometry(source)
    except (TypeError, ValueError):
        return False

    n = int(point_count)
    if isinstance(geometry, TwoPointGeometry):
        a = geometry.point_a
        b = geometry.point_b
        return (
            _in_range(a.initial_position, 0, n - 1)
            and _in_range(b.relative_offset, -(n - 1), n - 1)
            and _in_range(a.step_size, 1, n - 1)
            and _in_range(b.step_size, 1, n - 1)
            and _is_max_iterations_valid(geometry.max_iterations)
        )

    assert isinstance(geometry, SinglePointGeometry)
    return _in_range(geometry.start_point, 0, n - 1) and _in_range(
        geometry.step_size, 1, n - 1
    )


def is_style_valid(style: LayerStyle, *, max_line_width: float = MAX_LINE_WIDTH) -> bool:
    """LayerStyle の範囲検証。

    `color_type ∈ {"solid", "gradient"}`、`primary` が hex、`secondary` が None か hex、
    `line_width ∈ (0, max_line_width]`、`alpha ∈ [0, 1]` をすべて満たすとき True。
    """
    if style.color_type not in COLOR_TYPES:
        return False
    if not is_hex_color(style.primary):
        return False
    if style.secondary is not None and not is_hex_color(style.secondary):
        return False
    try:
        line_width = float(style.line_width)
        alpha = float(style.alpha)
    except (TypeError, ValueError):
        return False
    return 0.0 < line_width <= float(max_line_width) and 0.0 <= alpha <= 1.0


def is_valid(layer: "Layer", point_count: int, *, max_line_width: float = MAX_LINE_WIDTH) -> bool:
    """Layer 全体（geometry + style）の検証。"""
    return is_layer_valid(layer.geometry, point_count) and is_style_valid(
        layer.style, max_line_width=max_line_width
    )


__all__ = ["is_layer_valid", "is_style_valid", "is_valid"]
