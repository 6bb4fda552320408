"""
どこで: `src/strala/core/layer.py`。
何を: 名前・表示状態・接続規則・見た目をまとめた Layer と、その更新/複製/命名ヘルパを定義する。
なぜ: Layer 管理側が「更新候補を作る → 検証 → 採用/破棄」を純関数の組み合わせで書けるようにするため。

概要
----
- Layer は不変。更新は常に新しい Layer を返す。
- `update_layer()` は connection type の切り替えも扱う:
  - single → two: 点 A は開始点のみ引き継いでステップ幅 1、点 B は既定値（A+1, step 2）。
  - two → single: 点 A の値を開始点/ステップ幅として引き継ぐ。
- `apply_layer_update()` は検証に失敗した更新や解釈できない変更を破棄し、元の Layer を返す（例外にしない）。
"""

from __future__ import annotations

import dataclasses
import logging
import re
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from strala.core.layer_geometry import (
    CONNECTION_SINGLE_POINT,
    CONNECTION_TWO_POINT,
    DEFAULT_POINT_A_STEP,
    DEFAULT_POINT_B_OFFSET,
    DEFAULT_POINT_B_STEP,
    LayerGeometry,
    PointA,
    PointB,
    SinglePointGeometry,
    TwoPointGeometry,
    convert_two_to_single_point,
)
from strala.core.layer_style import MAX_LINE_WIDTH, LayerStyle
from strala.core.validation import is_valid

logger = logging.getLogger(__name__)

_LAYER_NAME_RE = re.compile(r"^Layer (\d+)$")

_GEOMETRY_KEYS = frozenset(
    {"connection_type", "start_point", "step_size", "point_a", "point_b", "max_iterations"}
)
_STYLE_KEYS = frozenset({f.name for f in dataclasses.fields(LayerStyle)})
_LAYER_KEYS = frozenset({"name", "visible"})


def generate_layer_id() -> str:
    """衝突しにくい Layer ID を返す。"""
    return f"layer-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True, slots=True)
class Layer:
    """1 枚の Layer。

    Attributes
    ----------
    id : str
        安定 ID。
    name : str
        表示名。
    visible : bool
        False の Layer は描画対象から外す。
    geometry : LayerGeometry
        接続規則。
    style : LayerStyle
        線色・不透明度・線幅。
    """

    geometry: LayerGeometry
    style: LayerStyle = field(default_factory=LayerStyle)
    name: str = "Layer 1"
    visible: bool = True
    id: str = field(default_factory=generate_layer_id)

    @property
    def connection_type(self) -> str:
        return self.geometry.connection_type


def generate_layer_name(existing: Iterable[Layer]) -> str:
    """既存 Layer の `"Layer N"` 形式の名前から次の番号の名前を返す。"""
    numbers = [
        int(m.group(1))
        for m in (_LAYER_NAME_RE.match(layer.name) for layer in existing)
        if m is not None and int(m.group(1)) > 0
    ]
    return f"Layer {max(numbers) + 1 if numbers else 1}"


def duplicate_layer(layer: Layer) -> Layer:
    """新しい ID と `" Copy"` 付きの名前で Layer を複製する。"""
    return dataclasses.replace(layer, id=generate_layer_id(), name=f"{layer.name} Copy")


def _merge_point(base: Any, value: Any, cls: type) -> Any:
    if value is None:
        return base
    if isinstance(value, cls):
        return value
    if isinstance(value, Mapping):
        return dataclasses.replace(base, **dict(value))
    raise TypeError(f"{cls.__name__} または mapping を指定してください: {type(value)!r}")


def _updated_geometry(geometry: LayerGeometry, changes: Mapping[str, Any]) -> LayerGeometry:
    target = changes.get("connection_type", geometry.connection_type)

    if target == CONNECTION_TWO_POINT:
        if isinstance(geometry, TwoPointGeometry):
            base = geometry
        else:
            base = TwoPointGeometry(
                point_a=PointA(geometry.start_point, DEFAULT_POINT_A_STEP),
                point_b=PointB(DEFAULT_POINT_B_OFFSET, DEFAULT_POINT_B_STEP),
            )
        return TwoPointGeometry(
            point_a=_merge_point(base.point_a, changes.get("point_a"), PointA),
            point_b=_merge_point(base.point_b, changes.get("point_b"), PointB),
            max_iterations=changes.get("max_iterations", base.max_iterations),
        )

    if target != CONNECTION_SINGLE_POINT:
        raise ValueError(f"未知の connection_type です: {target!r}")

    single = (
        geometry
        if isinstance(geometry, SinglePointGeometry)
        else convert_two_to_single_point(geometry)
    )
    return SinglePointGeometry(
        start_point=changes.get("start_point", single.start_point),
        step_size=changes.get("step_size", single.step_size),
    )


def update_layer(layer: Layer, **changes: Any) -> Layer:
    """変更を適用した新しい Layer を返す（検証はしない）。

    Parameters
    ----------
    layer : Layer
        元の Layer。
    **changes
        `name`, `visible`,
        `connection_type`, `start_point`, `step_size`, `point_a`, `point_b`, `max_iterations`,
        `color_type`, `primary`, `secondary`, `alpha`, `line_width`。
        `point_a`/`point_b` は dataclass か、部分更新用の mapping を受け付ける。

    Raises
    ------
    TypeError
        未知のキーを含む場合。
    """
    unknown = set(changes) - _GEOMETRY_KEYS - _STYLE_KEYS - _LAYER_KEYS
    if unknown:
        raise TypeError(f"update_layer に未知のキーがあります: {sorted(unknown)!r}")

    geometry = layer.geometry
    if _GEOMETRY_KEYS & set(changes):
        geometry = _updated_geometry(geometry, changes)

    style_changes = {k: v for k, v in changes.items() if k in _STYLE_KEYS}
    style = dataclasses.replace(layer.style, **style_changes) if style_changes else layer.style

    return dataclasses.replace(
        layer,
        geometry=geometry,
        style=style,
        name=changes.get("name", layer.name),
        visible=changes.get("visible", layer.visible),
    )


def apply_layer_update(
    layer: Layer,
    point_count: int,
    *,
    max_line_width: float = MAX_LINE_WIDTH,
    **changes: Any,
) -> Layer:
    """更新候補を検証し、妥当なら採用、そうでなければ元の Layer を返す。

    未知のキーや未知の connection_type など、候補自体を組み立てられない変更も破棄する。
    """
    try:
        candidate = update_layer(layer, **changes)
    except (TypeError, ValueError) as exc:
        logger.warning(
            "解釈できない Layer 更新を破棄しました (id=%s, changes=%r): %s",
            layer.id,
            changes,
            exc,
        )
        return layer
    if is_valid(candidate, point_count, max_line_width=max_line_width):
        return candidate
    logger.warning(
        "Layer 更新を破棄しました (id=%s, point_count=%d, changes=%r)",
        layer.id,
        int(point_count),
        changes,
    )
    return layer


def default_layers() -> list[Layer]:
    """初期表示用の Layer セット（Radiance / Harmony / Mystique）を返す。"""
    return [
        Layer(
            id="layer-1",
            name="Radiance",
            geometry=SinglePointGeometry(start_point=3, step_size=13),
            style=LayerStyle(
                color_type="gradient", primary="#3b82f6", secondary="#06b6d4", alpha=0.8
            ),
        ),
        Layer(
            id="layer-2",
            name="Harmony",
            geometry=TwoPointGeometry(
                point_a=PointA(initial_position=14, step_size=1),
                point_b=PointB(relative_offset=22, step_size=2),
                max_iterations=84,
            ),
            style=LayerStyle(
                color_type="gradient", primary="#f59e0b", secondary="#ef4444", alpha=0.7
            ),
        ),
        Layer(
            id="layer-3",
            name="Mystique",
            geometry=SinglePointGeometry(start_point=7, step_size=17),
            style=LayerStyle(
                color_type="gradient", primary="#8b5cf6", secondary="#ec4899", alpha=0.6
            ),
        ),
    ]


__all__ = [
    "Layer",
    "apply_layer_update",
    "default_layers",
    "duplicate_layer",
    "generate_layer_id",
    "generate_layer_name",
    "update_layer",
]
