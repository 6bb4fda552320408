"""
どこで: `src/strala/core/pipeline.py`。
何を: Layer 列とキャンバス設定から、描画/出力に使える “最終形”（realize 済み Layer 列）を返す。
なぜ: 点列生成 → 接続生成 → 配列化 → スタイル解決の流れを 1 か所にまとめ、描画側を単純にするため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from strala.core.dispatch import connections_for_layer
from strala.core.layer import Layer
from strala.core.layer_style import MAX_LINE_WIDTH, RGB01, resolve_colors
from strala.core.realized_geometry import RealizedGeometry, realize_connections
from strala.core.ring import generate_ring
from strala.core.runtime_config import CanvasConfig
from strala.core.validation import is_valid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RealizedLayer:
    """描画/出力のために realize 済みにした Layer 表現。"""

    layer: Layer
    realized: RealizedGeometry
    color: RGB01
    secondary_color: RGB01 | None
    alpha: float
    thickness: float


def realize_layers(
    layers: Sequence[Layer],
    canvas: CanvasConfig,
    *,
    max_line_width: float = MAX_LINE_WIDTH,
) -> list[RealizedLayer]:
    """1 フレーム分の Layer 列を realize して返す。

    Parameters
    ----------
    layers : Sequence[Layer]
        描画順の Layer 列。
    canvas : CanvasConfig
        点数・寸法・回転角。点列は呼び出しごとに 1 回だけ生成する。
    max_line_width : float, optional
        線幅の上限（検証に使う）。

    Returns
    -------
    list[RealizedLayer]
        可視かつ検証を通過した Layer の realize 結果（入力順）。
    """

    points = generate_ring(
        canvas.point_count, canvas.width, canvas.height, canvas.rotation_degrees
    )

    out: list[RealizedLayer] = []
    for layer in layers:
        if not layer.visible:
            continue
        if not is_valid(layer, canvas.point_count, max_line_width=max_line_width):
            logger.warning(
                "検証に失敗した Layer を描画対象から外しました (id=%s, name=%s, point_count=%d)",
                layer.id,
                layer.name,
                canvas.point_count,
            )
            continue

        connections = connections_for_layer(points, layer.geometry)
        primary, secondary = resolve_colors(layer.style)
        out.append(
            RealizedLayer(
                layer=layer,
                realized=realize_connections(connections),
                color=primary,
                secondary_color=secondary,
                alpha=float(layer.style.alpha),
                thickness=float(layer.style.line_width),
            )
        )
    return out


__all__ = ["RealizedLayer", "realize_layers"]
