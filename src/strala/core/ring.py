"""
どこで: `src/strala/core/ring.py`。円周上の点（nail）列の生成。
何を: 点数・キャンバス寸法・回転角から、等間隔に並んだ Point 列を構築する。
なぜ: single/two-point の接続生成と描画側が同じ点配置を共有するため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

# キャンバス短辺に対する円の半径比。
RING_RADIUS_RATIO = 0.45


@dataclass(frozen=True, slots=True)
class Point:
    """円周上の 1 点。

    Attributes
    ----------
    x, y : float
        キャンバス座標（y は下向き）。
    angle : float
        生成に使った角度 [rad]。
    """

    x: float
    y: float
    angle: float


def generate_ring(
    point_count: int,
    width: float,
    height: float,
    rotation_degrees: float = 0.0,
) -> tuple[Point, ...]:
    """円周上に等間隔な点列を生成する。

    Parameters
    ----------
    point_count : int
        点数 N。0 以下は空タプルを返す。
    width, height : float
        キャンバス寸法。中心は `(width/2, height/2)`。
    rotation_degrees : float, optional
        全体の回転角 [deg]。

    Returns
    -------
    tuple[Point, ...]
        長さ N の点列。index 0 は回転 0 のとき 12 時の位置。
    """
    n = int(point_count)
    if n <= 0:
        return ()

    try:
        w = float(width)
        h = float(height)
        rot = float(rotation_degrees)
    except Exception as exc:
        raise ValueError("generate_ring の width/height/rotation は数値である必要がある") from exc

    cx = w / 2.0
    cy = h / 2.0
    radius = min(w, h) * RING_RADIUS_RATIO

    # -π/2 で回転 0 の開始位置を 12 時に合わせる。
    angles = (2.0 * math.pi / n) * np.arange(n, dtype=np.float64)
    angles = angles - math.pi / 2.0 + math.radians(rot)

    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)

    return tuple(
        Point(x=float(x), y=float(y), angle=float(a))
        for x, y, a in zip(xs.tolist(), ys.tolist(), angles.tolist())
    )


def ring_coords(points: Sequence[Point]) -> np.ndarray:
    """点列を shape (N, 2) の float64 配列へ変換する。"""
    if not points:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


__all__ = ["Point", "RING_RADIUS_RATIO", "generate_ring", "ring_coords"]
