"""
どこで: `src/strala/core/two_point.py`。two-point 規則の接続生成。
何を: 独立に進む 2 点 A/B を A0→B0→A1→B1→... と交互に結ぶ連続パスを返す。
なぜ: 1 本の糸で 2 つの周期を織り合わせる two-point パターンを表現するため。

概要
----
- 周期: `period = lcm(N/gcd(step_a, N), N/gcd(step_b, N))`、完全パターンの接続数は `2 * period`。
- 接続 k（`i = k // 2`）:
  - 偶数 k: `A_i -> B_i`
  - 奇数 k: `B_i -> A_{i+1}`
- 隣接する接続は端点を共有する（`conn[k].to == conn[k+1].from`）。
- single-point と異なり再訪による早期終了はしない。接続数は常にちょうど `actual` 本。
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from strala.core.connection import Connection, IndexPair, connections_from_indices
from strala.core.layer_geometry import COMPLETE, MaxIterations, PointA, PointB, point_b_position
from strala.core.numeric import calculate_pattern_period, whole_number
from strala.core.ring import Point

logger = logging.getLogger(__name__)


def total_connections(point_count: int, step_a: int, step_b: int) -> int:
    """完全パターン 1 周分の接続数 `2 * period` を返す。"""
    return 2 * calculate_pattern_period(step_a, step_b, point_count)


def _resolve_count(full: int, max_iterations: MaxIterations) -> int:
    if max_iterations is None or max_iterations == COMPLETE:
        return full
    return max(0, min(int(max_iterations), full))


def two_point_indices(
    point_count: int,
    point_a: PointA,
    point_b: PointB,
    max_iterations: MaxIterations = None,
) -> list[IndexPair]:
    """two-point 規則の接続を index 対で返す。

    Parameters
    ----------
    point_count : int
        点数 N。
    point_a : PointA
        点 A の初期位置とステップ幅。
    point_b : PointB
        点 B の相対オフセットとステップ幅。
    max_iterations : int | "complete" | None, optional
        接続数の上限。完全パターンの接続数を超える値は完全パターン数に丸める。
        0 以下は空リスト。

    Returns
    -------
    list[tuple[int, int]]
        `(from, to)` の列。退化入力（N <= 0、ステップ幅が整数でないか `[1, N-1]` の外）は空リスト。
    """
    n = int(point_count)
    step_a = whole_number(point_a.step_size)
    step_b = whole_number(point_b.step_size)
    if (
        n <= 0
        or step_a is None
        or step_b is None
        or not (0 < step_a < n)
        or not (0 < step_b < n)
    ):
        logger.debug(
            "two-point: 退化入力のため接続なし (point_count=%d, step_a=%r, step_b=%r)",
            n,
            point_a.step_size,
            point_b.step_size,
        )
        return []

    count = _resolve_count(total_connections(n, step_a, step_b), max_iterations)
    if count == 0:
        return []

    a0 = int(point_a.initial_position) % n
    b0 = point_b_position(a0, point_b.relative_offset, n)

    k = np.arange(count, dtype=np.int64)
    iteration = k // 2
    pos_a = (a0 + step_a * iteration) % n
    pos_b = (b0 + step_b * iteration) % n
    next_a = (a0 + step_a * (iteration + 1)) % n

    # 偶数 k は A→B、奇数 k は B→A'（同じ糸の続き）。
    even = (k % 2) == 0
    src = np.where(even, pos_a, pos_b)
    dst = np.where(even, pos_b, next_a)

    return list(zip(src.tolist(), dst.tolist()))


def two_point_connections(
    points: Sequence[Point],
    point_a: PointA,
    point_b: PointB,
    max_iterations: MaxIterations = None,
) -> list[Connection]:
    """two-point 規則の接続列を返す。退化入力は空リスト。"""
    pairs = two_point_indices(len(points), point_a, point_b, max_iterations)
    return connections_from_indices(points, pairs)


__all__ = ["total_connections", "two_point_connections", "two_point_indices"]
