"""
どこで: `src/strala/core/single_point.py`。single-point 規則の接続生成。
何を: 開始点から一定ステップで進み、開始点へ戻るまでの接続列を返す。
なぜ: 最も基本的な string art（1 本の糸を一定間隔で掛け続ける）を表現するため。

終了条件
--------
「いずれかの点を再訪したら停止」ではなく「開始点へ戻ったら停止」を採用する。
1 ステップごとに必ず 1 本描き、最大でも N 本で打ち切る。
gcd(step, N) > 1 の場合は N 本より少ない接続で閉じる。
"""

from __future__ import annotations

import logging
from typing import Sequence

from strala.core.connection import Connection, IndexPair, connections_from_indices
from strala.core.numeric import whole_number
from strala.core.ring import Point

logger = logging.getLogger(__name__)


def single_point_indices(point_count: int, start_point: int, step_size: int) -> list[IndexPair]:
    """single-point 規則の接続を index 対で返す。

    Parameters
    ----------
    point_count : int
        点数 N。
    start_point : int
        開始 index。`[0, N-1]` にクランプする。
    step_size : int
        ステップ幅。整数でない値や `[1, N-1]` の外なら空リストを返す。

    Returns
    -------
    list[tuple[int, int]]
        `(from, to)` の列。
    """
    n = int(point_count)
    step = whole_number(step_size)
    if n <= 0 or step is None or step <= 0 or step >= n:
        logger.debug(
            "single-point: 退化入力のため接続なし (point_count=%d, step_size=%r)", n, step_size
        )
        return []

    start = min(max(int(start_point), 0), n - 1)

    pairs: list[IndexPair] = []
    current = start
    for _ in range(n):
        nxt = (current + step) % n
        pairs.append((current, nxt))
        current = nxt
        if current == start:
            break
    return pairs


def single_point_connections(
    points: Sequence[Point], start_point: int, step_size: int
) -> list[Connection]:
    """single-point 規則の接続列を返す。退化入力は空リスト。"""
    pairs = single_point_indices(len(points), start_point, step_size)
    return connections_from_indices(points, pairs)


__all__ = ["single_point_connections", "single_point_indices"]
