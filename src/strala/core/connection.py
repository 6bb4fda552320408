# どこで: `src/strala/core/connection.py`。
# 何を: 1 本の糸（2 点間の線分）を表す Connection と index 対からの変換を定義する。
# なぜ: generator は index 対で計算し、描画側は座標付きの Connection を受け取るため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from strala.core.ring import Point

IndexPair = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Connection:
    """順序付きの線分 `from_point -> to_point`。"""

    from_point: Point
    to_point: Point


def connections_from_indices(
    points: Sequence[Point], pairs: Iterable[IndexPair]
) -> list[Connection]:
    """index 対の列を Connection 列へ変換する。"""
    return [Connection(points[i], points[j]) for i, j in pairs]


__all__ = ["Connection", "IndexPair", "connections_from_indices"]
