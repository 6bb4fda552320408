# src/strala/core/realized_geometry.py
# 接続列を描画/書き出し向けの線分配列 (coords, offsets) に変換するモデル。

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from strala.core.connection import Connection


@dataclass(frozen=True, slots=True)
class RealizedGeometry:
    """接続 1 本を 2 頂点のポリラインとして並べた配列。

    Parameters
    ----------
    coords : np.ndarray
        float32 型 shape (2M, 3) の頂点配列。(2M, 2) を渡すと z=0 を補う。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        coords = np.asarray(self.coords, dtype=np.float32)
        if coords.ndim == 2 and coords.shape[1] == 2:
            coords = np.pad(coords, ((0, 0), (0, 1)))
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ValueError(f"coords は shape (N,2) か (N,3) である必要がある: got={coords.shape}")

        offsets = np.asarray(self.offsets, dtype=np.int32)
        if offsets.ndim != 1 or offsets.size == 0 or offsets[0] != 0:
            raise ValueError("offsets は 0 から始まる 1 次元配列である必要がある")
        if offsets[-1] != coords.shape[0] or np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は coords 行数まで単調非減少である必要がある")

        # 呼び出し側の配列と共有しないよう複製してから固定する。
        coords = coords.copy()
        offsets = offsets.copy()
        coords.setflags(write=False)
        offsets.setflags(write=False)
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)


def empty_geometry() -> RealizedGeometry:
    return RealizedGeometry(
        coords=np.zeros((0, 3), dtype=np.float32),
        offsets=np.zeros((1,), dtype=np.int32),
    )


def realize_connections(connections: Sequence[Connection]) -> RealizedGeometry:
    """接続列を「1 接続 = 2 頂点のポリライン」の集合に変換する。

    Parameters
    ----------
    connections : Sequence[Connection]
        接続列。空なら空ジオメトリを返す。

    Returns
    -------
    RealizedGeometry
        coords は `[from0, to0, from1, to1, ...]`、offsets は `[0, 2, 4, ...]`。
    """
    if not connections:
        return empty_geometry()

    coords = np.array(
        [
            ((c.from_point.x, c.from_point.y), (c.to_point.x, c.to_point.y))
            for c in connections
        ],
        dtype=np.float64,
    ).reshape(-1, 2)
    offsets = np.arange(0, coords.shape[0] + 1, 2, dtype=np.int32)
    return RealizedGeometry(coords=coords, offsets=offsets)


__all__ = ["RealizedGeometry", "empty_geometry", "realize_connections"]
