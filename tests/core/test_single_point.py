"""single-point 規則の接続生成テスト。"""

from __future__ import annotations

import pytest

from strala.core.ring import generate_ring
from strala.core.single_point import single_point_connections, single_point_indices


def _visited_set_walk(n: int, start: int, step: int) -> list[tuple[int, int]]:
    # 「いずれかの点を再訪したら停止」する旧規則（比較用）。
    visited: set[int] = set()
    current = start % n
    out = []
    while current not in visited and len(visited) < n:
        visited.add(current)
        nxt = (current + step) % n
        out.append((current, nxt))
        current = nxt
    return out


def test_closes_after_full_cycle_when_coprime() -> None:
    points = generate_ring(12, 400.0, 400.0)
    conns = single_point_connections(points, start_point=0, step_size=5)

    assert len(conns) == 12
    assert conns[0].from_point == points[0]
    assert conns[-1].to_point == points[0]


def test_closes_early_when_step_shares_factor() -> None:
    assert single_point_indices(12, 0, 4) == [(0, 4), (4, 8), (8, 0)]
    assert single_point_indices(9, 0, 3) == [(0, 3), (3, 6), (6, 0)]


def test_consecutive_connections_share_endpoints() -> None:
    pairs = single_point_indices(54, 3, 13)
    assert all(a[1] == b[0] for a, b in zip(pairs, pairs[1:]))


def test_terminates_on_return_to_start() -> None:
    """開始点へ戻った時点で止まり、N 本の上限には達しない。"""
    for n, start, step in [(12, 5, 4), (30, 7, 12), (54, 7, 17), (9, 2, 3)]:
        pairs = single_point_indices(n, start, step)
        assert pairs[-1][1] == start
        assert all(dst != start for _, dst in pairs[:-1])
        # 加算による巡回は単一サイクルなので、再訪規則と同じ列になる。
        assert pairs == _visited_set_walk(n, start, step)


def test_out_of_range_start_is_clamped_not_wrapped() -> None:
    # 15 は 11 にクランプされる（15 % 12 = 3 ではない）。
    pairs = single_point_indices(12, 15, 5)
    assert pairs[0][0] == 11
    assert pairs[-1][1] == 11
    assert pairs != _visited_set_walk(12, 15, 5)

    assert single_point_indices(12, -3, 5)[0][0] == 0


@pytest.mark.parametrize("step", [0, -1, 12, 13])
def test_degenerate_step_is_empty(step: int) -> None:
    points = generate_ring(12, 400.0, 400.0)
    assert single_point_connections(points, 0, step) == []


def test_empty_points_is_empty() -> None:
    assert single_point_connections((), 0, 1) == []
    assert single_point_indices(0, 0, 1) == []


@pytest.mark.parametrize("step", [2.5, 0.5, "2"])
def test_non_integral_step_is_empty_not_truncated(step) -> None:
    """2.5 を 2 に切り捨てず、退化入力として扱う。"""
    assert single_point_indices(12, 0, step) == []


def test_integral_float_step_is_accepted() -> None:
    assert single_point_indices(12, 0, 5.0) == single_point_indices(12, 0, 5)
