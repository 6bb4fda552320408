"""
どこで: `src/strala/core/numeric.py`。
何を: 周期計算に使う gcd/lcm と、single/two-point パターンの周期ヘルパを提供する。
なぜ: 「何本で 1 パターンが閉じるか」を generator と UI 側（スライダ上限）で共有するため。
"""

from __future__ import annotations

import math
import numbers


def whole_number(value: object) -> int | None:
    """整数値として扱える値なら int を、そうでなければ None を返す。

    `3` や `3.0` は 3、`2.5`・bool・数値でない値は None（切り捨てはしない）。
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    as_float = float(value)
    if not as_float.is_integer():
        return None
    return int(as_float)


def gcd(a: int, b: int) -> int:
    """最大公約数を返す。

    Notes
    -----
    `gcd(a, 0) == a`、`gcd(0, 0) == 0`（例外にしない）。
    """
    return math.gcd(int(a), int(b))


def lcm(a: int, b: int) -> int:
    """最小公倍数 `|a*b| / gcd(a, b)` を返す。どちらかが 0 なら 0。"""
    a_i = int(a)
    b_i = int(b)
    if a_i == 0 or b_i == 0:
        # gcd(0, 0) による 0 除算を避ける。
        return 0
    return abs(a_i * b_i) // gcd(a_i, b_i)


def single_point_period(point_count: int, step_size: int) -> int:
    """1 点を step_size ずつ進めたとき、開始 index に戻るまでのステップ数。"""
    n = int(point_count)
    if n <= 0:
        return 0
    return n // gcd(n, step_size)


def calculate_pattern_period(step_a: int, step_b: int, point_count: int) -> int:
    """two-point パターンの周期（A/B が同時に初期位置へ戻るまでの反復数）を返す。

    Parameters
    ----------
    step_a : int
        点 A のステップ幅。
    step_b : int
        点 B のステップ幅。
    point_count : int
        円周上の点数 N。

    Returns
    -------
    int
        `lcm(N / gcd(step_a, N), N / gcd(step_b, N))`。N <= 0 の場合は 0。
        1 周期あたりの接続数はこの値の 2 倍（A→B と B→A'）。
    """
    n = int(point_count)
    if n <= 0:
        return 0
    period_a = single_point_period(n, step_a)
    period_b = single_point_period(n, step_b)
    return lcm(period_a, period_b)


def max_iterations_bound(point_count: int, step_a: int, step_b: int) -> int:
    """max_iterations スライダの上限値を返す。

    完全パターンの接続数 `2 * period` を基本とし、`4 * N` で頭打ちにする。
    戻り値は常に 1 以上。
    """
    n = int(point_count)
    full = 2 * calculate_pattern_period(step_a, step_b, n)
    return max(1, min(full, 4 * n))


def is_symmetric_pattern(point_count: int, step_a: int, step_b: int) -> bool:
    """A/B の単独周期が一致するか（対称なパターンになるか）を返す。"""
    return single_point_period(point_count, step_a) == single_point_period(
        point_count, step_b
    )


__all__ = [
    "calculate_pattern_period",
    "gcd",
    "is_symmetric_pattern",
    "lcm",
    "max_iterations_bound",
    "single_point_period",
    "whole_number",
]
