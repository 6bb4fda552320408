"""
どこで: `src/strala/devtools/pattern_info.py`。
何を: ステップ幅の組から周期・完全パターンの接続数・max_iterations 上限を表示する。
なぜ: パラメータ探索時に「何本で閉じるか」を描画せずに確認できるようにするため。
"""

from __future__ import annotations

import argparse
import sys

from strala.core.numeric import (
    calculate_pattern_period,
    is_symmetric_pattern,
    max_iterations_bound,
    single_point_period,
)
from strala.core.runtime_config import runtime_config


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="python -m strala info")
    p.add_argument("--points", type=int, default=None, help="点数（省略時: config の canvas.point_count）")
    p.add_argument("--step-a", type=int, required=True, help="点 A（single-point ではこの値のみ）のステップ幅")
    p.add_argument("--step-b", type=int, default=None, help="点 B のステップ幅（two-point のとき）")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)
    n = int(args.points) if args.points is not None else runtime_config().canvas.point_count
    step_a = int(args.step_a)

    print(f"points: {n}")
    print(f"period_a: {single_point_period(n, step_a)}")
    if args.step_b is None:
        return 0

    step_b = int(args.step_b)
    period = calculate_pattern_period(step_a, step_b, n)
    print(f"period_b: {single_point_period(n, step_b)}")
    print(f"pattern_period: {period}")
    print(f"total_connections: {2 * period}")
    print(f"max_iterations_bound: {max_iterations_bound(n, step_a, step_b)}")
    print(f"symmetric: {is_symmetric_pattern(n, step_a, step_b)}")
    return 0
