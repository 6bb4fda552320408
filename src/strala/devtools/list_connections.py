"""
どこで: `src/strala/devtools/list_connections.py`。
何を: single/two-point パターンの接続を index 対として 1 行ずつ出力する。
なぜ: 実物の糸掛け手順（何番の釘から何番へ）を描画なしで得られるようにするため。
"""

from __future__ import annotations

import argparse
import sys

from strala.core.dispatch import indices_for_layer
from strala.core.layer_geometry import (
    COMPLETE,
    LayerGeometry,
    PointA,
    PointB,
    SinglePointGeometry,
    TwoPointGeometry,
)
from strala.core.runtime_config import runtime_config


def _max_iterations(text: str) -> int | str:
    if text == COMPLETE:
        return COMPLETE
    try:
        return int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"整数または {COMPLETE!r} を指定してください: {text!r}") from exc


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="python -m strala connections")
    p.add_argument("--points", type=int, default=None, help="点数（省略時: config の canvas.point_count）")
    p.add_argument("--start", type=int, default=0, help="開始点 / 点 A の初期位置")
    p.add_argument("--step", type=int, required=True, help="ステップ幅 / 点 A のステップ幅")
    p.add_argument("--b-offset", type=int, default=None, help="点 B の相対オフセット（指定で two-point）")
    p.add_argument("--b-step", type=int, default=2, help="点 B のステップ幅")
    p.add_argument("--max-iterations", type=_max_iterations, default=None, help="接続数の上限")
    return p.parse_args(argv)


def _geometry_from_args(args: argparse.Namespace) -> LayerGeometry:
    if args.b_offset is None:
        return SinglePointGeometry(start_point=int(args.start), step_size=int(args.step))
    return TwoPointGeometry(
        point_a=PointA(initial_position=int(args.start), step_size=int(args.step)),
        point_b=PointB(relative_offset=int(args.b_offset), step_size=int(args.b_step)),
        max_iterations=args.max_iterations,
    )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)
    n = int(args.points) if args.points is not None else runtime_config().canvas.point_count

    for src, dst in indices_for_layer(n, _geometry_from_args(args)):
        print(f"{src} -> {dst}")
    return 0
