# どこで: `src/strala/__main__.py`。
# 何を: `python -m strala ...` の CLI エントリポイントを提供する。
# なぜ: 周期確認や糸掛け手順の出力を短い導線で実行できるようにするため。

from __future__ import annotations

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="python -m strala")
    p.add_argument("-v", "--verbose", action="store_true", help="DEBUG ログを表示する")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser(
        "info",
        help="ステップ幅の組から周期と接続数を表示する",
        add_help=False,
    )
    sub.add_parser(
        "connections",
        help="接続を index 対として一覧表示する",
        add_help=False,
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sub_argv = list(rest)
    if sub_argv and sub_argv[0] == "--":
        sub_argv = sub_argv[1:]

    if args.cmd == "info":
        from strala.devtools import pattern_info

        return int(pattern_info.main(sub_argv))

    if args.cmd == "connections":
        from strala.devtools import list_connections

        return int(list_connections.main(sub_argv))

    raise AssertionError(f"unknown cmd: {args.cmd!r}")


if __name__ == "__main__":
    raise SystemExit(main())
