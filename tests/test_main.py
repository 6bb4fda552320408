"""`python -m strala` CLI のテスト。"""

from __future__ import annotations

from pathlib import Path

from strala.__main__ import main


def test_info_prints_periods(capsys) -> None:
    code = main(["info", "--points", "24", "--step-a", "1", "--step-b", "2"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert "period_a: 24" in out
    assert "period_b: 12" in out
    assert "pattern_period: 24" in out
    assert "total_connections: 48" in out
    assert "max_iterations_bound: 48" in out


def test_info_uses_config_point_count_by_default(isolated_config: Path, capsys) -> None:
    code = main(["info", "--step-a", "5"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == ["points: 54", "period_a: 54"]


def test_connections_single_point(capsys) -> None:
    code = main(["connections", "--points", "9", "--step", "3"])
    assert code == 0
    assert capsys.readouterr().out == "0 -> 3\n3 -> 6\n6 -> 0\n"


def test_connections_two_point(capsys) -> None:
    code = main(
        [
            "connections",
            "--points",
            "10",
            "--step",
            "1",
            "--b-offset",
            "3",
            "--b-step",
            "2",
            "--max-iterations",
            "4",
        ]
    )
    assert code == 0
    assert capsys.readouterr().out == "0 -> 3\n3 -> 1\n1 -> 5\n5 -> 2\n"


def test_connections_degenerate_prints_nothing(capsys) -> None:
    assert main(["-v", "connections", "--points", "9", "--step", "9"]) == 0
    assert capsys.readouterr().out == ""
