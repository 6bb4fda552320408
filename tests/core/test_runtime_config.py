from __future__ import annotations

from pathlib import Path

import pytest

from strala.core.runtime_config import runtime_config, set_config_path


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_packaged_defaults(isolated_config: Path) -> None:
    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.canvas.point_count == 54
    assert (cfg.canvas.width, cfg.canvas.height) == (800.0, 800.0)
    assert cfg.canvas.rotation_degrees == 0.0
    assert cfg.limits.min_point_count == 8
    assert cfg.limits.max_point_count == 500
    assert cfg.limits.max_line_width == 10.0


def test_discovered_config_overrides_keys_within_section(isolated_config: Path) -> None:
    path = _write(
        isolated_config / ".strala" / "config.yaml",
        "canvas:\n  point_count: 24\n  width: 300\n  height: 200\n  rotation: 30\n",
    )
    cfg = runtime_config()
    assert cfg.config_path == path
    assert cfg.canvas.point_count == 24
    assert (cfg.canvas.width, cfg.canvas.height) == (300.0, 200.0)
    assert cfg.canvas.rotation_degrees == 30.0
    assert cfg.limits.max_point_count == 500


def test_explicit_config_wins_and_point_count_is_clamped(isolated_config: Path) -> None:
    _write(isolated_config / ".strala" / "config.yaml", "canvas:\n  point_count: 24\n  width: 1\n  height: 1\n")
    explicit = _write(
        isolated_config / "custom.yaml",
        "canvas:\n  point_count: 1000\n  width: 400\n  height: 400\n  rotation: 15\n",
    )
    set_config_path(explicit)

    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.canvas.point_count == 500
    assert cfg.canvas.rotation_degrees == 15.0


def test_partial_section_keeps_lower_layer_values(isolated_config: Path) -> None:
    """セクションの一部だけを書いた設定は、残りのキーを下の層から引き継ぐ。"""
    _write(
        isolated_config / ".strala" / "config.yaml",
        "canvas:\n  width: 300\n  rotation: 45\nlimits:\n  max_line_width: 4\n",
    )
    set_config_path(_write(isolated_config / "custom.yaml", "canvas:\n  point_count: 12\n"))

    cfg = runtime_config()
    assert cfg.canvas.point_count == 12
    assert (cfg.canvas.width, cfg.canvas.height) == (300.0, 800.0)
    assert cfg.canvas.rotation_degrees == 45.0
    assert cfg.limits.max_line_width == 4.0
    assert cfg.limits.min_point_count == 8


def test_home_config_is_used_when_cwd_has_none(isolated_config: Path) -> None:
    path = _write(
        isolated_config / ".config" / "strala" / "config.yaml",
        "canvas:\n  point_count: 3\n",
    )
    cfg = runtime_config()
    assert cfg.config_path == path
    # limits.min_point_count (8) にクランプされる。
    assert cfg.canvas.point_count == 8


def test_config_is_cached_until_path_changes(isolated_config: Path) -> None:
    first = runtime_config()
    assert runtime_config() is first
    set_config_path(None)
    assert runtime_config() is not first


def test_missing_explicit_config_raises(isolated_config: Path) -> None:
    set_config_path(isolated_config / "nope.yaml")
    with pytest.raises(FileNotFoundError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "- not\n- a mapping\n",
        "limits:\n  min_point_count: 10\n  max_point_count: 5\n  max_line_width: 1\n",
        "canvas:\n  point_count: many\n  width: 1\n  height: 1\n",
        "canvas: 12\n",
        "canvas:\n  width: [1, 2]\n",
        "limits:\n  max_line_width: 0\n",
        "canvas:\n  point_count: [\n",
    ],
)
def test_invalid_config_raises_runtime_error(isolated_config: Path, text: str) -> None:
    set_config_path(_write(isolated_config / "bad.yaml", text))
    with pytest.raises(RuntimeError):
        runtime_config()
