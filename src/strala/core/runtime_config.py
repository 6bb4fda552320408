# どこで: `src/strala/core/runtime_config.py`。
# 何を: `canvas` / `limits` の 2 セクションからなる config.yaml を重ね合わせて RuntimeConfig を作る。
# なぜ: 既定の点数やキャンバス寸法、点数・線幅の上下限をコードを変えずに差し替えられるようにするため。

"""キャンバス既定値と入力上下限の設定。

重ね合わせの順序（後勝ち）::

    strala/resource/default_config.yaml   （同梱、全キーを持つ）
    ./.strala/config.yaml                  （見つかれば。無ければ ~/.config/strala/config.yaml）
    set_config_path() で指定したファイル

上書きはセクション内のキー単位で行う。例えば ``canvas: {point_count: 24}`` だけを
書いたユーザー設定は点数のみを変え、幅・高さ・回転は下の層の値を保つ。

結果はプロセス内で 1 つだけ保持し、`set_config_path()` を呼ぶと作り直す。
幾何計算の関数はこのモジュールを参照しない。値は呼び出し側が `CanvasConfig` として渡す。
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Callable

import yaml

SUPPORTED_VERSION = 1

# セクション名 → (キー → 変換関数)。ここに無いキーは無視する。
_SECTION_KEYS: dict[str, dict[str, Callable[[Any], Any]]] = {
    "canvas": {"point_count": int, "width": float, "height": float, "rotation": float},
    "limits": {"min_point_count": int, "max_point_count": int, "max_line_width": float},
}


@dataclass(frozen=True, slots=True)
class CanvasConfig:
    """点列を張るキャンバス。`rotation_degrees` は点 0 の位置を時計回りにずらす角度。"""

    point_count: int
    width: float
    height: float
    rotation_degrees: float = 0.0


@dataclass(frozen=True, slots=True)
class LimitsConfig:
    """UI から受け付ける点数と線幅の範囲。"""

    min_point_count: int
    max_point_count: int
    max_line_width: float

    def clamp_point_count(self, value: int) -> int:
        return min(max(int(value), self.min_point_count), self.max_point_count)


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """重ね合わせ後の設定。

    Attributes
    ----------
    config_path : Path | None
        最後に重ねたユーザー設定ファイル。同梱デフォルトのみなら None。
    canvas : CanvasConfig
        `point_count` は `limits` の範囲にクランプ済み。
    limits : LimitsConfig
    """

    config_path: Path | None
    canvas: CanvasConfig
    limits: LimitsConfig


_explicit_path: Path | None = None
_cached: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """ユーザー設定ファイルを明示指定する（None で解除）。保持中の設定は破棄する。"""
    global _explicit_path, _cached
    _explicit_path = None if path is None else Path(path).expanduser()
    _cached = None


def _discover_user_config() -> Path | None:
    for candidate in (
        Path.cwd() / ".strala" / "config.yaml",
        Path.home() / ".config" / "strala" / "config.yaml",
    ):
        if candidate.is_file():
            return candidate
    return None


def _parse(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml を解釈できません: source={source}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml のトップレベルは mapping である必要があります: source={source}")
    for section in _SECTION_KEYS:
        value = data.get(section)
        if value is not None and not isinstance(value, dict):
            raise RuntimeError(
                f"config.yaml の {section} は mapping である必要があります: source={source}, got={value!r}"
            )
    return data


def _packaged_defaults() -> dict[str, Any]:
    text = (
        resources.files("strala")
        .joinpath("resource", "default_config.yaml")
        .read_text(encoding="utf-8")
    )
    return _parse(text, source="strala/resource/default_config.yaml")


def _overlay(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """`layer` を `base` に重ねる。`canvas` / `limits` はキー単位でマージする。"""
    merged = dict(base)
    if "version" in layer:
        merged["version"] = layer["version"]
    for section in _SECTION_KEYS:
        merged[section] = {**(base.get(section) or {}), **(layer.get(section) or {})}
    return merged


def _section(payload: dict[str, Any], section: str) -> dict[str, Any]:
    """セクションの全キーを変換して返す。欠落や変換失敗は RuntimeError。"""
    raw = payload.get(section) or {}
    out: dict[str, Any] = {}
    for key, convert in _SECTION_KEYS[section].items():
        value = raw.get(key)
        if value is None or isinstance(value, bool):
            raise RuntimeError(f"{section}.{key} が未設定か不正です: got={value!r}")
        try:
            out[key] = convert(value)
        except (TypeError, ValueError) as exc:
            raise RuntimeError(f"{section}.{key} を解釈できません: got={value!r}") from exc
    return out


def _build(payload: dict[str, Any], config_path: Path | None) -> RuntimeConfig:
    version = payload.get("version")
    if version != SUPPORTED_VERSION:
        raise RuntimeError(f"未対応の config.yaml version です: got={version!r}")

    limits = LimitsConfig(**_section(payload, "limits"))
    if not 2 <= limits.min_point_count <= limits.max_point_count:
        raise RuntimeError(
            "limits は 2 <= min_point_count <= max_point_count を満たす必要があります:"
            f" got=({limits.min_point_count}, {limits.max_point_count})"
        )
    if limits.max_line_width <= 0.0:
        raise RuntimeError(f"limits.max_line_width は正の値である必要があります: got={limits.max_line_width}")

    canvas = _section(payload, "canvas")
    return RuntimeConfig(
        config_path=config_path,
        canvas=CanvasConfig(
            point_count=limits.clamp_point_count(canvas["point_count"]),
            width=canvas["width"],
            height=canvas["height"],
            rotation_degrees=canvas["rotation"],
        ),
        limits=limits,
    )


def runtime_config() -> RuntimeConfig:
    """設定を重ね合わせて返す。2 回目以降は保持している同じオブジェクトを返す。

    Raises
    ------
    FileNotFoundError
        `set_config_path()` で指定したファイルが存在しない場合。
    RuntimeError
        YAML が壊れている、version が未対応、値が欠落・不正な場合。
    """
    global _cached
    if _cached is not None:
        return _cached

    if _explicit_path is not None and not _explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {_explicit_path}")

    payload = _packaged_defaults()
    config_path: Path | None = None
    for path in (_discover_user_config(), _explicit_path):
        if path is None:
            continue
        payload = _overlay(payload, _parse(path.read_text(encoding="utf-8"), source=str(path)))
        config_path = path

    _cached = _build(payload, config_path)
    return _cached


__all__ = [
    "CanvasConfig",
    "LimitsConfig",
    "RuntimeConfig",
    "runtime_config",
    "set_config_path",
]
